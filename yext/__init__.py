"""
yext - entity metadata and error model for the Yext API

Typed and schema-less entity views, plus the structured errors the API
returns and a codec for their one-line string form.
"""

__version__ = "0.1.0"

from ._http import TransportError, errors_from_response, raise_for_response
from .codec import ErrorStringDecodeError, errors_from_string
from .entity import BaseEntity, Entity, EntityMeta, EntityType, RawEntity, UnorderedStrings
from .errors import (
    ERROR_TYPE_FATAL,
    ERROR_TYPE_NON_FATAL,
    ERROR_TYPE_WARNING,
    NOT_FOUND_CODES,
    Error,
    Errors,
    get_num_errors,
    is_business_error,
    is_error_code,
    is_fatal_business_error,
    is_not_found_error,
    to_user_friendly_message,
)

__all__ = [
    "ERROR_TYPE_FATAL",
    "ERROR_TYPE_NON_FATAL",
    "ERROR_TYPE_WARNING",
    "NOT_FOUND_CODES",
    # Entities
    "BaseEntity",
    "Entity",
    "EntityMeta",
    "EntityType",
    # Errors
    "Error",
    "ErrorStringDecodeError",
    "Errors",
    "RawEntity",
    "TransportError",
    "UnorderedStrings",
    "errors_from_response",
    "errors_from_string",
    "get_num_errors",
    "is_business_error",
    "is_error_code",
    "is_fatal_business_error",
    "is_not_found_error",
    "raise_for_response",
    "to_user_friendly_message",
]
