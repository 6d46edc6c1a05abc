"""
Root pytest configuration and fixtures for the yext package.

Provides common fixtures and test utilities for the test suite.
"""

from pathlib import Path
import sys

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from yext.errors import (  # noqa: E402
    ERROR_TYPE_FATAL,
    ERROR_TYPE_NON_FATAL,
    ERROR_TYPE_WARNING,
    Error,
    Errors,
)


@pytest.fixture
def request_uuid():
    """Request uuid as the API formats it."""
    return "3b03b517-51c5-4a64-8285-a3466ce875f6"


@pytest.fixture
def mixed_errors(request_uuid):
    """One record of each recognized kind from a single request."""
    return Errors(
        [
            Error("Unknown folder", 2015, ERROR_TYPE_FATAL, request_uuid),
            Error(
                "websiteUrl: The url provided is invalid.",
                2103,
                ERROR_TYPE_NON_FATAL,
                request_uuid,
            ),
            Error("Field is deprecated", 3001, ERROR_TYPE_WARNING, request_uuid),
        ]
    )


@pytest.fixture
def mock_meta_data():
    """Entity meta object as returned by the API."""
    return {
        "id": "loc-123",
        "accountId": "acct-1",
        "entityType": "location",
        "folderId": "0",
        "labelIds": ["b", "a", "b"],
        "categoryIds": ["1314", "42"],
        "language": "en",
        "countryCode": "US",
    }
