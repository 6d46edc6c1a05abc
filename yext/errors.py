"""Business errors reported by the Yext API and helpers to classify them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, overload

ERROR_TYPE_FATAL = "FATAL_ERROR"
ERROR_TYPE_NON_FATAL = "NON_FATAL_ERROR"
ERROR_TYPE_WARNING = "WARNING"

# Codes the API uses for "entity/location does not exist".
NOT_FOUND_CODES = frozenset({2000, 6004, 2238})


class Error(Exception):
    """A single error or warning returned by the API."""

    def __init__(self, message: str = "", code: int = 0, type: str = "", request_uuid: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code
        self.type = type
        self.request_uuid = request_uuid

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], request_uuid: str = "") -> Error:
        return cls(
            message=data.get("message", ""),
            code=data.get("code", 0),
            type=data.get("type", ""),
            request_uuid=data.get("request_uuid", request_uuid),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "type": self.type,
            "request_uuid": self.request_uuid,
        }

    def __str__(self) -> str:
        return f"{self.error_without_uuid()}, request uuid: {self.request_uuid}"

    def __repr__(self) -> str:
        return (
            f"Error(message={self.message!r}, code={self.code!r}, "
            f"type={self.type!r}, request_uuid={self.request_uuid!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return (self.message, self.code, self.type, self.request_uuid) == (
            other.message,
            other.code,
            other.type,
            other.request_uuid,
        )

    def __hash__(self) -> int:
        return hash((self.message, self.code, self.type, self.request_uuid))

    def error_without_uuid(self) -> str:
        """Render without the request uuid; the unit joined by :class:`Errors`."""
        return f"type: {self.type} code: {self.code} message: {self.message}"

    def is_error(self) -> bool:
        return self.type in (ERROR_TYPE_FATAL, ERROR_TYPE_NON_FATAL)

    def is_warning(self) -> bool:
        return self.type == ERROR_TYPE_WARNING


class Errors(Exception):
    """Ordered collection of :class:`Error` records from one API response.

    Behaves like a read-only sequence and can be raised as a whole.
    """

    def __init__(self, errors: Iterable[Error] = ()):
        self._errors: list[Error] = list(errors)
        super().__init__(self._errors)

    @classmethod
    def from_meta(cls, meta: Mapping[str, Any]) -> Errors:
        """Build from a response ``meta`` object, stamping ``meta.uuid`` on each record.

        Items that are not objects are skipped.
        """
        uuid = meta.get("uuid") or ""
        items = meta.get("errors") or []
        return cls(
            Error.from_dict(item, request_uuid=uuid) for item in items if isinstance(item, Mapping)
        )

    def __iter__(self) -> Iterator[Error]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    @overload
    def __getitem__(self, index: int) -> Error: ...

    @overload
    def __getitem__(self, index: slice) -> Errors: ...

    def __getitem__(self, index: int | slice) -> Error | Errors:
        if isinstance(index, slice):
            return Errors(self._errors[index])
        return self._errors[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Errors):
            return self._errors == other._errors
        if isinstance(other, list):
            return self._errors == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._errors))

    def __str__(self) -> str:
        # The last record's uuid wins if the list mixes request ids.
        uuid = self._errors[-1].request_uuid if self._errors else ""
        joined = "; ".join(err.error_without_uuid() for err in self._errors)
        return f"{joined}; request uuid: {uuid}"

    def __repr__(self) -> str:
        return f"Errors({self._errors!r})"

    def errors(self) -> list[Error]:
        return [err for err in self._errors if err.is_error()]

    def warnings(self) -> list[Error]:
        return [err for err in self._errors if err.is_warning()]


def _any_record(err: BaseException | None, predicate) -> bool:
    if isinstance(err, Errors):
        return any(_any_record(inner, predicate) for inner in err)
    if isinstance(err, Error):
        return predicate(err)
    return False


def get_num_errors(err: BaseException | None) -> int:
    """Return the number of errors in ``err``; warnings are excluded.

    Anything that is not part of this model counts as one error.
    """
    if err is None:
        return 0
    if isinstance(err, Errors):
        return len(err.errors())
    if isinstance(err, Error):
        return 1 if err.is_error() else 0
    return 1


def to_user_friendly_message(err: BaseException | None) -> str:
    """Return a message that can be shown to end users.

    Only message text is used; codes and kinds are never exposed.
    """
    if err is None:
        return ""
    if isinstance(err, Errors):
        return ", ".join(to_user_friendly_message(inner) for inner in err)
    if isinstance(err, Error):
        return err.message
    return str(err)


def is_not_found_error(err: BaseException | None) -> bool:
    return _any_record(err, lambda e: e.code in NOT_FOUND_CODES)


def is_business_error(err: BaseException | None) -> bool:
    """True if the API processed the request and rejected it.

    False when the server could not be reached or another protocol error
    occurred, since those failures are never represented as :class:`Error`.
    """
    return _any_record(err, lambda e: True)


def is_fatal_business_error(err: BaseException | None) -> bool:
    return _any_record(err, lambda e: e.type == ERROR_TYPE_FATAL)


def is_error_code(err: BaseException | None, code: int) -> bool:
    return _any_record(err, lambda e: e.code == code)
