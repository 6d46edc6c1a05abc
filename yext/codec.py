"""Decode the one-line rendering of :class:`~yext.errors.Errors` back into records.

The encoded form is whatever ``str(Errors(...))`` produces::

    type: FATAL_ERROR code: 2015 message: Unknown folder; request uuid: 7199948d-...

Strings in this format end up in logs and response headers, so the decoder
keeps the exact tokenization of existing producers, quirks included: the
``type: `` and ``request uuid: `` prefixes are removed as *character sets*
(``str.lstrip``), and a message containing the words ``code:`` or
``message:`` does not survive a round trip.
"""

import logging
import re

from .errors import Error, Errors

logger = logging.getLogger(__name__)

RECORD_SEPARATOR = "; "
_TYPE_PREFIX = "type: "
_UUID_PREFIX = "request uuid: "
_CODE_WORD = "code:"
_MESSAGE_WORD = "message:"
_CODE_RE = re.compile(r"[+-]?[0-9]+")


class ErrorStringDecodeError(ValueError):
    """Raised when a record in an encoded error string has a non-integer code."""

    def __init__(self, message: str, segment: str):
        super().__init__(message)
        self.segment = segment


def _split_at_word(text: str, word: str) -> tuple[str, str]:
    """Split ``text`` on single spaces around every occurrence of ``word``.

    Words before the first occurrence form the first part, the rest (minus any
    further occurrences of ``word``) form the second. Leading empty words are
    dropped.
    """
    found = False
    before = ""
    after = ""
    for w in text.split(" "):
        if w == word:
            found = True
        elif found:
            if after:
                after += " "
            after += w
        else:
            if before:
                before += " "
            before += w
    return before, after


def _error_from_string(segment: str, request_uuid: str) -> Error:
    remaining = segment.lstrip(_TYPE_PREFIX)
    typ, remaining = _split_at_word(remaining, _CODE_WORD)
    code, message = _split_at_word(remaining, _MESSAGE_WORD)
    if not _CODE_RE.fullmatch(code):
        raise ErrorStringDecodeError(f"invalid error code {code!r} in {segment!r}", segment)
    return Error(message=message, code=int(code), type=typ, request_uuid=request_uuid)


def errors_from_string(text: str) -> Errors:
    """Parse an encoded error string.

    Every record gets the request uuid from the trailing segment. An empty
    string yields an empty :class:`Errors`.

    Raises:
        ErrorStringDecodeError: if any record's code is not an integer. No
            partial result is returned.
    """
    segments = text.split(RECORD_SEPARATOR)
    uuid = segments[-1].lstrip(_UUID_PREFIX)
    records = []
    for segment in segments[:-1]:
        try:
            records.append(_error_from_string(segment, uuid))
        except ErrorStringDecodeError:
            logger.debug("Failed to decode error string: %s", text[:200])
            raise
    return Errors(records)
