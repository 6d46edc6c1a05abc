"""Hand finished HTTP responses to the error model.

Every API reply is wrapped in an envelope whose ``meta`` carries the request
uuid and any errors or warnings::

    {"meta": {"uuid": "...", "errors": [{"code": 2000, "type": "FATAL_ERROR", "message": "..."}]},
     "response": {...}}
"""

import logging

import requests

from .errors import Errors

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """A failed call that carried no structured errors (proxy page, empty body, ...).

    Never a business error: the API did not get to validate the request.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        method: str | None = None,
        url: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.method = method
        self.url = url


def errors_from_response(resp: requests.Response) -> Errors | None:
    """Return the records in ``meta.errors``, or None if the body has none."""
    try:
        body = resp.json()
    except ValueError:
        logger.debug("Failed to parse response body: %s", resp.text[:200] if resp.text else "empty")
        return None

    meta = body.get("meta") if isinstance(body, dict) else None
    if not isinstance(meta, dict) or not isinstance(meta.get("errors"), list):
        return None

    errs = Errors.from_meta(meta)
    if len(errs) != len(meta["errors"]):
        logger.debug("Skipped %d malformed error item(s)", len(meta["errors"]) - len(errs))
    return errs


def raise_for_response(resp: requests.Response) -> Errors:
    """Raise the response's business errors, or a transport error for a bare failure.

    Returns the warnings of a successful response (possibly empty).
    """
    method = resp.request.method if resp.request is not None else None
    errs = errors_from_response(resp)

    if errs is not None and errs.errors():
        raise errs

    if not resp.ok:
        message = f"HTTP {resp.status_code}"
        if resp.reason:
            message = f"{message} {resp.reason}"
        raise TransportError(message, status_code=resp.status_code, method=method, url=resp.url)

    warnings = Errors(errs.warnings()) if errs is not None else Errors()
    for warning in warnings:
        logger.warning("API warning for %s %s: %s", method, resp.url, warning)
    return warnings
