"""
Classification helpers for HTTP statuses and transport exceptions.

Implements status-to-category mapping for API errors and best-effort code
extraction from arbitrary transport exceptions so that wrapped errors carry
the most specific numeric code available.
"""
from __future__ import annotations

from typing import Dict, Optional

from .error_category import ErrorCategory


_HTTP_STATUS_MAP: Dict[int, ErrorCategory] = {
    400: ErrorCategory.VALIDATION,
    401: ErrorCategory.AUTH,
    403: ErrorCategory.AUTH,
    404: ErrorCategory.NOT_FOUND,
    408: ErrorCategory.TIMEOUT,
    409: ErrorCategory.CONFLICT,
    422: ErrorCategory.VALIDATION,
    429: ErrorCategory.RATE_LIMIT,
    500: ErrorCategory.SERVER_ERROR,
    502: ErrorCategory.TRANSIENT,
    503: ErrorCategory.UNAVAILABLE,
    504: ErrorCategory.TIMEOUT,
}

_RETRYABLE = frozenset(
    {
        ErrorCategory.TIMEOUT,
        ErrorCategory.RATE_LIMIT,
        ErrorCategory.SERVER_ERROR,
        ErrorCategory.UNAVAILABLE,
        ErrorCategory.TRANSIENT,
    }
)


def classify_status(status: Optional[int]) -> ErrorCategory:
    """Map an HTTP status code to an :class:`ErrorCategory`.

    Unlisted 5xx statuses fall back to ``SERVER_ERROR``; everything else that
    is not explicitly mapped is ``UNKNOWN``.
    """
    if status is None:
        return ErrorCategory.UNKNOWN
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if 500 <= status < 600:
        return ErrorCategory.SERVER_ERROR
    return ErrorCategory.UNKNOWN


def is_retryable(category: ErrorCategory) -> bool:
    """Return True when a caller-side retry could plausibly succeed."""
    return category in _RETRYABLE


def extract_exception_code(exc: BaseException) -> int:
    """Attempt to extract a numeric code from a transport exception.

    Supported attribute shapes (checked in order):
    - ``exc.code`` (integer)
    - ``exc.status_code`` / ``exc.status``
    - ``exc.response.status_code``
    - ``exc.errno`` (for ``OSError`` subclasses)
    Returns ``0`` when nothing usable is found.
    """
    for attr in ("code", "status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and not isinstance(val, bool):
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int):
            return sc
    errno = getattr(exc, "errno", None)
    if isinstance(errno, int):
        return errno
    return 0


__all__ = [
    "classify_status",
    "is_retryable",
    "extract_exception_code",
]
