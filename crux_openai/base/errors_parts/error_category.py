"""
Normalized HTTP failure categories.

Defines the ``ErrorCategory`` enumeration used to label API errors in logs.
The binding never retries on its own; categories are hints for callers that
implement their own policy.
"""
from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """Enumerated failure categories derived from HTTP status codes."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    TRANSIENT = "transient"
    UNKNOWN = "unknown"


__all__ = ["ErrorCategory"]
