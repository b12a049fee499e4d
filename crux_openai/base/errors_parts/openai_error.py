"""
Structured error type raised by every stage of the OpenAI binding.

Wraps input validation failures, encoding failures, remote API errors,
transport failures and stream decode failures in one exception class so
callers need a single ``except`` clause.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .classification import classify_status, is_retryable
from .error_category import ErrorCategory
from .error_kind import ErrorKind
from .json_parsing import extract_error_message


@dataclass
class OpenAIError(Exception):
    """Represents a failed call with a normalized kind and numeric code.

    Attributes:
        message: Human-readable message. When the raw text is a JSON error
            envelope (``{"error": {"message": ...}}``) the nested message is
            exposed instead of the raw payload.
        code: HTTP status for API errors, the transport's code when one is
            available, otherwise ``0``.
        cause: Optional original exception for diagnostics.
        kind: Pipeline stage that failed.
        body: Raw response body or payload text, unmodified.
    """

    message: Optional[str] = None
    code: int = 0
    cause: Optional[BaseException] = None
    kind: ErrorKind = ErrorKind.API
    body: Optional[str] = None
    raw_message: str = field(init=False, repr=False, default="")

    def __post_init__(self) -> None:
        raw = self.message or ""
        self.raw_message = raw
        self.message = extract_error_message(raw)
        self.args = (self.message,)
        if self.cause is not None and self.__cause__ is None:
            self.__cause__ = self.cause

    @property
    def category(self) -> ErrorCategory:
        """HTTP-derived category; ``UNKNOWN`` for non-API errors."""
        if self.kind is not ErrorKind.API:
            return ErrorCategory.UNKNOWN
        return classify_status(self.code)

    @property
    def retryable(self) -> bool:
        """Hint for caller-side retry logic (not authoritative)."""
        if self.kind is ErrorKind.TRANSPORT:
            return True
        return self.kind is ErrorKind.API and is_retryable(self.category)

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return the message, prefixed with the code when one is set."""
        if self.code:
            return f"[{self.code}] {self.message}"
        return str(self.message)


__all__ = ["OpenAIError"]
