"""
Normalized error kinds for the OpenAI binding.

Every failure surfaced by the client is an :class:`OpenAIError`; the ``kind``
field tells callers which stage of the request pipeline produced it. Values
are lowercase snake_case and are considered a stable public contract for
logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Pipeline stage that produced an error."""

    UNKNOWN_ENDPOINT = "unknown_endpoint"
    MISSING_PATH_PARAMETER = "missing_path_parameter"
    INVALID_PARAMETER_TYPE = "invalid_parameter_type"
    ENCODING = "encoding"
    API = "api"
    TRANSPORT = "transport"
    STREAM_DECODE = "stream_decode"

    @property
    def is_input_error(self) -> bool:
        """True for kinds raised before any network I/O takes place."""
        return self in (
            ErrorKind.UNKNOWN_ENDPOINT,
            ErrorKind.MISSING_PATH_PARAMETER,
            ErrorKind.INVALID_PARAMETER_TYPE,
            ErrorKind.ENCODING,
        )


__all__ = ["ErrorKind"]
