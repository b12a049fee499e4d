"""
Constructors for each :class:`ErrorKind`.

Keeps message wording consistent between the URL builder, the body builders,
the dispatcher and the stream decoder.
"""
from __future__ import annotations

from typing import Optional

from .classification import extract_exception_code
from .error_kind import ErrorKind
from .openai_error import OpenAIError


def unknown_endpoint(name: str) -> OpenAIError:
    return OpenAIError(f'Invalid OpenAI URL key "{name}".', kind=ErrorKind.UNKNOWN_ENDPOINT)


def missing_path_parameter(key: str, endpoint: str) -> OpenAIError:
    return OpenAIError(
        f'Missing path parameter "{key}" for endpoint "{endpoint}".',
        kind=ErrorKind.MISSING_PATH_PARAMETER,
    )


def invalid_parameter_type(key: str, value: object) -> OpenAIError:
    return OpenAIError(
        f'Path parameter "{key}" must be a scalar, got {type(value).__name__}.',
        kind=ErrorKind.INVALID_PARAMETER_TYPE,
    )


def encoding_error(reason: str, cause: Optional[BaseException] = None) -> OpenAIError:
    return OpenAIError(f"Unable to encode request body: {reason}", kind=ErrorKind.ENCODING, cause=cause)


def api_error(body: str, status_code: int) -> OpenAIError:
    """Build the error raised for responses with status >= 400."""
    return OpenAIError(body, code=status_code, kind=ErrorKind.API, body=body)


def transport_error(exc: BaseException) -> OpenAIError:
    """Wrap a transport-level exception, keeping its message and code."""
    return OpenAIError(
        str(exc) or type(exc).__name__,
        code=extract_exception_code(exc),
        cause=exc,
        kind=ErrorKind.TRANSPORT,
    )


def stream_decode_error(line: str, cause: Optional[BaseException] = None) -> OpenAIError:
    return OpenAIError(
        f"Malformed stream event: {line[:200]}",
        kind=ErrorKind.STREAM_DECODE,
        cause=cause,
        body=line,
    )


__all__ = [
    "unknown_endpoint",
    "missing_path_parameter",
    "invalid_parameter_type",
    "encoding_error",
    "api_error",
    "transport_error",
    "stream_decode_error",
]
