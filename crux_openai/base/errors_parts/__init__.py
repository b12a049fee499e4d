"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `crux_openai.base.errors` for the stable surface.
"""

from .error_kind import ErrorKind
from .error_category import ErrorCategory
from .openai_error import OpenAIError
from .classification import classify_status, extract_exception_code, is_retryable
from .json_parsing import JsonParseResult, extract_error_message, try_parse_json

__all__ = [
    "ErrorKind",
    "ErrorCategory",
    "OpenAIError",
    "classify_status",
    "extract_exception_code",
    "is_retryable",
    "JsonParseResult",
    "extract_error_message",
    "try_parse_json",
]
