"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``crux_openai.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_kind import ErrorKind
from .errors_parts.error_category import ErrorCategory
from .errors_parts.openai_error import OpenAIError
from .errors_parts.classification import classify_status, extract_exception_code, is_retryable
from .errors_parts.json_parsing import JsonParseResult, extract_error_message, try_parse_json
from .errors_parts import factories

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
    "factories",
]
