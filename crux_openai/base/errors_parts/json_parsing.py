"""
Fallible JSON parsing used to derive human-readable error messages.

``json.loads`` signals malformed input by raising; here that signal is turned
into an explicit :class:`JsonParseResult` so callers can branch on the
outcome without using exceptions for control flow.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional, Union

from ..constants import DEFAULT_ERROR_MESSAGE


@dataclass(frozen=True)
class JsonParseResult:
    """Outcome of :func:`try_parse_json`.

    Attributes:
        ok: True when the text was valid JSON.
        value: Decoded value (``None`` when ``ok`` is False).
        error: Decoder message when ``ok`` is False.
    """

    ok: bool
    value: Any = None
    error: Optional[str] = None


def try_parse_json(text: Union[str, bytes, None]) -> JsonParseResult:
    """Parse ``text`` as JSON without raising."""
    if text is None:
        return JsonParseResult(ok=False, error="no input")
    try:
        return JsonParseResult(ok=True, value=json.loads(text))
    except (ValueError, TypeError) as exc:
        return JsonParseResult(ok=False, error=str(exc))


def extract_error_message(raw: Union[str, bytes, None]) -> str:
    """Return the externally visible message for a raw error payload.

    - Empty or missing input yields :data:`DEFAULT_ERROR_MESSAGE`.
    - A JSON object with a string at ``error.message`` yields that string.
    - Anything else (malformed JSON, other shapes, non-string field) is
      returned verbatim.
    """
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    if not raw:
        return DEFAULT_ERROR_MESSAGE
    parsed = try_parse_json(raw)
    if parsed.ok and isinstance(parsed.value, dict):
        error = parsed.value.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
    return raw


__all__ = ["JsonParseResult", "try_parse_json", "extract_error_message"]
