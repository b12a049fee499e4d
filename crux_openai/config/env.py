"""crux_openai.config.env
======================

Environment variable mapping and helpers for client settings.

Design Notes
------------
- ``ENV_MAP`` maps each setting field to its canonical variable name.
- Some settings have historically been read from more than one variable;
  ``ENV_ALIASES`` lists those with the canonical name first to establish
  precedence.
- Helpers never raise on unset variables; callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

ENV_MAP: Dict[str, str] = {
    "api_key": "OPENAI_API_KEY",  # pragma: allowlist secret - env var name, not a secret
    "admin_key": "OPENAI_ADMIN_KEY",  # pragma: allowlist secret - env var name, not a secret
    "organization": "OPENAI_ORGANIZATION",
    "project": "OPENAI_PROJECT",
    "origin": "OPENAI_ORIGIN",
    "base_path": "OPENAI_BASE_PATH",
    "timeout_seconds": "OPENAI_TIMEOUT",
    "proxy": "OPENAI_PROXY",
}

ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "organization": ("OPENAI_ORGANIZATION", "OPENAI_ORG_ID"),
    "project": ("OPENAI_PROJECT", "OPENAI_PROJECT_ID"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the string looks like a placeholder or sample value.

    Heuristics: contains 'placeholder', 'changeme', 'your_api_key',
    'your-api-key' or starts with 'test_'. Case-insensitive.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "your_api_key" in v
        or "your-api-key" in v
        or v.startswith("test_")
    )


def get_env_var_candidates(field: str) -> Iterable[str]:
    """Yield acceptable variable names for a setting, canonical first."""
    canonical = ENV_MAP.get(field)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(field, ()):
        if alias != canonical:
            yield alias


def resolve_env(field: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve a setting from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)`` for the first non-empty, non-placeholder
        value; ``(None, None)`` when nothing usable is set.
    """
    for name in get_env_var_candidates(field):
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_candidates",
    "resolve_env",
]
