"""Unified configuration layer for the client.

Sources are merged in a predictable order (later wins):
    1. Built-in defaults (``config.defaults``)
    2. Optional config file named by ``CRUX_OPENAI_CONFIG_FILE``
       (``.json`` parsed as JSON, anything else as YAML)
    3. Environment variables (``OPENAI_API_KEY``, ``OPENAI_ORGANIZATION``, ...)
    4. In-code overrides passed to ``get_client_settings``

Config file example::

    openai:
      organization: org-123
      base_path: v1
      timeout_seconds: 30

Either a top-level ``openai`` section or a flat mapping is accepted.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    DEFAULT_BASE_PATH,
    DEFAULT_CHAT_MODEL,
    DEFAULT_COMPLETION_MODEL,
    DEFAULT_EMBEDDING_MODEL,
    DEFAULT_ORIGIN,
)
from .env import ENV_MAP, resolve_env

CONFIG_FILE_ENV = "CRUX_OPENAI_CONFIG_FILE"

DEFAULTS: Dict[str, Any] = {
    "origin": DEFAULT_ORIGIN,
    "base_path": DEFAULT_BASE_PATH,
    "chat_model": DEFAULT_CHAT_MODEL,
    "completion_model": DEFAULT_COMPLETION_MODEL,
    "embedding_model": DEFAULT_EMBEDDING_MODEL,
}


def load_config_file(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the optional config file.

    Returns an empty mapping when no path is configured or the file does not
    exist. Parse errors propagate so a broken file is noticed.
    """
    path = path or os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.is_file():
        return {}
    text = p.read_text(encoding="utf-8")
    data = json.loads(text) if p.suffix.lower() == ".json" else yaml.safe_load(text)
    if not isinstance(data, dict):
        return {}
    section = data.get("openai", data)
    return dict(section) if isinstance(section, dict) else {}


def _env_overrides(admin: bool) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field in ENV_MAP:
        if field in ("api_key", "admin_key"):
            continue
        val, _ = resolve_env(field)
        if val is not None:
            out[field] = val
    key_field = "admin_key" if admin else "api_key"
    key, _ = resolve_env(key_field)
    if key:
        out["api_key"] = key
    return out


def get_client_settings(overrides: Optional[Dict[str, Any]] = None, *, admin: bool = False) -> Dict[str, Any]:
    """Return merged client settings.

    Parameters
    ----------
    overrides:
        Explicit values; ``None`` entries are ignored.
    admin:
        Read the administration key (``OPENAI_ADMIN_KEY``) instead of the
        regular API key. Administration endpoints reject project keys.
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= load_config_file()
    cfg |= _env_overrides(admin)
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def get_default_model(kind: str) -> Optional[str]:
    """Return the configured default model for ``chat``, ``completion`` or ``embedding``."""
    return get_client_settings().get(f"{kind}_model")


__all__ = [
    "CONFIG_FILE_ENV",
    "DEFAULTS",
    "load_config_file",
    "get_client_settings",
    "get_default_model",
]
