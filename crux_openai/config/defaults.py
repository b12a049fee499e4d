"""crux_openai.config.defaults
===========================

Small, stable default values used across the client. Every value here can be
overridden through the environment, the optional config file or explicit
``ClientConfig`` arguments.

This module intentionally avoids importing from other crux_openai packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Endpoint location ----
DEFAULT_ORIGIN = "api.openai.com"
DEFAULT_BASE_PATH = "v1"

# ---- Models used by the typed convenience methods when none is given ----
DEFAULT_CHAT_MODEL = "gpt-4o-mini"
DEFAULT_COMPLETION_MODEL = "gpt-3.5-turbo-instruct"
DEFAULT_EMBEDDING_MODEL = "text-embedding-3-small"

# ---- Transport ----
DEFAULT_TIMEOUT_SECONDS = 60.0

__all__ = [
    "DEFAULT_ORIGIN",
    "DEFAULT_BASE_PATH",
    "DEFAULT_CHAT_MODEL",
    "DEFAULT_COMPLETION_MODEL",
    "DEFAULT_EMBEDDING_MODEL",
    "DEFAULT_TIMEOUT_SECONDS",
]
