"""Timeout configuration for client transports.

The binding does not enforce deadlines itself; it forwards these values to
the HTTP transport (``httpx.Timeout``) it creates and, per request, through
the ``timeout`` request extension. Injected transports keep their own timeout
configuration unless ``ClientConfig.timeout_seconds`` is set explicitly.

Supported environment variables (all optional, positive floats):
    CRUX_OPENAI_TIMEOUT_HTTP_SECONDS     read/write/pool timeout for normal calls
    CRUX_OPENAI_TIMEOUT_CONNECT_SECONDS  connection establishment timeout
    CRUX_OPENAI_TIMEOUT_STREAM_SECONDS   idle read timeout between stream chunks

Values are parsed on first use and cached; the cache is refreshed when the
variables change so tests can adjust them with ``monkeypatch``.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

from ..config.defaults import DEFAULT_TIMEOUT_SECONDS

_ENV_NAMES = (
    "CRUX_OPENAI_TIMEOUT_HTTP_SECONDS",
    "CRUX_OPENAI_TIMEOUT_CONNECT_SECONDS",
    "CRUX_OPENAI_TIMEOUT_STREAM_SECONDS",
)


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Baseline timeout for non-streaming requests.
        connect_timeout_seconds: Timeout for establishing the connection.
        stream_timeout_seconds: Idle timeout while waiting for the next
            streamed chunk.
    """

    http_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    connect_timeout_seconds: float = 10.0
    stream_timeout_seconds: float = 120.0

    def to_httpx(self, *, stream: bool = False) -> httpx.Timeout:
        read = self.stream_timeout_seconds if stream else self.http_timeout_seconds
        return httpx.Timeout(self.http_timeout_seconds, connect=self.connect_timeout_seconds, read=read)

    def with_http_timeout(self, seconds: float | None) -> "TimeoutConfig":
        """Return a copy with ``http_timeout_seconds`` replaced when given."""
        if seconds is None or seconds <= 0:
            return self
        return TimeoutConfig(
            http_timeout_seconds=float(seconds),
            connect_timeout_seconds=self.connect_timeout_seconds,
            stream_timeout_seconds=self.stream_timeout_seconds,
        )


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse an environment variable as a positive float, else ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(name, "") for name in _ENV_NAMES)
    if _CACHED is not None and guard == _ENV_GUARD:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float(_ENV_NAMES[0], defaults.http_timeout_seconds),
        connect_timeout_seconds=_parse_env_float(_ENV_NAMES[1], defaults.connect_timeout_seconds),
        stream_timeout_seconds=_parse_env_float(_ENV_NAMES[2], defaults.stream_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
