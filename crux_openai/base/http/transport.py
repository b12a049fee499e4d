"""HTTP transport boundary.

The client never talks to the network directly: it hands a fully built
``httpx.Request`` to a transport object exposing ``send``. In production that
is an ``httpx.Client``; tests inject an ``httpx.Client`` backed by
``httpx.MockTransport`` or any object satisfying :class:`Transport`.

Timeouts are forwarded to the client created by :func:`create_http_client`;
no per-call deadline is enforced here.
"""
from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

import httpx

from ..timeouts import TimeoutConfig, get_timeout_config


@runtime_checkable
class Transport(Protocol):
    """Anything able to send an ``httpx.Request``.

    ``stream=True`` must return a response whose body has not been read yet
    (``iter_text`` / ``iter_bytes`` available, ``close`` releases it).
    """

    def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        ...


def create_http_client(
    timeout_seconds: Optional[float] = None,
    proxy: Optional[str] = None,
    timeouts: Optional[TimeoutConfig] = None,
) -> httpx.Client:
    """Create the default ``httpx.Client`` used when no transport is injected.

    Parameters:
        timeout_seconds: Overrides ``TimeoutConfig.http_timeout_seconds``.
        proxy: Optional proxy URL.
        timeouts: Base timeout configuration; defaults to
            :func:`get_timeout_config`.
    """
    cfg = (timeouts or get_timeout_config()).with_http_timeout(timeout_seconds)
    if proxy:
        return httpx.Client(timeout=cfg.to_httpx(), proxy=proxy)
    return httpx.Client(timeout=cfg.to_httpx())


__all__ = ["Transport", "create_http_client"]
