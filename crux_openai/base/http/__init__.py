"""HTTP transport helpers (``httpx`` based)."""

from .transport import Transport, create_http_client

__all__ = ["Transport", "create_http_client"]
