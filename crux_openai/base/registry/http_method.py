"""HTTP methods used by catalog entries."""
from __future__ import annotations

from enum import Enum


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


__all__ = ["HttpMethod"]
