"""Encoded request body value object."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EncodedBody:
    """Bytes ready for the wire plus the matching ``Content-Type``.

    Attributes:
        content: Encoded body; empty for bodyless calls.
        content_type: Header value. JSON bodies keep ``application/json``
            even when empty.
        multipart: True when the body is ``multipart/form-data``.
    """

    content: bytes = b""
    content_type: Optional[str] = None
    multipart: bool = False

    def __len__(self) -> int:
        return len(self.content)


__all__ = ["EncodedBody"]
