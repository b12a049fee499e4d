"""Request body builders.

``build_body`` picks exactly one encoding per request: multipart when
``is_multipart`` says so, JSON otherwise.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from .encoded_body import EncodedBody
from .json_body import encode_json
from .multipart import encode_multipart, is_multipart


def build_body(options: Optional[Mapping[str, Any]], *, force_json: bool = False) -> EncodedBody:
    """Encode the option map for the wire.

    ``force_json`` skips multipart detection (streaming requests are always
    JSON).
    """
    options = options or {}
    if not force_json and is_multipart(options):
        return encode_multipart(options)
    return encode_json(options)


__all__ = ["EncodedBody", "build_body", "encode_json", "encode_multipart", "is_multipart"]
