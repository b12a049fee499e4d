"""JSON request bodies.

An empty option map produces an empty body rather than ``{}`` so that
bodyless calls send nothing. Values that cannot be represented as strict
JSON (arbitrary objects, NaN, infinities) fail with an ``ENCODING`` error
before any request is built.
"""
from __future__ import annotations

import json
from typing import Any, Mapping

from ..constants import JSON_CONTENT_TYPE
from ..errors_parts.factories import encoding_error
from .encoded_body import EncodedBody


def encode_json(options: Mapping[str, Any]) -> EncodedBody:
    if not options:
        return EncodedBody(content=b"", content_type=JSON_CONTENT_TYPE)
    try:
        text = json.dumps(dict(options), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise encoding_error(str(exc), cause=exc) from exc
    return EncodedBody(content=text.encode("utf-8"), content_type=JSON_CONTENT_TYPE)


__all__ = ["encode_json"]
