"""multipart/form-data request bodies.

Used for uploads (files, images, masks, upload parts). Reserved keys name a
file path whose bytes are attached as an ``application/octet-stream`` part
under a random file name that keeps the original extension; the ``data`` key
carries an opaque upload chunk and is base64 encoded. Every other option is
sent as a plain text field.
"""
from __future__ import annotations

import base64
import os
import uuid
from pathlib import Path
from typing import Any, List, Mapping, Tuple, Union

from ..constants import BASE64_FILE_KEYS, OCTET_STREAM_CONTENT_TYPE, RESERVED_FILE_KEYS
from ..errors_parts.factories import encoding_error
from .encoded_body import EncodedBody

FileSource = Union[str, "os.PathLike[str]", bytes, bytearray]


def _is_nested(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple, set))


def is_multipart(options: Mapping[str, Any]) -> bool:
    """True iff a reserved file key is present and no value is nested.

    Structured requests (for example a list of messages) stay JSON even when
    they happen to use a reserved key name.
    """
    if not any(key in RESERVED_FILE_KEYS for key in options):
        return False
    return not any(_is_nested(value) for value in options.values())


def new_boundary() -> str:
    return uuid.uuid4().hex


def random_filename(source: FileSource) -> str:
    """Random name preserving the extension of ``source`` when it is a path."""
    suffix = "" if isinstance(source, (bytes, bytearray)) else Path(os.fspath(source)).suffix
    return f"{uuid.uuid4().hex}{suffix}"


def read_file_bytes(key: str, source: FileSource) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if not isinstance(source, (str, os.PathLike)):
        raise encoding_error(f'field "{key}" must be a file path, got {type(source).__name__}')
    try:
        return Path(os.fspath(source)).read_bytes()
    except OSError as exc:
        raise encoding_error(f'cannot read file for field "{key}": {exc}', cause=exc) from exc


def _quote(name: str) -> str:
    return name.replace("\\", "\\\\").replace('"', "%22").replace("\r", "%0D").replace("\n", "%0A")


def _text_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_multipart(options: Mapping[str, Any], boundary: str | None = None) -> EncodedBody:
    """Encode ``options`` as ``multipart/form-data``.

    ``None`` values are skipped. Files are read eagerly so an unreadable path
    fails before the request is sent.
    """
    boundary = boundary or new_boundary()
    parts: List[bytes] = []
    for key, value in options.items():
        if value is None:
            continue
        headers: List[Tuple[str, str]]
        if key in RESERVED_FILE_KEYS:
            payload = read_file_bytes(key, value)
            if key in BASE64_FILE_KEYS:
                payload = base64.b64encode(payload)
            disposition = f'form-data; name="{_quote(key)}"; filename="{_quote(random_filename(value))}"'
            headers = [("Content-Disposition", disposition), ("Content-Type", OCTET_STREAM_CONTENT_TYPE)]
        else:
            payload = _text_value(value).encode("utf-8")
            headers = [("Content-Disposition", f'form-data; name="{_quote(key)}"')]
        head = "".join(f"{name}: {val}\r\n" for name, val in headers)
        parts.append(f"--{boundary}\r\n{head}\r\n".encode("utf-8") + payload + b"\r\n")
    parts.append(f"--{boundary}--\r\n".encode("utf-8"))
    return EncodedBody(
        content=b"".join(parts),
        content_type=f"multipart/form-data; boundary={boundary}",
        multipart=True,
    )


__all__ = [
    "is_multipart",
    "new_boundary",
    "random_filename",
    "read_file_bytes",
    "encode_multipart",
]
