"""Base shared constants for the OpenAI binding.

Central location to avoid scattering magic strings across the URL builder,
the body builders and the stream decoder.

Security
--------
This module contains only generic header names and sentinel strings. There
are no credentials or tokens embedded.

# pragma: allowlist secret
"""
from __future__ import annotations

# Host and API version used when the configuration leaves them empty
from ..config.defaults import DEFAULT_BASE_PATH, DEFAULT_ORIGIN

DEFAULT_SCHEME = "https"

# Error message used when the remote side (or a transport) gives us nothing
DEFAULT_ERROR_MESSAGE = "An unknown error occurred"

# Option key carrying per-call header overrides; never sent in the body
CUSTOM_HEADERS_KEY = "customHeaders"

# Option keys whose values are file paths to upload as multipart parts
RESERVED_FILE_KEYS = frozenset({"file", "image", "mask", "data"})

# Multipart fields carrying opaque binary payloads (base64 encoded on the wire)
BASE64_FILE_KEYS = frozenset({"data"})

# Server-sent events framing
SSE_DATA_PREFIX = "data: "
SSE_DONE_SENTINEL = "[DONE]"

# Header names
AUTHORIZATION_HEADER = "Authorization"
ORGANIZATION_HEADER = "OpenAI-Organization"
PROJECT_HEADER = "OpenAI-Project"
CONTENT_TYPE_HEADER = "Content-Type"

JSON_CONTENT_TYPE = "application/json"
OCTET_STREAM_CONTENT_TYPE = "application/octet-stream"

__all__ = [
    "DEFAULT_ORIGIN",
    "DEFAULT_BASE_PATH",
    "DEFAULT_SCHEME",
    "DEFAULT_ERROR_MESSAGE",
    "CUSTOM_HEADERS_KEY",
    "RESERVED_FILE_KEYS",
    "BASE64_FILE_KEYS",
    "SSE_DATA_PREFIX",
    "SSE_DONE_SENTINEL",
    "AUTHORIZATION_HEADER",
    "ORGANIZATION_HEADER",
    "PROJECT_HEADER",
    "CONTENT_TYPE_HEADER",
    "JSON_CONTENT_TYPE",
    "OCTET_STREAM_CONTENT_TYPE",
]
