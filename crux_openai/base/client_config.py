"""Immutable client configuration.

Purpose
-------
Carry everything a client needs to address and authenticate against the API:
credentials, organization/project routing, endpoint location and transport
hints. The model is frozen; a client holds its own instance for its whole
lifetime and concurrent callers never share mutable settings.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation. ``SecretStr`` keeps the key out of
  ``repr`` output and logs.

Failure modes
-------------
- ``pydantic.ValidationError`` when ``api_key`` is missing or empty.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from ..config import get_client_settings
from .constants import AUTHORIZATION_HEADER, ORGANIZATION_HEADER, PROJECT_HEADER
from ..config.defaults import (
    DEFAULT_CHAT_MODEL,
    DEFAULT_COMPLETION_MODEL,
    DEFAULT_EMBEDDING_MODEL,
)


class ClientConfig(BaseModel):
    """Configuration for :class:`crux_openai.client.OpenAIClient`.

    Attributes
    ----------
    api_key:
        Bearer token sent as ``Authorization: Bearer <api_key>``.
    organization:
        Optional value for the ``OpenAI-Organization`` header.
    project:
        Optional value for the ``OpenAI-Project`` header.
    origin:
        Host name; empty means ``api.openai.com``.
    base_path:
        API version path segment; empty means ``v1``.
    timeout_seconds:
        Request timeout in seconds. Applied to the transport the client
        creates; with an injected transport it is forwarded per request only
        when set, otherwise the transport keeps its own timeouts.
    proxy:
        Optional proxy URL for the transport the client creates.
    default_headers:
        Static headers added to every request (custom per-call headers still
        override them).
    chat_model, completion_model, embedding_model:
        Models used by the typed convenience methods when the caller omits
        ``model``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    api_key: SecretStr
    organization: Optional[str] = None
    project: Optional[str] = None
    origin: str = ""
    base_path: Optional[str] = None
    timeout_seconds: Optional[float] = Field(default=None, gt=0)
    proxy: Optional[str] = None
    default_headers: Mapping[str, str] = Field(default_factory=dict)
    chat_model: str = DEFAULT_CHAT_MODEL
    completion_model: str = DEFAULT_COMPLETION_MODEL
    embedding_model: str = DEFAULT_EMBEDDING_MODEL

    @field_validator("api_key")
    @classmethod
    def _require_key(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("api_key must not be empty")
        return value

    @classmethod
    def from_env(cls, *, admin: bool = False, **overrides: Any) -> "ClientConfig":
        """Build a configuration from defaults, config file and environment.

        ``admin=True`` reads ``OPENAI_ADMIN_KEY`` for the administration
        endpoints. Keyword ``overrides`` win over every other source.
        """
        settings: Dict[str, Any] = get_client_settings(overrides, admin=admin)
        return cls(**settings)

    def auth_headers(self) -> Dict[str, str]:
        """Default headers: bearer token plus organization and project when set."""
        headers = {AUTHORIZATION_HEADER: f"Bearer {self.api_key.get_secret_value()}"}
        if self.organization:
            headers[ORGANIZATION_HEADER] = self.organization
        if self.project:
            headers[PROJECT_HEADER] = self.project
        return headers


__all__ = ["ClientConfig"]
