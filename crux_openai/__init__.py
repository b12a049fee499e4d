"""crux_openai package

Thin client binding for the OpenAI REST API.

Purpose:
    Map named endpoint operations (``createChatCompletion``, ``listModels``,
    ``createRun`` ...) to HTTP requests, send them through an injectable
    ``httpx`` transport and normalize the outcome: responses are returned
    unchanged, every failure is an :class:`OpenAIError`, and streamed
    responses are decoded as server-sent events.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`OpenAIClient`, :func:`create`
    - Configuration: :class:`ClientConfig`
    - Exceptions: :class:`OpenAIError`, :class:`ErrorKind`, :class:`ErrorCategory`
    - Registry: :data:`DEFAULT_REGISTRY`, :class:`EndpointDefinition`
"""

from typing import Any, Optional

from .base.client_config import ClientConfig
from .base.errors import ErrorCategory, ErrorKind, OpenAIError
from .base.http import Transport
from .base.registry import DEFAULT_REGISTRY, EndpointDefinition, EndpointRegistry, HttpMethod
from .client import OpenAIClient

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "OpenAIClient",
    "create",
    "ClientConfig",
    "OpenAIError",
    "ErrorKind",
    "ErrorCategory",
    "Transport",
    "DEFAULT_REGISTRY",
    "EndpointDefinition",
    "EndpointRegistry",
    "HttpMethod",
]


def create(
    api_key: Optional[str] = None,
    *,
    transport: Optional[Transport] = None,
    admin: bool = False,
    **overrides: Any,
) -> OpenAIClient:
    """Construct an :class:`OpenAIClient`.

    Settings come from defaults, the optional config file and the environment,
    with ``api_key`` and keyword ``overrides`` taking precedence.

    Parameters
    ----------
    api_key:
        Explicit key; when omitted ``OPENAI_API_KEY`` (or ``OPENAI_ADMIN_KEY``
        with ``admin=True``) is used.
    transport:
        Optional transport (``httpx.Client`` or compatible).
    admin:
        Use the administration key for organization endpoints.
    **overrides:
        Any :class:`ClientConfig` field (``organization``, ``origin`` ...).

    Raises
    ------
    pydantic.ValidationError
        When no API key can be resolved.
    """
    config = ClientConfig.from_env(admin=admin, api_key=api_key, **overrides)
    return OpenAIClient(config, transport)
