"""
Client Base Package

Infrastructure layers used by :class:`crux_openai.client.OpenAIClient`:

- Registry: endpoint names -> HTTP method and path template
- URL builder: placeholder resolution and URL composition
- Body builders: JSON and multipart encoding
- Streaming: server-sent events decoding
- Errors, logging, timeouts and configuration model
"""

from .body import EncodedBody, build_body
from .client_config import ClientConfig
from .errors import ErrorCategory, ErrorKind, OpenAIError
from .http import Transport, create_http_client
from .registry import DEFAULT_REGISTRY, EndpointDefinition, EndpointRegistry, HttpMethod, get_endpoint
from .streaming import SSELineDecoder, iter_sse_events
from .timeouts import TimeoutConfig, get_timeout_config
from .url_builder import build_url, resolve_path

__all__ = [
    "EncodedBody",
    "build_body",
    "ClientConfig",
    "ErrorCategory",
    "ErrorKind",
    "OpenAIError",
    "Transport",
    "create_http_client",
    "DEFAULT_REGISTRY",
    "EndpointDefinition",
    "EndpointRegistry",
    "HttpMethod",
    "get_endpoint",
    "SSELineDecoder",
    "iter_sse_events",
    "TimeoutConfig",
    "get_timeout_config",
    "build_url",
    "resolve_path",
]
