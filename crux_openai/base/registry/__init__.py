"""Endpoint registry package.

``DEFAULT_REGISTRY`` is built from the static catalog at import time.
"""

from .catalog import ENDPOINT_CATALOG
from .endpoint_definition import EndpointDefinition, PLACEHOLDER_PATTERN
from .endpoint_registry import EndpointRegistry
from .http_method import HttpMethod

DEFAULT_REGISTRY = EndpointRegistry(ENDPOINT_CATALOG)


def get_endpoint(name: str) -> EndpointDefinition:
    """Look up ``name`` in :data:`DEFAULT_REGISTRY`."""
    return DEFAULT_REGISTRY.lookup(name)


__all__ = [
    "DEFAULT_REGISTRY",
    "ENDPOINT_CATALOG",
    "EndpointDefinition",
    "EndpointRegistry",
    "HttpMethod",
    "PLACEHOLDER_PATTERN",
    "get_endpoint",
]
