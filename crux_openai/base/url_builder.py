"""URL construction for endpoint calls.

Resolves ``{placeholder}`` segments in an endpoint's path template from the
caller's path parameters and composes the absolute URL::

    https://{origin}/{base_path}{resolved path}[?query]

Parameters that do not match a placeholder are handed back to the caller
(see :func:`resolve_path`). For GET operations they become the query string;
the dispatcher merges them into the body for every other method.

Failure modes
-------------
- ``MISSING_PATH_PARAMETER`` when a placeholder has no value (or ``None``).
- ``INVALID_PARAMETER_TYPE`` when a placeholder value is not a scalar.
Both are raised before any request is built.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import quote

import httpx

from .constants import DEFAULT_BASE_PATH, DEFAULT_ORIGIN, DEFAULT_SCHEME
from .errors_parts.factories import invalid_parameter_type, missing_path_parameter
from .registry import PLACEHOLDER_PATTERN, EndpointDefinition

SCALAR_TYPES = (str, int, float, bool)


def format_scalar(value: Any) -> str:
    """Render a scalar for a URL or form field (booleans as ``true``/``false``)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def placeholders(template: str) -> Tuple[str, ...]:
    """Distinct placeholder names of ``template`` in order of appearance."""
    return tuple(dict.fromkeys(PLACEHOLDER_PATTERN.findall(template)))


def resolve_path(
    definition: EndpointDefinition,
    path_params: Optional[Mapping[str, Any]] = None,
) -> Tuple[str, Dict[str, Any]]:
    """Substitute placeholders in the definition's template.

    Returns:
        ``(path, leftover)`` where ``leftover`` holds the parameters that
        matched no placeholder.
    """
    remaining: Dict[str, Any] = dict(path_params or {})
    values: Dict[str, str] = {}
    for key in definition.placeholders:
        value = remaining.pop(key, None)
        if value is None:
            raise missing_path_parameter(key, definition.name)
        if not isinstance(value, SCALAR_TYPES):
            raise invalid_parameter_type(key, value)
        values[key] = quote(format_scalar(value), safe="")
    path = PLACEHOLDER_PATTERN.sub(lambda m: values[m.group(1)], definition.path_template)
    return path, remaining


def _flatten_query(params: Mapping[str, Any], prefix: str = "") -> List[Tuple[str, str]]:
    """Flatten nested mappings with bracket keys; lists repeat the key."""
    items: List[Tuple[str, str]] = []
    for key, value in params.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if value is None:
            continue
        if isinstance(value, Mapping):
            items.extend(_flatten_query(value, name))
        elif isinstance(value, (list, tuple)):
            items.extend((name, format_scalar(v)) for v in value if v is not None)
        else:
            items.append((name, format_scalar(value)))
    return items


def base_url(origin: str = "", base_path: Optional[str] = None) -> str:
    """Compose ``scheme://origin/base_path`` with defaults for empty parts.

    An origin that already carries a scheme (``http://localhost:8080``) is used
    as-is, which keeps local gateways and test servers addressable.
    """
    host = (origin or "").strip().rstrip("/") or DEFAULT_ORIGIN
    if "://" not in host:
        host = f"{DEFAULT_SCHEME}://{host}"
    version = (base_path or "").strip().strip("/") or DEFAULT_BASE_PATH
    return f"{host}/{version}"


def compose_url(
    path: str,
    origin: str = "",
    base_path: Optional[str] = None,
    query: Optional[Mapping[str, Any]] = None,
) -> httpx.URL:
    """Join an already resolved path onto the base URL, adding ``query``."""
    raw = base_url(origin, base_path) + path
    pairs = _flatten_query(query or {})
    return httpx.URL(raw, params=httpx.QueryParams(pairs)) if pairs else httpx.URL(raw)


def build_url(
    definition: EndpointDefinition,
    path_params: Optional[Mapping[str, Any]] = None,
    origin: str = "",
    base_path: Optional[str] = None,
    query: Optional[Mapping[str, Any]] = None,
) -> httpx.URL:
    """Build the absolute URL for one call.

    Parameters
    ----------
    definition:
        Endpoint being called.
    path_params:
        Placeholder values; unmatched entries join the query for GET calls.
    origin, base_path:
        Host and version segment; empty values fall back to the defaults.
    query:
        Extra query parameters (GET only). Wins over unmatched path params.
    """
    path, leftover = resolve_path(definition, path_params)
    if not definition.is_read:
        return compose_url(path, origin, base_path)
    return compose_url(path, origin, base_path, {**leftover, **dict(query or {})})


__all__ = [
    "SCALAR_TYPES",
    "format_scalar",
    "placeholders",
    "resolve_path",
    "base_url",
    "compose_url",
    "build_url",
]
