"""
Endpoint definition value object.

An endpoint is a named remote operation with a fixed HTTP method and a path
template. Templates may contain ``{identifier}`` placeholders that are filled
per call from the caller's path parameters.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Tuple

from .http_method import HttpMethod

PLACEHOLDER_PATTERN = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass(frozen=True)
class EndpointDefinition:
    """Immutable description of one API operation.

    Attributes:
        name: Unique operation name (e.g. ``createChatCompletion``).
        http_method: HTTP verb used for the call.
        path_template: Path relative to the API base path, starting with
            ``/`` (e.g. ``/threads/{thread_id}/runs``).
        placeholders: Distinct placeholder names in template order.
    """

    name: str
    http_method: HttpMethod
    path_template: str
    placeholders: Tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.path_template.startswith("/"):
            raise ValueError(f"path template for {self.name!r} must start with '/'")
        names = tuple(dict.fromkeys(PLACEHOLDER_PATTERN.findall(self.path_template)))
        object.__setattr__(self, "placeholders", names)

    @property
    def is_read(self) -> bool:
        """True for GET operations (parameters travel in the query string)."""
        return self.http_method is HttpMethod.GET


__all__ = ["EndpointDefinition", "PLACEHOLDER_PATTERN"]
