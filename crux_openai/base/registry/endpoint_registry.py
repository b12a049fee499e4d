"""
Endpoint registry: operation name -> :class:`EndpointDefinition`.

The registry is built once and never mutated afterwards, so lookups are safe
from any number of threads without locking.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Tuple, Union

from ..errors_parts.factories import unknown_endpoint
from .endpoint_definition import EndpointDefinition
from .http_method import HttpMethod

EntryLike = Union[EndpointDefinition, Tuple[str, Union[HttpMethod, str], str]]


class EndpointRegistry:
    """Read-only mapping of endpoint names to definitions."""

    def __init__(self, entries: Iterable[EntryLike]) -> None:
        table = {}
        for entry in entries:
            definition = entry if isinstance(entry, EndpointDefinition) else _from_tuple(entry)
            if definition.name in table:
                raise ValueError(f"duplicate endpoint name {definition.name!r}")
            table[definition.name] = definition
        self._table: Mapping[str, EndpointDefinition] = MappingProxyType(table)

    def lookup(self, name: str) -> EndpointDefinition:
        """Return the definition for ``name``.

        Raises:
            OpenAIError: kind ``UNKNOWN_ENDPOINT`` when ``name`` is not registered.
        """
        try:
            return self._table[name]
        except KeyError:
            raise unknown_endpoint(name) from None

    def names(self) -> Tuple[str, ...]:
        return tuple(self._table)

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __iter__(self) -> Iterator[EndpointDefinition]:
        return iter(self._table.values())

    def __len__(self) -> int:
        return len(self._table)


def _from_tuple(entry: Tuple[str, Union[HttpMethod, str], str]) -> EndpointDefinition:
    name, method, path = entry
    return EndpointDefinition(name=name, http_method=HttpMethod(method), path_template=path)


__all__ = ["EndpointRegistry"]
