"""Instantiated object shapes understood by LocalGraph.

Constructors return a Bundle for an entity with components, or a Resource
for a standalone value. Other sinks are free to accept anything else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Bundle:
    """Components making up one entity. One component per type is kept."""

    components: tuple[Any, ...] = ()

    @classmethod
    def of(cls, *components: Any) -> Bundle:
        return cls(components=tuple(components))

    def component_types(self) -> tuple[type, ...]:
        return tuple(type(c) for c in self.components)


@dataclass(frozen=True, slots=True)
class Resource:
    """A standalone value, keyed by its type in the host graph."""

    value: Any

    @property
    def resource_type(self) -> type:
        return type(self.value)
