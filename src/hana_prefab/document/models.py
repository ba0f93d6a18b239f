"""Room document models: parsed but not yet instantiated prefabs."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from hana_prefab.core.errors import DocumentError
from hana_prefab.core.field import FieldMap


@dataclass(frozen=True, slots=True)
class PrefabDescriptor:
    """A type name plus the raw fields its constructor will read."""

    type_name: str
    fields: FieldMap = field(default_factory=FieldMap)

    @classmethod
    def of(cls, type_name: str, fields: Mapping[str, Any] | None = None) -> PrefabDescriptor:
        """Build a descriptor from plain Python field values."""
        return cls(type_name=type_name, fields=FieldMap(fields))


@dataclass(frozen=True, slots=True)
class RoomDocument:
    """Named collection of prefab (and resource) descriptors from one source.

    Both mappings keep declaration order, which is the order the loader
    instantiates them in.

    Attributes:
        name: Identity of the source, e.g. its file name.
        prefabs: Instance name → descriptor, entities to spawn.
        resources: Instance name → descriptor, standalone resources.

    Raises:
        DocumentError: If an instance name appears in both mappings.
    """

    name: str
    prefabs: Mapping[str, PrefabDescriptor] = field(default_factory=dict)
    resources: Mapping[str, PrefabDescriptor] = field(default_factory=dict)

    def __post_init__(self) -> None:
        clashes = sorted(set(self.prefabs) & set(self.resources))
        if clashes:
            raise DocumentError("resources", f"instance names also used by prefabs: {clashes}")
        object.__setattr__(self, "prefabs", MappingProxyType(dict(self.prefabs)))
        object.__setattr__(self, "resources", MappingProxyType(dict(self.resources)))

    def entries(self) -> Iterator[tuple[str, PrefabDescriptor]]:
        """All entries in load order: resources first, then prefabs."""
        yield from self.resources.items()
        yield from self.prefabs.items()

    def __len__(self) -> int:
        return len(self.prefabs) + len(self.resources)

    def is_empty(self) -> bool:
        return len(self) == 0
