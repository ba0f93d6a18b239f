"""Prefab registry: constructors by type name, plus dataclass schema constructors."""

from hana_prefab.registry.core import PrefabRegistry
from hana_prefab.registry.models import Constructor, PrefabLookup
from hana_prefab.registry.schema import schema_constructor

__all__ = [
    "PrefabRegistry",
    "Constructor",
    "PrefabLookup",
    "schema_constructor",
]
