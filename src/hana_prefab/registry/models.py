"""Registry models: the constructor capability and the read-only lookup view."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from hana_prefab.core.field import FieldMap


@runtime_checkable
class Constructor(Protocol):
    """FieldMap → instantiated object. Fails by raising a PrefabError."""

    def __call__(self, fields: FieldMap, /) -> Any: ...


@runtime_checkable
class PrefabLookup(Protocol):
    """Read-only registry view. This is all the loader is allowed to see."""

    def lookup(self, type_name: str) -> Constructor: ...

    def __contains__(self, type_name: object) -> bool: ...
