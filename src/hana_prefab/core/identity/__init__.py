"""Entity identity functionality: lightweight generational IDs."""

from hana_prefab.core.identity.models import EntityId

__all__ = [
    "EntityId",
]
