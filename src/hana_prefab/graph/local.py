"""Local in-memory host graph with per-room tracking.

Simple dict-based entity/component storage suitable for single-process use
and testing. Tracks which entities and resources each room created so a room
can be unloaded as a whole.

Usage:
    graph = LocalGraph()
    report = load(document, registry, graph.room(document.name))

    player = graph.entity_for(document.name, "player")
    pos = graph.get_component(player, Transform)

    graph.unload_room(document.name)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, TypeVar, cast

from hana_prefab.core.identity import EntityId
from hana_prefab.graph.allocator import EntityAllocator
from hana_prefab.graph.models import Bundle, Resource

T = TypeVar("T")

logger = logging.getLogger(__name__)


class LocalGraph:
    """Simple in-memory object graph using nested dicts.

    Structure:
        _components[entity][component_type] = component_instance
        _resources[resource_type] = resource_value
        _rooms[room_name][instance_name] = EntityId | resource type
        _resource_owners[resource_type] = room_name
    """

    def __init__(self) -> None:
        self._allocator = EntityAllocator()
        self._components: dict[EntityId, dict[type, Any]] = {}
        self._resources: dict[type, Any] = {}
        self._rooms: dict[str, dict[str, EntityId | type]] = {}
        self._resource_owners: dict[type, str] = {}

    # Entities

    def spawn(self, *components: Any) -> EntityId:
        """Create an entity with components. Later components replace earlier ones of the same type."""
        entity = self._allocator.allocate()
        self._components[entity] = {type(c): c for c in components}
        return entity

    def despawn(self, entity: EntityId) -> bool:
        """Destroy an entity and all its components.

        Returns:
            True if the entity existed, False otherwise.
        """
        if entity not in self._components:
            return False
        del self._components[entity]
        self._allocator.deallocate(entity)
        return True

    def entity_exists(self, entity: EntityId) -> bool:
        return entity in self._components and self._allocator.is_alive(entity)

    def all_entities(self) -> Iterator[EntityId]:
        yield from self._components

    def get_component(self, entity: EntityId, component_type: type[T]) -> T | None:
        """Get a component from an entity, or None if either is absent."""
        return cast(T | None, self._components.get(entity, {}).get(component_type))

    def set_component(self, entity: EntityId, component: Any) -> None:
        """Set or replace a component on an existing entity.

        Raises:
            KeyError: If the entity does not exist.
        """
        if entity not in self._components:
            raise KeyError(f"Entity {entity} does not exist")
        self._components[entity][type(component)] = component

    def query(self, *component_types: type) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Find entities with all specified components.

        Yields:
            Tuples of (entity, (component1, component2, ...)) for each match.
        """
        for entity, components in self._components.items():
            if all(t in components for t in component_types):
                yield entity, tuple(components[t] for t in component_types)

    # Resources

    def insert_resource(self, value: Any) -> None:
        """Insert or replace the resource of value's type.

        A resource inserted outside a room belongs to no room.
        """
        self._resources[type(value)] = value
        self._resource_owners.pop(type(value), None)

    def resource(self, resource_type: type[T]) -> T | None:
        return cast(T | None, self._resources.get(resource_type))

    def remove_resource(self, resource_type: type) -> bool:
        self._resource_owners.pop(resource_type, None)
        return self._resources.pop(resource_type, None) is not None

    def resource_owner(self, resource_type: type) -> str | None:
        """Room whose value currently occupies resource_type, or None."""
        return self._resource_owners.get(resource_type)

    # Rooms

    def attach(self, obj: Any) -> EntityId | type:
        """Attach an instantiated object to the graph.

        Bundles become entities, Resources are inserted by type, anything
        else becomes a single-component entity.

        Returns:
            The new entity, or the resource type for a Resource.
        """
        if isinstance(obj, Resource):
            self.insert_resource(obj.value)
            return obj.resource_type
        if isinstance(obj, Bundle):
            return self.spawn(*obj.components)
        return self.spawn(obj)

    def attach_to_room(self, room_name: str, instance_name: str, obj: Any) -> EntityId | type:
        """Attach obj and record it as instance_name of room_name.

        A resource replacing another room's value of the same type moves to
        this room; unloading the previous owner leaves it in place.

        Raises:
            ValueError: If the room already tracks instance_name. Unload the
                room before loading it again.
        """
        instances = self._rooms.setdefault(room_name, {})
        if instance_name in instances:
            raise ValueError(f"Room {room_name!r} already has an instance named {instance_name!r}")

        handle = self.attach(obj)
        if not isinstance(handle, EntityId):
            self._resource_owners[handle] = room_name
        instances[instance_name] = handle
        return handle

    def room(self, room_name: str) -> RoomSink:
        """Sink that attaches objects and records them under room_name."""
        return RoomSink(self, room_name)

    def rooms(self) -> list[str]:
        return list(self._rooms)

    def room_instances(self, room_name: str) -> dict[str, EntityId | type]:
        """Instance name → entity (or resource type) for everything the room created."""
        return dict(self._rooms.get(room_name, {}))

    def entity_for(self, room_name: str, instance_name: str) -> EntityId | None:
        """Entity created for an instance of a room, or None."""
        handle = self._rooms.get(room_name, {}).get(instance_name)
        return handle if isinstance(handle, EntityId) else None

    def unload_room(self, room_name: str) -> int:
        """Despawn every entity and remove every resource the room created.

        Resources whose value has since been replaced from elsewhere are
        left alone.

        Returns:
            Number of entities and resources removed.
        """
        instances = self._rooms.pop(room_name, {})
        removed = 0
        for handle in instances.values():
            if isinstance(handle, EntityId):
                removed += self.despawn(handle)
            elif self._resource_owners.get(handle) == room_name:
                removed += self.remove_resource(handle)
        logger.debug(f"Unloaded room {room_name!r}: removed {removed} objects")
        return removed


class RoomSink:
    """Sink bound to one room of a LocalGraph."""

    def __init__(self, graph: LocalGraph, room_name: str):
        self.graph = graph
        self.room_name = room_name

    def accept(self, instance_name: str, obj: Any) -> None:
        self.graph.attach_to_room(self.room_name, instance_name, obj)
