"""Generational entity handles for the local graph.

A slot index is recycled once its entity is despawned; the slot's generation
is bumped so handles to the previous occupant stay dead.
"""

from __future__ import annotations

from hana_prefab.core.identity import EntityId


class EntityAllocator:
    """Hands out EntityIds and recycles released slots.

    ``_generations[index]`` is the generation of the slot's current (or next)
    occupant. ``_released`` holds slots waiting in ``_free`` for reuse.
    """

    def __init__(self) -> None:
        self._generations: list[int] = []
        self._free: list[int] = []
        self._released: set[int] = set()

    def allocate(self) -> EntityId:
        """Reuse the most recently released slot, or open a new one."""
        if self._free:
            index = self._free.pop()
            self._released.discard(index)
        else:
            index = len(self._generations)
            self._generations.append(0)
        return EntityId(index=index, generation=self._generations[index])

    def deallocate(self, entity: EntityId) -> None:
        """Release entity's slot for reuse under the next generation.

        Raises:
            ValueError: If entity is not alive.
        """
        if not self.is_alive(entity):
            raise ValueError(f"Cannot deallocate entity {entity}: not alive")

        self._generations[entity.index] += 1
        self._released.add(entity.index)
        self._free.append(entity.index)

    def is_alive(self, entity: EntityId) -> bool:
        """True if entity is the current occupant of its slot."""
        if entity.index in self._released or not 0 <= entity.index < len(self._generations):
            return False
        return self._generations[entity.index] == entity.generation
