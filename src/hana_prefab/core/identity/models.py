"""Entity identity models.

Usage:
    entity = EntityId(index=42, generation=1)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EntityId:
    """Lightweight entity handle with a generation for safe slot reuse.

    A despawned entity's index can be handed out again; the bumped generation
    keeps stale handles from matching the new occupant.
    """

    index: int = 0
    generation: int = 0

    def __str__(self) -> str:
        return f"{self.index}v{self.generation}"
