"""Components and resources spawned by the pig game's prefabs."""

from dataclasses import dataclass, field

from hana_prefab import Vector2


@dataclass(slots=True)
class Transform:
    translation: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))


@dataclass(slots=True)
class Sprite:
    texture: str
    flip_x: bool = False


@dataclass(slots=True)
class Player:
    speed: float


@dataclass(slots=True)
class PigParent:
    """Marker for the entity pigs get spawned under."""


@dataclass(slots=True)
class Money:
    """Example: resource, one per graph."""

    amount: float
