"""Prefab constructors for the pig game.

Shows both styles: hand-written constructors reading the FieldMap directly,
and a dataclass schema registered with register_schema().
"""

from dataclasses import dataclass

from hana_prefab import Bundle, FieldMap, PrefabRegistry, Resource, Vector2

from .components import Money, PigParent, Player, Sprite, Transform


def player(fields: FieldMap) -> Bundle:
    return Bundle.of(
        Transform(fields.as_vector2("position")),
        Sprite(fields.as_string("texture", default="player.png")),
        Player(speed=fields.as_number("speed")),
    )


def pig_parent(fields: FieldMap) -> Bundle:
    return Bundle.of(Transform(), PigParent())


def money(fields: FieldMap) -> Resource:
    return Resource(Money(fields.as_number("amount")))


@dataclass
class SpriteFields:
    position: Vector2
    texture: str
    flip_x: bool = False


def _sprite_bundle(sprite: SpriteFields) -> Bundle:
    return Bundle.of(Transform(sprite.position), Sprite(sprite.texture, sprite.flip_x))


def build_registry() -> PrefabRegistry:
    """Register every prefab type the game's rooms use."""
    registry = PrefabRegistry()
    registry.register("Player", player)
    registry.register("PigParent", pig_parent)
    registry.register("Money", money)
    registry.register_schema("Sprite", SpriteFields, build=_sprite_bundle)
    return registry
