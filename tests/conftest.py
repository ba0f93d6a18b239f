"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from hana_prefab import Bundle, FieldMap, PrefabRegistry, Resource, Vector2


@dataclass(slots=True)
class FixtureTransform:
    translation: Vector2


@dataclass(slots=True)
class FixturePlayer:
    speed: float


@dataclass(slots=True)
class FixturePigParent:
    pass


@dataclass(slots=True)
class FixtureMoney:
    amount: float


def build_player(fields: FieldMap) -> Bundle:
    return Bundle.of(
        FixtureTransform(fields.as_vector2("position")),
        FixturePlayer(speed=fields.as_number("speed")),
    )


def build_pig_parent(fields: FieldMap) -> Bundle:
    return Bundle.of(FixturePigParent())


def build_money(fields: FieldMap) -> Resource:
    return Resource(FixtureMoney(fields.as_number("amount")))


@pytest.fixture
def registry():
    """Registry with Player, PigParent and Money prefabs."""
    registry = PrefabRegistry()
    registry.register("Player", build_player)
    registry.register("PigParent", build_pig_parent)
    registry.register("Money", build_money)
    return registry


@pytest.fixture
def player_fields():
    return {"position": "(0, 0)", "speed": 200.0}


