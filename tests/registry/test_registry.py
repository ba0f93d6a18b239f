"""Tests for the prefab registry."""

import pytest

from hana_prefab import DuplicateTypeError, FieldMap, PrefabLookup, PrefabRegistry, UnknownTypeError


@pytest.fixture
def empty_registry():
    return PrefabRegistry()


def test_register_and_lookup(empty_registry):
    def player(fields):
        return "player"

    returned = empty_registry.register("Player", player)

    assert returned is player
    assert empty_registry.lookup("Player") is player
    assert "Player" in empty_registry
    assert len(empty_registry) == 1


def test_duplicate_registration_keeps_first(empty_registry):
    """CRITICAL: Second registration under a name fails and changes nothing.

    Why: Silent overwrite hides configuration mistakes until a room misbehaves.
    """

    def first(fields):
        return 1

    def second(fields):
        return 2

    empty_registry.register("Pig", first)

    with pytest.raises(DuplicateTypeError) as exc_info:
        empty_registry.register("Pig", second)

    assert exc_info.value.type_name == "Pig"
    assert empty_registry.lookup("Pig") is first
    assert len(empty_registry) == 1


def test_lookup_unknown_lists_known_types(empty_registry):
    empty_registry.register("Pig", lambda fields: 1)
    empty_registry.register("Bush", lambda fields: 2)

    with pytest.raises(UnknownTypeError, match="unknown prefab type 'Cow'") as exc_info:
        empty_registry.lookup("Cow")

    assert exc_info.value.type_name == "Cow"
    assert exc_info.value.known == ("Bush", "Pig")


def test_lookup_does_not_instantiate(empty_registry):
    calls = []
    empty_registry.register("Pig", lambda fields: calls.append(fields))

    empty_registry.lookup("Pig")

    assert calls == []


def test_prefab_decorator(empty_registry):
    @empty_registry.prefab("Tree")
    def tree(fields: FieldMap) -> str:
        return f"tree:{fields.as_number('height')}"

    assert empty_registry.lookup("Tree")(FieldMap({"height": 3})) == "tree:3.0"
    assert tree.__name__ == "tree"


@pytest.mark.parametrize("name", ["", "   ", None, 3])
def test_register_rejects_bad_names(empty_registry, name):
    with pytest.raises(TypeError, match="non-empty string"):
        empty_registry.register(name, lambda fields: None)


def test_register_rejects_non_callable(empty_registry):
    with pytest.raises(TypeError, match="must be callable"):
        empty_registry.register("Pig", object())


def test_type_names_in_registration_order(empty_registry):
    for name in ["Player", "Pig", "Bush"]:
        empty_registry.register(name, lambda fields: name)

    assert empty_registry.type_names() == ["Player", "Pig", "Bush"]
    assert list(empty_registry) == ["Player", "Pig", "Bush"]


def test_registry_satisfies_lookup_protocol(empty_registry):
    assert isinstance(empty_registry, PrefabLookup)
