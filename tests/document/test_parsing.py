"""Tests for building room documents from deserialized mappings."""

import pytest

from hana_prefab import (
    BoolField,
    DocumentError,
    NumberField,
    PrefabDescriptor,
    PrefabSettings,
    RoomDocument,
    StringField,
    Vector2,
    VectorField,
    room_from_mapping,
)

TEST_ROOM = {
    "prefabs": {
        "player": {
            "type": "Player",
            "fields": {
                "position": {"String": "(0, 0)"},
                "speed": {"Number": 200.0},
                "visible": {"Bool": True},
                "velocity": {"Vec2": [1.0, 0.0]},
            },
        },
        "pig_parent": {"type": "PigParent", "fields": {}},
    },
}


def test_tagged_values():
    room = room_from_mapping("test_room", TEST_ROOM)
    fields = room.prefabs["player"].fields

    assert fields["position"] == StringField("(0, 0)")
    assert fields["speed"] == NumberField(200.0)
    assert fields["visible"] == BoolField(True)
    assert fields["velocity"] == VectorField(Vector2(1.0, 0.0))


def test_plain_values():
    room = room_from_mapping(
        "plain",
        {"prefabs": {"pig": {"type": "Pig", "fields": {"p": [1, 2], "n": 3, "b": False, "s": "x"}}}},
    )
    fields = room.prefabs["pig"].fields

    assert fields["p"] == VectorField(Vector2(1.0, 2.0))
    assert fields["n"] == NumberField(3.0)
    assert fields["b"] == BoolField(False)
    assert fields["s"] == StringField("x")


def test_declaration_order_is_preserved():
    names = [f"pig_{i}" for i in range(20)]
    data = {"prefabs": {name: {"type": "Pig", "fields": {}} for name in reversed(names)}}

    room = room_from_mapping("pigs", data)

    assert list(room.prefabs) == list(reversed(names))


def test_resources_section():
    room = room_from_mapping(
        "shop",
        {
            "resources": {"money": {"type": "Money", "fields": {"amount": 100}}},
            "prefabs": {"player": {"type": "Player", "fields": {}}},
        },
    )

    assert list(room.resources) == ["money"]
    assert [name for name, _ in room.entries()] == ["money", "player"]
    assert len(room) == 2


def test_empty_prefabs():
    room = room_from_mapping("empty", {"prefabs": {}})
    assert room.is_empty()


def test_missing_fields_key_is_empty_when_lenient():
    room = room_from_mapping("r", {"prefabs": {"pig": {"type": "Pig"}}})
    assert room.prefabs["pig"] == PrefabDescriptor.of("Pig")


@pytest.mark.parametrize(
    "data, path",
    [
        ([], "<root>"),
        ({}, "prefabs"),
        ({"prefabs": None}, "prefabs"),
        ({"prefabs": []}, "prefabs"),
        ({"prefabs": {"pig": "Pig"}}, "prefabs.pig"),
        ({"prefabs": {"pig": {"fields": {}}}}, "prefabs.pig.type"),
        ({"prefabs": {"pig": {"type": "", "fields": {}}}}, "prefabs.pig.type"),
        ({"prefabs": {"pig": {"type": "Pig", "fields": []}}}, "prefabs.pig.fields"),
        ({"prefabs": {"pig": {"type": "Pig", "fields": {"p": None}}}}, "prefabs.pig.fields.p"),
        ({"prefabs": {"pig": {"type": "Pig", "fields": {"p": [1, 2, 3]}}}}, "prefabs.pig.fields.p"),
        ({"prefabs": {"pig": {"type": "Pig", "fields": {"p": {"Vec2": [1]}}}}}, "prefabs.pig.fields.p"),
        ({"prefabs": {"pig": {"type": "Pig", "fields": {"p": {"Color": 1}}}}}, "prefabs.pig.fields.p"),
        ({"prefabs": {"pig": {"type": "Pig", "fields": {"p": {"Bool": 1}}}}}, "prefabs.pig.fields.p"),
        ({"prefabs": {"pig": {"type": "Pig", "fields": {"p": {"Number": True}}}}}, "prefabs.pig.fields.p"),
        ({"prefabs": {"pig": {"type": "Pig", "fields": {"p": {"String": 1, "Bool": True}}}}}, "prefabs.pig.fields.p"),
    ],
)
def test_malformed_documents(data, path):
    with pytest.raises(DocumentError) as exc_info:
        room_from_mapping("bad", data)

    assert exc_info.value.path == path


def test_instance_names_unique_across_sections():
    data = {
        "prefabs": {"money": {"type": "Pig", "fields": {}}},
        "resources": {"money": {"type": "Money", "fields": {}}},
    }

    with pytest.raises(DocumentError, match="money"):
        room_from_mapping("bad", data)


def test_directly_built_document_rejects_shared_instance_names():
    """Every construction path enforces unique instance names, not only parsing.

    Why: a name in both sections would reach the sink twice.
    """
    with pytest.raises(DocumentError, match="'x'") as exc_info:
        RoomDocument(
            "r",
            prefabs={"x": PrefabDescriptor.of("Pig")},
            resources={"x": PrefabDescriptor.of("Money")},
        )

    assert exc_info.value.path == "resources"


def test_type_name_is_kept_as_written():
    room = room_from_mapping("r", {"prefabs": {"pig": {"type": " Pig ", "fields": {}}}})

    assert room.prefabs["pig"].type_name == " Pig "


def test_strict_mode_rejects_unknown_keys():
    data = {"prefabs": {"pig": {"type": "Pig", "fields": {}, "comment": "hi"}}, "version": 2}

    room_from_mapping("lenient", data)
    with pytest.raises(DocumentError, match="unknown keys"):
        room_from_mapping("strict", data, strict=True)


def test_strict_mode_requires_fields():
    with pytest.raises(DocumentError) as exc_info:
        room_from_mapping("strict", {"prefabs": {"pig": {"type": "Pig"}}}, strict=True)

    assert exc_info.value.path == "prefabs.pig.fields"


def test_strict_mode_from_settings():
    settings = PrefabSettings(strict_documents=True)

    with pytest.raises(DocumentError):
        room_from_mapping("strict", {"prefabs": {}, "extra": 1}, settings=settings)
    room_from_mapping("override", {"prefabs": {}, "extra": 1}, strict=False, settings=settings)


def test_document_is_immutable():
    room = RoomDocument("r", prefabs={"pig": PrefabDescriptor.of("Pig")})

    with pytest.raises(TypeError):
        room.prefabs["cow"] = PrefabDescriptor.of("Cow")  # type: ignore[index]
