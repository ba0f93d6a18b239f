"""hana_prefab: load declarative rooms into typed prefab objects.

Usage:
    from hana_prefab import Bundle, FieldMap, LocalGraph, PrefabRegistry, load, room_from_mapping

    @dataclass
    class Player:
        speed: float

    registry = PrefabRegistry()

    @registry.prefab("Player")
    def player(fields: FieldMap) -> Bundle:
        return Bundle.of(Player(speed=fields.as_number("speed")), fields.as_vector2("position"))

    document = room_from_mapping("test_room", {
        "prefabs": {
            "player": {"type": "Player", "fields": {"speed": 200.0, "position": "(0, 0)"}},
        },
    })

    graph = LocalGraph()
    report = load(document, registry, graph.room(document.name))
    report.raise_for_failures()
"""

__version__ = "0.1.0"

# Core primitives
from hana_prefab.core import (
    BoolField,
    ConstructorError,
    DocumentError,
    DuplicateTypeError,
    EntityId,
    ErrorKind,
    FieldError,
    FieldKind,
    FieldMap,
    FieldParseError,
    FieldValue,
    MissingFieldError,
    NumberField,
    PrefabError,
    RoomLoadError,
    StringField,
    TypeMismatchError,
    UnknownTypeError,
    Vector2,
    VectorField,
    field_value,
    parse_vector2,
)

# Configuration
from hana_prefab.config import PrefabSettings, get_settings

# Documents
from hana_prefab.document import PrefabDescriptor, RoomDocument, room_from_mapping

# Host graph
from hana_prefab.graph import Bundle, ListSink, LocalGraph, Resource, Sink

# Loading
from hana_prefab.loader import LoadFailure, LoadReport, RoomLoader, load

# Registry
from hana_prefab.registry import Constructor, PrefabLookup, PrefabRegistry, schema_constructor

__all__ = [
    # Version
    "__version__",
    # Fields
    "FieldKind",
    "Vector2",
    "FieldValue",
    "VectorField",
    "NumberField",
    "BoolField",
    "StringField",
    "field_value",
    "parse_vector2",
    "FieldMap",
    "EntityId",
    # Errors
    "ErrorKind",
    "PrefabError",
    "FieldError",
    "UnknownTypeError",
    "DuplicateTypeError",
    "MissingFieldError",
    "TypeMismatchError",
    "FieldParseError",
    "ConstructorError",
    "DocumentError",
    "RoomLoadError",
    # Registry
    "PrefabRegistry",
    "Constructor",
    "PrefabLookup",
    "schema_constructor",
    # Documents
    "PrefabDescriptor",
    "RoomDocument",
    "room_from_mapping",
    # Loading
    "load",
    "RoomLoader",
    "LoadReport",
    "LoadFailure",
    # Host graph
    "Sink",
    "ListSink",
    "Bundle",
    "Resource",
    "LocalGraph",
    # Config
    "PrefabSettings",
    "get_settings",
]
