"""Core functionalities: field values, field maps, errors, and identities.

Architecture Note:
    core/ contains pure building blocks with no runtime state.
    For stateful services, see registry/, loader/, and graph/.
"""

from hana_prefab.core.errors import (
    ConstructorError,
    DocumentError,
    DuplicateTypeError,
    ErrorKind,
    FieldError,
    FieldParseError,
    MissingFieldError,
    PrefabError,
    RoomLoadError,
    TypeMismatchError,
    UnknownTypeError,
)
from hana_prefab.core.field import (
    MISSING,
    BoolField,
    FieldMap,
    FieldValue,
    NumberField,
    StringField,
    Vector2,
    VectorField,
    field_value,
    format_vector2,
    parse_vector2,
)
from hana_prefab.core.identity import EntityId
from hana_prefab.core.types import FieldKind

__all__ = [
    # Types
    "FieldKind",
    # Identity
    "EntityId",
    # Field
    "Vector2",
    "FieldValue",
    "VectorField",
    "NumberField",
    "BoolField",
    "StringField",
    "field_value",
    "parse_vector2",
    "format_vector2",
    "FieldMap",
    "MISSING",
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
]
