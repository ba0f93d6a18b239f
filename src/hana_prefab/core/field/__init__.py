"""Field functionality: value variants, vector literal parsing, and FieldMap."""

from hana_prefab.core.field.core import MISSING, FieldMap
from hana_prefab.core.field.models import (
    BoolField,
    FieldValue,
    NumberField,
    StringField,
    Vector2,
    VectorField,
    field_value,
)
from hana_prefab.core.field.operations import format_vector2, parse_vector2

__all__ = [
    # Models
    "Vector2",
    "FieldValue",
    "VectorField",
    "NumberField",
    "BoolField",
    "StringField",
    "field_value",
    # Operations
    "parse_vector2",
    "format_vector2",
    # Core
    "FieldMap",
    "MISSING",
]
