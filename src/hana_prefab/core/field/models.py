"""Field value models: the tagged union a room document's fields are stored as.

A field keeps whatever variant the raw document contained. Conversion to the
semantic type a constructor wants happens later, in the FieldMap accessors.

Usage:
    value = field_value((1.0, 2.0))      # VectorField(Vector2(1.0, 2.0))
    value = field_value("(1, 2)")        # StringField("(1, 2)")
    value.kind                            # FieldKind.STRING
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from hana_prefab.core.types import FieldKind


@dataclass(frozen=True, slots=True)
class Vector2:
    """Two-component float vector."""

    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True, slots=True)
class VectorField:
    value: Vector2

    kind: ClassVar[FieldKind] = FieldKind.VECTOR2


@dataclass(frozen=True, slots=True)
class NumberField:
    value: float

    kind: ClassVar[FieldKind] = FieldKind.NUMBER


@dataclass(frozen=True, slots=True)
class BoolField:
    value: bool

    kind: ClassVar[FieldKind] = FieldKind.BOOL


@dataclass(frozen=True, slots=True)
class StringField:
    value: str

    kind: ClassVar[FieldKind] = FieldKind.STRING


FieldValue = VectorField | NumberField | BoolField | StringField

FIELD_VARIANTS: tuple[type, ...] = (VectorField, NumberField, BoolField, StringField)


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def field_value(raw: Any) -> FieldValue:
    """Tag a plain Python value as a field value variant.

    Args:
        raw: bool, int/float, str, Vector2, a two-number sequence, or an
            existing field value (returned unchanged).

    Returns:
        The matching field value variant.

    Raises:
        TypeError: If raw has no field value representation.
    """
    if isinstance(raw, FIELD_VARIANTS):
        return raw  # type: ignore[return-value]
    # bool first: bool is an int subclass
    if isinstance(raw, bool):
        return BoolField(raw)
    if _is_number(raw):
        return NumberField(float(raw))
    if isinstance(raw, str):
        return StringField(raw)
    if isinstance(raw, Vector2):
        return VectorField(raw)
    if isinstance(raw, Sequence) and len(raw) == 2 and all(_is_number(c) for c in raw):
        return VectorField(Vector2(float(raw[0]), float(raw[1])))
    raise TypeError(f"Cannot represent {type(raw).__name__} value {raw!r} as a field value")
