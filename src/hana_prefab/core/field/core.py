"""FieldMap: read-only field storage with typed accessors.

Accessors are the only way a constructor should read its fields. Each one
either returns the requested semantic type or raises a typed FieldError
naming the field; they never raise anything else.

Usage:
    fields = FieldMap({"speed": 200.0, "position": "(0, 0)"})
    fields.as_number("speed")                 # 200.0
    fields.as_vector2("position")             # Vector2(0.0, 0.0)
    fields.as_bool("visible", default=True)   # True, field is absent
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, TypeVar, cast

from hana_prefab.core.errors import FieldParseError, MissingFieldError, TypeMismatchError
from hana_prefab.core.field.models import (
    BoolField,
    FieldValue,
    NumberField,
    StringField,
    Vector2,
    VectorField,
    field_value,
)
from hana_prefab.core.field.operations import parse_vector2
from hana_prefab.core.types import FieldKind

T = TypeVar("T")


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


MISSING: Any = _Missing()


class FieldMap(Mapping[str, FieldValue]):
    """Immutable mapping from field name to field value.

    Raw values are tagged with field_value() on construction, so a FieldMap
    can be built from plain Python data as well as from field values.

    Args:
        fields: Mapping of field name to raw or tagged value.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any] | None = None):
        self._fields: dict[str, FieldValue] = {}
        for name, raw in (fields or {}).items():
            if not isinstance(name, str):
                raise TypeError(f"Field names must be str, got {name!r}")
            self._fields[name] = field_value(raw)

    def __getitem__(self, name: str) -> FieldValue:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FieldMap({self._fields!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldMap):
            return self._fields == other._fields
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._fields.items()))

    def get_value(self, name: str, expected: FieldKind | None = None) -> FieldValue:
        """Get the stored field value.

        Args:
            name: Field name.
            expected: Kind the caller wants, reported in the error if absent.

        Returns:
            The stored field value, untouched.

        Raises:
            MissingFieldError: If the field is absent.
        """
        try:
            return self._fields[name]
        except KeyError:
            raise MissingFieldError(name, expected) from None

    def _read(self, name: str, expected: FieldKind, default: Any) -> FieldValue | None:
        if name not in self._fields:
            if default is MISSING:
                raise MissingFieldError(name, expected)
            return None
        return self._fields[name]

    def _strict(self, name: str, variant: type, expected: FieldKind, default: T) -> T:
        value = self._read(name, expected, default)
        if value is None:
            return default
        if not isinstance(value, variant):
            raise TypeMismatchError(name, expected, value.kind, value.value)
        return cast(T, value.value)

    def as_number(self, name: str, *, default: Any = MISSING) -> float:
        """Read a Number field. Strings are never parsed into numbers.

        Raises:
            MissingFieldError: If absent and no default was given.
            TypeMismatchError: If the field is not a Number.
        """
        return self._strict(name, NumberField, FieldKind.NUMBER, default)

    def as_bool(self, name: str, *, default: Any = MISSING) -> bool:
        """Read a Bool field.

        Raises:
            MissingFieldError: If absent and no default was given.
            TypeMismatchError: If the field is not a Bool.
        """
        return self._strict(name, BoolField, FieldKind.BOOL, default)

    def as_string(self, name: str, *, default: Any = MISSING) -> str:
        """Read a String field.

        Raises:
            MissingFieldError: If absent and no default was given.
            TypeMismatchError: If the field is not a String.
        """
        return self._strict(name, StringField, FieldKind.STRING, default)

    def as_vector2(self, name: str, *, default: Any = MISSING) -> Vector2:
        """Read a Vector2 field, or a String field holding an ``"(x, y)"`` literal.

        Raises:
            MissingFieldError: If absent and no default was given.
            FieldParseError: If the field is a String that is not a vector literal.
            TypeMismatchError: If the field is a Number or a Bool.
        """
        value = self._read(name, FieldKind.VECTOR2, default)
        if value is None:
            return default
        if isinstance(value, VectorField):
            return value.value
        if isinstance(value, StringField):
            try:
                return parse_vector2(value.value)
            except ValueError as e:
                raise FieldParseError(name, FieldKind.VECTOR2, value.value, str(e)) from e
        raise TypeMismatchError(name, FieldKind.VECTOR2, value.kind, value.value)

    def to_dict(self) -> dict[str, Any]:
        """Plain Python view of the stored values (Vector2 as a tuple)."""
        return {
            name: tuple(value.value) if isinstance(value, VectorField) else value.value
            for name, value in self._fields.items()
        }
