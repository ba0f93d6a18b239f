"""Shared type tags used across field values and errors."""

from __future__ import annotations

from enum import Enum


class FieldKind(Enum):
    """Semantic kind of a field value, as stored or as requested by an accessor."""

    VECTOR2 = "vector2"
    NUMBER = "number"
    BOOL = "bool"
    STRING = "string"

    def __str__(self) -> str:
        return self.value
