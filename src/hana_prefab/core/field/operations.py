"""Pure parsing functions for string-encoded field values."""

from __future__ import annotations

import re

from hana_prefab.core.field.models import Vector2

_FLOAT = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"

_VECTOR2_RE = re.compile(rf"\s*\(\s*({_FLOAT})\s*,\s*({_FLOAT})\s*\)\s*")


def parse_vector2(text: str) -> Vector2:
    """Parse a vector literal of the form ``"(x, y)"``.

    Args:
        text: Two float literals, comma separated, inside parentheses.

    Returns:
        Parsed Vector2.

    Raises:
        ValueError: If text does not match the vector literal grammar.
    """
    match = _VECTOR2_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"expected '(x, y)' vector literal, got {text!r}")
    return Vector2(float(match.group(1)), float(match.group(2)))


def format_vector2(vector: Vector2) -> str:
    """Render a Vector2 in the literal form parse_vector2 accepts."""
    return f"({vector.x!r}, {vector.y!r})"
