"""Schema constructors: build a dataclass from a FieldMap by its annotations.

Usage:
    @dataclass
    class PlayerFields:
        position: Vector2
        speed: float = 100.0
        texture: str = field(default="player.png", metadata={"field": "sprite"})

    constructor = schema_constructor(PlayerFields, build=lambda f: Bundle(...))
    obj = constructor(FieldMap({"position": "(0, 0)"}))

Each annotation picks the FieldMap accessor used to read the field. Dataclass
defaults become opt-in defaults for absent fields; fields without one are
required. ``metadata={"field": ...}`` reads a differently named document field.
"""

from __future__ import annotations

import dataclasses
import typing
from collections.abc import Callable
from typing import Any

from hana_prefab.core.field import MISSING, FieldMap, Vector2

_ACCESSORS: dict[Any, str] = {
    float: "as_number",
    bool: "as_bool",
    str: "as_string",
    Vector2: "as_vector2",
}


def _field_default(f: dataclasses.Field[Any]) -> Any:
    if f.default is not dataclasses.MISSING:
        return f.default
    if f.default_factory is not dataclasses.MISSING:
        return f.default_factory()
    return MISSING


def schema_constructor(
    schema: type,
    build: Callable[[Any], Any] | None = None,
) -> Callable[[FieldMap], Any]:
    """Create a constructor that fills a dataclass schema from a FieldMap.

    Args:
        schema: Dataclass whose fields are annotated float, bool, str or Vector2.
        build: Converts the filled schema instance into the instantiated
            object. Defaults to returning the schema instance itself.

    Returns:
        Constructor taking a FieldMap.

    Raises:
        TypeError: If schema is not a dataclass or a field has an
            unsupported annotation.
    """
    if not (isinstance(schema, type) and dataclasses.is_dataclass(schema)):
        raise TypeError(f"Prefab schema {schema!r} must be a dataclass type")

    hints = typing.get_type_hints(schema)
    plan: list[tuple[str, str, str, dataclasses.Field[Any]]] = []
    for f in dataclasses.fields(schema):
        if not f.init:
            continue
        accessor = _ACCESSORS.get(hints.get(f.name))
        if accessor is None:
            raise TypeError(
                f"Prefab schema {schema.__name__}.{f.name} has unsupported type "
                f"{hints.get(f.name)!r}; expected one of float, bool, str, Vector2"
            )
        plan.append((f.name, f.metadata.get("field", f.name), accessor, f))

    def construct(fields: FieldMap) -> Any:
        kwargs = {
            attr: getattr(fields, accessor)(source, default=_field_default(f))
            for attr, source, accessor, f in plan
        }
        instance = schema(**kwargs)
        return build(instance) if build is not None else instance

    construct.__name__ = f"{schema.__name__}_constructor"
    construct.__qualname__ = construct.__name__
    return construct
