"""Build a RoomDocument from the generic mapping a text parser produces.

The room grammar itself (RON, YAML, JSON, ...) is the parser's business.
This module only checks the deserialized shape:

    {
        "prefabs": {
            "player": {
                "type": "Player",
                "fields": {
                    "position": {"String": "(0, 0)"},
                    "speed": 200.0,
                    "visible": {"Bool": true},
                },
            },
            "pig_parent": {"type": "PigParent", "fields": {}},
        },
        "resources": {...},    # optional, same entry shape
    }

Field values may be plain (bool, number, str, two-number list) or tagged
with a single key: Vec2 / Vector2, Number, Bool, String.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from hana_prefab.core.errors import DocumentError
from hana_prefab.core.field import (
    BoolField,
    FieldMap,
    FieldValue,
    NumberField,
    StringField,
    field_value,
)
from hana_prefab.document.models import PrefabDescriptor, RoomDocument

if TYPE_CHECKING:
    from hana_prefab.config import PrefabSettings

_ROOT_KEYS = frozenset({"prefabs", "resources"})
_ENTRY_KEYS = frozenset({"type", "fields"})


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _require_mapping(obj: Any, *, where: str) -> Mapping[str, Any]:
    if not isinstance(obj, Mapping):
        raise DocumentError(where, f"must be a mapping, got {type(obj).__name__}")
    for key in obj:
        if not isinstance(key, str):
            raise DocumentError(where, f"must have str keys, got {key!r}")
    return obj


def _reject_unknown(obj: Mapping[str, Any], allowed: frozenset[str], *, where: str) -> None:
    unknown = set(obj) - allowed
    if unknown:
        raise DocumentError(
            where, f"contains unknown keys: {sorted(unknown)}; allowed keys are: {sorted(allowed)}"
        )


def _tagged_value(tag: str, inner: Any, *, where: str) -> FieldValue:
    if tag in ("Vec2", "Vector2"):
        if isinstance(inner, (list, tuple)) and len(inner) == 2 and all(map(_is_number, inner)):
            return field_value(tuple(inner))
        raise DocumentError(where, f"{tag} must hold two numbers, got {inner!r}")
    if tag == "Number":
        if _is_number(inner):
            return NumberField(float(inner))
        raise DocumentError(where, f"Number must hold a number, got {inner!r}")
    if tag == "Bool":
        if isinstance(inner, bool):
            return BoolField(inner)
        raise DocumentError(where, f"Bool must hold true or false, got {inner!r}")
    if tag == "String":
        if isinstance(inner, str):
            return StringField(inner)
        raise DocumentError(where, f"String must hold text, got {inner!r}")
    raise DocumentError(where, f"unknown value tag {tag!r}; expected Vec2, Number, Bool or String")


def parse_field_value(raw: Any, *, where: str) -> FieldValue:
    """Convert one deserialized field value into a field value variant.

    Raises:
        DocumentError: If raw is not one of the accepted value forms.
    """
    if isinstance(raw, Mapping):
        if len(raw) != 1:
            raise DocumentError(where, f"tagged value must have exactly one key, got {list(raw)!r}")
        ((tag, inner),) = raw.items()
        return _tagged_value(str(tag), inner, where=where)
    if raw is None:
        raise DocumentError(where, "value must not be null")
    try:
        return field_value(raw)
    except TypeError as e:
        raise DocumentError(where, str(e)) from e


def parse_descriptor(entry: Any, *, where: str, strict: bool = False) -> PrefabDescriptor:
    """Convert one ``{type, fields}`` entry into a PrefabDescriptor.

    Raises:
        DocumentError: If the entry is malformed.
    """
    entry = _require_mapping(entry, where=where)
    if strict:
        _reject_unknown(entry, _ENTRY_KEYS, where=where)

    type_name = entry.get("type")
    if not isinstance(type_name, str) or not type_name.strip():
        raise DocumentError(f"{where}.type", f"must be a non-empty string, got {type_name!r}")

    if "fields" not in entry:
        if strict:
            raise DocumentError(f"{where}.fields", "is required")
        raw_fields: Mapping[str, Any] = {}
    else:
        raw_fields = _require_mapping(entry["fields"], where=f"{where}.fields")

    fields = FieldMap(
        {
            name: parse_field_value(raw, where=f"{where}.fields.{name}")
            for name, raw in raw_fields.items()
        }
    )
    return PrefabDescriptor(type_name=type_name, fields=fields)


def _parse_section(
    data: Mapping[str, Any], key: str, *, strict: bool
) -> dict[str, PrefabDescriptor]:
    section = data.get(key)
    if section is None:
        return {}
    section = _require_mapping(section, where=key)
    return {
        name: parse_descriptor(entry, where=f"{key}.{name}", strict=strict)
        for name, entry in section.items()
    }


def room_from_mapping(
    name: str,
    data: Any,
    *,
    strict: bool | None = None,
    settings: PrefabSettings | None = None,
) -> RoomDocument:
    """Build a RoomDocument from a deserialized room mapping.

    Args:
        name: Identity of the source, usually its file name.
        data: Root mapping with a required ``prefabs`` key.
        strict: Reject unknown keys and entries without ``fields``. Defaults
            to settings.strict_documents, or False without settings.
        settings: Loading configuration.

    Returns:
        RoomDocument preserving declaration order.

    Raises:
        DocumentError: If the mapping does not have the room shape.
    """
    if strict is None:
        strict = settings.strict_documents if settings is not None else False

    data = _require_mapping(data, where="<root>")
    if strict:
        _reject_unknown(data, _ROOT_KEYS, where="<root>")
    if "prefabs" not in data:
        raise DocumentError("prefabs", "is required")
    if data["prefabs"] is None:
        raise DocumentError("prefabs", "must be a mapping, got NoneType")

    prefabs = _parse_section(data, "prefabs", strict=strict)
    resources = _parse_section(data, "resources", strict=strict)

    return RoomDocument(name=name, prefabs=prefabs, resources=resources)
