"""Room documents: descriptor models and construction from deserialized mappings."""

from hana_prefab.document.models import PrefabDescriptor, RoomDocument
from hana_prefab.document.parsing import parse_descriptor, parse_field_value, room_from_mapping

__all__ = [
    "PrefabDescriptor",
    "RoomDocument",
    "parse_descriptor",
    "parse_field_value",
    "room_from_mapping",
]
