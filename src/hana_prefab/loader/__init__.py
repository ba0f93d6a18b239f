"""Room loading: best-effort batch instantiation and its report."""

from hana_prefab.loader.loader import RoomLoader, construct, load
from hana_prefab.loader.models import LoadFailure, LoadReport

__all__ = [
    "load",
    "construct",
    "RoomLoader",
    "LoadReport",
    "LoadFailure",
]
