"""Host graph side: the Sink protocol and a local in-memory graph.

The loader only depends on Sink. LocalGraph is a minimal host for tests,
tools and small games.
"""

from hana_prefab.graph.allocator import EntityAllocator
from hana_prefab.graph.local import LocalGraph, RoomSink
from hana_prefab.graph.models import Bundle, Resource
from hana_prefab.graph.protocol import ListSink, Sink

__all__ = [
    "Sink",
    "ListSink",
    "Bundle",
    "Resource",
    "EntityAllocator",
    "LocalGraph",
    "RoomSink",
]
