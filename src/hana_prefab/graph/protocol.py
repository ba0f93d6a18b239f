"""Sink protocol: where the loader hands instantiated objects.

The host owns its object graph. The loader only needs something to call once
per successfully constructed object, in document order.

Usage:
    sink = ListSink()
    load(document, registry, sink)
    sink.items  # [("player", Bundle(...)), ...]
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Receives each instantiated object, tagged with its instance name."""

    def accept(self, instance_name: str, obj: Any) -> None:
        """Attach obj to the host graph."""
        ...


class ListSink:
    """Sink that records what it receives, in order.

    Useful for tests and for hosts that attach objects after the load.
    """

    def __init__(self) -> None:
        self.items: list[tuple[str, Any]] = []

    def accept(self, instance_name: str, obj: Any) -> None:
        self.items.append((instance_name, obj))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.items]

    def __len__(self) -> int:
        return len(self.items)
