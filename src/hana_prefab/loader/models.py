"""Load results: per-entry failures and the per-room report."""

from __future__ import annotations

from dataclasses import dataclass, field

from hana_prefab.core.errors import ErrorKind, PrefabError, RoomLoadError


@dataclass(frozen=True, slots=True)
class LoadFailure:
    """One entry that could not be instantiated."""

    instance_name: str
    type_name: str
    error: PrefabError

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


@dataclass(slots=True)
class LoadReport:
    """Outcome of loading one room document.

    Attributes:
        room: Name of the loaded document.
        attempted: Entries the loader tried to instantiate.
        succeeded: Entries handed to the sink.
        failures: Failed entries, in document order.
        instances: Instance names handed to the sink, in document order.
    """

    room: str
    attempted: int = 0
    succeeded: int = 0
    failures: list[LoadFailure] = field(default_factory=list)
    instances: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every entry succeeded (vacuously true for empty rooms)."""
        return not self.failures

    @property
    def failed(self) -> int:
        return len(self.failures)

    def record_success(self, instance_name: str) -> None:
        self.attempted += 1
        self.succeeded += 1
        self.instances.append(instance_name)

    def record_failure(self, instance_name: str, type_name: str, error: PrefabError) -> None:
        self.attempted += 1
        self.failures.append(LoadFailure(instance_name, type_name, error))

    def failure_for(self, instance_name: str) -> LoadFailure | None:
        for failure in self.failures:
            if failure.instance_name == instance_name:
                return failure
        return None

    def raise_for_failures(self) -> None:
        """Raise RoomLoadError if any entry failed.

        Raises:
            RoomLoadError: Listing every failure.
        """
        if self.failures:
            raise RoomLoadError(self)
