"""Room loader: resolve each descriptor, construct it, hand it to the sink.

Loading is a single synchronous pass over the document in declaration order
(resources first, then prefabs). A failing entry is recorded in the report
and the pass continues; only the caller decides whether failures are fatal.

Usage:
    report = load(document, registry, sink)
    if not report.ok:
        for failure in report.failures:
            print(failure.instance_name, failure.error)

    # Or bind registry and sink once:
    loader = RoomLoader(registry, sink)
    loader.load(first_room)
    loader.load(second_room)
"""

from __future__ import annotations

import logging
from typing import Any

from hana_prefab.config import PrefabSettings, get_settings
from hana_prefab.core.errors import ConstructorError, PrefabError
from hana_prefab.document import PrefabDescriptor, RoomDocument
from hana_prefab.graph.protocol import Sink
from hana_prefab.loader.models import LoadReport
from hana_prefab.registry.models import PrefabLookup

logger = logging.getLogger(__name__)


def _callable_name(obj: Any) -> str:
    return str(getattr(obj, "__qualname__", getattr(obj, "__name__", repr(obj))))


def construct(registry: PrefabLookup, descriptor: PrefabDescriptor) -> Any:
    """Resolve and invoke the constructor for one descriptor.

    Args:
        registry: Read-only registry to resolve the type name against.
        descriptor: Type name and fields to construct from.

    Returns:
        The instantiated object.

    Raises:
        UnknownTypeError: If the type name is not registered.
        PrefabError: Any field error the constructor raised.
        ConstructorError: If the constructor raised something else or
            returned None.
    """
    ctor = registry.lookup(descriptor.type_name)
    try:
        obj = ctor(descriptor.fields)
    except PrefabError:
        raise
    except Exception as e:
        raise ConstructorError(
            descriptor.type_name, f"{_callable_name(ctor)} raised {type(e).__name__}: {e}"
        ) from e

    if obj is None:
        raise ConstructorError(
            descriptor.type_name,
            f"{_callable_name(ctor)} returned None; constructors must return an object",
        )
    return obj


class RoomLoader:
    """Instantiates room documents against a registry into a sink.

    Holds no state between loads; each load() is independent.

    Args:
        registry: Populated registry. Must not be mutated while loading.
        sink: Receives every successfully constructed object.
        settings: Logging configuration. Defaults to the shared get_settings()
            instance, so the environment is read once per process.
    """

    def __init__(
        self,
        registry: PrefabLookup,
        sink: Sink,
        settings: PrefabSettings | None = None,
    ):
        self.registry = registry
        self.sink = sink
        self.settings = settings if settings is not None else get_settings()

    def load(self, document: RoomDocument) -> LoadReport:
        """Instantiate every entry of a document.

        Args:
            document: Parsed room to instantiate.

        Returns:
            LoadReport with counts, failures and succeeded instance names.
        """
        report = LoadReport(room=document.name)

        for instance_name, descriptor in document.entries():
            logger.debug(
                f"Constructing {instance_name!r} ({descriptor.type_name}) in room {document.name!r}"
            )
            try:
                obj = construct(self.registry, descriptor)
            except PrefabError as e:
                report.record_failure(instance_name, descriptor.type_name, e)
                if self.settings.log_failures:
                    logger.log(
                        self.settings.failure_level,
                        f"Room {document.name!r}: failed to load {instance_name!r}: {e}",
                    )
                continue

            self.sink.accept(instance_name, obj)
            report.record_success(instance_name)

        logger.info(
            f"Loaded room {document.name!r}: {report.succeeded}/{report.attempted} entries, "
            f"{report.failed} failed"
        )
        return report


def load(
    document: RoomDocument,
    registry: PrefabLookup,
    sink: Sink,
    *,
    settings: PrefabSettings | None = None,
) -> LoadReport:
    """Instantiate a room document in one call. See RoomLoader.load()."""
    return RoomLoader(registry, sink, settings=settings).load(document)
