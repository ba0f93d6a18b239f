"""Prefab registry: type name → constructor.

Populate once at startup, then hand the registry to the loader. Loads only
read from it; registration during a load is not supported.

Usage:
    registry = PrefabRegistry()

    @registry.prefab("Player")
    def player(fields: FieldMap) -> Bundle:
        return Bundle.of(Player(speed=fields.as_number("speed")))

    registry.register("PigParent", lambda fields: Bundle.of(PigParent()))
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from hana_prefab.core.errors import DuplicateTypeError, UnknownTypeError
from hana_prefab.core.field import FieldMap
from hana_prefab.registry.models import Constructor
from hana_prefab.registry.schema import schema_constructor

ConstructorT = TypeVar("ConstructorT", bound=Callable[[FieldMap], Any])

logger = logging.getLogger(__name__)


class PrefabRegistry:
    """Maps prefab type names to constructors.

    Constructors are opaque callables taking a FieldMap; there is no prefab
    base class. Names are unique: re-registering a name is an error and the
    first constructor stays in place.
    """

    def __init__(self) -> None:
        """Initialize empty prefab registry."""
        self._constructors: dict[str, Constructor] = {}

    def register(self, type_name: str, constructor: ConstructorT) -> ConstructorT:
        """Register a constructor under a type name.

        Args:
            type_name: Name used by room documents' ``type`` key.
            constructor: Callable taking a FieldMap and returning the object.

        Returns:
            The constructor, unchanged.

        Raises:
            DuplicateTypeError: If type_name is already registered.
            TypeError: If type_name is not a non-empty string or constructor
                is not callable.
        """
        if not isinstance(type_name, str) or not type_name.strip():
            raise TypeError(f"Prefab type name must be a non-empty string, got {type_name!r}")
        if not callable(constructor):
            raise TypeError(
                f"Constructor for {type_name!r} must be callable, got {type(constructor).__name__}"
            )
        if type_name in self._constructors:
            raise DuplicateTypeError(type_name)

        self._constructors[type_name] = constructor
        logger.debug(f"Registered prefab type {type_name!r}")
        return constructor

    def prefab(self, type_name: str) -> Callable[[ConstructorT], ConstructorT]:
        """Decorator form of register().

        >>> @registry.prefab("Pig")
        ... def pig(fields: FieldMap) -> Bundle: ...
        """

        def decorator(constructor: ConstructorT) -> ConstructorT:
            return self.register(type_name, constructor)

        return decorator

    def register_schema(
        self,
        type_name: str,
        schema: type,
        build: Callable[[Any], Any] | None = None,
    ) -> Callable[[FieldMap], Any]:
        """Register a dataclass schema as a prefab type.

        See schema_constructor() for how fields are read.

        Args:
            type_name: Name used by room documents' ``type`` key.
            schema: Dataclass describing the expected fields.
            build: Converts the filled schema into the instantiated object.

        Returns:
            The generated constructor.

        Raises:
            DuplicateTypeError: If type_name is already registered.
            TypeError: If schema is not a dataclass or has unsupported fields.
        """
        return self.register(type_name, schema_constructor(schema, build=build))

    def lookup(self, type_name: str) -> Constructor:
        """Get the constructor for a type name.

        Raises:
            UnknownTypeError: If no constructor is registered under type_name.
        """
        try:
            return self._constructors[type_name]
        except KeyError:
            raise UnknownTypeError(type_name, self._constructors) from None

    def type_names(self) -> list[str]:
        """Registered type names in registration order."""
        return list(self._constructors)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._constructors

    def __len__(self) -> int:
        return len(self._constructors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._constructors)
