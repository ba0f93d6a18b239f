"""Error taxonomy for prefab registration, field access, and room loading.

Every error carries the data needed to report it without parsing the message:
the offending type name, field name, expected kind, and what was actually found.

Usage:
    try:
        speed = fields.as_number("speed")
    except TypeMismatchError as e:
        print(e.field, e.expected, e.actual)
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

from hana_prefab.core.types import FieldKind

if TYPE_CHECKING:
    from hana_prefab.loader.models import LoadReport


class ErrorKind(Enum):
    """Category of a PrefabError, stable for programmatic inspection."""

    UNKNOWN_TYPE = auto()
    DUPLICATE_TYPE = auto()
    MISSING_FIELD = auto()
    TYPE_MISMATCH = auto()
    PARSE_ERROR = auto()
    CONSTRUCTOR = auto()
    DOCUMENT = auto()
    LOAD = auto()


class PrefabError(Exception):
    """Base class for every error raised by hana_prefab."""

    kind: ErrorKind


class UnknownTypeError(PrefabError):
    """Raised when a type name has no registered constructor."""

    kind = ErrorKind.UNKNOWN_TYPE

    def __init__(self, type_name: str, known: Iterable[str] = ()):
        self.type_name = type_name
        self.known = tuple(sorted(known))
        super().__init__(
            f"unknown prefab type {type_name!r}. known: [{', '.join(self.known)}]"
        )


class DuplicateTypeError(PrefabError):
    """Raised when a type name is registered twice."""

    kind = ErrorKind.DUPLICATE_TYPE

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"prefab type {type_name!r} is already registered")


class FieldError(PrefabError):
    """Base class for errors about a single field of a field map."""

    def __init__(self, field: str, expected: FieldKind | None, message: str):
        self.field = field
        self.expected = expected
        super().__init__(message)


class MissingFieldError(FieldError):
    """Raised when a required field is absent from the field map."""

    kind = ErrorKind.MISSING_FIELD

    def __init__(self, field: str, expected: FieldKind | None = None):
        wanted = f" (expected {expected})" if expected else ""
        super().__init__(field, expected, f"missing field {field!r}{wanted}")


class TypeMismatchError(FieldError):
    """Raised when a field's stored kind cannot satisfy the requested accessor."""

    kind = ErrorKind.TYPE_MISMATCH

    def __init__(self, field: str, expected: FieldKind, actual: FieldKind, value: Any = None):
        self.actual = actual
        self.value = value
        super().__init__(
            field,
            expected,
            f"field {field!r} expected {expected}, got {actual} ({value!r})",
        )


class FieldParseError(FieldError):
    """Raised when a string-encoded field fails its expected sub-grammar."""

    kind = ErrorKind.PARSE_ERROR

    def __init__(self, field: str, expected: FieldKind, content: str, reason: str = ""):
        self.content = content
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(
            field,
            expected,
            f"field {field!r} could not parse {content!r} as {expected}{detail}",
        )


class ConstructorError(PrefabError):
    """Raised when a constructor fails outside the field error taxonomy.

    The original exception, if any, is kept as ``__cause__``.
    """

    kind = ErrorKind.CONSTRUCTOR

    def __init__(self, type_name: str, message: str):
        self.type_name = type_name
        super().__init__(f"constructor for {type_name!r} failed: {message}")


class DocumentError(PrefabError):
    """Raised when a deserialized room document has the wrong structure."""

    kind = ErrorKind.DOCUMENT

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class RoomLoadError(PrefabError):
    """Raised by LoadReport.raise_for_failures() when any entry failed."""

    kind = ErrorKind.LOAD

    def __init__(self, report: LoadReport):
        self.report = report
        lines = [
            f"  {failure.instance_name} ({failure.type_name}): {failure.error}"
            for failure in report.failures
        ]
        super().__init__(
            f"room {report.room!r}: {len(report.failures)} of {report.attempted} "
            "entries failed\n" + "\n".join(lines)
        )
