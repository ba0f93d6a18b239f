"""Tests for the error taxonomy."""

import pytest

from hana_prefab import (
    ConstructorError,
    DocumentError,
    DuplicateTypeError,
    ErrorKind,
    FieldKind,
    FieldParseError,
    MissingFieldError,
    PrefabError,
    TypeMismatchError,
    UnknownTypeError,
)


@pytest.mark.parametrize(
    "error, kind",
    [
        (UnknownTypeError("Cow", ["Pig"]), ErrorKind.UNKNOWN_TYPE),
        (DuplicateTypeError("Pig"), ErrorKind.DUPLICATE_TYPE),
        (MissingFieldError("speed", FieldKind.NUMBER), ErrorKind.MISSING_FIELD),
        (TypeMismatchError("speed", FieldKind.NUMBER, FieldKind.STRING, "fast"), ErrorKind.TYPE_MISMATCH),
        (FieldParseError("position", FieldKind.VECTOR2, "nowhere"), ErrorKind.PARSE_ERROR),
        (ConstructorError("Pig", "exploded"), ErrorKind.CONSTRUCTOR),
        (DocumentError("prefabs", "is required"), ErrorKind.DOCUMENT),
    ],
)
def test_every_error_is_a_prefab_error_with_a_kind(error, kind):
    assert isinstance(error, PrefabError)
    assert error.kind is kind


def test_messages_name_field_expected_and_actual():
    message = str(TypeMismatchError("speed", FieldKind.NUMBER, FieldKind.STRING, "fast"))

    assert "'speed'" in message
    assert "number" in message
    assert "string" in message
    assert "'fast'" in message


def test_missing_field_message_without_expected_kind():
    assert str(MissingFieldError("speed")) == "missing field 'speed'"
    assert str(MissingFieldError("speed", FieldKind.NUMBER)) == "missing field 'speed' (expected number)"
