# topmark:header:start
#
#   project      : Keystring
#   file         : test_validator.py
#   file_relpath : tests/keys/test_validator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for forest validation (identifier legality and the reserved name)."""

from __future__ import annotations

from keystring.core.errors import (
    ErrorKind,
    InvalidIdentifierError,
    ReservedNameConflictError,
)
from keystring.keys.tree import parse_keys
from keystring.keys.validator import Violation, check_segment, is_identifier, validate_forest
from tests.conftest import parametrize


@parametrize("name", ["a", "_", "_a1", "Abc_9", "snake_case", "CamelCase"])
def test_is_identifier_accepts_legal_names(name: str) -> None:
    assert is_identifier(name)


@parametrize("name", ["1a", "a-b", "a b", "é", "a$", "", "ab!"])
def test_is_identifier_rejects_illegal_names(name: str) -> None:
    assert not is_identifier(name)


def test_valid_forest_has_no_violation() -> None:
    forest = parse_keys("app.start\napp.stop\nuser\n  login\n")
    assert validate_forest(forest, reserved_name="_BASE") is None


def test_invalid_identifier_reports_full_path() -> None:
    forest = parse_keys("app\n  9lives\n")
    violation: Violation | None = validate_forest(forest, reserved_name="_BASE")
    assert violation is not None
    assert violation.kind == ErrorKind.INVALID_IDENTIFIER
    assert violation.full_path == "app.9lives"
    assert violation.segment == "9lives"
    assert "app.9lives" in violation.message


def test_reserved_name_conflict_reports_full_path() -> None:
    forest = parse_keys("a.b._BASE\n")
    violation: Violation | None = validate_forest(forest, reserved_name="_BASE")
    assert violation is not None
    assert violation.kind == ErrorKind.RESERVED_NAME_CONFLICT
    assert violation.full_path == "a.b._BASE"


def test_first_violation_in_pre_order_wins() -> None:
    # "a.b-c" is declared after "z._BASE" but comes first in pre-order.
    forest = parse_keys("a.ok\nz._BASE\na.b-c\n")
    violation: Violation | None = validate_forest(forest, reserved_name="_BASE")
    assert violation is not None
    assert violation.full_path == "a.b-c"


def test_keywords_are_rejected_as_invalid_identifiers() -> None:
    forest = parse_keys("event.match\n")
    violation: Violation | None = validate_forest(
        forest, reserved_name="_BASE", keywords=frozenset({"match"})
    )
    assert violation is not None
    assert violation.kind == ErrorKind.INVALID_IDENTIFIER
    assert violation.full_path == "event.match"
    assert "keyword" in violation.message


def test_keywords_only_apply_when_given() -> None:
    forest = parse_keys("event.match\n")
    assert validate_forest(forest, reserved_name="_BASE") is None


def test_check_segment_prefers_syntax_error() -> None:
    violation: Violation | None = check_segment("1x", "a.1x", reserved_name="1x")
    assert violation is not None
    assert violation.kind == ErrorKind.INVALID_IDENTIFIER


def test_violation_to_error_maps_kinds() -> None:
    invalid = Violation(ErrorKind.INVALID_IDENTIFIER, "a.1", "1", "bad")
    reserved = Violation(ErrorKind.RESERVED_NAME_CONFLICT, "a._BASE", "_BASE", "taken")

    invalid_error = invalid.to_error()
    reserved_error = reserved.to_error()

    assert isinstance(invalid_error, InvalidIdentifierError)
    assert invalid_error.full_path == "a.1"
    assert str(invalid_error) == "bad"
    assert isinstance(reserved_error, ReservedNameConflictError)
    assert reserved_error.kind == ErrorKind.RESERVED_NAME_CONFLICT
    assert str(reserved_error) == "taken"


def test_name_check_reports_invalid_identifier() -> None:
    def no_x(name: str) -> str | None:
        return "x is not allowed" if name == "x" else None

    violation = validate_forest(
        parse_keys("a\n  b\n  x\n"), reserved_name="_BASE", name_check=no_x
    )

    assert violation is not None
    assert violation.kind == ErrorKind.INVALID_IDENTIFIER
    assert violation.full_path == "a.x"
    assert "x is not allowed" in violation.message
