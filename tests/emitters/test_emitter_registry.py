# topmark:header:start
#
#   project      : Keystring
#   file         : test_emitter_registry.py
#   file_relpath : tests/emitters/test_emitter_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for target registration and lookup."""

from __future__ import annotations

from typing import ClassVar

import pytest

from keystring.core.errors import ConfigurationError, UnknownTargetError
from keystring.emitters import get_emitter_registry, register_all_emitters, resolve_emitter
from keystring.emitters.base import KeyEmitter
from keystring.emitters.registry import register_target


def test_builtin_targets_are_registered() -> None:
    register_all_emitters()
    assert {"rust", "python"} <= set(get_emitter_registry())


def test_register_all_emitters_is_idempotent() -> None:
    register_all_emitters()
    before = dict(get_emitter_registry())
    register_all_emitters()
    assert get_emitter_registry() == before


def test_unknown_target_lists_known_targets() -> None:
    with pytest.raises(UnknownTargetError) as excinfo:
        resolve_emitter("fortran")
    assert isinstance(excinfo.value, ConfigurationError)
    assert excinfo.value.name == "fortran"
    assert "python" in str(excinfo.value)


def test_duplicate_registration_is_rejected() -> None:
    register_all_emitters()

    class AnotherRust(KeyEmitter):
        name: ClassVar[str] = "rust"

    with pytest.raises(ValueError, match="already has a registered emitter"):
        register_target("rust")(AnotherRust)


def test_name_mismatch_is_rejected() -> None:
    class Misnamed(KeyEmitter):
        name: ClassVar[str] = "something-else"

    with pytest.raises(ValueError, match="declares name"):
        register_target("misnamed-target")(Misnamed)
    assert "misnamed-target" not in get_emitter_registry()


def test_base_emitter_requires_target_syntax() -> None:
    with pytest.raises(NotImplementedError):
        KeyEmitter().open_grouping("a")
    with pytest.raises(NotImplementedError):
        KeyEmitter().constant("a", "a")
    assert KeyEmitter().close_grouping() is None
