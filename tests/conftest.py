# topmark:header:start
#
#   project      : Keystring
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Keystring test suite.

Sets up typed mark helpers, shared fixtures and verbose logging for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `keystring.config.MutableConfig`, then `freeze()` into a
    `keystring.config.Config` before passing them to the public API.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from keystring.config import MutableConfig, logging

if TYPE_CHECKING:
    from keystring.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

FIXTURES_DIR: Path = Path(__file__).parent / "fixtures"

# The three spellings of the same catalogue
FIXTURE_NAMES: tuple[str, ...] = ("hierarchical.keys", "enumerated.keys", "mixed.keys")


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_keystring_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's KEYSTRING_LOG_LEVEL does not leak into tests."""
    monkeypatch.delenv("KEYSTRING_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for all tests so failures come with full context."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an isolated project directory marked as config root.

    The directory holds a ``keystring.toml`` with ``root = true`` so config
    discovery never climbs into directories outside the test.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "keystring.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


def read_fixture(name: str) -> str:
    """Return the text of the fixture catalogue ``name``."""
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides."""
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()
