# topmark:header:start
#
#   project      : Keystring
#   file         : loaders.py
#   file_relpath : src/keystring/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading Keystring configuration from
on-disk TOML files (``keystring.toml`` / ``pyproject.toml``) and the built-in
runtime defaults.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from keystring.config.keys import Toml
from keystring.config.logging import get_logger
from keystring.constants import (
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SEPARATOR,
    DEFAULT_TARGET,
)
from keystring.core.errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

    from keystring.config.logging import KeystringLogger

TomlTable = dict[str, Any]
"""A parsed TOML table as a plain dict."""

logger: KeystringLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return Keystring's **runtime defaults** as a Python dict.

    This function performs **no I/O**. Sections and keys align with
    `keystring.config.keys.Toml`.

    Returns:
        A TOML-table-compatible dict containing the runtime defaults.

    Notes:
        The returned value is a new dict so callers can mutate it safely.
    """
    return {
        Toml.SECTION_OUTPUT: {
            Toml.KEY_OUTPUT_DIR: DEFAULT_OUTPUT_DIR,
            # An empty name means "constants" + the target's file extension.
            Toml.KEY_OUTPUT_NAME: "",
        },
        Toml.SECTION_GENERATOR: {
            Toml.KEY_TARGET: DEFAULT_TARGET,
            Toml.KEY_SEPARATOR: DEFAULT_SEPARATOR,
            Toml.KEY_ENABLE_WARNINGS: False,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``keystring.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Raises:
        ConfigurationError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigurationError(f"Invalid TOML in config file {path}: {e}") from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
