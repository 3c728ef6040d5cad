# topmark:header:start
#
#   project      : Keystring
#   file         : getters.py
#   file_relpath : src/keystring/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed value getters for parsed TOML tables.

The getters coerce loosely typed TOML values into the shapes the config model
expects. Absent keys yield ``None``; values of the wrong type raise
`keystring.core.errors.ConfigurationError` naming the offending key.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

from keystring.config.logging import get_logger
from keystring.core.errors import ConfigurationError

if TYPE_CHECKING:
    from keystring.config.logging import KeystringLogger

    from .loaders import TomlTable

logger: KeystringLogger = get_logger(__name__)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` of ``table``, or an empty dict when absent.

    Args:
        table (TomlTable): Table to query.
        key (str): Name of the sub-table.

    Returns:
        TomlTable: The sub-table (a new empty dict when the key is missing).

    Raises:
        ConfigurationError: If the key exists but is not a table.
    """
    value: Any | None = table.get(key)
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return dict(cast("Mapping[str, Any]", value))
    raise ConfigurationError(
        f"Config section [{key}] must be a table, got {type(value).__name__}."
    )


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent.

    Raises:
        ConfigurationError: If the value is present but not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    raise ConfigurationError(f"Config key '{key}' must be a string, got {value!r}.")


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Integers are coerced via ``bool(value)``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The boolean value, or ``None`` when absent.

    Raises:
        ConfigurationError: If the value is present but not a boolean or integer.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        logger.debug("Coercing integer %r to bool for key %s", value, key)
        return bool(value)
    raise ConfigurationError(f"Config key '{key}' must be a boolean, got {value!r}.")
