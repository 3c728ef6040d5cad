# topmark:header:start
#
#   project      : Keystring
#   file         : __init__.py
#   file_relpath : src/keystring/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for Keystring configuration.

This package centralizes helpers for reading, validating, and writing TOML used
by Keystring's configuration layer. Keeping these utilities separate avoids
import cycles and keeps the model classes small and focused.

Typical flow:
    1. Load runtime defaults (``load_defaults_dict``).
    2. Load project TOML files (``load_toml_dict``).
    3. Read values with typed getters.
    4. Serialize back to TOML when needed (``to_toml``).
"""

from __future__ import annotations

from .getters import (
    get_bool_value_or_none,
    get_string_value_or_none,
    get_table_value,
)
from .loaders import (
    TomlTable,
    load_defaults_dict,
    load_toml_dict,
)
from .render import to_toml

__all__ = [
    "TomlTable",
    "get_bool_value_or_none",
    "get_string_value_or_none",
    "get_table_value",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
]
