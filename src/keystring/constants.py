# topmark:header:start
#
#   project      : Keystring
#   file         : constants.py
#   file_relpath : src/keystring/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keystring Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

KEYSTRING_VERSION: str = get_version("keystring")

# Config file discovery
KEYSTRING_TOML_NAME: Final[str] = "keystring.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "keystring"

# Environment variable consulted for the internal log level
LOG_LEVEL_ENV_VAR: Final[str] = "KEYSTRING_LOG_LEVEL"

# Input syntax
TAB_WIDTH: Final[int] = 4
SEGMENT_DELIMITER: Final[str] = "."

# Generation defaults
DEFAULT_TARGET: Final[str] = "rust"
DEFAULT_SEPARATOR: Final[str] = "."
DEFAULT_OUTPUT_DIR: Final[str] = "generated/keygen"
DEFAULT_OUTPUT_STEM: Final[str] = "constants"

# Name of the constant emitted inside every grouping, holding the grouping's own path
SELF_PATH_CONSTANT: Final[str] = "_BASE"

VALUE_NOT_SET: str = "<not set>"
