# topmark:header:start
#
#   project      : Keystring
#   file         : keys.py
#   file_relpath : src/keystring/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Keystring configuration.

This module defines the authoritative string constants used when reading and
writing Keystring configuration from TOML sources (``keystring.toml`` and
``[tool.keystring]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Keystring configuration.

    The ordering of constants mirrors the rendered defaults
    (``keystring dump-config``) to make schema changes easy to audit.
    """

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [input]
    SECTION_INPUT: Final[str] = "input"

    KEY_INPUT_FILE: Final[str] = "file"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_OUTPUT_DIR: Final[str] = "dir"
    KEY_OUTPUT_NAME: Final[str] = "name"

    # [generator]
    SECTION_GENERATOR: Final[str] = "generator"

    KEY_TARGET: Final[str] = "target"
    KEY_SEPARATOR: Final[str] = "separator"
    KEY_ENABLE_WARNINGS: Final[str] = "enable_warnings"
