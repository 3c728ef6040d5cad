# topmark:header:start
#
#   project      : Keystring
#   file         : __init__.py
#   file_relpath : src/keystring/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for Keystring.

Exposes the immutable `Config` snapshot and its `MutableConfig` builder, which
discover and merge ``keystring.toml`` / ``[tool.keystring]`` settings.
"""

from __future__ import annotations

from keystring.config.model import ArgsLike, Config, MutableConfig

__all__ = [
    "ArgsLike",
    "Config",
    "MutableConfig",
]
