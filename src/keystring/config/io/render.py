# topmark:header:start
#
#   project      : Keystring
#   file         : render.py
#   file_relpath : src/keystring/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render an effective configuration as TOML text for `keystring dump-config`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

if TYPE_CHECKING:
    from .loaders import TomlTable


def _without_none(table: TomlTable) -> TomlTable:
    """Return a copy of ``table`` with ``None`` values dropped at every depth.

    TOML has no null, so unset options (e.g. no configured input file) are
    omitted from the rendered document.
    """
    cleaned: TomlTable = {}
    for key, value in table.items():
        if value is None:
            continue
        cleaned[key] = _without_none(value) if isinstance(value, dict) else value
    return cleaned


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize ``toml_dict`` to a TOML document, skipping ``None`` values.

    Args:
        toml_dict (TomlTable): Nested sections as produced by `Config.to_toml_dict`.

    Returns:
        str: The rendered TOML text.
    """
    doc: Any = tomlkit.document()
    for key, value in _without_none(toml_dict).items():
        doc[key] = value
    return tomlkit.dumps(doc)
