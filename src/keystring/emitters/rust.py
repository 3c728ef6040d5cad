# topmark:header:start
#
#   project      : Keystring
#   file         : rust.py
#   file_relpath : src/keystring/emitters/rust.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rust emitter.

Groupings become ``pub mod`` blocks and constants become ``pub const NAME: &str``.
The generated file is meant to be pulled into a crate with ``include!``; the
two inner attributes silence ``dead_code`` and ``non_upper_case_globals`` since
constant names are copied verbatim from the key catalogue.

Example output for ``app.start``::

    #![allow(dead_code)]
    #![allow(non_upper_case_globals)]

    pub mod app {
        pub const _BASE: &str = "app";
        pub const start: &str = "app.start";
    }
"""

from __future__ import annotations

from typing import ClassVar

from keystring.emitters.base import KeyEmitter
from keystring.emitters.registry import register_target

# Strict, reserved and weak-in-declaration keywords (2021 edition), plus `_`.
RUST_KEYWORDS: frozenset[str] = frozenset(
    {
        "_",
        "Self",
        "abstract",
        "as",
        "async",
        "await",
        "become",
        "box",
        "break",
        "const",
        "continue",
        "crate",
        "do",
        "dyn",
        "else",
        "enum",
        "extern",
        "false",
        "final",
        "fn",
        "for",
        "if",
        "impl",
        "in",
        "let",
        "loop",
        "macro",
        "match",
        "mod",
        "move",
        "mut",
        "override",
        "priv",
        "pub",
        "ref",
        "return",
        "self",
        "static",
        "struct",
        "super",
        "trait",
        "true",
        "try",
        "type",
        "typeof",
        "unsafe",
        "unsized",
        "use",
        "virtual",
        "where",
        "while",
        "yield",
    }
)


@register_target("rust")
class RustEmitter(KeyEmitter):
    """Emit nested ``pub mod`` / ``pub const`` declarations."""

    name: ClassVar[str] = "rust"
    description: ClassVar[str] = "Rust modules with &str constants (for include!)"
    file_extension: ClassVar[str] = ".rs"
    keywords: ClassVar[frozenset[str]] = RUST_KEYWORDS
    suppression_directives: ClassVar[tuple[str, ...]] = (
        "#![allow(dead_code)]",
        "#![allow(non_upper_case_globals)]",
    )

    def open_grouping(self, name: str) -> str:
        return f"pub mod {name} {{"

    def close_grouping(self) -> str | None:
        return "}"

    def constant(self, name: str, value: str) -> str:
        return f"pub const {name}: &str = {self.quote(value)};"
