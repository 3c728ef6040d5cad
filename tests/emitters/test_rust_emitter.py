# topmark:header:start
#
#   project      : Keystring
#   file         : test_rust_emitter.py
#   file_relpath : tests/emitters/test_rust_emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering tests for the Rust emitter."""

from __future__ import annotations

from keystring.emitters import resolve_emitter
from keystring.emitters.rust import RUST_KEYWORDS, RustEmitter
from keystring.keys.tree import parse_keys


def test_rust_emitter_is_registered() -> None:
    emitter = resolve_emitter("rust")
    assert isinstance(emitter, RustEmitter)
    assert emitter.file_extension == ".rs"
    assert emitter.default_output_name("constants") == "constants.rs"


def test_directives_are_written_first() -> None:
    out: str = resolve_emitter("rust").render(parse_keys("a\n"))
    assert out.splitlines()[:3] == [
        "#![allow(dead_code)]",
        "#![allow(non_upper_case_globals)]",
        "",
    ]


def test_enable_warnings_omits_directives() -> None:
    out: str = resolve_emitter("rust").render(parse_keys("a\n"), enable_warnings=True)
    assert out == 'pub const a: &str = "a";\n'


def test_nested_groupings_are_indented_four_spaces_per_level() -> None:
    out: str = resolve_emitter("rust").render(parse_keys("a.b.c\n"), enable_warnings=True)
    assert out.splitlines() == [
        "pub mod a {",
        '    pub const _BASE: &str = "a";',
        "    pub mod b {",
        '        pub const _BASE: &str = "a.b";',
        '        pub const c: &str = "a.b.c";',
        "    }",
        "}",
    ]


def test_output_ends_with_single_newline() -> None:
    out: str = resolve_emitter("rust").render(parse_keys("a\nb\n"))
    assert out.endswith("}\n") or out.endswith(";\n")
    assert not out.endswith("\n\n")


def test_quote_escapes_backslashes_and_quotes() -> None:
    assert RustEmitter().quote('a\\b"c') == '"a\\\\b\\"c"'


def test_keywords_include_underscore_and_strict_keywords() -> None:
    assert {"_", "fn", "mod", "self", "Self", "async"} <= RUST_KEYWORDS
    assert "with" not in RUST_KEYWORDS


def test_quote_escapes_control_characters() -> None:
    assert RustEmitter().quote("a\nb\r\tc\x01\x7f") == '"a\\nb\\r\\tc\\x01\\x7f"'


def test_quote_keeps_non_ascii_text() -> None:
    assert RustEmitter().quote("a→b") == '"a→b"'
