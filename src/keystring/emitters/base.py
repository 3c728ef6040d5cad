# topmark:header:start
#
#   project      : Keystring
#   file         : base.py
#   file_relpath : src/keystring/emitters/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for key emitters.

An emitter renders a validated `keystring.keys.tree.Forest` into source text for
one target language. The walk itself is shared; subclasses only describe the
target's syntax:

- `open_grouping` / `close_grouping` bracket a node that has children,
- `constant` renders one named string constant,
- `suppression_directives` are the two lint switches written at the top of the
  file (unused declarations, identifier casing) unless warnings are enabled.

Rendering rules:
    A node without children becomes a constant named after the node whose value
    is its full path. A node with children becomes a grouping that first holds
    the self-path constant (``self_path_name``) and then each child, in
    insertion order. Top-level nodes are emitted directly. Output is indented
    with ``indent_unit`` per nesting level, top-level blocks are separated by a
    blank line, and the text always ends with a single newline, so identical
    forests render to byte-identical text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Final

from keystring.config.logging import get_logger
from keystring.constants import DEFAULT_SEPARATOR, SELF_PATH_CONSTANT

if TYPE_CHECKING:
    from keystring.config.logging import KeystringLogger
    from keystring.keys.tree import Forest, KeyNode

logger: KeystringLogger = get_logger(__name__)

_SIMPLE_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _escape_char(ch: str) -> str:
    if ch in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[ch]
    if ord(ch) < 0x20 or ord(ch) == 0x7F:
        return f"\\x{ord(ch):02x}"
    return ch


class KeyEmitter:
    """Render a forest as nested constant declarations for one target language.

    Attributes:
        name (str): Registry name of the target (e.g. ``"rust"``).
        description (str): One-line description shown by ``keystring targets``.
        file_extension (str): Extension of the generated file, including the dot.
        self_path_name (str): Reserved name of the per-grouping self-path constant.
        keywords (frozenset[str]): Names that are not legal identifiers in the target.
        suppression_directives (tuple[str, ...]): Lint switches written first.
        indent_unit (str): Indentation added per nesting level.
    """

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    file_extension: ClassVar[str] = ""
    self_path_name: ClassVar[str] = SELF_PATH_CONSTANT
    keywords: ClassVar[frozenset[str]] = frozenset()
    suppression_directives: ClassVar[tuple[str, ...]] = ()
    indent_unit: ClassVar[str] = "    "

    # --- target syntax (override in subclasses) ---

    def open_grouping(self, name: str) -> str:
        """Return the line opening a grouping named ``name``."""
        raise NotImplementedError

    def close_grouping(self) -> str | None:
        """Return the line closing a grouping, or ``None`` if the syntax has none."""
        return None

    def constant(self, name: str, value: str) -> str:
        """Return the declaration of a string constant ``name`` holding ``value``."""
        raise NotImplementedError

    def name_problem(self, name: str) -> str | None:
        """Return why ``name`` cannot be declared as written, or ``None`` if it can.

        Checked after the identifier syntax and ``keywords``; targets override
        this for names the language accepts but would not expose unchanged.
        """
        return None

    def quote(self, value: str) -> str:
        """Return ``value`` as a double-quoted, single-line string literal.

        Backslashes, quotes and control characters are escaped; the ``\\xNN``
        form is valid in both Rust and Python literals.
        """
        return '"' + "".join(_escape_char(ch) for ch in value) + '"'

    # --- shared walk ---

    def render(
        self,
        forest: Forest,
        *,
        separator: str = DEFAULT_SEPARATOR,
        enable_warnings: bool = False,
    ) -> str:
        """Render ``forest`` into the complete text of the generated file.

        Args:
            forest (Forest): A validated forest.
            separator (str): String joining segments in the emitted values.
            enable_warnings (bool): Omit the suppression directives when True.

        Returns:
            str: The generated source text, newline-terminated.
        """
        blocks: list[str] = []
        if not enable_warnings and self.suppression_directives:
            blocks.append("\n".join(self.suppression_directives))

        for node in forest:
            lines: list[str] = []
            self._render_node(node, node.name, separator, 0, lines)
            blocks.append("\n".join(lines))

        logger.debug("Rendered %d top-level block(s) for target '%s'", len(forest), self.name)
        return "\n\n".join(blocks) + "\n"

    def _render_node(
        self,
        node: KeyNode,
        full_path: str,
        separator: str,
        depth: int,
        out: list[str],
    ) -> None:
        indent: str = self.indent_unit * depth
        if not node.children:
            out.append(indent + self.constant(node.name, full_path))
            return

        out.append(indent + self.open_grouping(node.name))
        inner: str = self.indent_unit * (depth + 1)
        out.append(inner + self.constant(self.self_path_name, full_path))
        for child in node.children.values():
            child_path: str = f"{full_path}{separator}{child.name}"
            self._render_node(child, child_path, separator, depth + 1, out)
        closing: str | None = self.close_grouping()
        if closing is not None:
            out.append(indent + closing)

    def default_output_name(self, stem: str) -> str:
        """Return the default output file name for ``stem``."""
        return f"{stem}{self.file_extension}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
