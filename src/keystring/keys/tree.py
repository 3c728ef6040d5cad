# topmark:header:start
#
#   project      : Keystring
#   file         : tree.py
#   file_relpath : src/keystring/keys/tree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Key tree model and the indentation-stack tree builder.

The model is a forest of `KeyNode` objects. Each node owns its children in an
insertion-ordered ``dict`` keyed by segment name, so the first occurrence of a
path in the input fixes its rendering position and sibling names stay unique.
Nodes hold no parent reference and no "kind" flag: a node is a *grouping* when
it has children and a *terminal* when it has none, which makes promoting a leaf
(``a.b`` later extended by ``a.b.c``) automatic.

Building:
    `build_forest` consumes normalized lines with a stack of
    ``(width, node)`` pairs. For each line, entries whose width is greater or
    equal to the line's width are popped; the node left on top (or the forest
    itself when the stack is empty) is the attachment parent. The line's
    segments are then walked as a find-or-create chain below that parent and
    the deepest node is pushed with the line's width.

    The same algorithm handles indented input (one segment per line), fully
    dotted input (every line at width 0) and any mix of both. Re-declaring a
    known path, exactly or as a prefix, merges into the existing nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from keystring.config.logging import get_logger
from keystring.keys.lines import iter_normalized_lines

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from keystring.config.logging import KeystringLogger
    from keystring.keys.lines import NormalizedLine

logger: KeystringLogger = get_logger(__name__)

# Nested, order-preserving outline of a (sub)tree: ``[(name, [...children...]), ...]``
Outline = list[tuple[str, "Outline"]]


@dataclass(eq=False)
class _Branch:
    """Owner of an ordered name → node mapping."""

    children: dict[str, KeyNode] = field(default_factory=lambda: {}, kw_only=True)

    def child(self, name: str) -> KeyNode:
        """Return the child named ``name``, creating it when missing."""
        node: KeyNode | None = self.children.get(name)
        if node is None:
            node = KeyNode(name=name)
            self.children[name] = node
        return node

    def outline(self) -> Outline:
        """Return the ordered structure below this branch as nested tuples."""
        return [(node.name, node.outline()) for node in self.children.values()]


@dataclass(eq=False)
class KeyNode(_Branch):
    """One path segment.

    Attributes:
        name (str): The segment exactly as written in the input.
        children (dict[str, KeyNode]): Child nodes in first-seen order.
    """

    name: str = ""

    @property
    def is_grouping(self) -> bool:
        """Whether this node renders as a grouping (has children)."""
        return bool(self.children)

    def __repr__(self) -> str:
        return f"KeyNode({self.name!r}, children={list(self.children)!r})"


@dataclass(eq=False)
class Forest(_Branch):
    """Ordered top-level nodes of a key catalogue.

    There is no implicit root node: the forest's ``children`` are the top-level keys.
    """

    def __iter__(self) -> Iterator[KeyNode]:
        return iter(self.children.values())

    def __len__(self) -> int:
        return len(self.children)

    def walk(self) -> Iterator[tuple[tuple[str, ...], KeyNode]]:
        """Yield ``(segments, node)`` for every node, pre-order, in insertion order.

        ``segments`` is the root-to-node path; join it to obtain the full path.
        """
        stack: list[tuple[tuple[str, ...], KeyNode]] = [
            ((node.name,), node) for node in reversed(self.children.values())
        ]
        while stack:
            segments, node = stack.pop()
            yield segments, node
            stack.extend(
                ((*segments, child.name), child) for child in reversed(node.children.values())
            )

    def paths(self, separator: str = ".") -> list[str]:
        """Return the full path of every node, pre-order."""
        return [separator.join(segments) for segments, _ in self.walk()]

    def terminal_paths(self, separator: str = ".") -> list[str]:
        """Return the full path of every terminal node, pre-order."""
        return [separator.join(segments) for segments, node in self.walk() if not node.children]

    def to_dict(self) -> dict[str, Any]:
        """Return the forest as nested dicts (``{}`` for terminals)."""

        def _convert(branch: _Branch) -> dict[str, Any]:
            return {name: _convert(node) for name, node in branch.children.items()}

        return _convert(self)


def build_forest(lines: Iterable[NormalizedLine]) -> Forest:
    """Build the canonical forest from normalized lines.

    Args:
        lines (Iterable[NormalizedLine]): Usable lines in input order.

    Returns:
        Forest: The fully built forest. Widths only ever compare numerically;
        an indentation that matches no earlier level simply attaches to the
        nearest shallower line.
    """
    forest = Forest()
    stack: list[tuple[int, KeyNode]] = []

    for line in lines:
        while stack and stack[-1][0] >= line.width:
            stack.pop()

        parent: _Branch = stack[-1][1] if stack else forest
        node: KeyNode = parent.child(line.segments[0])
        for segment in line.segments[1:]:
            node = node.child(segment)

        stack.append((line.width, node))
        logger.trace(
            "line %d: attached %s below %s (stack depth %d)",
            line.lineno,
            ".".join(line.segments),
            parent.name if isinstance(parent, KeyNode) else "<top level>",
            len(stack),
        )

    logger.debug("Built forest with %d top-level key(s)", len(forest))
    return forest


def parse_keys(text: str) -> Forest:
    """Normalize ``text`` and build its forest in one step."""
    return build_forest(iter_normalized_lines(text))
