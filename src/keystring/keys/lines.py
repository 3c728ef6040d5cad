# topmark:header:start
#
#   project      : Keystring
#   file         : lines.py
#   file_relpath : src/keystring/keys/lines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line normalization for key catalogues.

Each raw input line is reduced to an indentation width and an ordered tuple of
dot-separated segments:

- A leading space counts 1 towards the width, a leading tab counts
  ``TAB_WIDTH`` (4) regardless of the current column. There is no tab-stop
  rounding, so mixed indentation stays deterministic.
- The remaining content (trailing whitespace removed) is split on ``.``; empty
  segments produced by stray delimiters are dropped.
- Blank lines, whitespace-only lines and lines without any segment are skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from keystring.config.logging import get_logger
from keystring.constants import SEGMENT_DELIMITER, TAB_WIDTH

if TYPE_CHECKING:
    from collections.abc import Iterator

    from keystring.config.logging import KeystringLogger

logger: KeystringLogger = get_logger(__name__)


@dataclass(frozen=True)
class NormalizedLine:
    """One usable input line.

    Attributes:
        width (int): Indentation width (spaces count 1, tabs count 4).
        segments (tuple[str, ...]): Non-empty key segments, in input order.
        lineno (int): 1-based line number in the source text (0 when unknown).
    """

    width: int
    segments: tuple[str, ...]
    lineno: int = 0


def measure_indent(line: str) -> tuple[int, int]:
    """Return ``(width, offset)`` for the leading spaces and tabs of ``line``.

    ``offset`` is the index of the first character that is neither a space nor a tab.
    """
    width = 0
    offset = 0
    for ch in line:
        if ch == " ":
            width += 1
        elif ch == "\t":
            width += TAB_WIDTH
        else:
            break
        offset += 1
    return width, offset


def normalize_line(line: str, lineno: int = 0) -> NormalizedLine | None:
    """Normalize a single raw line.

    Args:
        line (str): The raw line, with or without its line terminator.
        lineno (int): 1-based line number used for diagnostics.

    Returns:
        NormalizedLine | None: The normalized line, or ``None`` when the line is
        blank or yields no segments (e.g. a lone ``.``).
    """
    if not line.strip():
        return None

    width, offset = measure_indent(line)
    content: str = line[offset:].rstrip()
    segments: tuple[str, ...] = tuple(s for s in content.split(SEGMENT_DELIMITER) if s)
    if not segments:
        logger.debug("Line %d has no key segments, skipping: %r", lineno, line)
        return None

    return NormalizedLine(width=width, segments=segments, lineno=lineno)


def iter_normalized_lines(text: str) -> Iterator[NormalizedLine]:
    """Yield the usable lines of ``text`` in input order."""
    for lineno, raw in enumerate(text.splitlines(), start=1):
        normalized: NormalizedLine | None = normalize_line(raw, lineno)
        if normalized is not None:
            logger.trace(
                "line %d: width=%d segments=%s", lineno, normalized.width, normalized.segments
            )
            yield normalized


def normalize_lines(text: str) -> list[NormalizedLine]:
    """Return all usable lines of ``text`` as a list."""
    return list(iter_normalized_lines(text))
