# topmark:header:start
#
#   project      : Keystring
#   file         : diff.py
#   file_relpath : src/keystring/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diffs between a generated file on disk and freshly generated content.

`make_patch` builds the diff text; `render_patch` formats a colorized preview
for CLI display.
"""

from __future__ import annotations

import difflib
from collections.abc import Sequence

from yachalk import chalk

from keystring.config.logging import get_logger

logger = get_logger(__name__)


def make_patch(current: str | None, updated: str, path: str) -> str:
    """Return a unified diff turning ``current`` into ``updated``.

    Args:
        current (str | None): Existing file content, or ``None`` when the file is missing.
        updated (str): Freshly generated content.
        path (str): Display path used in the diff headers.

    Returns:
        str: The unified diff, or an empty string when both sides are identical.
    """
    before: list[str] = (current or "").splitlines(keepends=True)
    after: list[str] = updated.splitlines(keepends=True)
    fromfile: str = f"{path} (current)" if current is not None else "/dev/null"
    patch: str = "".join(
        difflib.unified_diff(before, after, fromfile=fromfile, tofile=f"{path} (generated)")
    )
    logger.trace("Patch for %s: %d characters", path, len(patch))
    return patch


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch (Sequence[str] | str): A unified diff as **either** a sequence of lines
            **or** a single multiline string.
        show_line_numbers (bool): Whether to prefix output with line numbers.

    Returns:
        str: The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\n") for line in patch]

    def process_line(line: str) -> str:
        match line[:1]:
            case "-":
                return chalk.bold.red(line)
            case "+":
                return chalk.bold.green(line)
            case "@":
                return chalk.cyan(line)
            case _:
                return chalk.white(line)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
