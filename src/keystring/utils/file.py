# topmark:header:start
#
#   project      : Keystring
#   file         : file.py
#   file_relpath : src/keystring/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File helpers for reading key catalogues and writing generated sources.

Writes are atomic: content goes to a temporary file in the destination
directory, which then replaces the target with `os.replace`. A reader never
observes a half-written file, and a failed write leaves the previous file as
it was.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from keystring.config.logging import get_logger
from keystring.core.errors import KeystringIOError

logger = get_logger(__name__)


def read_text_file(path: Path) -> str:
    """Read a UTF-8 text file.

    Args:
        path (Path): File to read.

    Returns:
        str: The file contents.

    Raises:
        KeystringIOError: If the file cannot be read or decoded.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise KeystringIOError(path, f"Input file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise KeystringIOError(path, f"Cannot read {path}: {e}") from e
    logger.debug("Read %d characters from %s", len(text), path)
    return text


def read_existing_text(path: Path) -> str | None:
    """Return the contents of a previously generated file, or ``None`` when absent.

    Bytes that are not valid UTF-8 are decoded as U+FFFD so a damaged file can
    still be diffed against and replaced.

    Raises:
        KeystringIOError: If the file exists but cannot be read.
    """
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise KeystringIOError(path, f"Cannot read {path}: {e}") from e


def has_content(path: Path, text: str) -> bool:
    """Return whether ``path`` exists and holds exactly the UTF-8 bytes of ``text``.

    Raises:
        KeystringIOError: If the file exists but cannot be read.
    """
    if not path.is_file():
        return False
    try:
        return path.read_bytes() == text.encode("utf-8")
    except OSError as e:
        raise KeystringIOError(path, f"Cannot read {path}: {e}") from e


def write_text_atomic(path: Path, text: str) -> int:
    """Atomically write ``text`` to ``path``, creating parent directories.

    Args:
        path (Path): Destination file.
        text (str): Content to write (written verbatim, ``\\n`` line endings).

    Returns:
        int: Number of UTF-8 bytes written.

    Raises:
        KeystringIOError: If the directory cannot be created or the file written.
    """
    data: bytes = text.encode("utf-8")
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        raise KeystringIOError(path, f"Cannot write {path}: {e}") from e
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)

    logger.debug("Wrote %d bytes to %s", len(data), path)
    return len(data)
