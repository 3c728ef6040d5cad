# topmark:header:start
#
#   project      : Keystring
#   file         : types.py
#   file_relpath : src/keystring/api/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stable public types for the Keystring API.

This module defines the enums, dataclasses, and TypedDicts that appear in the
public function signatures and return values of `keystring.api`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from pathlib import Path


class WriteStatus(str, Enum):
    """What happened to the generated file.

    Values:
      - ``WRITTEN``: The file was created or replaced.
      - ``UNCHANGED``: The file already held identical content; nothing was written.
    """

    WRITTEN = "written"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class GenerateResult:
    """Result of a successful generation.

    Attributes:
        input_path (Path): The key catalogue that was read.
        output_path (Path): The generated file.
        target (str): Emitter name used for rendering.
        status (WriteStatus): Whether the file was written or already up to date.
        bytes_written (int): UTF-8 bytes written (``0`` when unchanged).
    """

    input_path: Path
    output_path: Path
    target: str
    status: WriteStatus
    bytes_written: int = 0


@dataclass(frozen=True)
class CheckResult:
    """Result of comparing the generated file on disk with fresh output.

    Attributes:
        input_path (Path): The key catalogue that was read.
        output_path (Path): The generated file that was compared.
        target (str): Emitter name used for rendering.
        up_to_date (bool): ``True`` when the file exists and matches exactly.
        exists (bool): Whether the generated file exists at all.
        diff (str | None): Unified diff from the current to the fresh content
            (``None`` when up to date).
    """

    input_path: Path
    output_path: Path
    target: str
    up_to_date: bool
    exists: bool
    diff: str | None = None


class TargetInfo(TypedDict):
    """Metadata about a registered emission target.

    Attributes:
        name (str): Target identifier (e.g., ``"rust"``).
        description (str): Human description.
        file_extension (str): Extension of the generated file, including the dot.
        default_output_name (str): File name used when no name is configured.
        self_path_name (str): Name of the per-grouping self-path constant.
    """

    name: str
    description: str
    file_extension: str
    default_output_name: str
    self_path_name: str
