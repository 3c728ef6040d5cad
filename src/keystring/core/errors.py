# topmark:header:start
#
#   project      : Keystring
#   file         : errors.py
#   file_relpath : src/keystring/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error taxonomy for key generation.

Every failure surfaces as a single `KeystringError` carrying one descriptive
message. There is no partial success: a run either returns its complete output
or raises exactly one of these errors.

Usage:
    The API raises these errors; the CLI translates them into Click exceptions
    with sysexits-aligned exit codes (see `keystring.cli.errors`).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ErrorKind(str, Enum):
    """Categories of generation failures."""

    EMPTY_INPUT = "empty-input"
    INVALID_IDENTIFIER = "invalid-identifier"
    RESERVED_NAME_CONFLICT = "reserved-name-conflict"
    IO_FAILURE = "io-failure"
    INVALID_CONFIG = "invalid-config"


class KeystringError(Exception):
    """Base class for all Keystring errors.

    Attributes:
        kind (ErrorKind): Failure category.
        message (str): Human-readable description (also the ``str()`` of the error).
    """

    kind: ErrorKind = ErrorKind.INVALID_CONFIG

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyInputError(KeystringError):
    """The input holds no usable key lines."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, message: str = "Input contains no key paths; nothing to generate.") -> None:
        super().__init__(message)


class InvalidIdentifierError(KeystringError):
    """A path segment is not a legal identifier for the selected target."""

    kind = ErrorKind.INVALID_IDENTIFIER

    def __init__(self, full_path: str, message: str | None = None) -> None:
        super().__init__(message or f'Invalid identifier in key path "{full_path}".')
        self.full_path = full_path


class ReservedNameConflictError(KeystringError):
    """A path segment collides with the reserved self-path constant name."""

    kind = ErrorKind.RESERVED_NAME_CONFLICT

    def __init__(self, full_path: str, message: str | None = None) -> None:
        super().__init__(message or f'Reserved name used in key path "{full_path}".')
        self.full_path = full_path


class KeystringIOError(KeystringError):
    """Input could not be read or output could not be written."""

    kind = ErrorKind.IO_FAILURE

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class ConfigurationError(KeystringError):
    """Invalid generation settings (unknown target, empty separator, bad config value)."""

    kind = ErrorKind.INVALID_CONFIG


class UnknownTargetError(ConfigurationError):
    """The requested emitter target is not registered."""

    def __init__(self, name: str, known: tuple[str, ...] = ()) -> None:
        hint = f" (known targets: {', '.join(known)})" if known else ""
        super().__init__(f"Unknown target '{name}'{hint}.")
        self.name = name
