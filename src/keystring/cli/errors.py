# topmark:header:start
#
#   project      : Keystring
#   file         : errors.py
#   file_relpath : src/keystring/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Keystring CLI.

Usage:
    Commands raise these to exit with a standardized message and exit code.
    `from_keystring_error` converts an API-level `KeystringError` into the
    matching CLI error.

Styling:
    Errors print through the project console when one is present in the Click
    context (see `show()`); otherwise Click's default styling applies.
"""

from __future__ import annotations

from typing import IO, Any

import click

from keystring.cli_shared.exit_codes import ExitCode
from keystring.core.errors import (
    ErrorKind,
    KeystringError,
    KeystringIOError,
    UnknownTargetError,
)


class KeystringCliError(click.ClickException):
    """Base class for all Keystring CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class KeystringUsageError(KeystringCliError):
    """Command-line invocation error (invalid flags/args, unknown target)."""

    exit_code = ExitCode.USAGE_ERROR


class KeystringInputError(KeystringCliError):
    """The key catalogue cannot be compiled (empty, bad identifier, reserved name)."""

    exit_code = ExitCode.INPUT_ERROR


class KeystringFileNotFoundError(KeystringCliError):
    """Input file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class KeystringCliIOError(KeystringCliError):
    """I/O error reading or writing a file."""

    exit_code = ExitCode.IO_ERROR


class KeystringConfigError(KeystringCliError):
    """Configuration error (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


_ERRORS_BY_KIND: dict[ErrorKind, type[KeystringCliError]] = {
    ErrorKind.EMPTY_INPUT: KeystringInputError,
    ErrorKind.INVALID_IDENTIFIER: KeystringInputError,
    ErrorKind.RESERVED_NAME_CONFLICT: KeystringInputError,
    ErrorKind.IO_FAILURE: KeystringCliIOError,
    ErrorKind.INVALID_CONFIG: KeystringConfigError,
}


def from_keystring_error(exc: KeystringError) -> KeystringCliError:
    """Return the CLI error matching ``exc``, carrying the same message."""
    if isinstance(exc, UnknownTargetError):
        return KeystringUsageError(exc.message)
    if isinstance(exc, KeystringIOError) and isinstance(exc.__cause__, FileNotFoundError):
        return KeystringFileNotFoundError(exc.message)
    return _ERRORS_BY_KIND.get(exc.kind, KeystringCliError)(exc.message)
