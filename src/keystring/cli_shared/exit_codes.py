# topmark:header:start
#
#   project      : Keystring
#   file         : exit_codes.py
#   file_relpath : src/keystring/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Keystring CLI.

Keystring aligns with the BSD `sysexits` convention where practical, so that build
tooling can interpret failures consistently. The one deliberate divergence is
`WOULD_CHANGE=2`, which `keystring check` uses to signal that the generated file is
missing or stale. Click's own usage errors also exit with 2, so tests must assert
`result.exception` to tell the two apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Keystring CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: Check mode: the generated file is missing or out of date.
        USAGE_ERROR: Command-line invocation error (invalid flags/args, unknown
            target). Mirrors BSD ``EX_USAGE (64)``.
        INPUT_ERROR: The key catalogue is unusable (empty, invalid identifier,
            reserved name). Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input file does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    INPUT_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
