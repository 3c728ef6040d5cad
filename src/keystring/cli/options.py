# topmark:header:start
#
#   project      : Keystring
#   file         : options.py
#   file_relpath : src/keystring/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options and their resolution logic.

Group-level options (verbosity, color) and the per-command option bundles
shared by ``generate`` and ``check`` live here so the commands stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from keystring.cli.errors import KeystringUsageError

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by all commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` / ``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: ``0`` by default, positive for more detail, negative for less.

    Raises:
        KeystringUsageError: If both ``-v`` and ``-q`` are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise KeystringUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase program output verbosity.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress status output; only errors are printed.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from ``--color``.
        stdout_isatty (bool | None): Whether stdout is a TTY; auto-detected when None.

    Returns:
        bool: True if color output should be enabled.

    Behavior:
        Honors ``--color`` / ``--no-color`` first, then the ``FORCE_COLOR`` and
        ``NO_COLOR`` environment variables, then whether stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto/always/never) and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-config`` and ``--config`` options."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore discovered project config files (explicit --config files still apply).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def input_file_argument(f: Callable[P, R]) -> Callable[P, R]:
    """Add the optional ``INPUT`` argument (defaults to ``[input] file`` from config)."""
    return click.argument(
        "input_file",
        metavar="[INPUT]",
        required=False,
        type=click.Path(dir_okay=False, path_type=Path),
    )(f)


def common_generator_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the output and rendering options shared by ``generate`` and ``check``."""
    f = click.option(
        "-o",
        "--output-dir",
        "output_dir",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Directory receiving the generated file (default: generated/keygen).",
    )(f)
    f = click.option(
        "--name",
        "output_name",
        default=None,
        metavar="FILE",
        help="Generated file name (default: constants + the target's extension).",
    )(f)
    f = click.option(
        "--target",
        "target",
        default=None,
        metavar="TARGET",
        help="Emission target (see 'keystring targets'; default: rust).",
    )(f)
    f = click.option(
        "--separator",
        "separator",
        default=None,
        help="String joining segments in the generated values (default: '.').",
    )(f)
    f = click.option(
        "--enable-warnings/--disable-warnings",
        "enable_warnings",
        default=None,
        help="Omit (or keep) the lint suppression directives in the generated file.",
    )(f)
    return f
