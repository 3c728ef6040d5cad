# topmark:header:start
#
#   project      : Keystring
#   file         : version.py
#   file_relpath : src/keystring/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keystring `version` command.

Prints the Keystring version installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from keystring.cli.cmd_common import get_console, get_effective_verbosity
from keystring.constants import KEYSTRING_VERSION

if TYPE_CHECKING:
    from keystring.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of Keystring.",
)
def version_command() -> None:
    """Show the current version of Keystring."""
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Keystring version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(KEYSTRING_VERSION, bold=True)}")
    else:
        console.print(console.styled(KEYSTRING_VERSION, bold=True))
