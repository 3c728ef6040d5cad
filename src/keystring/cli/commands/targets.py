# topmark:header:start
#
#   project      : Keystring
#   file         : targets.py
#   file_relpath : src/keystring/cli/commands/targets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keystring `targets` command.

Lists the registered emission targets.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from keystring import api
from keystring.cli.cmd_common import get_console, get_effective_verbosity
from keystring.cli.options import CONTEXT_SETTINGS

if TYPE_CHECKING:
    from keystring.api.types import TargetInfo
    from keystring.cli.console import ClickConsole


@click.command(
    name="targets",
    help="List the supported emission targets.",
    context_settings=CONTEXT_SETTINGS,
)
def targets_command() -> None:
    """List the supported emission targets."""
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    infos: list[TargetInfo] = api.get_target_info()
    width: int = max((len(info["name"]) for info in infos), default=0)
    if vlevel > 0:
        console.print(console.styled("Supported targets:\n", bold=True, underline=True))
    for info in infos:
        line: str = f"{console.styled(info['name'].ljust(width), bold=True)}  {info['description']}"
        if vlevel > 0:
            line += f" [{info['default_output_name']}]"
        console.print(line)
