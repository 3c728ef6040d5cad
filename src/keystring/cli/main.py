# topmark:header:start
#
#   project      : Keystring
#   file         : main.py
#   file_relpath : src/keystring/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``keystring`` command.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` together with the program-output console; subcommands read them
through `keystring.cli.cmd_common`.
"""

from __future__ import annotations

import click

from keystring.cli.commands.check import check_command
from keystring.cli.commands.dump_config import dump_config_command
from keystring.cli.commands.generate import generate_command
from keystring.cli.commands.targets import targets_command
from keystring.cli.commands.version import version_command
from keystring.cli.console import ClickConsole
from keystring.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from keystring.config.logging import get_logger, resolve_env_log_level, setup_logging
from keystring.emitters import register_all_emitters

logger = get_logger(__name__)

register_all_emitters()


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO.value)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Keystring: generate nested string-key constants from a dotted key catalogue.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the Keystring CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'keystring generate [INPUT]' to generate constants.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(generate_command)
cli.add_command(check_command)
cli.add_command(targets_command)
cli.add_command(dump_config_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
