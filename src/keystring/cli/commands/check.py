# topmark:header:start
#
#   project      : Keystring
#   file         : check.py
#   file_relpath : src/keystring/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keystring `check` command.

Compiles the catalogue in memory and compares the result with the generated
file on disk. Exits with 0 when up to date and with 2 (`ExitCode.WOULD_CHANGE`)
when the file is missing or stale. Never writes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from keystring import api
from keystring.cli.cmd_common import (
    build_config_from_click,
    get_console,
    get_effective_verbosity,
    translate_errors,
)
from keystring.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_generator_options,
    input_file_argument,
)
from keystring.cli_shared.exit_codes import ExitCode
from keystring.config.logging import get_logger
from keystring.utils.diff import render_patch

if TYPE_CHECKING:
    from pathlib import Path

    from keystring.api.types import CheckResult
    from keystring.cli.console import ClickConsole
    from keystring.config import Config

logger = get_logger(__name__)


@click.command(
    name="check",
    help="Check that the generated constants file is up to date (exit 2 when not).",
    context_settings=CONTEXT_SETTINGS,
)
@input_file_argument
@common_generator_options
@click.option(
    "--diff",
    "show_diff",
    is_flag=True,
    help="Show a unified diff between the file on disk and the fresh output.",
)
@common_config_options
def check_command(
    *,
    input_file: Path | None,
    output_dir: Path | None,
    output_name: str | None,
    target: str | None,
    separator: str | None,
    enable_warnings: bool | None,
    show_diff: bool,
    no_config: bool,
    config_paths: tuple[Path, ...],
) -> None:
    """Check the generated file for INPUT without writing anything."""
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    cfg: Config = build_config_from_click(
        no_config=no_config,
        config_paths=config_paths,
        overrides={
            "input_file": input_file,
            "output_dir": output_dir,
            "output_name": output_name,
            "target": target,
            "separator": separator,
            "enable_warnings": enable_warnings,
        },
    )

    with translate_errors():
        result: CheckResult = api.check(None, config=cfg)

    if result.up_to_date:
        if vlevel >= 0:
            console.print(f"{result.output_path}: {console.styled('up to date', fg='green')}")
        return

    state: str = "out of date" if result.exists else "missing"
    if vlevel >= 0:
        console.print(f"{result.output_path}: {console.styled(state, fg='yellow', bold=True)}")
    if show_diff and result.diff:
        patch: str = render_patch(result.diff) if console.enable_color else result.diff
        console.print(patch, nl=False)
    ctx.exit(ExitCode.WOULD_CHANGE)
