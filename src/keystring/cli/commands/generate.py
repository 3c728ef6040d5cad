# topmark:header:start
#
#   project      : Keystring
#   file         : generate.py
#   file_relpath : src/keystring/cli/commands/generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keystring `generate` command.

Compiles a key catalogue and writes the generated constants file atomically,
or prints the generated source with ``--stdout``. Nothing is written when the
catalogue is rejected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from keystring import api
from keystring.api.runtime import render_input
from keystring.api.types import WriteStatus
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
from keystring.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from keystring.api.runtime import Rendered
    from keystring.api.types import GenerateResult
    from keystring.cli.console import ClickConsole
    from keystring.config import Config

logger = get_logger(__name__)


@click.command(
    name="generate",
    help="Generate nested string-key constants from a key catalogue.",
    epilog=(
        "INPUT defaults to [input] file from keystring.toml or [tool.keystring]. "
        "The output file is only rewritten when its content changes."
    ),
    context_settings=CONTEXT_SETTINGS,
)
@input_file_argument
@common_generator_options
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print the generated source instead of writing a file.",
)
@common_config_options
def generate_command(
    *,
    input_file: Path | None,
    output_dir: Path | None,
    output_name: str | None,
    target: str | None,
    separator: str | None,
    enable_warnings: bool | None,
    to_stdout: bool,
    no_config: bool,
    config_paths: tuple[Path, ...],
) -> None:
    """Generate constants from INPUT.

    Args:
        input_file (Path | None): Key catalogue (``None``: configured input).
        output_dir (Path | None): Output directory override.
        output_name (str | None): Output file name override.
        target (str | None): Emission target override.
        separator (str | None): Value separator override.
        enable_warnings (bool | None): Suppression directive override.
        to_stdout (bool): Print the generated source instead of writing it.
        no_config (bool): Skip config file discovery.
        config_paths (tuple[Path, ...]): Extra config files to merge.
    """
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

    if to_stdout:
        with translate_errors():
            rendered: Rendered = render_input(None, cfg)
        console.print(rendered.text, nl=False)
        return

    with translate_errors():
        result: GenerateResult = api.generate_with_config(None, config=cfg)

    if vlevel < 0:
        return
    if result.status == WriteStatus.UNCHANGED:
        console.print(f"{result.output_path}: {console.styled('up to date', fg='green')}")
    else:
        console.print(
            f"{result.output_path}: "
            f"{console.styled('written', fg='green', bold=True)} "
            f"({result.bytes_written} bytes)"
        )
    if vlevel > 0:
        console.print(f"  input : {result.input_path}")
        console.print(f"  target: {result.target}")
