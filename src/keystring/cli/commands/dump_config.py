# topmark:header:start
#
#   project      : Keystring
#   file         : dump_config.py
#   file_relpath : src/keystring/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keystring `dump-config` command.

Emits the effective configuration as TOML after applying defaults, discovered
project config files, explicit ``--config`` files and CLI overrides. The output
is wrapped between ``# === BEGIN ===`` and ``# === END ===`` markers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from keystring.cli.cmd_common import build_config_from_click, get_console
from keystring.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_generator_options,
)
from keystring.config.io import to_toml

if TYPE_CHECKING:
    from pathlib import Path

    from keystring.cli.console import ClickConsole
    from keystring.config import Config


@click.command(
    name="dump-config",
    help="Dump the final merged Keystring configuration as TOML.",
    epilog="Output is wrapped between '# === BEGIN ===' and '# === END ===' markers.",
    context_settings=CONTEXT_SETTINGS,
)
@common_generator_options
@common_config_options
def dump_config_command(
    *,
    output_dir: Path | None,
    output_name: str | None,
    target: str | None,
    separator: str | None,
    enable_warnings: bool | None,
    no_config: bool,
    config_paths: tuple[Path, ...],
) -> None:
    """Print the merged configuration as TOML."""
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)

    cfg: Config = build_config_from_click(
        no_config=no_config,
        config_paths=config_paths,
        overrides={
            "output_dir": output_dir,
            "output_name": output_name,
            "target": target,
            "separator": separator,
            "enable_warnings": enable_warnings,
        },
    )

    console.print("# === BEGIN ===")
    console.print(to_toml(cfg.to_toml_dict()), nl=False)
    console.print("# === END ===")
