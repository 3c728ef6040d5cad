# topmark:header:start
#
#   project      : Keystring
#   file         : cmd_common.py
#   file_relpath : src/keystring/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers used by several commands: reading shared state from the Click
context, building the effective configuration, and translating API errors
into CLI errors with the right exit code.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import click

from keystring.cli.errors import from_keystring_error
from keystring.config import MutableConfig
from keystring.config.logging import get_logger
from keystring.core.errors import KeystringError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence
    from pathlib import Path

    from keystring.cli.console import ClickConsole
    from keystring.config import Config

logger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group (``0`` when absent)."""
    obj: Any = ctx.obj
    if isinstance(obj, dict):
        return int(obj.get("verbosity_level", 0))
    return 0


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the Click context by the group callback."""
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    return console


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise any `KeystringError` as the matching CLI error."""
    try:
        yield
    except KeystringError as exc:
        logger.debug("Translating %s: %s", type(exc).__name__, exc)
        raise from_keystring_error(exc) from exc


def build_config_from_click(
    *,
    no_config: bool,
    config_paths: Sequence[Path],
    overrides: Mapping[str, Any],
) -> Config:
    """Materialize the effective Config for a command.

    Merges defaults, discovered project configs (unless ``no_config``), the
    explicit ``--config`` files, and finally the CLI overrides.

    Raises:
        KeystringConfigError: If a config file is invalid.
    """
    with translate_errors():
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=config_paths,
            no_config=no_config,
        )
        cfg: Config = draft.apply_overrides(overrides).freeze()
    logger.debug("Effective config: %s", cfg)
    return cfg
