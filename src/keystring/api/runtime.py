# topmark:header:start
#
#   project      : Keystring
#   file         : runtime.py
#   file_relpath : src/keystring/api/runtime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime helpers behind the public API.

These functions turn the loose arguments accepted by `keystring.api` into an
immutable `Config`, and run the in-memory compiler for that configuration.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, NamedTuple

from keystring.config import Config, MutableConfig
from keystring.config.logging import get_logger
from keystring.core.errors import ConfigurationError
from keystring.emitters import resolve_emitter
from keystring.keys.compiler import build_validated_forest
from keystring.utils.file import read_text_file

if TYPE_CHECKING:
    from keystring.config.logging import KeystringLogger
    from keystring.emitters.base import KeyEmitter
    from keystring.keys.tree import Forest

logger: KeystringLogger = get_logger(__name__)


class Rendered(NamedTuple):
    """Fresh output for one input file, not yet written.

    Attributes:
        input_path (Path): The catalogue that was read.
        output_path (Path): Where the output belongs.
        emitter (KeyEmitter): The emitter that rendered it.
        text (str): The generated file content.
    """

    input_path: Path
    output_path: Path
    emitter: KeyEmitter
    text: str


def build_config(
    config: Mapping[str, Any] | Config | None,
    overrides: Mapping[str, Any],
) -> Config:
    """Normalize an API ``config`` argument and apply explicit overrides.

    Args:
        config (Mapping[str, Any] | Config | None): A frozen `Config`, a mapping
            mirroring the TOML schema, or ``None`` for the built-in defaults.
            No config file discovery takes place here.
        overrides (Mapping[str, Any]): Keyword arguments; ``None`` values are ignored.

    Returns:
        Config: The immutable configuration to run with.
    """
    draft: MutableConfig
    if isinstance(config, Config):
        draft = config.thaw()
    elif config is None:
        draft = MutableConfig.from_defaults()
    else:
        draft = MutableConfig.from_defaults().merge_with(
            MutableConfig.from_toml_dict(dict(config))
        )
    return draft.apply_overrides(overrides).freeze()


def render_input(input_path: Path | str | None, cfg: Config) -> Rendered:
    """Read, compile, and render the catalogue selected by ``input_path`` / ``cfg``.

    Raises:
        ConfigurationError: If no input file is given or configured, or the target is unknown.
        KeystringIOError: If the input cannot be read.
        EmptyInputError: If the input has no usable lines.
        InvalidIdentifierError: If a segment is not a legal identifier.
        ReservedNameConflictError: If a segment equals the self-path constant name.
    """
    path: Path | None = Path(input_path) if input_path is not None else cfg.input_file
    if path is None:
        raise ConfigurationError("No input file given and none configured in [input] file.")

    emitter: KeyEmitter = resolve_emitter(cfg.target)
    text: str = read_text_file(path)
    forest: Forest = build_validated_forest(text, emitter)
    output: str = emitter.render(
        forest,
        separator=cfg.separator,
        enable_warnings=cfg.enable_warnings,
    )
    output_path: Path = cfg.output_path(emitter)
    logger.debug("Rendered %s for target '%s' -> %s", path, emitter.name, output_path)
    return Rendered(input_path=path, output_path=output_path, emitter=emitter, text=output)
