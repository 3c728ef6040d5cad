# topmark:header:start
#
#   project      : Keystring
#   file         : __init__.py
#   file_relpath : src/keystring/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public Keystring API (stable surface).

This module exposes a **small, typed API** for build scripts that want to
generate key constants without going through the CLI.

Notes:
-----
- `compile_keys` is the pure core: catalogue text in, generated source out.
- `generate` / `generate_with_config` read a catalogue file and write the
  generated file atomically; nothing is written when any step fails.
- `check` compiles in memory and compares with the file on disk; it never writes.
- Every failure raises exactly one `keystring.core.errors.KeystringError`
  whose ``str()`` is the descriptive message.

Configuration contract
----------------------
- The ``config`` parameter accepts a plain **mapping** mirroring the TOML schema
  or a frozen `keystring.config.Config`. With ``config=None`` the built-in
  defaults apply; unlike the CLI, the API does not discover config files.
- Explicit keyword arguments override the config.

```python
from keystring import api

result = api.generate_with_config(
    "keys/input.keys",
    "src/generated",
    config={"generator": {"target": "python", "separator": "/"}},
)
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from keystring.api.runtime import build_config, render_input
from keystring.config.logging import get_logger
from keystring.constants import DEFAULT_OUTPUT_STEM, KEYSTRING_VERSION
from keystring.emitters import get_emitter_registry, register_all_emitters
from keystring.keys.compiler import compile_keys
from keystring.utils.diff import make_patch
from keystring.utils.file import has_content, read_existing_text, write_text_atomic

from .types import CheckResult, GenerateResult, TargetInfo, WriteStatus

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from keystring.api.runtime import Rendered
    from keystring.config import Config
    from keystring.config.logging import KeystringLogger

logger: KeystringLogger = get_logger(__name__)


__all__: list[str] = [
    "CheckResult",
    "GenerateResult",
    "TargetInfo",
    "WriteStatus",
    "check",
    "compile_keys",
    "generate",
    "generate_with_config",
    "get_target_info",
    "version",
]


def generate(input_path: Path | str) -> GenerateResult:
    """Generate constants from ``input_path`` into the default output location.

    Equivalent to `generate_with_config` with all defaults: target ``rust``,
    output ``generated/keygen/constants.rs`` relative to the working directory.

    Args:
        input_path (Path | str): The key catalogue.

    Returns:
        GenerateResult: Where the output went and whether it changed.
    """
    return generate_with_config(input_path)


def generate_with_config(
    input_path: Path | str | None,
    output_dir: Path | str | None = None,
    *,
    config: Mapping[str, Any] | Config | None = None,
    target: str | None = None,
    separator: str | None = None,
    enable_warnings: bool | None = None,
    output_name: str | None = None,
) -> GenerateResult:
    """Generate constants from ``input_path`` into ``output_dir``.

    The output directory is created if missing. When the destination already
    holds identical content it is left untouched (`WriteStatus.UNCHANGED`).

    Args:
        input_path (Path | str | None): The key catalogue (``None``: ``[input] file``
            from ``config``).
        output_dir (Path | str | None): Destination directory (``None``: configured
            or default directory).
        config (Mapping[str, Any] | Config | None): Base configuration.
        target (str | None): Emitter name override.
        separator (str | None): Value separator override.
        enable_warnings (bool | None): Suppression directive override.
        output_name (str | None): Generated file name override.

    Returns:
        GenerateResult: Where the output went and whether it changed.

    Raises:
        KeystringError: On any failure; no file is written in that case.
    """
    cfg: Config = build_config(
        config,
        {
            "output_dir": output_dir,
            "output_name": output_name,
            "target": target,
            "separator": separator,
            "enable_warnings": enable_warnings,
        },
    )
    rendered: Rendered = render_input(input_path, cfg)

    if has_content(rendered.output_path, rendered.text):
        logger.info("%s is up to date", rendered.output_path)
        return GenerateResult(
            input_path=rendered.input_path,
            output_path=rendered.output_path,
            target=rendered.emitter.name,
            status=WriteStatus.UNCHANGED,
        )

    written: int = write_text_atomic(rendered.output_path, rendered.text)
    logger.info("Wrote %d bytes to %s", written, rendered.output_path)
    return GenerateResult(
        input_path=rendered.input_path,
        output_path=rendered.output_path,
        target=rendered.emitter.name,
        status=WriteStatus.WRITTEN,
        bytes_written=written,
    )


def check(
    input_path: Path | str | None,
    output_dir: Path | str | None = None,
    *,
    config: Mapping[str, Any] | Config | None = None,
    target: str | None = None,
    separator: str | None = None,
    enable_warnings: bool | None = None,
    output_name: str | None = None,
) -> CheckResult:
    """Report whether the generated file for ``input_path`` is up to date.

    Takes the same arguments as `generate_with_config` but never writes.

    Returns:
        CheckResult: Comparison outcome, with a unified diff when stale or missing.

    Raises:
        KeystringError: If the catalogue cannot be compiled or files cannot be read.
    """
    cfg: Config = build_config(
        config,
        {
            "output_dir": output_dir,
            "output_name": output_name,
            "target": target,
            "separator": separator,
            "enable_warnings": enable_warnings,
        },
    )
    rendered: Rendered = render_input(input_path, cfg)
    current: str | None = read_existing_text(rendered.output_path)
    up_to_date: bool = has_content(rendered.output_path, rendered.text)
    diff: str | None = (
        None if up_to_date else make_patch(current, rendered.text, str(rendered.output_path))
    )
    logger.debug("Check %s: up_to_date=%s", rendered.output_path, up_to_date)
    return CheckResult(
        input_path=rendered.input_path,
        output_path=rendered.output_path,
        target=rendered.emitter.name,
        up_to_date=up_to_date,
        exists=current is not None,
        diff=diff,
    )


def get_target_info() -> list[TargetInfo]:
    """Return metadata about registered emission targets, sorted by name."""
    register_all_emitters()
    items: list[TargetInfo] = []
    for name, emitter in sorted(get_emitter_registry().items()):
        items.append(
            {
                "name": name,
                "description": emitter.description,
                "file_extension": emitter.file_extension,
                "default_output_name": emitter.default_output_name(DEFAULT_OUTPUT_STEM),
                "self_path_name": emitter.self_path_name,
            }
        )
    return items


def version() -> str:
    """Return the current Keystring version string."""
    return KEYSTRING_VERSION
