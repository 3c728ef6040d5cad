# topmark:header:start
#
#   project      : Keystring
#   file         : model.py
#   file_relpath : src/keystring/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the generator.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) Project configs discovered upward **root → current**; within a directory
       `pyproject.toml` (``[tool.keystring]``) is merged first, then
       `keystring.toml`
    3) Extra config files passed explicitly (``--config``), in the order given
    4) Explicit overrides (CLI options or API keyword arguments)

Path semantics:
    - Paths declared in a config file are resolved against that file's directory.
    - Paths given as overrides are kept as given (relative to the invocation CWD).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from keystring.config.io import (
    get_bool_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from keystring.config.keys import Toml
from keystring.config.logging import get_logger
from keystring.constants import (
    DEFAULT_OUTPUT_DIR,
    DEFAULT_OUTPUT_STEM,
    DEFAULT_SEPARATOR,
    DEFAULT_TARGET,
    KEYSTRING_TOML_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)
from keystring.core.errors import ConfigurationError

if TYPE_CHECKING:
    from keystring.config.io import TomlTable
    from keystring.config.logging import KeystringLogger
    from keystring.emitters.base import KeyEmitter

# ArgsLike: generic mapping accepted for overrides (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: KeystringLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Keystring.

    Attributes:
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
        input_file (Path | None): Default key catalogue, if configured.
        output_dir (Path): Directory receiving the generated file.
        output_name (str | None): Generated file name; ``None`` selects
            ``constants`` plus the target's extension.
        target (str): Emitter name (``"rust"``, ``"python"``).
        separator (str): String joining segments in emitted values.
        enable_warnings (bool): Omit the lint suppression directives when True.
    """

    config_files: tuple[Path | str, ...]
    input_file: Path | None
    output_dir: Path
    output_name: str | None
    target: str
    separator: str
    enable_warnings: bool

    def output_path(self, emitter: KeyEmitter) -> Path:
        """Return the full path of the generated file for ``emitter``."""
        name: str = self.output_name or emitter.default_output_name(DEFAULT_OUTPUT_STEM)
        return self.output_dir / name

    def to_toml_dict(self) -> TomlTable:
        """Convert this immutable Config into a TOML-serializable dict.

        Returns:
            TomlTable: the TOML-serializable dict representing the Config
        """
        return {
            Toml.SECTION_INPUT: {
                Toml.KEY_INPUT_FILE: str(self.input_file) if self.input_file else None,
            },
            Toml.SECTION_OUTPUT: {
                Toml.KEY_OUTPUT_DIR: str(self.output_dir),
                Toml.KEY_OUTPUT_NAME: self.output_name or "",
            },
            Toml.SECTION_GENERATOR: {
                Toml.KEY_TARGET: self.target,
                Toml.KEY_SEPARATOR: self.separator,
                Toml.KEY_ENABLE_WARNINGS: self.enable_warnings,
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            config_files=list(self.config_files),
            input_file=self.input_file,
            output_dir=self.output_dir,
            output_name=self.output_name,
            target=self.target,
            separator=self.separator,
            enable_warnings=self.enable_warnings,
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Every setting is optional (``None`` = inherit); `freeze` fills the gaps
    with the built-in defaults.
    """

    config_files: list[Path | str] = field(default_factory=lambda: [])
    input_file: Path | None = None
    output_dir: Path | None = None
    output_name: str | None = None
    target: str | None = None
    separator: str | None = None
    enable_warnings: bool | None = None

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config.

        Raises:
            ConfigurationError: If the separator is empty.
        """
        separator: str = DEFAULT_SEPARATOR if self.separator is None else self.separator
        if not separator:
            raise ConfigurationError("The value separator must not be empty.")

        return Config(
            config_files=tuple(self.config_files),
            input_file=self.input_file,
            output_dir=self.output_dir or Path(DEFAULT_OUTPUT_DIR),
            output_name=self.output_name or None,
            target=self.target or DEFAULT_TARGET,
            separator=separator,
            enable_warnings=bool(self.enable_warnings),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict(), config_file=None)

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Path entries are resolved against the directory of ``config_file`` when
        one is given; otherwise they are kept as written.

        Args:
            data (TomlTable): The parsed TOML data (the Keystring table itself).
            config_file (Path | None): Optional path to the source TOML file.

        Returns:
            MutableConfig: The resulting MutableConfig instance.

        Raises:
            ConfigurationError: If a value has the wrong type.
        """
        input_tbl: TomlTable = get_table_value(data, Toml.SECTION_INPUT)
        logger.trace("TOML [input]: %s", input_tbl)
        output_tbl: TomlTable = get_table_value(data, Toml.SECTION_OUTPUT)
        logger.trace("TOML [output]: %s", output_tbl)
        generator_tbl: TomlTable = get_table_value(data, Toml.SECTION_GENERATOR)
        logger.trace("TOML [generator]: %s", generator_tbl)

        cfg_dir: Path | None = config_file.parent.resolve() if config_file else None

        def _path(raw: str | None) -> Path | None:
            if not raw:
                return None
            p = Path(raw)
            if cfg_dir is not None and not p.is_absolute():
                p = cfg_dir / p
            return p

        return cls(
            config_files=[config_file] if config_file else [],
            input_file=_path(get_string_value_or_none(input_tbl, Toml.KEY_INPUT_FILE)),
            output_dir=_path(get_string_value_or_none(output_tbl, Toml.KEY_OUTPUT_DIR)),
            output_name=get_string_value_or_none(output_tbl, Toml.KEY_OUTPUT_NAME) or None,
            target=get_string_value_or_none(generator_tbl, Toml.KEY_TARGET),
            separator=get_string_value_or_none(generator_tbl, Toml.KEY_SEPARATOR),
            enable_warnings=get_bool_value_or_none(generator_tbl, Toml.KEY_ENABLE_WARNINGS),
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``keystring.toml`` and ``pyproject.toml`` files, extracting
        the ``[tool.keystring]`` section from the latter.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or ``None`` for a ``pyproject.toml``
                without a ``[tool.keystring]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)

        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, "tool"), PYPROJECT_TOOL_SECTION
            )
            if not tool_section:
                logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = tool_section

        draft: MutableConfig = cls.from_toml_dict(toml_data, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Layered discovery semantics:
          * We traverse from the anchor directory up to the filesystem root and
            collect config files in **root-most → nearest** order.
          * In a given directory, `pyproject.toml` is listed before
            `keystring.toml`, so the latter wins when both are merged.
          * If a discovered config sets ``root = true`` we stop traversing
            further up after collecting the current directory's files.

        Args:
            start (Path): The Path instance where discovery starts.

        Returns:
            list[Path]: Discovered config file paths ordered for stable merging.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []

            for name in (PYPROJECT_TOML_NAME, KEYSTRING_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                data: TomlTable = load_toml_dict(p)
                if name == PYPROJECT_TOML_NAME:
                    tool: Any = data.get("tool", {})
                    data = tool.get(PYPROJECT_TOOL_SECTION, {}) if isinstance(tool, dict) else {}
                    if not data:
                        continue
                dir_entries.append(p)
                logger.debug("Discovered config file: %s", p)
                if bool(data.get(Toml.KEY_ROOT, False)):
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):  # root-most first
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            start (Path | None): Discovery anchor (CWD when None).
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                **after** discovery, in their given order.
            no_config (bool): If True, skip discovery (explicit files still apply).

        Returns:
            MutableConfig: A draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(start or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            path = Path(extra)
            if not path.is_file():
                raise ConfigurationError(f"Config file not found: {path}")
            mc = cls.from_toml_file(path)
            if mc is None:
                raise ConfigurationError(
                    f"[tool.{PYPROJECT_TOOL_SECTION}] section missing in {path}"
                )
            draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            config_files=self.config_files + other.config_files,
            input_file=other.input_file if other.input_file is not None else self.input_file,
            output_dir=other.output_dir if other.output_dir is not None else self.output_dir,
            output_name=other.output_name if other.output_name is not None else self.output_name,
            target=other.target if other.target is not None else self.target,
            separator=other.separator if other.separator is not None else self.separator,
            enable_warnings=other.enable_warnings
            if other.enable_warnings is not None
            else self.enable_warnings,
        )

    def apply_overrides(self, args: ArgsLike) -> MutableConfig:
        """Apply explicit overrides (CLI options or API keywords) in place.

        Recognized keys: ``input_file``, ``output_dir``, ``output_name``, ``target``,
        ``separator``, ``enable_warnings``. Keys that are absent or ``None`` are ignored.

        Args:
            args (ArgsLike): Mapping of override values.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        if args.get("input_file") is not None:
            self.input_file = Path(args["input_file"])
        if args.get("output_dir") is not None:
            self.output_dir = Path(args["output_dir"])
        if args.get("output_name") is not None:
            self.output_name = str(args["output_name"]) or None
        if args.get("target") is not None:
            self.target = str(args["target"])
        if args.get("separator") is not None:
            self.separator = str(args["separator"])
        if args.get("enable_warnings") is not None:
            self.enable_warnings = bool(args["enable_warnings"])
        logger.trace("Config after overrides: %s", self)
        return self
