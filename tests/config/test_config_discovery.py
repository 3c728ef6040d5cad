# topmark:header:start
#
#   project      : Keystring
#   file         : test_config_discovery.py
#   file_relpath : tests/config/test_config_discovery.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for config file loading and upward discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from keystring.config import Config, MutableConfig
from keystring.core.errors import ConfigurationError


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_from_toml_file_reads_keystring_toml(tmp_path: Path) -> None:
    cfg_file: Path = _write(tmp_path / "keystring.toml", '[generator]\ntarget = "python"\n')
    draft: MutableConfig | None = MutableConfig.from_toml_file(cfg_file)
    assert draft is not None
    assert draft.target == "python"


def test_from_toml_file_reads_pyproject_tool_section(tmp_path: Path) -> None:
    cfg_file: Path = _write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "demo"\n\n[tool.keystring.generator]\nseparator = "/"\n',
    )
    draft: MutableConfig | None = MutableConfig.from_toml_file(cfg_file)
    assert draft is not None
    assert draft.separator == "/"


def test_pyproject_without_tool_section_is_ignored(tmp_path: Path) -> None:
    cfg_file: Path = _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')
    assert MutableConfig.from_toml_file(cfg_file) is None


def test_invalid_toml_is_a_config_error(tmp_path: Path) -> None:
    cfg_file: Path = _write(tmp_path / "keystring.toml", "[generator\ntarget = \n")
    with pytest.raises(ConfigurationError, match="Invalid TOML"):
        MutableConfig.from_toml_file(cfg_file)


def test_discovery_orders_root_most_first(tmp_path: Path) -> None:
    top: Path = _write(tmp_path / "keystring.toml", "root = true\n")
    mid_py: Path = _write(
        tmp_path / "a" / "pyproject.toml", '[tool.keystring.generator]\ntarget = "python"\n'
    )
    mid_ks: Path = _write(tmp_path / "a" / "keystring.toml", '[generator]\nseparator = ":"\n')
    start: Path = tmp_path / "a" / "b"
    start.mkdir()

    found: list[Path] = MutableConfig.discover_local_config_files(start)

    assert found == [top.resolve(), mid_py.resolve(), mid_ks.resolve()]


def test_discovery_stops_at_root_true(tmp_path: Path) -> None:
    _write(tmp_path / "keystring.toml", '[generator]\ntarget = "python"\n')
    inner: Path = _write(tmp_path / "inner" / "keystring.toml", "root = true\n")

    found: list[Path] = MutableConfig.discover_local_config_files(tmp_path / "inner")

    assert found == [inner.resolve()]


def test_discovery_skips_pyproject_without_section(tmp_path: Path) -> None:
    _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    ks: Path = _write(tmp_path / "keystring.toml", "root = true\n")
    assert MutableConfig.discover_local_config_files(tmp_path) == [ks.resolve()]


def test_load_merged_applies_nearest_last(tmp_path: Path) -> None:
    _write(
        tmp_path / "keystring.toml",
        'root = true\n[generator]\ntarget = "python"\nseparator = ":"\n',
    )
    _write(tmp_path / "sub" / "keystring.toml", '[generator]\nseparator = "/"\n')

    cfg: Config = MutableConfig.load_merged(start=tmp_path / "sub").freeze()

    assert cfg.target == "python"
    assert cfg.separator == "/"
    assert len(cfg.config_files) == 2


def test_load_merged_resolves_paths_against_config_dir(tmp_path: Path) -> None:
    _write(
        tmp_path / "keystring.toml",
        'root = true\n[input]\nfile = "keys/input.keys"\n[output]\ndir = "gen"\n',
    )
    cfg: Config = MutableConfig.load_merged(start=tmp_path).freeze()
    assert cfg.input_file == tmp_path.resolve() / "keys" / "input.keys"
    assert cfg.output_dir == tmp_path.resolve() / "gen"


def test_no_config_skips_discovery_but_keeps_explicit_files(tmp_path: Path) -> None:
    _write(tmp_path / "keystring.toml", 'root = true\n[generator]\ntarget = "python"\n')
    extra: Path = _write(tmp_path / "extra" / "custom.toml", '[generator]\nseparator = "::"\n')

    cfg: Config = MutableConfig.load_merged(
        start=tmp_path, extra_config_files=[extra], no_config=True
    ).freeze()

    assert cfg.target == "rust"
    assert cfg.separator == "::"
    assert cfg.config_files == (extra,)


def test_missing_explicit_config_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        MutableConfig.load_merged(
            start=tmp_path, extra_config_files=[tmp_path / "nope.toml"], no_config=True
        )
