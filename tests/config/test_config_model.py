# topmark:header:start
#
#   project      : Keystring
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the Config / MutableConfig model: defaults, merging, freezing."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from keystring.config import Config, MutableConfig
from keystring.config.io import load_defaults_dict, to_toml
from keystring.core.errors import ConfigurationError


def test_defaults_freeze_to_documented_values() -> None:
    cfg: Config = MutableConfig.from_defaults().freeze()
    assert cfg.target == "rust"
    assert cfg.separator == "."
    assert cfg.enable_warnings is False
    assert cfg.output_dir == Path("generated/keygen")
    assert cfg.output_name is None
    assert cfg.input_file is None
    assert cfg.config_files == ()


def test_empty_builder_freezes_to_defaults() -> None:
    assert MutableConfig().freeze() == MutableConfig.from_defaults().freeze()


def test_config_is_immutable() -> None:
    cfg: Config = MutableConfig.from_defaults().freeze()
    with pytest.raises(FrozenInstanceError):
        cfg.target = "python"  # type: ignore[misc]


def test_thaw_freeze_roundtrip_preserves_values() -> None:
    cfg: Config = MutableConfig(target="python", separator="/", enable_warnings=True).freeze()
    assert cfg.thaw().freeze() == cfg


def test_from_toml_dict_reads_all_sections(tmp_path: Path) -> None:
    cfg_file: Path = tmp_path / "keystring.toml"
    draft: MutableConfig = MutableConfig.from_toml_dict(
        {
            "input": {"file": "keys/input.keys"},
            "output": {"dir": "out", "name": "k.rs"},
            "generator": {"target": "python", "separator": ":", "enable_warnings": True},
        },
        config_file=cfg_file,
    )
    base: Path = tmp_path.resolve()
    assert draft.input_file == base / "keys" / "input.keys"
    assert draft.output_dir == base / "out"
    assert draft.output_name == "k.rs"
    assert draft.target == "python"
    assert draft.separator == ":"
    assert draft.enable_warnings is True
    assert draft.config_files == [cfg_file]


def test_from_toml_dict_keeps_absolute_paths(tmp_path: Path) -> None:
    absolute: Path = (tmp_path / "abs").resolve()
    draft = MutableConfig.from_toml_dict(
        {"output": {"dir": str(absolute)}}, config_file=tmp_path / "x" / "keystring.toml"
    )
    assert draft.output_dir == absolute


def test_from_toml_dict_without_file_keeps_relative_paths() -> None:
    draft = MutableConfig.from_toml_dict({"output": {"dir": "rel"}})
    assert draft.output_dir == Path("rel")


@pytest.mark.parametrize(
    "data",
    [
        {"generator": {"target": 3}},
        {"generator": {"enable_warnings": "yes"}},
        {"output": "not-a-table"},
        {"input": {"file": ["a", "b"]}},
    ],
)
def test_wrongly_typed_values_are_config_errors(data: dict[str, object]) -> None:
    with pytest.raises(ConfigurationError):
        MutableConfig.from_toml_dict(data)


def test_integer_enable_warnings_is_coerced() -> None:
    assert MutableConfig.from_toml_dict({"generator": {"enable_warnings": 1}}).enable_warnings


def test_merge_with_prefers_values_set_in_other() -> None:
    base = MutableConfig(target="python", separator=":", enable_warnings=True)
    other = MutableConfig(separator="/", enable_warnings=False)

    merged: MutableConfig = base.merge_with(other)

    assert merged.target == "python"
    assert merged.separator == "/"
    assert merged.enable_warnings is False


def test_apply_overrides_ignores_none_values() -> None:
    draft = MutableConfig(target="python", separator=":")
    draft.apply_overrides({"target": None, "separator": "/", "output_dir": "gen"})
    assert draft.target == "python"
    assert draft.separator == "/"
    assert draft.output_dir == Path("gen")


def test_empty_separator_fails_on_freeze() -> None:
    with pytest.raises(ConfigurationError):
        MutableConfig(separator="").freeze()


def test_empty_output_name_means_target_default() -> None:
    cfg: Config = MutableConfig.from_toml_dict({"output": {"name": ""}}).freeze()
    assert cfg.output_name is None


def test_to_toml_dict_matches_defaults_shape() -> None:
    exported = MutableConfig.from_defaults().freeze().to_toml_dict()
    defaults = load_defaults_dict()
    assert exported["output"] == defaults["output"]
    assert exported["generator"] == defaults["generator"]
    assert exported["input"] == {"file": None}


def test_to_toml_renders_without_none_values() -> None:
    text: str = to_toml(MutableConfig.from_defaults().freeze().to_toml_dict())
    assert "[generator]" in text
    assert 'target = "rust"' in text
    assert "file" not in text
