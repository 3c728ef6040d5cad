# topmark:header:start
#
#   project      : Keystring
#   file         : test_cli_main.py
#   file_relpath : tests/cli/test_cli_main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: the `keystring` group itself."""

from __future__ import annotations

import click
import pytest
from click.testing import Result

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli

pytestmark = pytest.mark.cli


def test_no_subcommand_prints_hint_and_help() -> None:
    result: Result = run_cli(["--no-color"])

    assert_SUCCESS(result)
    assert "Hint:" in result.output
    assert "generate" in result.output
    assert "check" in result.output


def test_help_lists_commands() -> None:
    result: Result = run_cli(["--help"])

    assert_SUCCESS(result)
    for name in ("generate", "check", "targets", "dump-config", "version"):
        assert name in result.output


def test_unknown_option_is_usage_error() -> None:
    result: Result = run_cli(["generate", "--bogus"])
    assert result.exit_code == click.UsageError.exit_code


def test_verbose_quiet_conflict() -> None:
    assert_USAGE_ERROR(run_cli(["-v", "-q", "version"]))
