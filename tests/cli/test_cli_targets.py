# topmark:header:start
#
#   project      : Keystring
#   file         : test_cli_targets.py
#   file_relpath : tests/cli/test_cli_targets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `keystring targets`."""

from __future__ import annotations

import pytest
from click.testing import Result

from tests.cli.conftest import assert_SUCCESS, run_cli

pytestmark = pytest.mark.cli


def test_targets_lists_registered_emitters() -> None:
    result: Result = run_cli(["--no-color", "targets"])

    assert_SUCCESS(result)
    assert "rust" in result.output
    assert "python" in result.output


def test_targets_verbose_shows_header_and_file_names() -> None:
    result: Result = run_cli(["--no-color", "-v", "targets"])

    assert_SUCCESS(result)
    assert "Supported targets:" in result.output
    assert "constants.rs" in result.output
    assert "constants.py" in result.output
