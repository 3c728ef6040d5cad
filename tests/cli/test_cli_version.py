# topmark:header:start
#
#   project      : Keystring
#   file         : test_cli_version.py
#   file_relpath : tests/cli/test_cli_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `keystring version`."""

from __future__ import annotations

import pytest
from click.testing import Result

from keystring.constants import KEYSTRING_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli

pytestmark = pytest.mark.cli


def test_version_prints_version() -> None:
    result: Result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == KEYSTRING_VERSION


def test_version_verbose_adds_header() -> None:
    result: Result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert "Keystring version:" in result.output
    assert KEYSTRING_VERSION in result.output
