# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : test_version_and_group.py
#   file_relpath : tests/cli/test_version_and_group.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Tests for the command group options and the ``version`` command."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest

from canonrepr.cli.errors import CanonReprUsageError
from canonrepr.cli.options import resolve_verbosity
from canonrepr.config.logging import ENV_LOG_LEVEL, TRACE_LEVEL
from canonrepr.constants import CANONREPR_VERSION
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from click.testing import Result


@parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (5, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
        (0, 2, logging.CRITICAL),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    assert resolve_verbosity(verbose, quiet) == expected


def test_verbose_and_quiet_are_exclusive() -> None:
    with pytest.raises(CanonReprUsageError):
        resolve_verbosity(1, 1)


@mark_cli
def test_version_text() -> None:
    result: Result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == CANONREPR_VERSION


@mark_cli
def test_version_json() -> None:
    result: Result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": CANONREPR_VERSION}


@mark_cli
def test_group_without_command_prints_hint_and_help() -> None:
    result: Result = run_cli([])
    assert_SUCCESS(result)
    assert "canonrepr render FILE" in result.stdout
    assert "Commands:" in result.stdout


@mark_cli
def test_verbose_and_quiet_flags_together_are_a_usage_error() -> None:
    assert_USAGE_ERROR(run_cli(["-v", "-q", "version"]))


@mark_cli
def test_verbose_logging_goes_to_stderr() -> None:
    result: Result = run_cli(["-vv", "render", "--no-config"], input_text="[true]")
    assert_SUCCESS(result)
    assert result.stdout == "[]bool{true}\n"
    assert "Rendering json document" in result.stderr


@mark_cli
def test_env_log_level_wins_over_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_LOG_LEVEL, "CRITICAL")
    result: Result = run_cli(["-vv", "render", "--no-config"], input_text="1")
    assert_SUCCESS(result)
    assert "Rendering json document" not in result.stderr
