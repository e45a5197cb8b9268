# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""CLI test helpers for running CanonRepr in a controlled working directory.

`run_cli_in()` changes the process working directory to the given
``tmp_path`` before invoking the Click CLI, so that config discovery and
relative input paths resolve against the temporary test directory.
"""

from __future__ import annotations

import logging
import os
from typing import IO, TYPE_CHECKING, Any, Sequence

import pytest
from click.testing import CliRunner, Result

from canonrepr.cli.exit_codes import ExitCode
from canonrepr.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Undo the logging setup performed by each CLI invocation."""
    root: logging.Logger = logging.getLogger()
    level: int = root.level
    handlers: list[logging.Handler] = root.handlers[:]
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for the
            command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. `["render", "data.json"]`.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass to the command.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["render", "data.json"])
        assert res.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on files or config in
    the working directory (e.g. ``--help`` / ``version``).

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass
            to the command.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_ENCODING_ERROR(result: Result) -> None:
    """Assert that the command exited with ENCODING_ERROR (code 65)."""
    assert result.exit_code == ExitCode.ENCODING_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
