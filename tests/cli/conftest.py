# topmark:header:start
#
#   project      : Harmonizer
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Harmonizer through Click's test runner."""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from harmonizer.cli.exit_codes import ExitCode
from harmonizer.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input, used
            when the command reads from ``-``.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Configuration discovery looks at the working directory, so tests that
    place a ``harmonizer.toml`` or ``pyproject.toml`` in `tmp_path` use this.

    Args:
        tmp_path (Path): Directory to run from.
        argv (str | Sequence[str] | None): CLI argument vector.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv, input_text=input_text)
    finally:
        os.chdir(cwd)


def assert_exit(result: Result, expected: ExitCode) -> None:
    """Assert that the command exited with `expected`, showing output otherwise.

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
        expected (ExitCode): The expected exit code.
    """
    assert result.exit_code == expected, (result.exit_code, result.output, result.exception)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert_exit(result, ExitCode.SUCCESS)


def assert_COMPOSITION_FAILED(result: Result) -> None:
    """Assert that the command reported build errors (code 1)."""
    assert_exit(result, ExitCode.COMPOSITION_FAILED)
