# topmark:header:start
#
#   project      : StyleMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers.

`run_cli()` invokes the Click command in-process. Program output (diagnostics,
summary, JSON) is on ``result.stdout``; skipped-file notices, fatal errors and
log records are on ``result.stderr``. Tests that rely on relative paths or on
configuration discovery should use the `isolation` fixture so that the working
directory is a fresh temporary project.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from stylemark.cli.main import cli
from stylemark.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``argv`` and return the Click test result.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["--format", "json", "src"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv))


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited with SUCCESS (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1): errors were found."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_INVOCATION_ERROR(result: Result) -> None:
    """Assert that the command exited with INVOCATION_ERROR (code 2)."""
    assert result.exit_code == ExitCode.INVOCATION_ERROR, result.output
