# topmark:header:start
#
#   project      : StyleMark
#   file         : test_cli_exit_codes.py
#   file_relpath : tests/cli/test_cli_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI exit codes for clean, warning-only, failing and broken runs.

Warnings never fail a run; an error diagnostic exits 1; invocation,
configuration and I/O problems exit 2.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_FAILURE,
    assert_INVOCATION_ERROR,
    assert_SUCCESS,
    run_cli,
)
from tests.conftest import mark_cli, write_source

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

CASE_WITHOUT_DEFAULT: str = """\
view shape =
    case shape of
        Diamond ->
            1

        PocketLint ->
            2
"""


@mark_cli
def test_clean_file(isolation: Path) -> None:
    write_source(isolation, "Main.elm", "main =\n    1\n")

    result: Result = run_cli(["Main.elm"])

    assert_SUCCESS(result)
    assert result.stdout == "Checked 1 file: 0 errors, 0 warnings\n"


@mark_cli
def test_long_line_is_a_warning_only(isolation: Path) -> None:
    write_source(isolation, "Long.elm", "a" * 81 + "\n")

    result: Result = run_cli(["Long.elm"])

    assert_SUCCESS(result)
    assert result.stdout.splitlines() == [
        "Long.elm:1:81: warning: Line is 81 characters long (maximum is 80) [LineTooLong]",
        "Checked 1 file: 0 errors, 1 warning",
    ]


@mark_cli
def test_case_without_default_fails(isolation: Path) -> None:
    write_source(isolation, "View.elm", CASE_WITHOUT_DEFAULT)

    result: Result = run_cli(["View.elm"])

    assert_FAILURE(result)
    assert "View.elm:2:5: error: " in result.stdout
    assert "[CaseWithoutDefault]" in result.stdout
    assert "1 error, 0 warnings" in result.stdout


@mark_cli
def test_wildcard_import(isolation: Path) -> None:
    write_source(isolation, "Imports.elm", "import Foo exposing (..)\n")

    result: Result = run_cli(["Imports.elm"])

    assert_SUCCESS(result)
    assert "Imports.elm:1:12: warning: " in result.stdout
    assert "[WildcardImportUsed]" in result.stdout


@mark_cli
def test_empty_file(isolation: Path) -> None:
    write_source(isolation, "Empty.elm", "")

    result: Result = run_cli(["Empty.elm"])

    assert_SUCCESS(result)
    assert result.stdout == "Checked 1 file: 0 errors, 0 warnings\n"


@mark_cli
def test_missing_path_is_an_io_failure(isolation: Path) -> None:
    write_source(isolation, "View.elm", CASE_WITHOUT_DEFAULT)

    result: Result = run_cli(["View.elm", "Missing.elm"])

    # I/O failures take precedence over error diagnostics.
    assert_INVOCATION_ERROR(result)
    assert "[CaseWithoutDefault]" in result.stdout
    assert "Missing.elm: skipped (unreadable)" in result.stderr


@mark_cli
def test_binary_file_is_skipped_without_failing(isolation: Path) -> None:
    (isolation / "Blob.elm").write_bytes(b"\x00\x01")

    result: Result = run_cli(["Blob.elm"])

    assert_SUCCESS(result)
    assert "Blob.elm: skipped (not text)" in result.stderr
    assert result.stdout == "Checked 0 files: 0 errors, 0 warnings (1 skipped)\n"


@mark_cli
def test_no_paths_is_a_usage_error(isolation: Path) -> None:
    result: Result = run_cli([])

    assert_INVOCATION_ERROR(result)
    assert "No PATH given" in result.stderr


@mark_cli
def test_unknown_option_is_a_usage_error() -> None:
    assert_INVOCATION_ERROR(run_cli(["--no-such-flag"]))


@mark_cli
def test_verbose_and_quiet_are_exclusive(isolation: Path) -> None:
    result: Result = run_cli(["-v", "-q", "."])

    assert_INVOCATION_ERROR(result)
    assert "mutually exclusive" in result.stderr


@mark_cli
def test_directory_argument(isolation: Path) -> None:
    write_source(isolation, "src/A.elm", "main =\n    1\n")
    write_source(isolation, "src/B.elm", "main =\n\t1\n")
    write_source(isolation, "src/elm-stuff/C.elm", "main =\n\t1\n")

    result: Result = run_cli(["src"])

    assert_FAILURE(result)
    assert "Checked 2 files: 1 error, 0 warnings" in result.stdout
    assert "elm-stuff" not in result.stdout


@mark_cli
def test_jobs_and_timeout(isolation: Path) -> None:
    for i in range(6):
        write_source(isolation, f"src/M{i}.elm", "main =\n    1\n")

    result: Result = run_cli(["--jobs", "3", "--timeout", "60", "src"])

    assert_SUCCESS(result)
    assert "Checked 6 files" in result.stdout


@mark_cli
def test_invalid_jobs_and_timeout_values(isolation: Path) -> None:
    assert_INVOCATION_ERROR(run_cli(["--jobs", "0", "."]))
    assert_INVOCATION_ERROR(run_cli(["--timeout", "0", "."]))
