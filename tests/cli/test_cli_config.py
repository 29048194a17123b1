# topmark:header:start
#
#   project      : StyleMark
#   file         : test_cli_config.py
#   file_relpath : tests/cli/test_cli_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI configuration: discovery, explicit files, overrides and ``--show-config``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

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

LONG_LINE: str = "a" * 81 + "\n"


@mark_cli
def test_discovered_config_is_applied(isolation: Path) -> None:
    write_source(isolation, "stylemark.toml", "[rules]\nmax_line_length = 100\n")
    write_source(isolation, "Long.elm", LONG_LINE)

    result: Result = run_cli(["Long.elm"])

    assert_SUCCESS(result)
    assert "LineTooLong" not in result.stdout


@mark_cli
def test_pyproject_tool_section_is_applied(isolation: Path) -> None:
    write_source(
        isolation,
        "pyproject.toml",
        '[tool.stylemark.rules]\ndisable = ["LineTooLong"]\n',
    )
    write_source(isolation, "Long.elm", LONG_LINE)

    result: Result = run_cli(["Long.elm"])

    assert_SUCCESS(result)
    assert "LineTooLong" not in result.stdout


@mark_cli
def test_no_config_ignores_discovered_file(isolation: Path) -> None:
    write_source(isolation, "stylemark.toml", "[rules]\nmax_line_length = 100\n")
    write_source(isolation, "Long.elm", LONG_LINE)

    result: Result = run_cli(["--no-config", "Long.elm"])

    assert "[LineTooLong]" in result.stdout


@mark_cli
def test_explicit_config_file(isolation: Path) -> None:
    write_source(isolation, "ci/strict.toml", "[rules]\nmax_line_length = 40\n")
    write_source(isolation, "Medium.elm", "a" * 50 + "\n")

    result: Result = run_cli(["--config", "ci/strict.toml", "Medium.elm"])

    assert "Line is 50 characters long (maximum is 40)" in result.stdout


@mark_cli
def test_cli_flags_override_config(isolation: Path) -> None:
    write_source(isolation, "stylemark.toml", "[rules]\nmax_line_length = 100\n")
    write_source(isolation, "Long.elm", LONG_LINE)

    result: Result = run_cli(["--max-line-length", "60", "Long.elm"])

    assert "(maximum is 60)" in result.stdout


@mark_cli
def test_disable_flag_accepts_lists(isolation: Path) -> None:
    write_source(isolation, "Bad.elm", "main =\n\t1   \n")

    result: Result = run_cli(
        [
            "--disable",
            "TrailingWhitespace,LineTooLong",
            "--disable",
            "TabIndentation",
            "Bad.elm",
        ]
    )

    assert_SUCCESS(result)
    assert result.stdout == "Checked 1 file: 0 errors, 0 warnings\n"


@mark_cli
def test_disable_unknown_rule(isolation: Path) -> None:
    result: Result = run_cli(["--disable", "NoSuchRule", "."])

    assert_INVOCATION_ERROR(result)
    assert "NoSuchRule" in result.stderr


@mark_cli
def test_invalid_config_file_fails_before_checking(isolation: Path) -> None:
    write_source(isolation, "stylemark.toml", "[rules]\nindent_width = 0\n")
    write_source(isolation, "Main.elm", "main =\n\t1\n")

    result: Result = run_cli(["Main.elm"])

    assert_INVOCATION_ERROR(result)
    assert "indent_width" in result.stderr
    assert result.stdout == ""


@mark_cli
def test_malformed_config_file(isolation: Path) -> None:
    write_source(isolation, "stylemark.toml", "[rules\n")

    result: Result = run_cli(["."])

    assert_INVOCATION_ERROR(result)
    assert "malformed TOML" in result.stderr


@mark_cli
def test_indent_width_flag(isolation: Path) -> None:
    write_source(isolation, "Two.elm", "main =\n  1\n")

    assert_FAILURE(run_cli(["Two.elm"]))
    assert_SUCCESS(run_cli(["--indent-width", "2", "Two.elm"]))
    assert_INVOCATION_ERROR(run_cli(["--indent-width", "9", "Two.elm"]))


@mark_cli
def test_show_config(isolation: Path) -> None:
    write_source(isolation, "stylemark.toml", "[rules]\nindent_width = 2\n")

    result: Result = run_cli(["--show-config", "--exclude", "gen/"])

    assert_SUCCESS(result)
    assert result.stdout.startswith("# Sources: ")
    data: Any = tomlkit.parse(result.stdout).unwrap()
    assert data["rules"]["indent_width"] == 2
    assert data["rules"]["max_line_length"] == 80
    assert data["files"] == {"include": ["*.elm"], "exclude": ["gen/"]}


@mark_cli
def test_include_exclude_flags(isolation: Path) -> None:
    write_source(isolation, "src/A.elm", "main =\n\t1\n")
    write_source(isolation, "src/gen/B.elm", "main =\n\t1\n")

    result: Result = run_cli(["--exclude", "gen/", "src"])

    assert "Checked 1 file: 1 error" in result.stdout
