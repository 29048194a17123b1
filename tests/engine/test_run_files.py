# topmark:header:start
#
#   project      : StyleMark
#   file         : test_run_files.py
#   file_relpath : tests/engine/test_run_files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for whole-run execution: parallel workers and the run timeout."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

import pytest

import stylemark.engine as engine_mod
from stylemark.core.exit_codes import ExitCode
from stylemark.engine import FileReport, RunResult, SkipReason, run_files
from tests.conftest import make_config, mark_integration, write_source

if TYPE_CHECKING:
    from pathlib import Path

    from stylemark.config.model import RuleConfig


def _make_tree(root: Path, count: int) -> list[Path]:
    files: list[Path] = []
    for i in range(count):
        # Every third file has a tab-indented (error) line.
        body: str = "\t1" if i % 3 == 0 else "    1"
        text: str = f"m{i} =\n{body}\n" + "x" * (80 + i) + "\n"
        files.append(write_source(root, f"M{i:02d}.elm", text))
    return files


@mark_integration
def test_parallel_run_matches_sequential_run(tmp_path: Path) -> None:
    files: list[Path] = _make_tree(tmp_path, 12)
    config: RuleConfig = make_config()

    sequential: RunResult = run_files(files, config)
    parallel: RunResult = run_files(files, config, jobs=4)

    assert parallel == sequential
    assert [r.path for r in parallel.reports] == [str(f) for f in files]
    assert parallel.exit_code is ExitCode.FAILURE


def test_unreadable_file_does_not_stop_the_run(tmp_path: Path) -> None:
    good: Path = write_source(tmp_path, "Good.elm", "main =\n    1\n")
    missing: Path = tmp_path / "Missing.elm"

    result: RunResult = run_files([missing, good], make_config(), jobs=2)

    assert [r.skip_reason for r in result.reports] == [SkipReason.UNREADABLE, None]
    assert result.checked_count == 1
    assert result.exit_code is ExitCode.INVOCATION_ERROR


def test_timeout_reports_unfinished_files(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    release = threading.Event()

    def slow_check_file(path: Path, config: RuleConfig) -> FileReport:
        release.wait(5)
        return FileReport(path=str(path))

    monkeypatch.setattr(engine_mod, "check_file", slow_check_file)
    files: list[Path] = [tmp_path / "a.elm", tmp_path / "b.elm"]
    try:
        result: RunResult = run_files(files, make_config(), jobs=2, timeout=0.05)
    finally:
        release.set()

    assert [r.skip_reason for r in result.reports] == [SkipReason.TIMEOUT, SkipReason.TIMEOUT]
    assert result.reports[0].detail == "not checked within 0.05s"
    # Abandoned files are listed, but only completed files decide the status.
    assert result.exit_code is ExitCode.SUCCESS


def test_generous_timeout_checks_everything(tmp_path: Path) -> None:
    files: list[Path] = _make_tree(tmp_path, 3)

    result: RunResult = run_files(files, make_config(), timeout=30)

    assert result.skipped == ()
    assert result.checked_count == 3


def test_no_files() -> None:
    result: RunResult = run_files([], make_config(), jobs=3)

    assert result.reports == ()
    assert result.exit_code is ExitCode.SUCCESS
