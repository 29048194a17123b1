# topmark:header:start
#
#   project      : StyleMark
#   file         : engine.py
#   file_relpath : src/stylemark/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the checking pipeline for one file and for a whole run.

Per file, the pipeline is strictly sequential:

    read bytes -> scan -> parse -> evaluate rules -> FileReport

Files are independent. `run_files` checks them sequentially, or on a
``ThreadPoolExecutor`` when more than one job is requested or a timeout is set.
Each worker owns its `SourceFile`, `BlockTree` and diagnostics; the only shared
object is the frozen `RuleConfig`.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from stylemark.config.logging import get_logger
from stylemark.core.errors import EncodingError
from stylemark.core.exit_codes import ExitCode
from stylemark.diagnostic.model import DiagnosticLog, compute_diagnostic_stats
from stylemark.parser.blocks import parse
from stylemark.rules.base import RuleContext
from stylemark.rules.registry import RULE_ORDER, RULES
from stylemark.source.model import load_source_file

if TYPE_CHECKING:
    from collections.abc import Sequence
    from concurrent.futures import Future

    from stylemark.config.logging import StylemarkLogger
    from stylemark.config.model import RuleConfig
    from stylemark.diagnostic.model import Diagnostic, DiagnosticStats
    from stylemark.parser.blocks import BlockTree
    from stylemark.source.model import SourceFile

logger: StylemarkLogger = get_logger(__name__)


class SkipReason(Enum):
    """Why a file produced no diagnostics."""

    UNREADABLE = "unreadable"
    NOT_TEXT = "not text"
    TIMEOUT = "timeout"

    @property
    def is_failure(self) -> bool:
        """Return True if this skip makes the run fail with an I/O exit status.

        Files abandoned at the run timeout are reported but do not override the
        status of the files that completed.
        """
        return self is SkipReason.UNREADABLE


@dataclass(frozen=True)
class FileReport:
    """Outcome of checking one file.

    Attributes:
        path (str): Display path of the file.
        diagnostics (tuple[Diagnostic, ...]): Sorted diagnostics, each carrying ``path``.
        skip_reason (SkipReason | None): Set when the file was not checked.
        detail (str): Human-readable detail for a skipped file.
    """

    path: str
    diagnostics: tuple[Diagnostic, ...] = ()
    skip_reason: SkipReason | None = None
    detail: str = ""

    @property
    def is_skipped(self) -> bool:
        """Return True if the file was not checked."""
        return self.skip_reason is not None

    @property
    def has_error(self) -> bool:
        """Return True if any diagnostic has error severity."""
        return any(d.is_error for d in self.diagnostics)

    def to_skipped_dict(self) -> dict[str, str]:
        """Return a JSON-friendly description of a skipped file."""
        return {
            "file": self.path,
            "reason": self.skip_reason.value if self.skip_reason else "",
            "detail": self.detail,
        }


@dataclass(frozen=True)
class RunResult:
    """Outcome of a whole run, in input order."""

    reports: tuple[FileReport, ...]

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Return all diagnostics, file by file."""
        return tuple(d for r in self.reports for d in r.diagnostics)

    @property
    def skipped(self) -> tuple[FileReport, ...]:
        """Return the reports of files that were not checked."""
        return tuple(r for r in self.reports if r.is_skipped)

    @property
    def checked_count(self) -> int:
        """Return the number of files that were actually checked."""
        return sum(1 for r in self.reports if not r.is_skipped)

    def stats(self) -> DiagnosticStats:
        """Return per-severity counts over all files."""
        return compute_diagnostic_stats(self.diagnostics)

    @property
    def exit_code(self) -> ExitCode:
        """Return the process exit status for this run.

        An unreadable file takes precedence over error diagnostics found in
        other files. Files skipped as not text or at the timeout do not change
        the status.
        """
        if any(r.skip_reason is not None and r.skip_reason.is_failure for r in self.reports):
            return ExitCode.INVOCATION_ERROR
        if any(r.has_error for r in self.reports):
            return ExitCode.FAILURE
        return ExitCode.SUCCESS


def evaluate(source: SourceFile, tree: BlockTree, config: RuleConfig) -> list[Diagnostic]:
    """Run every registered rule over one parsed file.

    Rules run in registration order and never see each other's output.

    Args:
        source: The scanned file.
        tree: Its structural parse.
        config: The frozen configuration.

    Returns:
        list[Diagnostic]: Diagnostics sorted by line, then rule registration
        order, then column.
    """
    ctx = RuleContext(source=source, tree=tree, config=config)
    log = DiagnosticLog()
    for rule in RULES:
        log.extend(rule(ctx))

    line_count: int = len(source.lines)
    for diagnostic in log:
        if not 1 <= diagnostic.line <= line_count:
            raise RuntimeError(
                f"{diagnostic.rule_id} reported line {diagnostic.line} of a "
                f"{line_count}-line file"
            )

    return sorted(log, key=lambda d: (d.line, RULE_ORDER[d.rule_id], d.column))


def check_source(source: SourceFile, config: RuleConfig) -> FileReport:
    """Parse and evaluate an already loaded file."""
    tree: BlockTree = parse(source.lines)
    diagnostics: list[Diagnostic] = evaluate(source, tree, config)
    logger.info("%s: %d diagnostic(s)", source.path, len(diagnostics))
    return FileReport(
        path=source.path,
        diagnostics=tuple(d.with_path(source.path) for d in diagnostics),
    )


def check_file(path: Path, config: RuleConfig) -> FileReport:
    """Load and check one file.

    Read failures and undecodable content do not raise; they produce a skipped
    report instead.

    Args:
        path: File to check.
        config: The frozen configuration.

    Returns:
        FileReport: Diagnostics, or the reason the file was skipped.
    """
    display: str = str(path)
    try:
        source: SourceFile = load_source_file(path, display_path=display)
    except EncodingError as e:
        logger.info("Skipping %s: %s", display, e.reason)
        return FileReport(path=display, skip_reason=SkipReason.NOT_TEXT, detail=e.reason)
    except OSError as e:
        logger.error("Cannot read %s: %s", display, e)
        return FileReport(
            path=display, skip_reason=SkipReason.UNREADABLE, detail=e.strerror or str(e)
        )
    return check_source(source, config)


def run_files(
    files: Sequence[Path],
    config: RuleConfig,
    *,
    jobs: int = 1,
    timeout: float | None = None,
) -> RunResult:
    """Check several files, optionally in parallel and within a time limit.

    Args:
        files: Files to check.
        config: The frozen configuration, shared read-only by all workers.
        jobs: Maximum number of worker threads.
        timeout: Whole-run limit in seconds. Files not finished in time are
            reported as skipped with `SkipReason.TIMEOUT`.

    Returns:
        RunResult: One report per input file, in input order.
    """
    if jobs <= 1 and timeout is None:
        return RunResult(tuple(check_file(Path(p), config) for p in files))

    results: dict[int, FileReport] = {}
    pool = ThreadPoolExecutor(max_workers=max(1, jobs), thread_name_prefix="stylemark")
    try:
        futures: dict[Future[FileReport], int] = {
            pool.submit(check_file, Path(p), config): i for i, p in enumerate(files)
        }
        done, not_done = wait(futures, timeout=timeout)
        for fut in done:
            results[futures[fut]] = fut.result()
        if not_done:
            logger.warning(
                "Timeout after %ss: %d file(s) not checked", timeout, len(not_done)
            )
    finally:
        # Workers already running finish in the background; queued ones are dropped.
        pool.shutdown(wait=False, cancel_futures=True)

    reports: list[FileReport] = []
    for i, p in enumerate(files):
        report: FileReport | None = results.get(i)
        if report is None:
            report = FileReport(
                path=str(p),
                skip_reason=SkipReason.TIMEOUT,
                detail=f"not checked within {timeout}s",
            )
        reports.append(report)
    return RunResult(tuple(reports))
