# topmark:header:start
#
#   project      : StyleMark
#   file         : model.py
#   file_relpath : src/stylemark/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for StyleMark.

Sections:
    * Severity: severity levels with associated terminal colors.
    * Diagnostic: immutable rule violation (rule id, severity, location, message).
    * DiagnosticStats: aggregated per-severity counts.
    * DiagnosticLog: mutable per-file collection with helpers for adding and
      summarizing diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from stylemark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from stylemark.config.logging import StylemarkLogger


logger: StylemarkLogger = get_logger(__name__)


class Severity(Enum):
    """Severity of a diagnostic.

    Warnings are advisory; errors are must-fix and make the run fail.
    """

    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity.

        Intended for human-readable output only; machine formats never use colors.

        Returns:
            Callable[[str], str]: The `yachalk` color function for this severity.
        """
        return cast(
            "Callable[[str], str]",
            {
                Severity.WARNING: chalk.yellow,
                Severity.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """A single reported rule violation.

    Attributes:
        rule_id (str): Identifier of the rule that produced this diagnostic.
        severity (Severity): Severity of the violation.
        line (int): 1-based line number; always refers to an existing line.
        column (int): 1-based column number.
        message (str): Human-readable description of the violation.
        path (str | None): Display path of the file, attached by the engine.
    """

    rule_id: str
    severity: Severity
    line: int
    column: int
    message: str
    path: str | None = None

    @property
    def is_error(self) -> bool:
        """Return True if this diagnostic has ``error`` severity."""
        return self.severity is Severity.ERROR

    def with_path(self, path: str) -> Diagnostic:
        """Return a copy of this diagnostic attributed to ``path``."""
        return replace(self, path=path)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping for machine output."""
        return {
            "file": self.path,
            "line": self.line,
            "column": self.column,
            "severity": self.severity.value,
            "rule": self.rule_id,
            "message": self.message,
        }


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity."""

    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_warning + self.n_error


@dataclass
class DiagnosticLog:
    """Mutable, per-file collection of diagnostics.

    Diagnostics are kept in insertion order; sorting is the engine's job.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def add(self, diagnostic: Diagnostic) -> None:
        """Append a diagnostic to the log.

        Args:
            diagnostic: The diagnostic object.
        """
        self.items.append(diagnostic)
        logger.trace(
            "Adding [%s] %s at %d:%d: %r",
            diagnostic.severity.value,
            diagnostic.rule_id,
            diagnostic.line,
            diagnostic.column,
            diagnostic.message,
        )

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append several diagnostics to the log."""
        for diagnostic in diagnostics:
            self.add(diagnostic)

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over all diagnostics in insertion order."""
        return iter(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-severity counts for a sequence of diagnostics.

    Args:
        diagnostics: the diagnostics to count.

    Returns:
        Per-severity counts.
    """
    n_warn: int = 0
    n_err: int = 0
    for d in diagnostics:
        if d.is_error:
            n_err += 1
        else:
            n_warn += 1
    return DiagnosticStats(n_warning=n_warn, n_error=n_err)


def diagnostics_counts_to_dict(diagnostics: Iterable[Diagnostic]) -> dict[str, int]:
    """Return a JSON-friendly mapping of counts by severity for any iterable."""
    stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
    return {
        "warning": stats.n_warning,
        "error": stats.n_error,
    }
