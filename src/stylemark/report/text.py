# topmark:header:start
#
#   project      : StyleMark
#   file         : text.py
#   file_relpath : src/stylemark/report/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable text output.

One line per diagnostic::

    src/Main.elm:12:5: error: `case` expression has no catch-all branch; ... [CaseWithoutDefault]

followed by an optional summary line. Styling uses `yachalk` and is only applied
when the caller enables it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable

    from stylemark.diagnostic.model import Diagnostic, DiagnosticStats
    from stylemark.engine import RunResult


def maybe_colorize(styler: Callable[[str], str], text: str, *, enabled: bool) -> str:
    """Apply ``styler`` to ``text`` when ``enabled``; return ``text`` unchanged otherwise."""
    return styler(text) if enabled else text


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" + ("" if n == 1 else "s")


def format_diagnostic(diagnostic: Diagnostic, *, color: bool = False) -> str:
    """Format one diagnostic as ``file:line:col: severity: message [RuleId]``."""
    location: str = f"{diagnostic.path}:{diagnostic.line}:{diagnostic.column}:"
    severity: str = maybe_colorize(
        diagnostic.severity.color, diagnostic.severity.value, enabled=color
    )
    rule: str = maybe_colorize(chalk.dim, f"[{diagnostic.rule_id}]", enabled=color)
    location = maybe_colorize(chalk.bold, location, enabled=color)
    return f"{location} {severity}: {diagnostic.message} {rule}"


def format_summary(result: RunResult, *, color: bool = False) -> str:
    """Format the one-line run summary."""
    stats: DiagnosticStats = result.stats()
    parts: list[str] = [
        maybe_colorize(
            chalk.red_bright, _plural(stats.n_error, "error"), enabled=color and stats.n_error > 0
        ),
        maybe_colorize(
            chalk.yellow,
            _plural(stats.n_warning, "warning"),
            enabled=color and stats.n_warning > 0,
        ),
    ]
    line: str = f"Checked {_plural(result.checked_count, 'file')}: {', '.join(parts)}"
    if result.skipped:
        line += f" ({len(result.skipped)} skipped)"
    return line


def render_text(result: RunResult, *, color: bool = False, summary: bool = True) -> str:
    """Render a run as text.

    Args:
        result: The run to render.
        color: Apply ANSI styling.
        summary: Append the summary line.

    Returns:
        str: The rendered output, one line per diagnostic, ending with a newline
        (empty when there is nothing to print).
    """
    lines: list[str] = [format_diagnostic(d, color=color) for d in result.diagnostics]
    if summary:
        lines.append(format_summary(result, color=color))
    return "\n".join(lines) + "\n" if lines else ""
