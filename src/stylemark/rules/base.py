# topmark:header:start
#
#   project      : StyleMark
#   file         : base.py
#   file_relpath : src/stylemark/rules/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for style rules.

The engine invokes rules as *callables*. `BaseRule` implements the common
lifecycle:

    diagnostics = rule(ctx)  # internally: is_enabled -> check

Rules are independent of each other: a rule only reads the `RuleContext`
(source lines, block tree and configuration) and never sees the output of
other rules. Rules hold no state, so one instance is shared by all workers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from stylemark.config.logging import get_logger
from stylemark.diagnostic.model import Diagnostic

if TYPE_CHECKING:
    from collections.abc import Iterator

    from stylemark.config.logging import StylemarkLogger
    from stylemark.config.model import RuleConfig
    from stylemark.diagnostic.model import Severity
    from stylemark.parser.blocks import BlockTree
    from stylemark.rules.ids import RuleId
    from stylemark.source.model import SourceFile

logger: StylemarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class RuleContext:
    """Read-only inputs shared by all rules for one file.

    Attributes:
        source (SourceFile): The scanned file.
        tree (BlockTree): The structural parse of the file.
        config (RuleConfig): The frozen run configuration.
    """

    source: SourceFile
    tree: BlockTree
    config: RuleConfig

    def code(self, index: int) -> str:
        """Return line ``index`` with comments and literals masked out."""
        return self.tree.code(index)


class BaseRule:
    """Reusable foundation for style rules.

    Subclasses set the class attributes and override `check()`; rules that only
    apply under some configuration also override `is_enabled()`.

    Attributes:
        rule_id (RuleId): Stable identifier, shown in reports.
        severity (Severity): Severity of every diagnostic the rule emits.
        summary (str): One-line description for ``--list-rules``.
    """

    rule_id: ClassVar[RuleId]
    severity: ClassVar[Severity]
    summary: ClassVar[str]

    def is_enabled(self, config: RuleConfig) -> bool:
        """Return True if the rule runs under ``config``."""
        return config.is_rule_enabled(self.rule_id.value)

    def check(self, ctx: RuleContext) -> Iterator[Diagnostic]:
        """Yield the diagnostics for one file."""
        raise NotImplementedError

    def report(self, line: int, column: int, message: str) -> Diagnostic:
        """Build a diagnostic attributed to this rule."""
        return Diagnostic(
            rule_id=self.rule_id.value,
            severity=self.severity,
            line=line,
            column=column,
            message=message,
        )

    def __call__(self, ctx: RuleContext) -> list[Diagnostic]:
        """Run the rule lifecycle: gate, then check.

        Args:
            ctx (RuleContext): Inputs for the current file.

        Returns:
            list[Diagnostic]: Diagnostics in the order the rule found them; empty
            when the rule is disabled.
        """
        if not self.is_enabled(ctx.config):
            logger.trace("Rule %s disabled", self.rule_id.value)
            return []
        found: list[Diagnostic] = list(self.check(ctx))
        logger.trace(
            "Rule %s: %d finding(s) in %s", self.rule_id.value, len(found), ctx.source.path
        )
        return found

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rule_id.value})"
