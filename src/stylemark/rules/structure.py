# topmark:header:start
#
#   project      : StyleMark
#   file         : structure.py
#   file_relpath : src/stylemark/rules/structure.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report constructs the structural parser could not close."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stylemark.diagnostic.model import Severity
from stylemark.rules.base import BaseRule
from stylemark.rules.ids import RuleId

if TYPE_CHECKING:
    from collections.abc import Iterator

    from stylemark.diagnostic.model import Diagnostic
    from stylemark.rules.base import RuleContext


class UnterminatedBlock(BaseRule):
    rule_id = RuleId.UNTERMINATED_BLOCK
    severity = Severity.WARNING
    summary = "Opening keyword or bracket without its closer"

    def check(self, ctx: RuleContext) -> Iterator[Diagnostic]:
        for record in ctx.tree.unterminated:
            yield self.report(
                record.line,
                record.column,
                f"Unterminated `{record.opener}`: expected {record.expected}",
            )
