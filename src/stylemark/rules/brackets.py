# topmark:header:start
#
#   project      : StyleMark
#   file         : brackets.py
#   file_relpath : src/stylemark/rules/brackets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layout of multi-line record and list literals.

A multi-line literal opens with its bracket as the first code on the line, and
closes with the matching bracket first on its own line, aligned with the
indentation of the opening line::

    { name = "x"
    , age = 3
    }

Single-line literals are not checked.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from stylemark.diagnostic.model import Severity
from stylemark.parser.blocks import BlockKind
from stylemark.rules.base import BaseRule
from stylemark.rules.ids import RuleId

if TYPE_CHECKING:
    from collections.abc import Iterator

    from stylemark.diagnostic.model import Diagnostic
    from stylemark.parser.blocks import Block
    from stylemark.rules.base import RuleContext


class _BracketStyleRule(BaseRule):
    kind: ClassVar[BlockKind]
    noun: ClassVar[str]
    opener: ClassVar[str]
    closer: ClassVar[str]

    def check(self, ctx: RuleContext) -> Iterator[Diagnostic]:
        for block in ctx.tree.iter_blocks(self.kind):
            if block.is_multiline:
                yield from self._check_block(ctx, block)

    def _check_block(self, ctx: RuleContext, block: Block) -> Iterator[Diagnostic]:
        if ctx.code(block.start_line)[: block.column - 1].strip():
            yield self.report(
                block.start_line,
                block.column,
                f"Multi-line {self.noun}: `{self.opener}` should start its line",
            )
        if not block.terminated or block.close_column is None:
            return
        close_code: str = ctx.code(block.end_line)
        if close_code[: block.close_column - 1].strip():
            yield self.report(
                block.end_line,
                block.close_column,
                f"Multi-line {self.noun}: `{self.closer}` should be on its own line",
            )
        elif block.close_column != block.header_indent + 1:
            yield self.report(
                block.end_line,
                block.close_column,
                f"Multi-line {self.noun}: `{self.closer}` should be aligned with column "
                f"{block.header_indent + 1}",
            )


class RecordBraceStyle(_BracketStyleRule):
    rule_id = RuleId.RECORD_BRACE_STYLE
    severity = Severity.WARNING
    summary = "Multi-line record braces are not laid out one per line and aligned"

    kind = BlockKind.RECORD
    noun = "record"
    opener = "{"
    closer = "}"


class ListBracketStyle(_BracketStyleRule):
    rule_id = RuleId.LIST_BRACKET_STYLE
    severity = Severity.WARNING
    summary = "Multi-line list brackets are not laid out one per line and aligned"

    kind = BlockKind.LIST
    noun = "list"
    opener = "["
    closer = "]"
