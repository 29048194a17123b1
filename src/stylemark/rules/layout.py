# topmark:header:start
#
#   project      : StyleMark
#   file         : layout.py
#   file_relpath : src/stylemark/rules/layout.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-level layout rules: length, whitespace, final newline and tabs.

These rules only look at the `Line` records; they do not need the block tree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stylemark.diagnostic.model import Severity
from stylemark.rules.base import BaseRule
from stylemark.rules.ids import RuleId

if TYPE_CHECKING:
    from collections.abc import Iterator

    from stylemark.config.model import RuleConfig
    from stylemark.diagnostic.model import Diagnostic
    from stylemark.rules.base import RuleContext


class LineTooLong(BaseRule):
    """Lines longer than ``max_line_length`` characters."""

    rule_id = RuleId.LINE_TOO_LONG
    severity = Severity.WARNING
    summary = "Line is longer than max_line_length characters"

    def check(self, ctx: RuleContext) -> Iterator[Diagnostic]:
        limit: int = ctx.config.max_line_length
        for line in ctx.source.lines:
            if line.length > limit:
                yield self.report(
                    line.index,
                    limit + 1,
                    f"Line is {line.length} characters long (maximum is {limit})",
                )


class TrailingWhitespace(BaseRule):
    rule_id = RuleId.TRAILING_WHITESPACE
    severity = Severity.WARNING
    summary = "Line ends with spaces or tabs"

    def check(self, ctx: RuleContext) -> Iterator[Diagnostic]:
        for line in ctx.source.lines:
            if line.has_trailing_whitespace:
                yield self.report(
                    line.index,
                    len(line.raw_text.rstrip(" \t")) + 1,
                    "Trailing whitespace",
                )


class MissingFinalNewline(BaseRule):
    """The last line of a non-empty file has no line terminator."""

    rule_id = RuleId.MISSING_FINAL_NEWLINE
    severity = Severity.WARNING
    summary = "File does not end with a newline (require_trailing_newline)"

    def is_enabled(self, config: RuleConfig) -> bool:
        return config.require_trailing_newline and super().is_enabled(config)

    def check(self, ctx: RuleContext) -> Iterator[Diagnostic]:
        if ctx.source.ends_with_newline:
            return
        last = ctx.source.lines[-1]
        yield self.report(last.index, last.length + 1, "File does not end with a newline")


class TabIndentation(BaseRule):
    rule_id = RuleId.TAB_INDENTATION
    severity = Severity.ERROR
    summary = "Indentation contains a tab character"

    def check(self, ctx: RuleContext) -> Iterator[Diagnostic]:
        for line in ctx.source.lines:
            if line.has_tab_indent:
                yield self.report(
                    line.index,
                    line.raw_text.index("\t") + 1,
                    "Tab character in indentation; indent with spaces",
                )
