# topmark:header:start
#
#   project      : StyleMark
#   file         : indentation.py
#   file_relpath : src/stylemark/rules/indentation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Indentation rule.

Two checks share one rule id, and at most one diagnostic is emitted per line:

* the first line of a block body (after ``let``, ``then``, ``else``, ``of``, a
  branch arrow or an ``import``) must be indented exactly one step deeper than
  the line that introduced it;
* every other code line must be indented by a multiple of the step.

Lines with no code (blank lines, comment-only lines, the inside of multi-line
strings), lines that start inside a multi-line string or comment (such as the
line closing a ``\"\"\"`` string) and lines indented with tabs are not checked.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stylemark.diagnostic.model import Severity
from stylemark.rules.base import BaseRule
from stylemark.rules.ids import RuleId

if TYPE_CHECKING:
    from collections.abc import Iterator

    from stylemark.diagnostic.model import Diagnostic
    from stylemark.rules.base import RuleContext


class IndentationMismatch(BaseRule):
    rule_id = RuleId.INDENTATION_MISMATCH
    severity = Severity.ERROR
    summary = "Indentation is not a multiple of indent_width, or a block body is mis-indented"

    def check(self, ctx: RuleContext) -> Iterator[Diagnostic]:
        width: int = ctx.config.indent_width
        expected_body: dict[int, int] = {}
        for block in ctx.tree.iter_blocks():
            for body in block.body_lines:
                expected_body.setdefault(body.line, body.base_indent + width)

        for line in ctx.source.lines:
            code: str = ctx.code(line.index)
            if line.has_tab_indent or not code.strip():
                continue
            # Starts inside a multi-line string or comment; its indentation is content.
            if len(code) - len(code.lstrip(" ")) != line.indent_width:
                continue
            indent: int = line.indent_width
            expected: int | None = expected_body.get(line.index)
            if expected is not None and indent != expected:
                yield self.report(
                    line.index,
                    indent + 1,
                    f"Block body indented {indent} spaces; expected {expected}",
                )
            elif indent % width:
                yield self.report(
                    line.index,
                    indent + 1,
                    f"Indentation of {indent} spaces is not a multiple of {width}",
                )
