# topmark:header:start
#
#   project      : StyleMark
#   file         : declarations.py
#   file_relpath : src/stylemark/rules/declarations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rules about top-level declarations and import clauses."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from stylemark.diagnostic.model import Severity
from stylemark.parser.blocks import BlockKind
from stylemark.rules.base import BaseRule
from stylemark.rules.ids import RuleId

if TYPE_CHECKING:
    from collections.abc import Iterator

    from stylemark.diagnostic.model import Diagnostic
    from stylemark.rules.base import RuleContext

_WILDCARD_EXPOSING_RE: re.Pattern[str] = re.compile(r"exposing\s*\(\s*\.\.\s*\)")

_DECLARATION_RE: re.Pattern[str] = re.compile(r"[a-z_][A-Za-z0-9_']*")

# Top-level lines starting with these words are not value declarations.
_NON_VALUE_WORDS: frozenset[str] = frozenset(
    {"module", "port", "import", "type", "infix", "effect", "where"}
)

# Characters that turn a following/preceding ``=`` into part of an operator.
_OPERATOR_CHARS: str = "=/<>!:+-*|&.^%$#@~?"


class WildcardImportUsed(BaseRule):
    """Imports that expose everything with ``exposing (..)``."""

    rule_id = RuleId.WILDCARD_IMPORT_USED
    severity = Severity.WARNING
    summary = "Import exposes everything with `exposing (..)`"

    def check(self, ctx: RuleContext) -> Iterator[Diagnostic]:
        for block in ctx.tree.iter_blocks(BlockKind.IMPORT):
            lines: list[str] = [ctx.code(i) for i in range(block.start_line, block.end_line + 1)]
            clause: str = "\n".join(lines)
            match: re.Match[str] | None = _WILDCARD_EXPOSING_RE.search(clause)
            if match is None:
                continue
            offset: int = match.start()
            line_offset: int = clause.count("\n", 0, offset)
            line_start: int = clause.rfind("\n", 0, offset) + 1
            yield self.report(
                block.start_line + line_offset,
                offset - line_start + 1,
                "Wildcard import `exposing (..)`; list the exposed names explicitly",
            )


def _find_definition_equals(code: str) -> int:
    """Return the index of the first standalone ``=`` in ``code``, or -1.

    ``==``, ``/=``, ``<=``, ``>=`` and other operators containing ``=`` are skipped.
    """
    for i, ch in enumerate(code):
        if ch != "=":
            continue
        before: str = code[i - 1] if i > 0 else " "
        after: str = code[i + 1] if i + 1 < len(code) else " "
        if before not in _OPERATOR_CHARS and after not in _OPERATOR_CHARS:
            return i
    return -1


class MissingNewlineAfterEquals(BaseRule):
    """Top-level value or function declarations whose body starts on the ``=`` line."""

    rule_id = RuleId.MISSING_NEWLINE_AFTER_EQUALS
    severity = Severity.WARNING
    summary = "Top-level declaration has code after `=` on the same line"

    def check(self, ctx: RuleContext) -> Iterator[Diagnostic]:
        for line in ctx.source.lines:
            code: str = ctx.code(line.index)
            match: re.Match[str] | None = _DECLARATION_RE.match(code)
            if match is None or match.group(0) in _NON_VALUE_WORDS:
                continue
            equals: int = _find_definition_equals(code)
            if equals < 0 or not code[equals + 1 :].strip():
                continue
            yield self.report(
                line.index,
                equals + 1,
                f"Declaration `{match.group(0)}` has code after `=`; "
                "start the body on the next line",
            )
