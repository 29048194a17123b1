# topmark:header:start
#
#   project      : StyleMark
#   file         : case.py
#   file_relpath : src/stylemark/rules/case.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rules about ``case ... of`` expressions.

`CaseWithoutDefault` is a heuristic: without type information, a case block is
considered exhaustive when one branch is a catch-all pattern (``_``, a plain
variable or a record destructuring, optionally with ``as``, or a tuple of
those), or when its branches jointly cover one of the well-known
two-constructor types.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from stylemark.diagnostic.model import Severity
from stylemark.parser.blocks import BlockKind
from stylemark.rules.base import BaseRule
from stylemark.rules.ids import RuleId

if TYPE_CHECKING:
    from collections.abc import Iterator

    from stylemark.config.model import RuleConfig
    from stylemark.diagnostic.model import Diagnostic
    from stylemark.parser.blocks import Block
    from stylemark.rules.base import RuleContext

_CATCH_ALL_RE: re.Pattern[str] = re.compile(
    r"^(_|[a-z][A-Za-z0-9_']*)(\s+as\s+[a-z][A-Za-z0-9_']*)?$"
)

# Record destructuring (`{ name, age }`) binds fields and never fails to match.
_RECORD_PATTERN_RE: re.Pattern[str] = re.compile(
    r"^\{\s*[a-z][A-Za-z0-9_']*(\s*,\s*[a-z][A-Za-z0-9_']*)*\s*\}"
    r"(\s+as\s+[a-z][A-Za-z0-9_']*)?$"
)

# Constructor sets that cover their type completely.
EXHAUSTIVE_CONSTRUCTOR_SETS: tuple[frozenset[str], ...] = (
    frozenset({"True", "False"}),
    frozenset({"Just", "Nothing"}),
    frozenset({"Ok", "Err"}),
    frozenset({"[]", "::"}),
)


def _strip_parens(pattern: str) -> str:
    pattern = pattern.strip()
    while pattern.startswith("(") and pattern.endswith(")") and _split_top_level(
        pattern[1:-1], ","
    ) == [pattern[1:-1]]:
        inner: str = pattern[1:-1].strip()
        if not inner:
            break
        pattern = inner
    return pattern


def _split_top_level(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep`` outside brackets."""
    parts: list[str] = []
    depth: int = 0
    start: int = 0
    i: int = 0
    while i < len(text):
        ch: str = text[i]
        if ch in "([{":
            depth += 1
        elif ch in ")]}":
            depth -= 1
        elif depth == 0 and text.startswith(sep, i):
            parts.append(text[start:i])
            i += len(sep)
            start = i
            continue
        i += 1
    parts.append(text[start:])
    return parts


def is_catch_all(pattern: str) -> bool:
    """Return True if ``pattern`` matches any value."""
    pattern = _strip_parens(pattern)
    if _CATCH_ALL_RE.match(pattern) or _RECORD_PATTERN_RE.match(pattern):
        return True
    if pattern.startswith("(") and pattern.endswith(")"):
        components: list[str] = _split_top_level(pattern[1:-1], ",")
        return len(components) > 1 and all(is_catch_all(c) for c in components)
    return False


def constructor_head(pattern: str) -> str | None:
    """Return the constructor a pattern matches completely, if any.

    ``Just x`` gives ``Just``, ``x :: rest`` gives ``::`` and ``[]`` gives
    ``[]``. Patterns that only match part of a constructor (``Just 1``) give None.
    """
    pattern = _strip_parens(pattern)
    if pattern == "[]":
        return "[]"
    cons: list[str] = _split_top_level(pattern, "::")
    if len(cons) > 1:
        return "::" if all(is_catch_all(part) for part in cons) else None
    words: list[str] = pattern.split()
    if not words:
        return None
    name: str = words[0].rsplit(".", 1)[-1]
    if not name[:1].isupper() or not all(is_catch_all(arg) for arg in words[1:]):
        return None
    return name


def is_exhaustive(patterns: list[str]) -> bool:
    """Return True if the branch patterns are known to cover every value."""
    if any(is_catch_all(p) for p in patterns):
        return True
    heads: set[str] = {h for h in map(constructor_head, patterns) if h is not None}
    return any(required <= heads for required in EXHAUSTIVE_CONSTRUCTOR_SETS)


class CaseWithoutDefault(BaseRule):
    rule_id = RuleId.CASE_WITHOUT_DEFAULT
    severity = Severity.ERROR
    summary = "`case` expression has no catch-all branch (require_default_case)"

    def is_enabled(self, config: RuleConfig) -> bool:
        return config.require_default_case and super().is_enabled(config)

    def check(self, ctx: RuleContext) -> Iterator[Diagnostic]:
        for block in ctx.tree.iter_blocks(BlockKind.CASE_OF):
            # Without branches there is nothing to judge; the parser reports those.
            if not block.branches:
                continue
            if not is_exhaustive([b.pattern for b in block.branches]):
                yield self.report(
                    block.start_line,
                    block.column,
                    "`case` expression has no catch-all branch; add a `_ ->` branch",
                )


class RhythmicArrowAlignment(BaseRule):
    """Branch arrows padded to line up with each other; one space is expected."""

    rule_id = RuleId.RHYTHMIC_ARROW_ALIGNMENT
    severity = Severity.WARNING
    summary = "Case branch arrows are padded for alignment"

    def check(self, ctx: RuleContext) -> Iterator[Diagnostic]:
        for block in ctx.tree.iter_blocks(BlockKind.CASE_OF):
            yield from self._check_block(block)

    def _check_block(self, block: Block) -> Iterator[Diagnostic]:
        arrows = [b for b in block.branches if b.arrow_column is not None]
        if len(arrows) < 2:
            return
        for branch in arrows:
            if branch.arrow_gap is not None and branch.arrow_gap > 1 and branch.arrow_column:
                yield self.report(
                    branch.line,
                    branch.arrow_column,
                    f"Arrow padded with {branch.arrow_gap} spaces; use one space before `->`",
                )
