# topmark:header:start
#
#   project      : StyleMark
#   file         : registry.py
#   file_relpath : src/stylemark/rules/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordered rule registry.

The position of a rule in `RULES` is its registration order, which breaks ties
between diagnostics reported on the same line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stylemark.rules.brackets import ListBracketStyle, RecordBraceStyle
from stylemark.rules.case import CaseWithoutDefault, RhythmicArrowAlignment
from stylemark.rules.declarations import MissingNewlineAfterEquals, WildcardImportUsed
from stylemark.rules.indentation import IndentationMismatch
from stylemark.rules.layout import (
    LineTooLong,
    MissingFinalNewline,
    TabIndentation,
    TrailingWhitespace,
)
from stylemark.rules.structure import UnterminatedBlock

if TYPE_CHECKING:
    from stylemark.rules.base import BaseRule

RULES: tuple[BaseRule, ...] = (
    UnterminatedBlock(),
    LineTooLong(),
    TrailingWhitespace(),
    MissingFinalNewline(),
    TabIndentation(),
    IndentationMismatch(),
    WildcardImportUsed(),
    MissingNewlineAfterEquals(),
    CaseWithoutDefault(),
    RhythmicArrowAlignment(),
    RecordBraceStyle(),
    ListBracketStyle(),
)

RULE_ORDER: dict[str, int] = {rule.rule_id.value: pos for pos, rule in enumerate(RULES)}


def get_rule(rule_id: str) -> BaseRule:
    """Return the registered rule with identifier ``rule_id``.

    Raises:
        KeyError: If no rule has that identifier.
    """
    return RULES[RULE_ORDER[rule_id]]
