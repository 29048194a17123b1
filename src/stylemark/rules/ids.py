# topmark:header:start
#
#   project      : StyleMark
#   file         : ids.py
#   file_relpath : src/stylemark/rules/ids.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stable rule identifiers.

The values appear in reports (``[RuleId]``), in machine output and in the
``disable`` configuration list. Renaming one is a breaking change.
"""

from __future__ import annotations

from enum import Enum


class RuleId(str, Enum):
    """Identifier of a style rule."""

    UNTERMINATED_BLOCK = "UnterminatedBlock"
    LINE_TOO_LONG = "LineTooLong"
    TRAILING_WHITESPACE = "TrailingWhitespace"
    MISSING_FINAL_NEWLINE = "MissingFinalNewline"
    TAB_INDENTATION = "TabIndentation"
    INDENTATION_MISMATCH = "IndentationMismatch"
    WILDCARD_IMPORT_USED = "WildcardImportUsed"
    MISSING_NEWLINE_AFTER_EQUALS = "MissingNewlineAfterEquals"
    CASE_WITHOUT_DEFAULT = "CaseWithoutDefault"
    RHYTHMIC_ARROW_ALIGNMENT = "RhythmicArrowAlignment"
    RECORD_BRACE_STYLE = "RecordBraceStyle"
    LIST_BRACKET_STYLE = "ListBracketStyle"

    @classmethod
    def all_ids(cls) -> frozenset[str]:
        """Return the string values of all rule identifiers."""
        return frozenset(member.value for member in cls)
