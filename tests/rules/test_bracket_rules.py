# topmark:header:start
#
#   project      : StyleMark
#   file         : test_bracket_rules.py
#   file_relpath : tests/rules/test_bracket_rules.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for multi-line record and list layout."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stylemark.rules.brackets import ListBracketStyle, RecordBraceStyle
from tests.conftest import parametrize
from tests.rules.conftest import run_rule

if TYPE_CHECKING:
    from stylemark.diagnostic.model import Diagnostic


@parametrize(
    "text",
    [
        "point =\n    { x = 1\n    , y = 2\n    }\n",
        "point =\n    { x = 1, y = 2 }\n",
        "point =\n    { model\n        | x = 1\n    }\n",
    ],
)
def test_record_layout_accepted(text: str) -> None:
    assert run_rule(RecordBraceStyle(), text) == []


def test_record_closing_brace_not_on_own_line() -> None:
    found: list[Diagnostic] = run_rule(RecordBraceStyle(), "point =\n    { x = 1\n    , y = 2 }\n")

    assert [(d.line, d.column) for d in found] == [(3, 13)]
    assert found[0].message == "Multi-line record: `}` should be on its own line"


def test_record_opening_brace_after_code_and_misaligned_closer() -> None:
    text: str = "point =\n    foo { x = 1\n        , y = 2\n        }\n"
    found: list[Diagnostic] = run_rule(RecordBraceStyle(), text)

    assert [(d.line, d.column, d.message) for d in found] == [
        (2, 9, "Multi-line record: `{` should start its line"),
        (4, 9, "Multi-line record: `}` should be aligned with column 5"),
    ]


def test_unterminated_record_only_checks_the_opener() -> None:
    text: str = "point =\n    foo { x = 1\n        , y = 2\nother =\n    1\n"
    found: list[Diagnostic] = run_rule(RecordBraceStyle(), text)

    assert [(d.line, d.column) for d in found] == [(2, 9)]


def test_list_layout() -> None:
    good: str = "xs =\n    [ 1\n    , 2\n    ]\n"
    bad: str = "xs =\n    [ 1\n    , 2 ]\n"

    assert run_rule(ListBracketStyle(), good) == []
    found: list[Diagnostic] = run_rule(ListBracketStyle(), bad)
    assert [(d.line, d.column) for d in found] == [(3, 9)]
    assert found[0].message == "Multi-line list: `]` should be on its own line"


def test_brackets_in_strings_are_ignored() -> None:
    assert run_rule(ListBracketStyle(), 'xs =\n    "[ not a list"\n') == []
