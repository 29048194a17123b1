# topmark:header:start
#
#   project      : StyleMark
#   file         : conftest.py
#   file_relpath : tests/rules/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers for rule tests.

`run_rule()` runs a single rule over a snippet, so a test only sees the
findings of the rule under test. `run_all()` runs the full engine evaluation
and returns compact ``(rule, line, column)`` triples.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stylemark.engine import evaluate
from stylemark.parser.blocks import parse
from stylemark.rules.base import RuleContext
from stylemark.source.model import SourceFile
from tests.conftest import make_config

if TYPE_CHECKING:
    from stylemark.config.model import RuleConfig
    from stylemark.diagnostic.model import Diagnostic
    from stylemark.rules.base import BaseRule


def make_context(text: str, **overrides: Any) -> RuleContext:
    """Scan and parse ``text`` into a rule context with an overridden config."""
    source: SourceFile = SourceFile.from_text(text)
    config: RuleConfig = make_config(**overrides)
    return RuleContext(source=source, tree=parse(source.lines), config=config)


def run_rule(rule: BaseRule, text: str, **overrides: Any) -> list[Diagnostic]:
    """Run one rule over ``text`` and return its diagnostics."""
    return rule(make_context(text, **overrides))


def run_all(text: str, **overrides: Any) -> list[tuple[str, int, int]]:
    """Evaluate every rule over ``text`` and return ``(rule, line, column)`` triples."""
    ctx: RuleContext = make_context(text, **overrides)
    return [(d.rule_id, d.line, d.column) for d in evaluate(ctx.source, ctx.tree, ctx.config)]
