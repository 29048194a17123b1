# topmark:header:start
#
#   project      : StyleMark
#   file         : __init__.py
#   file_relpath : src/stylemark/parser/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural parsing: code masking and the heuristic block parser."""

from __future__ import annotations

from stylemark.parser.blocks import (
    Block,
    BlockKind,
    BlockTree,
    BodyLine,
    CaseBranch,
    Unterminated,
    parse,
)
from stylemark.parser.lexer import CodeMasker, Token, iter_tokens, mask_lines

__all__ = [
    "Block",
    "BlockKind",
    "BlockTree",
    "BodyLine",
    "CaseBranch",
    "CodeMasker",
    "Token",
    "Unterminated",
    "iter_tokens",
    "mask_lines",
    "parse",
]
