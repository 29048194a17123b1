# topmark:header:start
#
#   project      : StyleMark
#   file         : lexer.py
#   file_relpath : src/stylemark/parser/lexer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Code masking and token extraction for the structural parser.

The structural parser and the rules must ignore keywords, brackets and operators
that appear inside comments and literals. `mask_lines` replaces the content of
line comments (``-- ...``), nested block comments (``{- ... -}``), string
literals (``"..."`` and multi-line ``\"\"\"...\"\"\"``) and char literals
(``'x'``) with spaces. Literal delimiters are kept, so a line holding only a
string is still a code line. Every masked line keeps the exact column layout of
the original line.

`iter_tokens` then extracts the handful of tokens the parser cares about from a
masked line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

KEYWORDS: frozenset[str] = frozenset({"let", "in", "if", "then", "else", "case", "of", "import"})

OPEN_BRACKETS: str = "{[("
CLOSE_BRACKETS: str = "}])"
MATCHING_OPENER: dict[str, str] = {"}": "{", "]": "[", ")": "("}

_TOKEN_RE: re.Pattern[str] = re.compile(r"[A-Za-z_][A-Za-z0-9_']*|->|[{}\[\]()]")


@dataclass(frozen=True, slots=True)
class Token:
    """A token of interest on a masked line.

    Attributes:
        text (str): Token text (keyword, identifier, bracket or ``->``).
        column (int): 1-based column of the first character.
    """

    text: str
    column: int

    @property
    def is_keyword(self) -> bool:
        """Return True for the keywords that open or close blocks."""
        return self.text in KEYWORDS


@dataclass
class CodeMasker:
    """Incremental masker; carries comment and string state from one line to the next."""

    comment_depth: int = 0
    in_multiline_string: bool = False

    def mask(self, text: str) -> str:
        """Return ``text`` with comments and literals blanked out."""
        return _mask_line(text, self)


def _blank_literal(segment: str) -> str:
    """Keep the delimiting quotes of a literal and blank out its content."""
    quote: str = segment[0]
    if len(segment) > 1 and segment[-1] == quote:
        return quote + " " * (len(segment) - 2) + quote
    return quote + " " * (len(segment) - 1)


def _mask_line(text: str, state: CodeMasker) -> str:
    out: list[str] = []
    i: int = 0
    n: int = len(text)
    while i < n:
        if state.comment_depth > 0:
            if text.startswith("{-", i):
                state.comment_depth += 1
                out.append("  ")
                i += 2
            elif text.startswith("-}", i):
                state.comment_depth -= 1
                out.append("  ")
                i += 2
            else:
                out.append(" ")
                i += 1
            continue
        if state.in_multiline_string:
            if text.startswith('"""', i):
                state.in_multiline_string = False
                out.append('"""')
                i += 3
            elif text[i] == "\\":
                out.append(" " * len(text[i : i + 2]))
                i += 2
            else:
                out.append(" ")
                i += 1
            continue

        ch: str = text[i]
        if text.startswith("{-", i):
            state.comment_depth = 1
            out.append("  ")
            i += 2
        elif text.startswith("--", i):
            out.append(" " * (n - i))
            break
        elif text.startswith('"""', i):
            state.in_multiline_string = True
            out.append('"""')
            i += 3
        elif ch == '"':
            # Single-line string: blank everything between the quotes.
            j: int = i + 1
            while j < n and text[j] != '"':
                j += 2 if text[j] == "\\" else 1
            j = min(j + 1, n)
            out.append(_blank_literal(text[i:j]))
            i = j
        elif ch == "'" and (i == 0 or not (text[i - 1].isalnum() or text[i - 1] == "_")):
            # Char literal ('x', '\n', '\u{00A0}'); a quote after an identifier
            # character is part of the identifier (``model'``).
            j = i + 1
            while j < n and text[j] != "'":
                j += 2 if text[j] == "\\" else 1
            j = min(j + 1, n)
            out.append(_blank_literal(text[i:j]))
            i = j
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def mask_lines(lines: Iterable[str]) -> tuple[str, ...]:
    """Mask comments and literals in a sequence of raw lines.

    Args:
        lines: Raw line contents (without terminators), in file order.

    Returns:
        tuple[str, ...]: Masked lines, each the same length as its input line.
    """
    masker = CodeMasker()
    return tuple(masker.mask(text) for text in lines)


def iter_tokens(masked: str) -> Iterator[Token]:
    """Yield the tokens of interest on a masked line.

    Identifiers preceded by a ``.`` (qualified names such as ``Foo.in``) are
    never reported as keywords.

    Args:
        masked: A line produced by `mask_lines`.

    Yields:
        Token: Keywords, identifiers, brackets and arrows in column order.
    """
    for match in _TOKEN_RE.finditer(masked):
        start: int = match.start()
        text: str = match.group(0)
        if text in KEYWORDS and start > 0 and masked[start - 1] == ".":
            text = "." + text
        yield Token(text=text, column=start + 1)
