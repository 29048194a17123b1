# topmark:header:start
#
#   project      : StyleMark
#   file         : blocks.py
#   file_relpath : src/stylemark/parser/blocks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Heuristic structural block parser.

`parse` walks the scanned lines once and recognizes the nested constructs the
rules need: ``let ... in``, ``if ... then ... else``, ``case ... of`` with its
branches, record literals ``{ ... }``, list literals ``[ ... ]`` and ``import``
clauses. It is *not* a grammar. Anything it does not recognize is treated as
opaque text.

Termination model:
    * ``let`` closes at its ``in``.
    * ``if`` moves through ``then`` and ``else``; once in its ``else`` branch it
      closes on the first line indented at or before its header (other than a
      chained ``else``).
    * ``case ... of`` closes on the first line indented less than its branches.
    * ``{``/``[`` close at their matching bracket. Parentheses are matched too,
      but they are not blocks.
    * An ``import`` clause closes at the next top-level line.
    * Layout never closes a construct while a bracket opened after it is still
      open.

Recovery:
    At each top-level line (a column-1 identifier) every open construct is
    closed. Constructs that are still waiting for their closer are recorded as
    `Unterminated`; parsing then continues, so one malformed construct does not
    hide findings elsewhere in the file.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from stylemark.config.logging import get_logger
from stylemark.parser.lexer import (
    CLOSE_BRACKETS,
    MATCHING_OPENER,
    CodeMasker,
    Token,
    iter_tokens,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from stylemark.config.logging import StylemarkLogger
    from stylemark.source.scanner import Line

logger: StylemarkLogger = get_logger(__name__)


class BlockKind(Enum):
    """Closed set of block constructs recognized by the parser."""

    LET = "let"
    IF_ELSE = "if-else"
    CASE_OF = "case-of"
    RECORD = "record"
    LIST = "list"
    IMPORT = "import"


@dataclass(frozen=True, slots=True)
class CaseBranch:
    """A branch pattern line of a ``case ... of`` block.

    Attributes:
        line (int): Line number of the pattern.
        column (int): 1-based column where the pattern starts.
        pattern (str): Pattern text (up to the arrow, stripped).
        arrow_column (int | None): 1-based column of ``->`` when it is on the
            pattern line.
        arrow_gap (int | None): Number of spaces between the pattern and ``->``.
    """

    line: int
    column: int
    pattern: str
    arrow_column: int | None = None
    arrow_gap: int | None = None


@dataclass(frozen=True, slots=True)
class BodyLine:
    """First line of a block body, with the indentation of the line that introduced it.

    Attributes:
        line (int): Line number of the body line.
        base_indent (int): Indentation of the header line (``let``, ``then``,
            ``else``, ``of``, a branch ``->`` or an ``import``). The body is
            expected one indentation step deeper.
    """

    line: int
    base_indent: int


@dataclass(eq=False)
class Block:
    """A recognized syntactic region.

    Attributes:
        kind (BlockKind): What construct this is.
        start_line (int): Line of the opening token.
        column (int): 1-based column of the opening token.
        header_indent (int): Indentation of the start line.
        depth (int): Number of enclosing blocks (0 for roots).
        end_line (int): Line where the block ends (``>= start_line`` once closed).
        close_column (int | None): 1-based column of the closing bracket, if any.
        terminated (bool): False if the block was closed by recovery.
        children (list[Block]): Directly nested blocks, in source order.
        branches (list[CaseBranch]): Branch patterns (``CASE_OF`` only).
        body_lines (list[BodyLine]): Body lines subject to indentation checks.
    """

    kind: BlockKind
    start_line: int
    column: int
    header_indent: int
    depth: int
    end_line: int = -1
    close_column: int | None = None
    terminated: bool = True
    children: list[Block] = field(default_factory=lambda: [])
    branches: list[CaseBranch] = field(default_factory=lambda: [])
    body_lines: list[BodyLine] = field(default_factory=lambda: [])
    _parent: weakref.ReferenceType[Block] | None = field(default=None, repr=False)

    @property
    def parent(self) -> Block | None:
        """Return the enclosing block, if any (weak back-reference)."""
        return self._parent() if self._parent is not None else None

    @property
    def is_multiline(self) -> bool:
        """Return True if the block spans more than one line."""
        return self.end_line > self.start_line

    def contains(self, other: Block) -> bool:
        """Return True if ``other`` lies within this block's line range."""
        return self.start_line <= other.start_line and other.end_line <= self.end_line

    def walk(self) -> Iterator[Block]:
        """Yield this block and all its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True, slots=True)
class Unterminated:
    """An opener whose closer was never found.

    Attributes:
        opener (str): Opening token text (``let``, ``{``, ``(``, ...).
        line (int): Line of the opener.
        column (int): 1-based column of the opener.
        expected (str): What the parser was waiting for.
    """

    opener: str
    line: int
    column: int
    expected: str


@dataclass(frozen=True)
class BlockTree:
    """Result of a structural parse: the block forest plus parse facts.

    Attributes:
        roots (tuple[Block, ...]): Top-level blocks in source order.
        masked (tuple[str, ...]): Lines with comments and literals blanked out,
            index ``i`` holding line ``i + 1``.
        unterminated (tuple[Unterminated, ...]): Openers without closers.
    """

    roots: tuple[Block, ...]
    masked: tuple[str, ...]
    unterminated: tuple[Unterminated, ...] = ()

    def iter_blocks(self, kind: BlockKind | None = None) -> Iterator[Block]:
        """Yield all blocks in pre-order, optionally restricted to ``kind``."""
        for root in self.roots:
            for block in root.walk():
                if kind is None or block.kind is kind:
                    yield block

    def code(self, index: int) -> str:
        """Return the masked code of 1-based line ``index``."""
        return self.masked[index - 1]


_BLOCK_OPENERS: dict[str, BlockKind] = {
    "let": BlockKind.LET,
    "if": BlockKind.IF_ELSE,
    "case": BlockKind.CASE_OF,
    "{": BlockKind.RECORD,
    "[": BlockKind.LIST,
    "import": BlockKind.IMPORT,
}

_CLOSER_FOR: dict[str, str] = {"{": "`}`", "[": "`]`", "(": "`)`", "let": "`in`"}

# Keywords that never start a new top-level declaration.
_CONTINUATION_WORDS: frozenset[str] = frozenset({"in", "then", "else", "of"})

# Keywords that introduce a body when they end a line.
_BODY_INTRODUCERS: frozenset[str] = frozenset({"let", "then", "else", "of", "->"})


@dataclass(eq=False)
class _Frame:
    """An open construct on the parser stack."""

    opener: str
    line: int
    column: int
    header_indent: int
    block: Block | None
    state: str = ""
    branch_indent: int | None = None

    @property
    def is_bracket(self) -> bool:
        return self.opener in "{[("

    @property
    def is_complete(self) -> bool:
        """Return True if the construct may end here without its closer."""
        if self.opener == "if":
            return self.state == "else"
        if self.opener == "case":
            return self.state == "branches" and self.branch_indent is not None
        return self.opener == "import"

    @property
    def expected(self) -> str:
        """Describe what the construct is still waiting for."""
        if self.opener == "if":
            return "`then`" if self.state == "cond" else "`else`"
        if self.opener == "case":
            return "`of`" if self.state == "scrutinee" else "a case branch"
        return _CLOSER_FOR.get(self.opener, "end of clause")


class _StructureParser:
    """Single-pass, line-oriented parser state machine."""

    def __init__(self) -> None:
        self.masker = CodeMasker()
        self.stack: list[_Frame] = []
        self.roots: list[Block] = []
        self.masked: list[str] = []
        self.unterminated: list[Unterminated] = []
        self.last_code_line: int = 0
        self.pending_body: tuple[_Frame, int] | None = None

    # --- stack helpers ---

    def _enclosing_block(self) -> Block | None:
        for frame in reversed(self.stack):
            if frame.block is not None:
                return frame.block
        return None

    def _push(self, token: Token, line: int, header_indent: int) -> _Frame:
        block: Block | None = None
        kind: BlockKind | None = _BLOCK_OPENERS.get(token.text)
        if kind is not None:
            parent: Block | None = self._enclosing_block()
            block = Block(
                kind=kind,
                start_line=line,
                column=token.column,
                header_indent=header_indent,
                depth=0 if parent is None else parent.depth + 1,
                _parent=weakref.ref(parent) if parent is not None else None,
            )
            if parent is None:
                self.roots.append(block)
            else:
                parent.children.append(block)
        frame = _Frame(
            opener=token.text,
            line=line,
            column=token.column,
            header_indent=header_indent,
            block=block,
            state={"if": "cond", "case": "scrutinee"}.get(token.text, ""),
        )
        self.stack.append(frame)
        logger.trace("open %r at %d:%d (depth %d)", token.text, line, token.column, len(self.stack))
        return frame

    def _pop(self, end_line: int, *, close_column: int | None = None) -> None:
        """Close the top frame at ``end_line``, recording it if it was incomplete."""
        frame: _Frame = self.stack.pop()
        terminated: bool = close_column is not None or frame.is_complete
        if not terminated:
            self.unterminated.append(
                Unterminated(
                    opener=frame.opener,
                    line=frame.line,
                    column=frame.column,
                    expected=frame.expected,
                )
            )
            logger.debug(
                "Unterminated %r at %d:%d (expected %s)",
                frame.opener,
                frame.line,
                frame.column,
                frame.expected,
            )
        if frame.block is not None:
            frame.block.end_line = max(end_line, frame.block.start_line)
            frame.block.close_column = close_column
            frame.block.terminated = terminated
        if self.pending_body is not None and self.pending_body[0] is frame:
            self.pending_body = None
        logger.trace("close %r from line %d at line %d", frame.opener, frame.line, end_line)

    def _close_all(self) -> None:
        while self.stack:
            self._pop(self.last_code_line)

    def _close_layout_until(self, predicate: str, line: int, end_line: int) -> _Frame | None:
        """Close layout frames above the nearest frame whose opener is ``predicate``.

        Returns the matching frame (left on the stack), or None when a bracket or
        an import is found first; in that case nothing is closed.
        """
        target: int | None = None
        for pos in range(len(self.stack) - 1, -1, -1):
            frame: _Frame = self.stack[pos]
            if frame.opener == predicate and self._accepts(frame, predicate):
                target = pos
                break
            if frame.is_bracket or frame.opener == "import":
                return None
            if frame.opener == "let" and predicate != "let":
                return None
        if target is None:
            return None
        while len(self.stack) - 1 > target:
            self._pop(end_line)
        logger.trace("%r matched frame opened at line %d", predicate, self.stack[-1].line)
        return self.stack[-1]

    @staticmethod
    def _accepts(frame: _Frame, predicate: str) -> bool:
        return predicate != "if" or frame.state != "else"

    # --- line processing ---

    def _close_on_layout(self, indent: int, first: str) -> None:
        while self.stack:
            frame: _Frame = self.stack[-1]
            if frame.is_bracket or frame.opener == "import":
                return
            if frame.opener == "let":
                if indent >= frame.header_indent:
                    return
            elif frame.opener == "if":
                if indent > frame.header_indent:
                    return
                if indent == frame.header_indent and (
                    first == "else" or (frame.state != "else" and first == "then")
                ):
                    return
            elif frame.opener == "case":
                if frame.state == "branches" and frame.branch_indent is not None:
                    if indent >= frame.branch_indent:
                        return
                elif indent > frame.header_indent or first == "of":
                    return
            self._pop(self.last_code_line)

    def _record_branch(self, frame: _Frame, line: Line, code: str, indent: int) -> None:
        assert frame.block is not None
        arrow: int = code.find("->", indent)
        if arrow < 0:
            pattern: str = line.raw_text[indent:].strip()
            frame.block.branches.append(CaseBranch(line=line.index, column=indent + 1, pattern=pattern))
            return
        before: str = line.raw_text[indent:arrow]
        frame.block.branches.append(
            CaseBranch(
                line=line.index,
                column=indent + 1,
                pattern=before.strip(),
                arrow_column=arrow + 1,
                arrow_gap=len(before) - len(before.rstrip(" ")),
            )
        )
        if not code[arrow + 2 :].strip():
            self.pending_body = (frame, indent)

    def feed(self, line: Line) -> None:
        code: str = self.masker.mask(line.raw_text)
        self.masked.append(code)
        stripped: str = code.lstrip()
        if not stripped:
            return

        indent: int = len(code) - len(stripped)
        tokens: list[Token] = list(iter_tokens(code))
        first: str = tokens[0].text if tokens and tokens[0].column == indent + 1 else stripped[0]

        if indent == 0 and (stripped[0].isalpha() or stripped[0] == "_"):
            if first not in _CONTINUATION_WORDS:
                # Top-level line: everything still open ends here.
                self._close_all()
        else:
            self._close_on_layout(indent, first)

        if self.pending_body is not None:
            pending_frame, base_indent = self.pending_body
            self.pending_body = None
            if any(f is pending_frame for f in self.stack) and pending_frame.block is not None:
                pending_frame.block.body_lines.append(BodyLine(line=line.index, base_indent=base_indent))

        top: _Frame | None = self.stack[-1] if self.stack else None
        if top is not None and top.opener == "case" and top.state == "branches":
            if top.branch_indent is None and indent > top.header_indent:
                top.branch_indent = indent
            if indent == top.branch_indent:
                self._record_branch(top, line, code, indent)

        for token in tokens:
            self._feed_token(token, line, code, indent)

        self._maybe_expect_body(tokens, code, indent)
        self.last_code_line = line.index

    def _feed_token(self, token: Token, line: Line, code: str, indent: int) -> None:
        text: str = token.text
        end_line: int = line.index if code[: token.column - 1].strip() else self.last_code_line

        if text in ("let", "if", "case", "{", "[", "("):
            self._push(token, line.index, indent)
        elif text == "import":
            if token.column == 1 and not self.stack:
                # Continuation lines of the clause are indented one step.
                self.pending_body = (self._push(token, line.index, indent), 0)
        elif text == "in":
            frame: _Frame | None = self._close_layout_until("let", line.index, end_line)
            if frame is None:
                logger.debug("Stray `in` at %d:%d", line.index, token.column)
                return
            self._pop(line.index, close_column=token.column)
        elif text == "then":
            frame = self._close_layout_until("if", line.index, end_line)
            if frame is not None and frame.state == "cond":
                frame.state = "then"
        elif text == "else":
            frame = self._close_layout_until("if", line.index, end_line)
            if frame is not None and frame.state == "then":
                frame.state = "else"
        elif text == "of":
            frame = self._close_layout_until("case", line.index, end_line)
            if frame is not None and frame.state == "scrutinee":
                frame.state = "branches"
                rest: str = code[token.column + 1 :]
                if rest.strip():
                    # Branch written on the same line as `of`.
                    branch_indent: int = len(code) - len(rest.lstrip())
                    frame.branch_indent = branch_indent
                    self._record_branch(frame, line, code, branch_indent)
        elif text in CLOSE_BRACKETS:
            self._close_bracket(token, line, end_line)

    def _close_bracket(self, token: Token, line: Line, end_line: int) -> None:
        opener: str = MATCHING_OPENER[token.text]
        target: int | None = None
        for pos in range(len(self.stack) - 1, -1, -1):
            if self.stack[pos].opener == opener:
                target = pos
                break
        if target is None:
            logger.debug("Stray %r at %d:%d", token.text, line.index, token.column)
            return
        while len(self.stack) - 1 > target:
            self._pop(end_line)
        self._pop(line.index, close_column=token.column)

    def _maybe_expect_body(self, tokens: list[Token], code: str, indent: int) -> None:
        if not tokens or code.rstrip()[-len(tokens[-1].text) :] != tokens[-1].text:
            return
        last: str = tokens[-1].text
        if last not in _BODY_INTRODUCERS or not self.stack:
            return
        top: _Frame = self.stack[-1]
        if last == "->":
            # Branch arrows are handled when the branch is recorded.
            return
        expected_opener: str = {"let": "let", "then": "if", "else": "if", "of": "case"}[last]
        if top.opener == expected_opener:
            self.pending_body = (top, indent)

    def finish(self) -> BlockTree:
        self._close_all()
        return BlockTree(
            roots=tuple(self.roots),
            masked=tuple(self.masked),
            unterminated=tuple(sorted(self.unterminated, key=lambda u: (u.line, u.column))),
        )


def parse(lines: Iterable[Line]) -> BlockTree:
    """Parse scanned lines into a block forest.

    The input is consumed exactly once, so a lazy `scan` generator can be passed
    directly.

    Args:
        lines: Line records in file order.

    Returns:
        BlockTree: Blocks, masked code lines and unterminated openers.
    """
    parser = _StructureParser()
    count: int = 0
    for line in lines:
        parser.feed(line)
        count += 1
    tree: BlockTree = parser.finish()
    logger.debug(
        "Parsed %d line(s): %d root block(s), %d unterminated",
        count,
        len(tree.roots),
        len(tree.unterminated),
    )
    return tree
