# topmark:header:start
#
#   project      : StyleMark
#   file         : scanner.py
#   file_relpath : src/stylemark/source/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Line scanner: turn raw source text into `Line` records.

Lines are split on ``\r\n``, ``\n`` and ``\r`` (in that order of preference),
and the exact terminator is kept on each record so that the absence of a final
newline can be detected. Other Unicode line separators (form feed, U+2028, ...)
are deliberately *not* treated as line breaks: the language does not treat them
as such either, and counting them would shift every reported line number.

The scanner is a generator: it yields records lazily and is meant to be
consumed exactly once (see `stylemark.source.model.SourceFile.from_text`).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from stylemark.config.logging import get_logger
from stylemark.core.errors import EncodingError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from stylemark.config.logging import StylemarkLogger

logger: StylemarkLogger = get_logger(__name__)

_LINE_RE: re.Pattern[str] = re.compile(r"([^\r\n]*)(\r\n|\n|\r)?")

_UTF8_BOM: str = "\ufeff"


@dataclass(frozen=True, slots=True)
class Line:
    """A single physical line of a source file.

    Attributes:
        index (int): 1-based line number.
        raw_text (str): Line content without its terminator.
        terminator (str): The line ending (``"\\n"``, ``"\\r\\n"``, ``"\\r"``), or
            ``""`` for a final line without one.
        indent_width (int): Number of leading space characters.
        has_tab_indent (bool): Whether the leading whitespace contains a tab.
        has_trailing_whitespace (bool): Whether the content ends with spaces/tabs.
        length (int): Length of ``raw_text`` in characters (not bytes).
    """

    index: int
    raw_text: str
    terminator: str
    indent_width: int
    has_tab_indent: bool
    has_trailing_whitespace: bool
    length: int

    @classmethod
    def from_text(cls, index: int, raw_text: str, terminator: str = "") -> Line:
        """Derive a line record from its content and terminator."""
        leading: int = len(raw_text) - len(raw_text.lstrip(" \t"))
        return cls(
            index=index,
            raw_text=raw_text,
            terminator=terminator,
            indent_width=len(raw_text) - len(raw_text.lstrip(" ")),
            has_tab_indent="\t" in raw_text[:leading],
            has_trailing_whitespace=raw_text != raw_text.rstrip(" \t"),
            length=len(raw_text),
        )

    @property
    def is_blank(self) -> bool:
        """Return True if the line contains only whitespace."""
        return not self.raw_text.strip()


def decode_text(data: str | bytes) -> str:
    """Return ``data`` as text, rejecting content that is not valid text.

    Args:
        data: Raw file content, either already decoded or as UTF-8 bytes.

    Returns:
        str: The decoded text without a leading byte order mark.

    Raises:
        EncodingError: If the bytes are not valid UTF-8 or the text contains NUL
            characters (binary content).
    """
    if isinstance(data, bytes):
        try:
            text: str = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncodingError(
                f"not valid UTF-8 text (byte offset {exc.start}: {exc.reason})"
            ) from exc
    else:
        text = data
    if "\x00" in text:
        raise EncodingError("binary content (NUL character found)")
    if text.startswith(_UTF8_BOM):
        logger.debug("Dropping leading UTF-8 BOM")
        text = text[len(_UTF8_BOM) :]
    return text


def scan(text: str | bytes) -> Iterator[Line]:
    """Lazily split source text into `Line` records.

    Validation happens before the first record is produced, so an invalid input
    raises `EncodingError` on the first ``next()`` call.

    Args:
        text: Source text or UTF-8 bytes.

    Yields:
        Line: One record per physical line, numbered from 1. Empty input yields
            nothing.

    Raises:
        EncodingError: If the input is not valid text.
    """
    content: str = decode_text(text)
    pos: int = 0
    end: int = len(content)
    index: int = 0
    while pos < end:
        match: re.Match[str] | None = _LINE_RE.match(content, pos)
        # The pattern always matches, and consumes at least one character here.
        assert match is not None
        index += 1
        yield Line.from_text(index, match.group(1), match.group(2) or "")
        pos = match.end()
