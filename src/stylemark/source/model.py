# topmark:header:start
#
#   project      : StyleMark
#   file         : model.py
#   file_relpath : src/stylemark/source/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable in-memory image of a source file.

Files are read fully into memory in a single call; StyleMark does not stream.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from stylemark.config.logging import get_logger
from stylemark.constants import STRING_SOURCE_NAME
from stylemark.source.scanner import scan

if TYPE_CHECKING:
    from pathlib import Path

    from stylemark.config.logging import StylemarkLogger
    from stylemark.source.scanner import Line

logger: StylemarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class SourceFile:
    """A loaded source file: its display path and ordered line records.

    Attributes:
        path (str): Display path used in diagnostics.
        lines (tuple[Line, ...]): Line records in file order (index 1 first).
    """

    path: str
    lines: tuple[Line, ...]

    @classmethod
    def from_text(cls, text: str | bytes, *, path: str = STRING_SOURCE_NAME) -> SourceFile:
        """Scan ``text`` into a new source file.

        Args:
            text: Source text or UTF-8 bytes.
            path: Display path used in diagnostics.

        Returns:
            SourceFile: The loaded file.

        Raises:
            EncodingError: If the input is not valid text.
        """
        lines: tuple[Line, ...] = tuple(scan(text))
        logger.debug("Scanned %d line(s) from %s", len(lines), path)
        return cls(path=path, lines=lines)

    @property
    def is_empty(self) -> bool:
        """Return True if the file has no lines at all."""
        return not self.lines

    @property
    def ends_with_newline(self) -> bool:
        """Return True if the last line is terminated (vacuously True when empty)."""
        return not self.lines or self.lines[-1].terminator != ""

    def line(self, index: int) -> Line:
        """Return the record for 1-based line ``index``."""
        return self.lines[index - 1]


def load_source_file(path: Path, *, display_path: str | None = None) -> SourceFile:
    """Read ``path`` fully and scan it into a `SourceFile`.

    Args:
        path: File to read.
        display_path: Path shown in diagnostics (defaults to ``str(path)``).

    Returns:
        SourceFile: The loaded file.

    Raises:
        OSError: If the file cannot be read.
        EncodingError: If the file content is not valid text.
    """
    data: bytes = path.read_bytes()
    logger.trace("Read %d byte(s) from %s", len(data), path)
    return SourceFile.from_text(data, path=display_path or str(path))
