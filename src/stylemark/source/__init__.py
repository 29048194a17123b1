# topmark:header:start
#
#   project      : StyleMark
#   file         : __init__.py
#   file_relpath : src/stylemark/source/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source loading: line records and immutable source files."""

from __future__ import annotations

from stylemark.source.model import SourceFile, load_source_file
from stylemark.source.scanner import Line, decode_text, scan

__all__ = [
    "Line",
    "SourceFile",
    "decode_text",
    "load_source_file",
    "scan",
]
