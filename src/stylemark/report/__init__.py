# topmark:header:start
#
#   project      : StyleMark
#   file         : __init__.py
#   file_relpath : src/stylemark/report/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reporters: render a run result as human text or machine-readable JSON/NDJSON.

Renderers are Click-free and console-free: they return strings, and the CLI
decides where to write them.
"""

from __future__ import annotations

from stylemark.report.formats import OutputFormat, is_machine_format
from stylemark.report.render import render

__all__ = [
    "OutputFormat",
    "is_machine_format",
    "render",
]
