# topmark:header:start
#
#   project      : StyleMark
#   file         : __init__.py
#   file_relpath : src/stylemark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StyleMark package.

StyleMark is a style-conformance checker for Elm-like functional source files.
It scans files into line records, recognizes nested block constructs with a
heuristic structural parser, and applies independent formatting rules. Both a
CLI and a small typed API are exposed for automation.
"""

from __future__ import annotations
