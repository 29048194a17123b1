# topmark:header:start
#
#   project      : StyleMark
#   file         : __init__.py
#   file_relpath : src/stylemark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, framework-agnostic building blocks shared across StyleMark layers."""

from __future__ import annotations
