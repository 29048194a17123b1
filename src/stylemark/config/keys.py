# topmark:header:start
#
#   project      : StyleMark
#   file         : keys.py
#   file_relpath : src/stylemark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for StyleMark configuration.

These constants define the external configuration schema as it appears in
``stylemark.toml`` and in ``[tool.stylemark]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by StyleMark configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_STYLEMARK: Final[str] = "stylemark"

    # [rules]
    SECTION_RULES: Final[str] = "rules"

    KEY_MAX_LINE_LENGTH: Final[str] = "max_line_length"
    KEY_INDENT_WIDTH: Final[str] = "indent_width"
    KEY_REQUIRE_TRAILING_NEWLINE: Final[str] = "require_trailing_newline"
    KEY_REQUIRE_DEFAULT_CASE: Final[str] = "require_default_case"
    KEY_DISABLE: Final[str] = "disable"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_INCLUDE: Final[str] = "include"
    KEY_EXCLUDE: Final[str] = "exclude"
