# topmark:header:start
#
#   project      : StyleMark
#   file         : constants.py
#   file_relpath : src/stylemark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StyleMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

STYLEMARK_TOOL_NAME: str = "stylemark"
STYLEMARK_VERSION: str = get_version("stylemark")

# Configuration file names, searched from the working directory upwards:
STYLEMARK_TOML_NAME: str = "stylemark.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Display name used for text that does not come from a file:
STRING_SOURCE_NAME: str = "<string>"
