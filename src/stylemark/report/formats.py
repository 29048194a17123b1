# topmark:header:start
#
#   project      : StyleMark
#   file         : formats.py
#   file_relpath : src/stylemark/report/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output format vocabulary shared by the CLI and the reporters."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for diagnostics.

    Attributes:
        TEXT: One ``file:line:col: severity: message [RuleId]`` line per
            diagnostic; may include ANSI color if enabled.
        JSON: A single JSON document with ``meta``, ``diagnostics``, ``skipped``
            and ``summary``.
        NDJSON: One JSON object per line (newline-delimited JSON).

    Notes:
        Machine formats (``JSON`` and ``NDJSON``) never include ANSI color.
    """

    TEXT = "text"
    JSON = "json"
    NDJSON = "ndjson"


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True for formats intended for machine consumption."""
    return fmt in {OutputFormat.JSON, OutputFormat.NDJSON}
