# topmark:header:start
#
#   project      : StyleMark
#   file         : render.py
#   file_relpath : src/stylemark/report/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dispatch a run result to the renderer for an output format."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stylemark.report.formats import OutputFormat
from stylemark.report.machine import iter_ndjson_records, serialize_json_envelope, serialize_ndjson
from stylemark.report.text import render_text

if TYPE_CHECKING:
    from stylemark.engine import RunResult


def render(
    result: RunResult,
    fmt: OutputFormat = OutputFormat.TEXT,
    *,
    color: bool = False,
    summary: bool = True,
) -> str:
    """Render ``result`` in the requested format.

    Args:
        result: The run to render.
        fmt: Output format.
        color: Apply ANSI styling (text only; ignored for machine formats).
        summary: Append the summary line (text only; machine formats always
            carry their summary data).

    Returns:
        str: The rendered output; ends with a newline unless empty.
    """
    if fmt is OutputFormat.JSON:
        return serialize_json_envelope(result) + "\n"
    if fmt is OutputFormat.NDJSON:
        return serialize_ndjson(iter_ndjson_records(result))
    return render_text(result, color=color, summary=summary)
