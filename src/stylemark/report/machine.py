# topmark:header:start
#
#   project      : StyleMark
#   file         : machine.py
#   file_relpath : src/stylemark/report/machine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""JSON and NDJSON output.

Shapes:
    * JSON: one envelope
      ``{"meta": {...}, "diagnostics": [...], "skipped": [...], "summary": {...}}``.
    * NDJSON: one record per line, ``{"kind": <kind>, "meta": {...}, <kind>: {...}}``
      where ``kind`` is ``"diagnostic"`` or ``"skipped"``.

Conventions:
    - `json.dumps()` does not append a trailing newline.
    - `serialize_ndjson()` returns a string that ends with ``\n`` unless there are
      no records at all, in which case it returns ``""``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from stylemark.constants import STYLEMARK_TOOL_NAME, STYLEMARK_VERSION
from stylemark.diagnostic.model import diagnostics_counts_to_dict

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from stylemark.engine import RunResult

KIND_DIAGNOSTIC: str = "diagnostic"
KIND_SKIPPED: str = "skipped"


def build_meta_payload() -> dict[str, str]:
    """Build the metadata payload with tool name and version."""
    return {"tool": STYLEMARK_TOOL_NAME, "version": STYLEMARK_VERSION}


def build_summary_payload(result: RunResult) -> dict[str, int]:
    """Return file and per-severity counts for a run."""
    return {
        "files": result.checked_count,
        "skipped": len(result.skipped),
        **diagnostics_counts_to_dict(result.diagnostics),
    }


def build_json_envelope(result: RunResult) -> dict[str, object]:
    """Build the JSON document for a run (no serialization)."""
    return {
        "meta": build_meta_payload(),
        "diagnostics": [d.to_dict() for d in result.diagnostics],
        "skipped": [r.to_skipped_dict() for r in result.skipped],
        "summary": build_summary_payload(result),
    }


def build_ndjson_record(
    *, kind: str, meta: Mapping[str, str], payload: object
) -> dict[str, object]:
    """Build a single NDJSON record with a uniform envelope."""
    return {"kind": kind, "meta": dict(meta), kind: payload}


def iter_ndjson_records(result: RunResult) -> Iterator[dict[str, object]]:
    """Yield one record per diagnostic, then one per skipped file."""
    meta: dict[str, str] = build_meta_payload()
    for diagnostic in result.diagnostics:
        yield build_ndjson_record(kind=KIND_DIAGNOSTIC, meta=meta, payload=diagnostic.to_dict())
    for report in result.skipped:
        yield build_ndjson_record(kind=KIND_SKIPPED, meta=meta, payload=report.to_skipped_dict())


def serialize_json_envelope(result: RunResult) -> str:
    """Serialize a run as pretty-printed JSON (no trailing newline)."""
    return json.dumps(build_json_envelope(result), indent=2)


def serialize_ndjson(records: Iterable[Mapping[str, object]]) -> str:
    """Serialize records into a newline-delimited string."""
    lines: list[str] = [json.dumps(record) for record in records]
    return "\n".join(lines) + "\n" if lines else ""
