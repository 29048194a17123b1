# topmark:header:start
#
#   project      : StyleMark
#   file         : __init__.py
#   file_relpath : src/stylemark/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives and helpers.

Design:
    - A reported rule violation is an immutable `Diagnostic` instance.
    - During evaluation of one file, diagnostics are accumulated in a mutable
      `DiagnosticLog`, then frozen into a tuple on the file report.
"""

from __future__ import annotations

from stylemark.diagnostic.model import (
    Diagnostic,
    DiagnosticLog,
    DiagnosticStats,
    Severity,
    compute_diagnostic_stats,
    diagnostics_counts_to_dict,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLog",
    "DiagnosticStats",
    "Severity",
    "compute_diagnostic_stats",
    "diagnostics_counts_to_dict",
]
