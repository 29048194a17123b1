# topmark:header:start
#
#   project      : StyleMark
#   file         : errors.py
#   file_relpath : src/stylemark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain exceptions raised by the StyleMark engine layers.

These exceptions are Click-free. The CLI maps them onto
[`stylemark.cli.errors`][stylemark.cli.errors] exceptions carrying exit codes.

Taxonomy:
    * `EncodingError`: input is not valid text. Fatal for that file only; the
      file is skipped and the run continues.
    * `InvalidConfigError`: configuration could not be loaded or validated.
      Fatal at startup; no file is processed.

Unterminated blocks are *not* exceptions: the structural parser records them and
the rule engine reports them as diagnostics.
"""

from __future__ import annotations


class StylemarkError(Exception):
    """Base class for all StyleMark domain errors."""


class EncodingError(StylemarkError):
    """Raised when source content cannot be decoded as text.

    Attributes:
        reason: Short human-readable explanation of the decoding failure.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason: str = reason


class InvalidConfigError(StylemarkError):
    """Raised when a configuration value or source is invalid.

    Attributes:
        source: Where the offending value came from (file path, ``"cli"``, ...),
            or ``None`` when unknown.
    """

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(f"{source}: {message}" if source else message)
        self.source: str | None = source
