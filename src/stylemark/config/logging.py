# topmark:header:start
#
#   project      : StyleMark
#   file         : logging.py
#   file_relpath : src/stylemark/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging setup for StyleMark.

Every module obtains its logger with ``get_logger(__name__)``. The returned
`StylemarkLogger` adds a ``trace()`` method for the TRACE level, which sits
below DEBUG and is enabled with ``-vvv``.

Log records always go to ``stderr``. ``stdout`` carries only the report, so
JSON/NDJSON output stays parseable at any verbosity.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

# Used from INFO upwards:
LOG_FORMAT: Final[str] = "stylemark: %(levelname)s: %(message)s"
# Used at DEBUG and TRACE; locates the record in the pipeline:
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d: %(message)s"

# Checked top-down; the first threshold at or below the record level wins.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.ERROR, chalk.red_bright),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class StylemarkLogger(logging.Logger):
    """Logger with a ``trace()`` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(StylemarkLogger)


class ChalkFormatter(logging.Formatter):
    """Color each formatted record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return message


def setup_logging(level: int | None = None) -> None:
    """Route all records at ``level`` or above to ``stderr``.

    Any handler installed by an earlier call is replaced, so calling this once
    per CLI invocation is safe.

    Args:
        level (int | None): Threshold level. ``None`` means CRITICAL, which keeps
            a default run silent.
    """
    threshold: int = logging.CRITICAL if level is None else level
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if threshold >= logging.INFO else DEBUG_LOG_FORMAT)
    )
    logging.basicConfig(level=threshold, handlers=[handler], force=True)


def get_logger(name: str) -> StylemarkLogger:
    """Return the `StylemarkLogger` registered under ``name``."""
    return cast("StylemarkLogger", logging.getLogger(name))
