# topmark:header:start
#
#   project      : StyleMark
#   file         : errors.py
#   file_relpath : src/stylemark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the StyleMark CLI.

Usage:
    Raise these exceptions in the command to signal fatal errors with
    standardized messages and exit codes. Domain errors from
    [`stylemark.core.errors`][stylemark.core.errors] are converted to these at
    the CLI boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from stylemark.core.exit_codes import ExitCode


class StylemarkCliError(click.ClickException):
    """Base class for all StyleMark CLI errors."""

    exit_code = ExitCode.INVOCATION_ERROR

    def format_message(self) -> str:
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        console: Any = None
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class StylemarkUsageError(StylemarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""


class StylemarkConfigError(StylemarkCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""
