# topmark:header:start
#
#   project      : StyleMark
#   file         : console.py
#   file_relpath : src/stylemark/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

The report (diagnostics, summary, JSON) goes to stdout through `print`.
Skipped-file notices go through `warn` and fatal errors through `error`, both on
stderr. Internal logging is separate (see
[`stylemark.config.logging`][stylemark.config.logging]).
"""

from __future__ import annotations

import sys
from typing import Protocol

import click


class ConsoleLike(Protocol):
    """What the command and the CLI errors need from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None: ...

    def warn(self, text: str) -> None: ...

    def error(self, text: str) -> None: ...


class ClickConsole:
    """`ConsoleLike` writing through `click.echo`.

    Streams are looked up at write time, so output follows `sys.stdout` and
    `sys.stderr` when they are swapped (as `click.testing.CliRunner` does).

    Args:
        enable_color (bool): Keep ANSI codes in the output; Click strips them
            otherwise.
    """

    def __init__(self, *, enable_color: bool = False) -> None:
        self.enable_color: bool = enable_color

    def _write(self, text: str, *, to_stderr: bool, nl: bool = True, fg: str | None = None) -> None:
        if fg is not None:
            text = click.style(text, fg=fg)
        click.echo(
            text,
            nl=nl,
            file=sys.stderr if to_stderr else sys.stdout,
            color=self.enable_color,
        )

    def print(self, text: str = "", *, nl: bool = True) -> None:
        self._write(text, to_stderr=False, nl=nl)

    def warn(self, text: str) -> None:
        self._write(text, to_stderr=True, fg="yellow")

    def error(self, text: str) -> None:
        self._write(text, to_stderr=True, fg="bright_red")
