# topmark:header:start
#
#   project      : StyleMark
#   file         : options.py
#   file_relpath : src/stylemark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable CLI options and their resolution logic.

Options are grouped into decorators (verbosity, color, rule overrides, file
selection, execution) so that the command definition stays readable. The
helpers here are Click-aware.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from stylemark.cli.cli_types import EnumChoiceParam
from stylemark.cli.errors import StylemarkUsageError
from stylemark.config.logging import TRACE_LEVEL
from stylemark.report.formats import OutputFormat, is_machine_format

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by the command.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the internal logging level from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        The logging level: CRITICAL by default, INFO for ``-v``, DEBUG for
        ``-vv`` and TRACE for ``-vvv`` or more. ``-q`` keeps CRITICAL (it
        suppresses the summary line, not logging).

    Raises:
        StylemarkUsageError: If both ``-v`` and ``-q`` are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise StylemarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    return logging.CRITICAL


def resolve_color_mode(
    *,
    color_flag: bool | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. Machine formats (JSON/NDJSON) are never colored.
        2. ``--color`` / ``--no-color``.
        3. Otherwise color is used when stdout is a terminal.
    """
    if is_machine_format(output_format):
        return False
    if color_flag is not None:
        return color_flag
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return stdout_isatty


def split_csv(values: Iterable[str]) -> list[str]:
    """Flatten repeated and comma-separated option values (``--disable A,B --disable C``)."""
    out: list[str] = []
    for value in values:
        out.extend(part.strip() for part in value.split(",") if part.strip())
    return out


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity on stderr (-v info, -vv debug, -vvv trace).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Do not print the summary line.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--color/--no-color`` switch (default: auto-detect)."""
    return click.option(
        "--color/--no-color",
        "color",
        default=None,
        help="Force colored text output on or off (default: on when stdout is a terminal).",
    )(f)


def rule_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add options overriding the rule configuration."""
    f = click.option(
        "--max-line-length",
        "max_line_length",
        type=int,
        default=None,
        metavar="N",
        help="Maximum line length in characters (default: 80).",
    )(f)
    f = click.option(
        "--indent-width",
        "indent_width",
        type=int,
        default=None,
        metavar="N",
        help="Width of one indentation step in spaces, 1 to 8 (default: 4).",
    )(f)
    f = click.option(
        "--disable",
        "disabled_rules",
        multiple=True,
        metavar="RULE",
        help="Disable a rule by id (repeatable, or comma-separated).",
    )(f)
    return f


def config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add configuration file options."""
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        metavar="FILE",
        help="Read configuration from FILE (stylemark.toml or pyproject.toml).",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        default=False,
        help="Do not look for a configuration file.",
    )(f)
    return f


def file_selection_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add include/exclude pattern options for directory walks."""
    f = click.option(
        "--include",
        "include_patterns",
        multiple=True,
        metavar="PATTERN",
        help="Check files matching PATTERN when walking directories (default: *.elm).",
    )(f)
    f = click.option(
        "--exclude",
        "exclude_patterns",
        multiple=True,
        metavar="PATTERN",
        help="Skip files matching PATTERN when walking directories (default: elm-stuff/).",
    )(f)
    return f


def execution_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add output format and execution options."""
    f = click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=OutputFormat.TEXT.value,
        show_default=True,
        help=f"Output format ({', '.join(e.value for e in OutputFormat)}).",
    )(f)
    f = click.option(
        "--jobs",
        "-j",
        "jobs",
        type=click.IntRange(min=1),
        default=1,
        show_default=True,
        help="Number of files checked in parallel.",
    )(f)
    f = click.option(
        "--timeout",
        "timeout",
        type=click.FloatRange(min=0, min_open=True),
        default=None,
        metavar="SECONDS",
        help="Stop after SECONDS; files not checked by then are reported as skipped.",
    )(f)
    return f
