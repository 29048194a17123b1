# topmark:header:start
#
#   project      : StyleMark
#   file         : main.py
#   file_relpath : src/stylemark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StyleMark command-line entry point.

A single command checks the given files and directories:

    stylemark [OPTIONS] PATH...

Shared state (logging level, color, console) is initialized once and stored in
``ctx.obj``. Domain errors are converted to CLI errors carrying exit status 2;
otherwise the exit status is derived from the run result.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from stylemark.cli.console import ClickConsole
from stylemark.cli.errors import StylemarkConfigError, StylemarkUsageError
from stylemark.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    config_options,
    execution_options,
    file_selection_options,
    resolve_color_mode,
    resolve_verbosity,
    rule_options,
    split_csv,
)
from stylemark.config.loaders import render_config_toml, resolve_config
from stylemark.config.logging import get_logger, setup_logging
from stylemark.config.model import MutableRuleConfig
from stylemark.constants import STYLEMARK_TOOL_NAME, STYLEMARK_VERSION
from stylemark.core.errors import InvalidConfigError
from stylemark.engine import run_files
from stylemark.file_resolver import resolve_file_list
from stylemark.report import OutputFormat, render
from stylemark.rules.registry import RULES

if TYPE_CHECKING:
    from stylemark.cli.console import ConsoleLike
    from stylemark.config.logging import StylemarkLogger
    from stylemark.config.model import RuleConfig
    from stylemark.engine import RunResult

logger: StylemarkLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color: bool | None,
    output_format: OutputFormat,
) -> ConsoleLike:
    """Initialize shared state (logging, color, console) on the Click context.

    Returns:
        ConsoleLike: The console used for all program output.
    """
    ctx.obj = ctx.obj or {}

    log_level: int = resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    enable_color: bool = resolve_color_mode(color_flag=color, output_format=output_format)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console
    return console


def emit_rule_list(console: ConsoleLike) -> None:
    """Print the registered rules in evaluation order."""
    width: int = max(len(rule.rule_id.value) for rule in RULES)
    for rule in RULES:
        console.print(f"{rule.rule_id.value:<{width}}  {rule.severity.value:<7}  {rule.summary}")


def emit_skipped(console: ConsoleLike, result: RunResult) -> None:
    """Report every skipped file on stderr."""
    for report in result.skipped:
        reason: str = report.skip_reason.value if report.skip_reason else "skipped"
        console.warn(f"{report.path}: skipped ({reason}): {report.detail}")


@click.command(
    name=STYLEMARK_TOOL_NAME,
    context_settings=CONTEXT_SETTINGS,
    help="Check Elm-style source files against the formatting style guide.",
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=str))
@rule_options
@config_options
@file_selection_options
@execution_options
@common_color_options
@common_verbose_options
@click.option("--list-rules", is_flag=True, default=False, help="List the rules and exit.")
@click.option(
    "--show-config",
    is_flag=True,
    default=False,
    help="Print the effective configuration as TOML and exit.",
)
@click.version_option(STYLEMARK_VERSION, "--version", prog_name=STYLEMARK_TOOL_NAME)
@click.pass_context
def cli(
    ctx: click.Context,
    paths: tuple[str, ...],
    max_line_length: int | None,
    indent_width: int | None,
    disabled_rules: tuple[str, ...],
    config_file: str | None,
    no_config: bool,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    output_format: OutputFormat,
    jobs: int,
    timeout: float | None,
    color: bool | None,
    verbose: int,
    quiet: int,
    list_rules: bool,
    show_config: bool,
) -> None:
    """Entry point for the StyleMark CLI."""
    console: ConsoleLike = init_common_state(
        ctx, verbose=verbose, quiet=quiet, color=color, output_format=output_format
    )

    if list_rules:
        emit_rule_list(console)
        return

    overrides: MutableRuleConfig = MutableRuleConfig().apply_overrides(
        max_line_length=max_line_length,
        indent_width=indent_width,
        disabled_rules=split_csv(disabled_rules),
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
    )
    try:
        config: RuleConfig = resolve_config(
            config_file=Path(config_file) if config_file else None,
            discover=not no_config,
            overrides=overrides,
        )
    except InvalidConfigError as e:
        raise StylemarkConfigError(str(e)) from e

    if show_config:
        console.print(render_config_toml(config), nl=False)
        return

    if not paths:
        raise StylemarkUsageError("No PATH given. Try 'stylemark --help'.")

    logger.info("Checking %d path(s) with %d job(s)", len(paths), jobs)
    result: RunResult = run_files(
        resolve_file_list(paths, config), config, jobs=jobs, timeout=timeout
    )

    output: str = render(
        result,
        output_format,
        color=ctx.obj["color_enabled"],
        summary=quiet == 0,
    )
    if output:
        console.print(output, nl=False)
    emit_skipped(console, result)

    logger.debug("Exit status: %s", result.exit_code.name)
    ctx.exit(int(result.exit_code))


if __name__ == "__main__":
    cli()
