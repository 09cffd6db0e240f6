# topmark:header:start
#
#   project      : clippy-lint-tester
#   file         : main.py
#   file_relpath : src/clippy_lint_tester/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for clippy-lint-tester.

Group-level options are initialized once and placed into ``ctx.obj``;
subcommands read the console and verbosity level from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from clippy_lint_tester.cli.commands.clean_config import clean_config_command
from clippy_lint_tester.cli.commands.clean_source import clean_source_command
from clippy_lint_tester.cli.commands.touch_crate_roots import touch_crate_roots_command
from clippy_lint_tester.cli.console import ClickConsole
from clippy_lint_tester.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from clippy_lint_tester.config.logging import get_logger, resolve_env_log_level, setup_logging
from clippy_lint_tester.constants import TOOL_VERSION

if TYPE_CHECKING:
    from clippy_lint_tester.cli.console import ConsoleLike
    from clippy_lint_tester.config.logging import ClippyLintTesterLogger

logger: ClippyLintTesterLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: verbosity=%d color=%s", ctx.obj["verbosity_level"], enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Neutralize lint-control attributes in Rust crates before running Clippy.",
)
@click.version_option(TOOL_VERSION, "--version", prog_name="clippy-lint-tester")
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the clippy-lint-tester CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'clippy-lint-tester clean-source PATH' to clean a crate.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(clean_source_command)

cli.add_command(clean_config_command)

cli.add_command(touch_crate_roots_command)

if __name__ == "__main__":
    cli()
