# topmark:header:start
#
#   project      : ShebangScan
#   file         : main.py
#   file_relpath : src/shebangscan/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShebangScan command group.

Group-level options (verbosity and color) are resolved once and stored in
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

import click

from shebangscan.cli.commands.detect import detect_command
from shebangscan.cli.commands.languages import languages_command
from shebangscan.cli.commands.scan import scan_command
from shebangscan.cli.commands.version import version_command
from shebangscan.cli.console import ClickConsole, ConsoleLike
from shebangscan.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from shebangscan.config.logging import ShebangScanLogger, get_logger, resolve_env_log_level, setup_logging

logger: ShebangScanLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ShebangScan: shebang recognition and shell language detection.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ShebangScan CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'shebangscan scan [PATHS...]' to classify shebang lines.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(scan_command)
cli.add_command(detect_command)
cli.add_command(languages_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
