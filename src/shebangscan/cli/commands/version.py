# topmark:header:start
#
#   project      : ShebangScan
#   file         : version.py
#   file_relpath : src/shebangscan/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShebangScan `version` command.

Prints the current ShebangScan version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from shebangscan.cli.cli_types import OutputFormat
from shebangscan.cli.cmd_common import get_effective_verbosity
from shebangscan.cli.options import output_format_option
from shebangscan.constants import SHEBANGSCAN_VERSION

if TYPE_CHECKING:
    from shebangscan.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ShebangScan.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of ShebangScan.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt.is_machine:
        console.print(json.dumps({"version": SHEBANGSCAN_VERSION}))
    elif fmt is OutputFormat.MARKDOWN:
        console.print("# ShebangScan Version\n")
        console.print(f"**ShebangScan version: {SHEBANGSCAN_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("ShebangScan version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(SHEBANGSCAN_VERSION, bold=True)}")
    else:
        console.print(console.styled(SHEBANGSCAN_VERSION, bold=True))
