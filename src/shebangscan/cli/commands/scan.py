# topmark:header:start
#
#   project      : ShebangScan
#   file         : scan.py
#   file_relpath : src/shebangscan/cli/commands/scan.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShebangScan `scan` command.

Recognizes the shebang line of each input, classifies its interpreter and
prints the injection tag a grammar selector would use for the body.

Examples:
  Classify a few scripts:

    $ shebangscan scan install.sh tools/*.sh

  Show the node partition of each shebang line as NDJSON:

    $ shebangscan scan --nodes --format=ndjson install.sh

  Read a single script from STDIN:

    $ cat install.sh | shebangscan scan -
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shebangscan.cli.cmd_common import (
    display_label,
    exit_with,
    get_effective_verbosity,
    read_source,
    report_input_error,
    require_paths,
    worst_exit_code,
)
from shebangscan.cli.emitters import ScanItem, emit_scan_results
from shebangscan.cli.cli_types import OutputFormat
from shebangscan.cli.options import output_format_option
from shebangscan.config.logging import ShebangScanLogger, get_logger
from shebangscan.scan.recognizer import recognize

if TYPE_CHECKING:
    from shebangscan.cli.console import ConsoleLike
    from shebangscan.cli.exit_codes import ExitCode

logger: ShebangScanLogger = get_logger(__name__)


@click.command(
    name="scan",
    help="Classify the shebang line of each PATH ('-' reads STDIN).",
)
@click.argument("paths", nargs=-1, type=str)
@output_format_option
@click.option(
    "--nodes",
    "show_nodes",
    is_flag=True,
    help="Include the named span partition of each shebang line.",
)
def scan_command(
    *,
    paths: tuple[str, ...],
    output_format: OutputFormat | None = None,
    show_nodes: bool = False,
) -> None:
    """Scan inputs and report shebang classification and injection tag.

    Unreadable inputs are reported on stderr and skipped; the command exits with
    the highest exit code encountered.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    items: list[ScanItem] = []
    codes: list[ExitCode] = []
    for arg in require_paths(paths):
        label: str = display_label(arg)
        try:
            text: str = read_source(arg)
        except (OSError, UnicodeDecodeError) as e:
            codes.append(report_input_error(label, e))
            continue
        result = recognize(text)
        logger.info("%s: %s", label, result.body.injection_tag.value)
        items.append(ScanItem(label=label, result=result))

    if vlevel >= 0 or fmt is not OutputFormat.DEFAULT:
        emit_scan_results(console, items, fmt=fmt, show_nodes=show_nodes or vlevel > 0)

    exit_with(worst_exit_code(codes))
