# topmark:header:start
#
#   project      : ShebangScan
#   file         : detect.py
#   file_relpath : src/shebangscan/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShebangScan `detect` command.

Prints the language detected for each file: by extension, with the shebang
line deciding between languages that share an extension (such as ``.sh``).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from shebangscan.cli.cli_types import OutputFormat
from shebangscan.cli.cmd_common import exit_with, get_effective_verbosity, require_paths, worst_exit_code
from shebangscan.cli.config_resolver import resolve_config_from_click
from shebangscan.cli.emitters import build_meta_payload
from shebangscan.cli.exit_codes import ExitCode
from shebangscan.cli.markdown import escape_cell, render_markdown_table
from shebangscan.cli.options import config_options, output_format_option
from shebangscan.languages.detect import LanguageDetectionError, detect_language
from shebangscan.languages.registry import LanguageRegistry

if TYPE_CHECKING:
    from shebangscan.cli.console import ConsoleLike
    from shebangscan.config.model import Config
    from shebangscan.languages.base import Language


@click.command(
    name="detect",
    help="Detect the language of each PATH from its extension and shebang.",
)
@click.argument("paths", nargs=-1, type=str)
@config_options
@output_format_option
def detect_command(
    *,
    paths: tuple[str, ...],
    config_paths: tuple[str, ...] = (),
    no_config: bool = False,
    merge_config: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """Detect file languages.

    Files that do not exist or match no registered language are reported on
    stderr; the command exits with the highest exit code encountered.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    config: Config = resolve_config_from_click(
        config_paths=config_paths, no_config=no_config, merge_config=merge_config
    )
    registry: LanguageRegistry = LanguageRegistry.from_config(config)

    detected: list[tuple[str, Language]] = []
    codes: list[ExitCode] = []
    for arg in require_paths(paths):
        path = Path(arg)
        if not path.is_file():
            console.error(f"{arg}: no such file")
            codes.append(ExitCode.FILE_NOT_FOUND)
            continue
        try:
            lang: Language = detect_language(path, registry)
        except LanguageDetectionError as e:
            console.error(f"{arg}: {e}")
            codes.append(ExitCode.UNSUPPORTED_FILE_TYPE)
            continue
        detected.append((arg, lang))

    if fmt is OutputFormat.JSON:
        payload: dict[str, Any] = {
            "meta": build_meta_payload(),
            "results": [{"path": p, "language": lang.name} for p, lang in detected],
        }
        console.print(json.dumps(payload, indent=2))
    elif fmt is OutputFormat.NDJSON:
        for p, lang in detected:
            console.print(json.dumps({"path": p, "language": lang.name}))
    elif fmt is OutputFormat.MARKDOWN:
        console.print("# Detected Languages\n")
        rows: list[list[str]] = [[f"`{escape_cell(p)}`", f"`{lang.name}`"] for p, lang in detected]
        console.print(render_markdown_table(["Path", "Language"], rows))
    elif vlevel >= 0:
        for p, lang in detected:
            console.print(f"{p}: {console.styled(lang.name, bold=True)}")

    exit_with(worst_exit_code(codes))
