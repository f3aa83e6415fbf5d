# topmark:header:start
#
#   project      : ShebangScan
#   file         : languages.py
#   file_relpath : src/shebangscan/cli/commands/languages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShebangScan `languages` command.

Lists the configured languages with their extensions, in registry order (which
is also the tie-break order for shared extensions).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from shebangscan.cli.cli_types import OutputFormat
from shebangscan.cli.cmd_common import get_effective_verbosity
from shebangscan.cli.config_resolver import resolve_config_from_click
from shebangscan.cli.markdown import escape_cell, render_markdown_table
from shebangscan.cli.options import config_options, output_format_option
from shebangscan.languages.registry import LanguageRegistry

if TYPE_CHECKING:
    from shebangscan.cli.console import ConsoleLike
    from shebangscan.config.model import Config
    from shebangscan.languages.base import Language


def _serialize(lang: Language) -> dict[str, Any]:
    return {
        "name": lang.name,
        "extensions": list(lang.extensions),
        "description": lang.description,
    }


@click.command(
    name="languages",
    help="List the configured languages.",
)
@config_options
@output_format_option
def languages_command(
    *,
    config_paths: tuple[str, ...] = (),
    no_config: bool = False,
    merge_config: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List configured languages and their extensions."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    config: Config = resolve_config_from_click(
        config_paths=config_paths, no_config=no_config, merge_config=merge_config
    )
    registry: LanguageRegistry = LanguageRegistry.from_config(config)

    if fmt is OutputFormat.JSON:
        console.print(json.dumps([_serialize(lang) for lang in registry], indent=2))
        return
    if fmt is OutputFormat.NDJSON:
        for lang in registry:
            console.print(json.dumps(_serialize(lang)))
        return
    if fmt is OutputFormat.MARKDOWN:
        console.print("# Languages\n")
        rows: list[list[str]] = [
            [
                f"`{lang.name}`",
                ", ".join(f"`.{ext}`" for ext in lang.extensions),
                escape_cell(lang.description),
            ]
            for lang in registry
        ]
        console.print(render_markdown_table(["Language", "Extensions", "Description"], rows))
        return

    if vlevel > 0:
        console.print(console.styled("Configured languages:\n", bold=True, underline=True))
        for file in config.config_files:
            console.print(console.styled(f"  (from {file})", dim=True))
    width: int = max((len(name) for name in registry.names()), default=1)
    for idx, lang in enumerate(registry, start=1):
        exts: str = ", ".join(f".{ext}" for ext in lang.extensions)
        line: str = f"{idx:>2}. {lang.name:<{width}}  {exts}"
        if vlevel > 0 and lang.description:
            line += f"  {console.styled(lang.description, dim=True)}"
        console.print(line)
