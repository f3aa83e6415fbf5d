# topmark:header:start
#
#   project      : ShebangScan
#   file         : emitters.py
#   file_relpath : src/shebangscan/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render `scan` results in the supported output formats.

Human output is one line per input (``PATH: TAG  (details)``), optionally
followed by the node partition of the shebang line. Machine output uses the
shapes from [`shebangscan.scan.serializers`][shebangscan.scan.serializers].
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, NamedTuple

from shebangscan.cli.cli_types import OutputFormat
from shebangscan.cli.markdown import escape_cell, render_markdown_table
from shebangscan.constants import LAUNCHER_NAME, SHEBANGSCAN_VERSION
from shebangscan.scan.model import InjectionTag, Interpreter, ShebangForm
from shebangscan.scan.serializers import parse_result_to_dict

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shebangscan.cli.console import ConsoleLike
    from shebangscan.scan.model import ParseResult, ShebangLine


class ScanItem(NamedTuple):
    """A successfully scanned input."""

    label: str
    result: ParseResult


def build_meta_payload() -> dict[str, str]:
    """Return the tool name and version for machine output."""
    return {"tool": "shebangscan", "version": SHEBANGSCAN_VERSION}


def describe_shebang(shebang: ShebangLine | None) -> str:
    """Return a one-line human description of a shebang line."""
    if shebang is None:
        return "no shebang"
    if shebang.form is ShebangForm.VIA_LAUNCHER:
        invocation: str = " ".join(
            [f"{shebang.path_prefix}{LAUNCHER_NAME}", *shebang.launcher_flags, shebang.interpreter_token]
        )
        parts: list[str] = [f"via launcher: {invocation}"]
    else:
        parts = [f"direct: {shebang.path_prefix}{shebang.interpreter_token}"]
    if shebang.interpreter_name is Interpreter.UNRECOGNIZED:
        parts.append("unrecognized interpreter")
    if shebang.arguments is not None:
        parts.append(f"arguments: {shebang.arguments}")
    return ", ".join(parts)


def _tag_style(tag: InjectionTag) -> dict[str, Any]:
    if tag is InjectionTag.NONE:
        return {"fg": "yellow"}
    return {"fg": "green", "bold": True}


def _emit_default(console: ConsoleLike, items: Sequence[ScanItem], *, show_nodes: bool) -> None:
    for item in items:
        tag: InjectionTag = item.result.body.injection_tag
        details: str = console.styled(f"({describe_shebang(item.result.shebang)})", dim=True)
        console.print(f"{item.label}: {console.styled(tag.value, **_tag_style(tag))}  {details}")
        if not show_nodes:
            continue
        for node in item.result.iter_nodes():
            span: str = str(node.span)
            console.print(f"    {node.kind.value:<16} {span:<12} {item.result.text_of(node)!r}")


def _emit_markdown(console: ConsoleLike, items: Sequence[ScanItem], *, show_nodes: bool) -> None:
    console.print("# ShebangScan Results\n")
    rows: list[list[str]] = []
    for item in items:
        shebang: ShebangLine | None = item.result.shebang
        rows.append(
            [
                f"`{escape_cell(item.label)}`",
                shebang.form.value if shebang else "",
                f"`{escape_cell(shebang.interpreter_token)}`" if shebang else "",
                escape_cell(" ".join(shebang.launcher_flags)) if shebang else "",
                escape_cell(shebang.arguments or "") if shebang else "",
                f"**{item.result.body.injection_tag.value}**",
            ]
        )
    headers: list[str] = ["Path", "Form", "Interpreter", "Launcher Flags", "Arguments", "Tag"]
    console.print(render_markdown_table(headers, rows))

    if not show_nodes:
        return
    for item in items:
        console.print(f"## `{item.label}`\n")
        node_rows: list[list[str]] = [
            [
                f"`{node.kind.value}`",
                str(node.span),
                f"`{escape_cell(repr(item.result.text_of(node)))}`",
            ]
            for node in item.result.iter_nodes()
        ]
        console.print(render_markdown_table(["Node", "Span", "Text"], node_rows))


def emit_scan_results(
    console: ConsoleLike,
    items: Sequence[ScanItem],
    *,
    fmt: OutputFormat,
    show_nodes: bool,
) -> None:
    """Write scan results to the console in the requested format.

    Args:
        console (ConsoleLike): Program-output console.
        items (Sequence[ScanItem]): Results in input order.
        fmt (OutputFormat): Output format.
        show_nodes (bool): Whether to include the node partition.
    """
    if fmt is OutputFormat.JSON:
        payload: dict[str, Any] = {
            "meta": build_meta_payload(),
            "results": [
                parse_result_to_dict(item.result, path=item.label, include_nodes=show_nodes)
                for item in items
            ],
        }
        console.print(json.dumps(payload, indent=2))
    elif fmt is OutputFormat.NDJSON:
        for item in items:
            console.print(
                json.dumps(parse_result_to_dict(item.result, path=item.label, include_nodes=show_nodes))
            )
    elif fmt is OutputFormat.MARKDOWN:
        _emit_markdown(console, items, show_nodes=show_nodes)
    else:
        _emit_default(console, items, show_nodes=show_nodes)
