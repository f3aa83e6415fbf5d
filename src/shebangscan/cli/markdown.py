# topmark:header:start
#
#   project      : ShebangScan
#   file         : markdown.py
#   file_relpath : src/shebangscan/cli/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown rendering helpers (Click-free)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def escape_cell(text: str) -> str:
    """Escape characters that would break a Markdown table cell."""
    return text.replace("\\", "\\\\").replace("|", "\\|")


def render_markdown_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
        headers (Sequence[str]): Column headers.
        rows (Sequence[Sequence[str]]): Rows, each as long as ``headers``.

    Returns:
        str: The table, ending with a newline (``""`` when there are no headers).

    Raises:
        ValueError: If any row length differs from the number of headers.
    """
    if not headers:
        return ""
    if any(len(row) != len(headers) for row in rows):
        raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [
        max([len(headers[i]), *(len(row[i]) for row in rows)]) for i in range(len(headers))
    ]

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{cell:<{w}}" for cell, w in zip(cells, widths)) + " |"

    lines: list[str] = [_line(headers), _line(["-" * w for w in widths])]
    lines.extend(_line(row) for row in rows)
    return "\n".join(lines) + "\n"
