# topmark:header:start
#
#   project      : ShebangScan
#   file         : serializers.py
#   file_relpath : src/shebangscan/scan/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-readable shapes for parse results.

The helpers return JSON-compatible dicts and perform no I/O; CLI emitters
decide between JSON and NDJSON framing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from shebangscan.scan.model import Node, ParseResult, ShebangLine
    from shebangscan.scan.spans import Span


def span_to_dict(span: Span) -> dict[str, int]:
    """Serialize a span as ``{"start": ..., "end": ...}``."""
    return {"start": span.start, "end": span.end}


def node_to_dict(result: ParseResult, node: Node) -> dict[str, Any]:
    """Serialize a node together with the text it covers."""
    return {
        "kind": node.kind.value,
        "span": span_to_dict(node.span),
        "text": result.text_of(node),
    }


def shebang_to_dict(shebang: ShebangLine) -> dict[str, Any]:
    """Serialize the classified fields of a shebang line."""
    return {
        "form": shebang.form.value,
        "span": span_to_dict(shebang.span),
        "path_prefix": shebang.path_prefix,
        "launcher_flags": list(shebang.launcher_flags),
        "interpreter": shebang.interpreter_token,
        "interpreter_name": shebang.interpreter_name.value,
        "arguments": shebang.arguments,
    }


def parse_result_to_dict(
    result: ParseResult,
    *,
    path: str | None = None,
    include_nodes: bool = True,
) -> dict[str, Any]:
    """Serialize a parse result.

    Args:
        result (ParseResult): The result to serialize.
        path (str | None): Optional path label to include.
        include_nodes (bool): Whether to include the named span partition.

    Returns:
        dict[str, Any]: JSON-compatible mapping.
    """
    payload: dict[str, Any] = {}
    if path is not None:
        payload["path"] = path
    payload["shebang"] = shebang_to_dict(result.shebang) if result.shebang else None
    payload["injection_tag"] = result.body.injection_tag.value
    payload["body"] = span_to_dict(result.body.span)
    if include_nodes:
        payload["nodes"] = [node_to_dict(result, node) for node in result.iter_nodes()]
    return payload
