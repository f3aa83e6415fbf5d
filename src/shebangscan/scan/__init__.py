# topmark:header:start
#
#   project      : ShebangScan
#   file         : __init__.py
#   file_relpath : src/shebangscan/scan/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shebang recognition, interpreter resolution, and injection tagging."""

from __future__ import annotations

from shebangscan.scan.model import (
    InjectionTag,
    Interpreter,
    Node,
    NodeKind,
    ParseResult,
    ScriptBody,
    ShebangForm,
    ShebangLine,
)
from shebangscan.scan.recognizer import recognize
from shebangscan.scan.resolver import Injection, find_injection, resolve
from shebangscan.scan.spans import Span

__all__ = [
    "Injection",
    "InjectionTag",
    "Interpreter",
    "Node",
    "NodeKind",
    "ParseResult",
    "ScriptBody",
    "ShebangForm",
    "ShebangLine",
    "Span",
    "find_injection",
    "recognize",
    "resolve",
]
