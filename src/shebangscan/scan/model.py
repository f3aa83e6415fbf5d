# topmark:header:start
#
#   project      : ShebangScan
#   file         : model.py
#   file_relpath : src/shebangscan/scan/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable result types produced by the shebang recognizer.

A parse splits the source text into an optional [`ShebangLine`][shebangscan.scan.model.ShebangLine]
and a [`ScriptBody`][shebangscan.scan.model.ScriptBody]. Both are expressed as
spans into the original text; nothing is copied or normalized, so the source can
always be rebuilt byte for byte from the parts.

Every shebang line additionally carries a tuple of named [`Node`][shebangscan.scan.model.Node]
objects that partition its span (marker, whitespace runs, path, flags,
interpreter, arguments, newline). Downstream formatters address those nodes by
kind, the same way they would address nodes of a parse tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from shebangscan.scan.spans import Span


class ShebangForm(str, Enum):
    """How the interpreter is invoked.

    Attributes:
        DIRECT: By path, e.g. ``#!/bin/bash``.
        VIA_LAUNCHER: Through the ``env`` launcher, e.g. ``#!/usr/bin/env -S zsh``.
    """

    DIRECT = "direct"
    VIA_LAUNCHER = "via_launcher"


class Interpreter(str, Enum):
    """Interpreter identity named by a shebang line."""

    BASH = "bash"
    ZSH = "zsh"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def from_token(cls, token: str) -> Interpreter:
        """Classify an interpreter token by exact match.

        Args:
            token (str): The raw interpreter token (e.g. ``"bash"``).

        Returns:
            Interpreter: The matching member, or ``UNRECOGNIZED``.
        """
        if token in (cls.BASH.value, cls.ZSH.value):
            return cls(token)
        return cls.UNRECOGNIZED


class InjectionTag(str, Enum):
    """Key handed to the downstream grammar selector.

    ``NONE`` means the body is left opaque and passed through unchanged.
    """

    BASH = "bash"
    ZSH = "zsh"
    NONE = "none"


class NodeKind(str, Enum):
    """Names of the spans a parse exposes; values follow the grammar node names."""

    SHEBANG_LINE = "shebang_line"
    MARKER = "shebang_marker"
    WHITESPACE = "whitespace"
    INTERPRETER_PATH = "interpreter_path"
    INTERPRETER_NAME = "interpreter_name"
    LAUNCHER_PATH = "env_path"
    LAUNCHER_FLAG = "env_flags"
    LAUNCHER_INTERPRETER = "env_interpreter"
    ARGUMENTS = "args"
    NEWLINE = "newline"
    SCRIPT_CONTENT = "script_content"


@dataclass(frozen=True)
class Node:
    """A named span of the source text."""

    kind: NodeKind
    span: Span


@dataclass(frozen=True)
class ShebangLine:
    """A recognized shebang line, including its terminating newline.

    Attributes:
        form (ShebangForm): Direct path or launcher invocation.
        span (Span): The whole line, starting at offset 0 and ending after the newline.
        nodes (tuple[Node, ...]): Ordered named sub-spans that partition ``span``.
        path_prefix (str): Text before the interpreter name (direct form) or before the
            launcher name (launcher form); may be empty.
        launcher_flags (tuple[str, ...]): Flags passed to the launcher, in order.
        interpreter_token (str): The raw interpreter token.
        interpreter_name (Interpreter): Classification of ``interpreter_token``.
        arguments (str | None): Raw trailing text passed to the interpreter, without
            surrounding whitespace.
    """

    form: ShebangForm
    span: Span
    nodes: tuple[Node, ...]
    path_prefix: str
    interpreter_token: str
    interpreter_name: Interpreter
    launcher_flags: tuple[str, ...] = ()
    arguments: str | None = None


@dataclass(frozen=True)
class ScriptBody:
    """Everything after the shebang line (or the whole file without one)."""

    span: Span
    injection_tag: InjectionTag


@dataclass(frozen=True)
class ParseResult:
    """The partition of a source text into shebang line and body."""

    source: str
    shebang: ShebangLine | None
    body: ScriptBody

    @property
    def has_shebang(self) -> bool:
        """Whether a shebang line was recognized."""
        return self.shebang is not None

    @property
    def header_text(self) -> str:
        """Text of the shebang line, or ``""`` if there is none."""
        if self.shebang is None:
            return ""
        return self.shebang.span.text(self.source)

    @property
    def body_text(self) -> str:
        """Text of the script body."""
        return self.body.span.text(self.source)

    def text_of(self, node: Node) -> str:
        """Return the source text covered by ``node``."""
        return node.span.text(self.source)

    def reconstruct(self) -> str:
        """Concatenate the parts in order; always equal to ``source``."""
        return self.header_text + self.body_text

    def iter_nodes(self) -> Iterator[Node]:
        """Yield the top-level named spans followed by the shebang sub-spans.

        Yields ``shebang_line`` (when present), its sub-nodes, and finally
        ``script_content`` (when the body is non-empty), all in source order.
        """
        if self.shebang is not None:
            yield Node(NodeKind.SHEBANG_LINE, self.shebang.span)
            yield from self.shebang.nodes
        if not self.body.span.is_empty:
            yield Node(NodeKind.SCRIPT_CONTENT, self.body.span)
