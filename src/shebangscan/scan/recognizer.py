# topmark:header:start
#
#   project      : ShebangScan
#   file         : recognizer.py
#   file_relpath : src/shebangscan/scan/recognizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shebang recognizer.

A hand-written, single-pass scanner for the first line of a shell script. The
line grammar is flat:

    shebang_line  := "#!" ws? (launcher | direct) ws? args? ws? newline
    launcher      := path_ending_in_env ws (flag ws)* interpreter
    direct        := path_prefix? interpreter_name
    newline       := "\\n" | "\\r\\n"

The two invocation forms are tried in a fixed order on independent cursors
(launcher first, since ``/usr/bin/env`` would otherwise read as a direct
invocation of an interpreter named ``env``); the first branch that matches wins.

`recognize` is total: for any input it returns a
[`ParseResult`][shebangscan.scan.model.ParseResult] whose parts rebuild the input
exactly. Anything that does not form a complete, newline-terminated shebang line
degrades to "no shebang, whole file is body".
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, NamedTuple

from shebangscan.config.logging import ShebangScanLogger, get_logger
from shebangscan.constants import (
    INLINE_WHITESPACE,
    LAUNCHER_NAME,
    SHEBANG_MARKER,
    TOKEN_TERMINATORS,
)
from shebangscan.scan.model import (
    Interpreter,
    Node,
    NodeKind,
    ParseResult,
    ScriptBody,
    ShebangForm,
    ShebangLine,
)
from shebangscan.scan.resolver import resolve
from shebangscan.scan.spans import Span

if TYPE_CHECKING:
    from collections.abc import Callable

logger: ShebangScanLogger = get_logger(__name__)


@dataclass
class _LineScanner:
    """Forward-only cursor over the content of the first line (newline excluded)."""

    text: str
    pos: int
    end: int

    def fork(self) -> _LineScanner:
        return replace(self)

    def whitespace(self) -> Span | None:
        """Consume a run of spaces/tabs."""
        start: int = self.pos
        while self.pos < self.end and self.text[self.pos] in INLINE_WHITESPACE:
            self.pos += 1
        return Span(start, self.pos) if self.pos > start else None

    def token(self) -> Span | None:
        """Consume a maximal run of non-whitespace characters."""
        start: int = self.pos
        while self.pos < self.end and self.text[self.pos] not in TOKEN_TERMINATORS:
            self.pos += 1
        return Span(start, self.pos) if self.pos > start else None

    def rest(self) -> Span | None:
        """Consume everything up to the end of the line content."""
        if self.pos >= self.end:
            return None
        span = Span(self.pos, self.end)
        self.pos = self.end
        return span


class _BranchMatch(NamedTuple):
    form: ShebangForm
    nodes: list[Node]
    path_prefix: str
    launcher_flags: tuple[str, ...]
    interpreter_token: str
    scanner: _LineScanner


def _split_last_segment(token: str) -> int:
    """Return the offset just past the last ``/`` in ``token`` (0 if there is none)."""
    return token.rfind("/") + 1


def _match_via_launcher(scanner: _LineScanner) -> _BranchMatch | None:
    """Match ``<path>/env <flags...> <interpreter>``."""
    text: str = scanner.text
    path: Span | None = scanner.token()
    if path is None:
        return None
    token: str = path.text(text)
    cut: int = _split_last_segment(token)
    if token[cut:] != LAUNCHER_NAME:
        return None

    nodes: list[Node] = [Node(NodeKind.LAUNCHER_PATH, path)]
    gap: Span | None = scanner.whitespace()
    if gap is None:
        logger.trace("launcher %r is not followed by whitespace", token)
        return None
    nodes.append(Node(NodeKind.WHITESPACE, gap))

    flags: list[str] = []
    while True:
        word_span: Span | None = scanner.token()
        if word_span is None:
            logger.trace("launcher %r names no interpreter", token)
            return None
        word: str = word_span.text(text)
        if not word.startswith("-"):
            nodes.append(Node(NodeKind.LAUNCHER_INTERPRETER, word_span))
            return _BranchMatch(
                form=ShebangForm.VIA_LAUNCHER,
                nodes=nodes,
                path_prefix=token[:cut],
                launcher_flags=tuple(flags),
                interpreter_token=word,
                scanner=scanner,
            )
        flags.append(word)
        nodes.append(Node(NodeKind.LAUNCHER_FLAG, word_span))
        gap = scanner.whitespace()
        if gap is None:
            logger.trace("launcher flag %r ends the line", word)
            return None
        nodes.append(Node(NodeKind.WHITESPACE, gap))


def _match_direct(scanner: _LineScanner) -> _BranchMatch | None:
    """Match ``<path prefix><interpreter name>``."""
    path: Span | None = scanner.token()
    if path is None:
        return None
    token: str = path.text(scanner.text)
    cut: int = _split_last_segment(token)

    nodes: list[Node] = []
    if cut > 0:
        nodes.append(Node(NodeKind.INTERPRETER_PATH, Span(path.start, path.start + cut)))
    if cut < len(token):
        nodes.append(Node(NodeKind.INTERPRETER_NAME, Span(path.start + cut, path.end)))
    return _BranchMatch(
        form=ShebangForm.DIRECT,
        nodes=nodes,
        path_prefix=token[:cut],
        launcher_flags=(),
        interpreter_token=token[cut:],
        scanner=scanner,
    )


# Order matters: the launcher form is the more specific one.
_BRANCHES: tuple[Callable[[_LineScanner], _BranchMatch | None], ...] = (
    _match_via_launcher,
    _match_direct,
)


def _scan_shebang(text: str) -> ShebangLine | None:
    if not text.startswith(SHEBANG_MARKER):
        return None

    newline: int = text.find("\n")
    if newline < 0:
        logger.trace("shebang line is not newline-terminated; treating file as body")
        return None
    content_end: int = newline
    if content_end > len(SHEBANG_MARKER) and text[content_end - 1] == "\r":
        content_end -= 1

    nodes: list[Node] = [Node(NodeKind.MARKER, Span(0, len(SHEBANG_MARKER)))]
    scanner = _LineScanner(text=text, pos=len(SHEBANG_MARKER), end=content_end)
    lead: Span | None = scanner.whitespace()
    if lead is not None:
        nodes.append(Node(NodeKind.WHITESPACE, lead))

    match: _BranchMatch | None = None
    for branch in _BRANCHES:
        match = branch(scanner.fork())
        if match is not None:
            break
    if match is None:
        logger.trace("shebang marker without an interpreter token; treating file as body")
        return None
    nodes.extend(match.nodes)

    tail: _LineScanner = match.scanner
    gap: Span | None = tail.whitespace()
    if gap is not None:
        nodes.append(Node(NodeKind.WHITESPACE, gap))

    arguments: str | None = None
    rest: Span | None = tail.rest()
    if rest is not None:
        raw: str = rest.text(text)
        arguments = raw.rstrip(INLINE_WHITESPACE)
        args_span = Span(rest.start, rest.start + len(arguments))
        nodes.append(Node(NodeKind.ARGUMENTS, args_span))
        if args_span.end < rest.end:
            nodes.append(Node(NodeKind.WHITESPACE, Span(args_span.end, rest.end)))

    nodes.append(Node(NodeKind.NEWLINE, Span(content_end, newline + 1)))

    shebang = ShebangLine(
        form=match.form,
        span=Span(0, newline + 1),
        nodes=tuple(nodes),
        path_prefix=match.path_prefix,
        interpreter_token=match.interpreter_token,
        interpreter_name=Interpreter.from_token(match.interpreter_token),
        launcher_flags=match.launcher_flags,
        arguments=arguments,
    )
    logger.trace(
        "shebang: form=%s interpreter=%r (%s) flags=%r args=%r",
        shebang.form.value,
        shebang.interpreter_token,
        shebang.interpreter_name.value,
        shebang.launcher_flags,
        shebang.arguments,
    )
    return shebang


def recognize(text: str) -> ParseResult:
    """Split ``text`` into an optional shebang line and the script body.

    Args:
        text (str): The whole file content.

    Returns:
        ParseResult: The partition; ``result.reconstruct() == text`` always holds.
    """
    shebang: ShebangLine | None = _scan_shebang(text)
    body_start: int = shebang.span.end if shebang is not None else 0
    body = ScriptBody(span=Span(body_start, len(text)), injection_tag=resolve(shebang))
    return ParseResult(source=text, shebang=shebang, body=body)
