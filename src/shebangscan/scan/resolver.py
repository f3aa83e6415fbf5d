# topmark:header:start
#
#   project      : ShebangScan
#   file         : resolver.py
#   file_relpath : src/shebangscan/scan/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Interpreter resolution and injection tagging.

Maps a recognized shebang line to the key a grammar selector uses to parse the
script body. This module never loads or runs another grammar; it only produces
the selection key and the span to apply it to.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from shebangscan.config.logging import ShebangScanLogger, get_logger
from shebangscan.scan.model import InjectionTag, Interpreter

if TYPE_CHECKING:
    from collections.abc import Mapping

    from shebangscan.scan.model import ParseResult, ShebangLine
    from shebangscan.scan.spans import Span

logger: ShebangScanLogger = get_logger(__name__)

_TAG_BY_INTERPRETER: Final[Mapping[Interpreter, InjectionTag]] = MappingProxyType(
    {
        Interpreter.BASH: InjectionTag.BASH,
        Interpreter.ZSH: InjectionTag.ZSH,
    }
)


@dataclass(frozen=True)
class Injection:
    """A detected injection point.

    Attributes:
        language (InjectionTag): Grammar to parse ``content`` with (never ``NONE``).
        content (Span): The body span to re-parse with that grammar.
    """

    language: InjectionTag
    content: Span


def resolve(shebang: ShebangLine | None) -> InjectionTag:
    """Return the injection tag for a shebang line.

    Args:
        shebang (ShebangLine | None): The recognized line, or ``None`` if the file has none.

    Returns:
        InjectionTag: ``BASH`` or ``ZSH`` for supported interpreters, ``NONE`` otherwise.
    """
    if shebang is None:
        return InjectionTag.NONE
    return _TAG_BY_INTERPRETER.get(shebang.interpreter_name, InjectionTag.NONE)


def find_injection(result: ParseResult) -> Injection | None:
    """Return the injection point of a parse, or ``None`` when the body stays opaque."""
    tag: InjectionTag = resolve(result.shebang)
    if tag is InjectionTag.NONE:
        logger.debug("no injection: shebang=%s", "absent" if result.shebang is None else "unsupported")
        return None
    logger.debug("injection: language=%s content=%s", tag.value, result.body.span)
    return Injection(language=tag, content=result.body.span)
