# topmark:header:start
#
#   project      : ShebangScan
#   file         : injection.py
#   file_relpath : src/shebangscan/scan/injection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Splice an interpreter-specific formatter into the script body.

The formatter itself is an external collaborator: any callable taking the body
text and the injection tag and returning the formatted body. The shebang line
is never handed to it and is copied through verbatim, as is a body whose tag is
``none``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from shebangscan.config.logging import ShebangScanLogger, get_logger
from shebangscan.scan.recognizer import recognize
from shebangscan.scan.resolver import find_injection

if TYPE_CHECKING:
    from shebangscan.scan.model import InjectionTag, ParseResult
    from shebangscan.scan.resolver import Injection

logger: ShebangScanLogger = get_logger(__name__)


class BodyFormatter(Protocol):
    """Formats the text of a script body with the grammar selected by ``language``."""

    def __call__(self, body: str, language: InjectionTag) -> str:
        """Return the formatted body."""
        ...


def apply_injection(text: str, formatter: BodyFormatter) -> str:
    """Format the body of ``text`` with ``formatter`` and keep the shebang line intact.

    Args:
        text (str): The whole file content.
        formatter (BodyFormatter): Downstream formatter for the injected language.

    Returns:
        str: Shebang line followed by the formatted body, or ``text`` unchanged when
            no supported interpreter was detected.
    """
    result: ParseResult = recognize(text)
    injection: Injection | None = find_injection(result)
    if injection is None:
        return text
    formatted: str = formatter(injection.content.text(text), injection.language)
    logger.debug(
        "formatted %s body: %d -> %d chars",
        injection.language.value,
        len(injection.content),
        len(formatted),
    )
    return result.header_text + formatted
