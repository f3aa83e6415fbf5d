# topmark:header:start
#
#   project      : ShebangScan
#   file         : detect.py
#   file_relpath : src/shebangscan/languages/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detect the language of a file from its extension and shebang line.

Shell dialects commonly share the ``.sh`` extension. When more than one
registered language claims a file's extension, the shebang line is recognized
and resolved, and the language named by the resulting injection tag wins. If the
shebang cannot decide (absent, unsupported interpreter, or naming a language that
does not claim the extension), the first candidate in registry order is used.

Files without an extension are detected from the shebang alone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shebangscan.config.logging import ShebangScanLogger, get_logger
from shebangscan.constants import MAX_SHEBANG_LINE_BYTES, SHEBANG_MARKER
from shebangscan.scan.model import InjectionTag
from shebangscan.scan.recognizer import recognize
from shebangscan.scan.resolver import resolve

if TYPE_CHECKING:
    from pathlib import Path

    from shebangscan.languages.base import Language
    from shebangscan.languages.registry import LanguageRegistry

logger: ShebangScanLogger = get_logger(__name__)


class LanguageDetectionError(Exception):
    """Base class for language detection failures."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class UnknownExtensionError(LanguageDetectionError):
    """Raised when no registered language claims the file extension."""

    def __init__(self, path: Path, extension: str) -> None:
        super().__init__(f"no language registered for extension '.{extension}'", path)
        self.extension = extension


class NoExtensionError(LanguageDetectionError):
    """Raised when a file has no extension and no usable shebang line."""

    def __init__(self, path: Path) -> None:
        super().__init__("file has no extension and no recognized shebang", path)


def read_shebang_line(path: Path) -> str | None:
    """Return the first line of ``path`` when it starts with ``#!``.

    The line is returned with its terminator, if any. The marker must be at byte
    0 (a leading BOM disqualifies the line). At most ``MAX_SHEBANG_LINE_BYTES``
    are read; a longer first line is not treated as a shebang.

    Args:
        path (Path): File to inspect.

    Returns:
        str | None: The first line, or None if the file has no shebang, cannot be
            read, or its first line is too long or not valid UTF-8.
    """
    marker: bytes = SHEBANG_MARKER.encode("ascii")
    limit: int = MAX_SHEBANG_LINE_BYTES - len(marker)
    try:
        with path.open("rb") as fh:
            if fh.read(len(marker)) != marker:
                return None
            rest: bytes = fh.readline(limit)
    except OSError as e:
        logger.debug("Cannot read %s: %s", path, e)
        return None
    if len(rest) == limit and not rest.endswith(b"\n"):
        logger.debug("First line of %s exceeds %d bytes", path, MAX_SHEBANG_LINE_BYTES)
        return None
    try:
        return (marker + rest).decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Shebang line of %s is not valid UTF-8", path)
        return None


def shebang_language(path: Path) -> InjectionTag:
    """Return the injection tag named by the shebang line of ``path``.

    A file consisting of only an unterminated shebang line is treated as if the
    line were terminated.
    """
    line: str | None = read_shebang_line(path)
    if line is None:
        return InjectionTag.NONE
    if not line.endswith("\n"):
        line += "\n"
    tag: InjectionTag = resolve(recognize(line).shebang)
    logger.debug("Shebang of %s resolves to %s", path, tag.value)
    return tag


def detect_language(path: Path, registry: LanguageRegistry) -> Language:
    """Detect the language of ``path``.

    Args:
        path (Path): File to classify; it is only opened when the extension is
            ambiguous or missing.
        registry (LanguageRegistry): Languages to choose from.

    Returns:
        Language: The detected language.

    Raises:
        UnknownExtensionError: If no registered language claims the extension.
        NoExtensionError: If the file has no extension and the shebang names no
            registered language.
    """
    extension: str = path.suffix.lstrip(".")

    if not extension:
        tag: InjectionTag = shebang_language(path)
        lang: Language | None = registry.get(tag.value) if tag is not InjectionTag.NONE else None
        if lang is None:
            raise NoExtensionError(path)
        logger.debug("Detected %s for %s (shebang, no extension)", lang.name, path)
        return lang

    candidates: list[Language] = registry.for_extension(extension)
    if not candidates:
        raise UnknownExtensionError(path, extension)
    if len(candidates) == 1:
        logger.debug("Detected %s for %s (extension)", candidates[0].name, path)
        return candidates[0]

    tag = shebang_language(path)
    for candidate in candidates:
        if candidate.name == tag.value:
            logger.debug("Detected %s for %s (shebang)", candidate.name, path)
            return candidate

    logger.debug(
        "Ambiguous extension '.%s' for %s (%s); using %s",
        extension,
        path,
        ", ".join(c.name for c in candidates),
        candidates[0].name,
    )
    return candidates[0]
