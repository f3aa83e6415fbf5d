# topmark:header:start
#
#   project      : ShebangScan
#   file         : base.py
#   file_relpath : src/shebangscan/languages/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Language definitions used for file language detection."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Language:
    """A formattable language and the file extensions associated with it.

    Attributes:
        name (str): Identifier of the language; also the injection key for shells
            (e.g. ``"bash"``).
        extensions (tuple[str, ...]): Extensions without the leading dot (e.g. ``"sh"``).
            Several languages may share an extension; the shebang then decides.
        description (str): Human-readable description.
    """

    name: str
    extensions: tuple[str, ...]
    description: str = ""

    def matches_extension(self, extension: str) -> bool:
        """Return True if ``extension`` (with or without leading dot) belongs to this language."""
        return extension.lstrip(".") in self.extensions
