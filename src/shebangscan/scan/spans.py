# topmark:header:start
#
#   project      : ShebangScan
#   file         : spans.py
#   file_relpath : src/shebangscan/scan/spans.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Half-open offset ranges into a source text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Span:
    """A contiguous, half-open range ``[start, end)`` of character offsets.

    Attributes:
        start (int): Offset of the first character.
        end (int): Offset one past the last character.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        """Whether the span covers no characters."""
        return self.start == self.end

    def text(self, source: str) -> str:
        """Return the slice of ``source`` covered by this span."""
        return source[self.start : self.end]

    def byte_range(self, source: str, encoding: str = "utf-8") -> tuple[int, int]:
        """Return the span as byte offsets of ``source`` encoded with ``encoding``.

        Tree-sitter style consumers address text by byte, while spans are character
        offsets; this performs the translation.

        Args:
            source (str): The text the span points into.
            encoding (str): Encoding used to compute byte lengths.

        Returns:
            tuple[int, int]: ``(start_byte, end_byte)``.
        """
        start_byte: int = len(source[: self.start].encode(encoding, errors="surrogatepass"))
        width: int = len(self.text(source).encode(encoding, errors="surrogatepass"))
        return start_byte, start_byte + width

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"
