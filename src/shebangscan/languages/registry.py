# topmark:header:start
#
#   project      : ShebangScan
#   file         : registry.py
#   file_relpath : src/shebangscan/languages/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordered registry of configured languages.

The registry is built from a frozen [`Config`][shebangscan.config.model.Config]
and keeps the configuration order, which is also the tie-break order when
several languages claim the same extension and the shebang cannot decide.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shebangscan.languages.builtins import LANGUAGES

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from shebangscan.config.model import Config
    from shebangscan.languages.base import Language


class LanguageRegistry:
    """Name → Language mapping that preserves registration order."""

    def __init__(self, languages: Iterable[Language]) -> None:
        self._languages: dict[str, Language] = {}
        for lang in languages:
            self._languages[lang.name] = lang

    @classmethod
    def from_config(cls, config: Config) -> LanguageRegistry:
        """Build a registry from a resolved configuration."""
        return cls(config.languages)

    @classmethod
    def builtin(cls) -> LanguageRegistry:
        """Build a registry with only the built-in languages."""
        return cls(LANGUAGES)

    def __len__(self) -> int:
        return len(self._languages)

    def __iter__(self) -> Iterator[Language]:
        return iter(self._languages.values())

    def __contains__(self, name: object) -> bool:
        return name in self._languages

    def names(self) -> tuple[str, ...]:
        """Return the registered language names, in registration order."""
        return tuple(self._languages)

    def get(self, name: str) -> Language | None:
        """Return the language registered under ``name``, if any."""
        return self._languages.get(name)

    def for_extension(self, extension: str) -> list[Language]:
        """Return the languages claiming ``extension``, in registration order.

        Args:
            extension (str): File extension, with or without the leading dot.

        Returns:
            list[Language]: Matching languages (may be empty).
        """
        return [lang for lang in self._languages.values() if lang.matches_extension(extension)]
