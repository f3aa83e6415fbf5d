# topmark:header:start
#
#   project      : ShebangScan
#   file         : model.py
#   file_relpath : src/shebangscan/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot used by language detection and the CLI.
    - `MutableConfig`: a mutable builder used during discovery/merge; it is
      frozen into `Config` once all layers are applied.
    - `CollationMode`: how a layer combines with the layers below it.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) ``pyproject.toml`` (``[tool.shebangscan]``) in the working directory
    3) ``shebangscan.toml`` in the working directory
    4) Files passed explicitly via ``--config`` (in the order provided)

Languages merge by name and key by key: a later layer only replaces the keys
it actually sets (``extensions``, ``description``), so
``[languages.bash] description = "GNU Bash"`` keeps bash's extensions. In
``MERGE`` mode, ``extensions`` are unioned instead of replaced. A redefined
language keeps its position; new languages are appended after the existing
ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from shebangscan.config.loaders import (
    KEY_DESCRIPTION,
    KEY_EXTENSIONS,
    KEY_LANGUAGES,
    ConfigError,
    discover_config_files,
    extract_config_table,
    load_defaults_dict,
    load_toml_dict,
)
from shebangscan.config.logging import ShebangScanLogger, get_logger
from shebangscan.languages.base import Language

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shebangscan.config.loaders import TomlTable

logger: ShebangScanLogger = get_logger(__name__)

_LANGUAGE_KEYS: Final[frozenset[str]] = frozenset({KEY_EXTENSIONS, KEY_DESCRIPTION})


class CollationMode(str, Enum):
    """How a configuration layer is combined with the layers below it.

    Attributes:
        REVISE: Keys set by the higher layer replace the lower values; keys it
            does not set are kept.
        MERGE: Like ``REVISE``, but ``extensions`` are the union of both layers
            (lower layer first).
    """

    REVISE = "revise"
    MERGE = "merge"


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        languages (tuple[Language, ...]): Languages in precedence order.
        config_files (tuple[Path, ...]): Files that contributed to this config.
    """

    languages: tuple[Language, ...]
    config_files: tuple[Path, ...] = ()

    def language_names(self) -> tuple[str, ...]:
        """Return the configured language names, in order."""
        return tuple(lang.name for lang in self.languages)


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Attributes:
        languages (dict[str, Language]): Languages by name, in precedence order.
        config_files (list[Path]): Files that contributed to this draft.
        set_keys (dict[str, frozenset[str]]): For each language, the keys a layer
            set explicitly. Languages without an entry are treated as fully set.
    """

    languages: dict[str, Language] = field(default_factory=lambda: {})
    config_files: list[Path] = field(default_factory=lambda: [])
    set_keys: dict[str, frozenset[str]] = field(default_factory=lambda: {})

    def freeze(self) -> Config:
        """Return an immutable snapshot of this draft."""
        return Config(
            languages=tuple(self.languages.values()),
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Build a draft from the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a draft from a TOML-shaped dict.

        Args:
            data (TomlTable): The ShebangScan table (already extracted from ``pyproject.toml``).
            config_file (Path | None): Source file, used in error messages.

        Returns:
            MutableConfig: The parsed draft, recording which keys each language sets.

        Raises:
            ConfigError: If ``languages`` or one of its entries has an invalid shape.
        """
        draft = cls()
        if config_file is not None:
            draft.config_files.append(config_file)

        table: Any = data.get(KEY_LANGUAGES, {})
        if not isinstance(table, dict):
            raise ConfigError(f"'{KEY_LANGUAGES}' must be a table", config_file)

        for name, entry in table.items():
            draft.languages[name] = _parse_language(str(name), entry, config_file)
            draft.set_keys[name] = frozenset(key for key in _LANGUAGE_KEYS if key in entry)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from a single TOML file.

        Returns:
            MutableConfig | None: The draft, or None for a ``pyproject.toml`` without a
                ``[tool.shebangscan]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable | None = extract_config_table(path, load_toml_dict(path))
        if table is None:
            return None
        return cls.from_toml_dict(table, config_file=path)

    @classmethod
    def load_merged(
        cls,
        *,
        directory: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
        collation: CollationMode = CollationMode.REVISE,
    ) -> MutableConfig:
        """Discover and merge configuration layers.

        Args:
            directory (Path | None): Directory searched for config files (CWD if None).
            extra_config_files (Iterable[Path] | None): Explicit files merged last.
            no_config (bool): If True, skip discovery in ``directory``.
            collation (CollationMode): How each layer combines with the ones below.

        Returns:
            MutableConfig: The merged draft.

        Raises:
            ConfigError: If an explicit config file does not exist, or any source is invalid.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for path in discover_config_files(directory or Path.cwd()):
                layer: MutableConfig | None = cls.from_toml_file(path)
                if layer is not None:
                    draft = draft.merge_with(layer, mode=collation)

        for extra in extra_config_files or ():
            extra_path = Path(extra)
            if not extra_path.is_file():
                raise ConfigError("config file not found", extra_path)
            layer = cls.from_toml_file(extra_path)
            if layer is not None:
                draft = draft.merge_with(layer, mode=collation)

        logger.debug(
            "Merged config (%s): languages=%s files=%s",
            collation.value,
            list(draft.languages),
            draft.config_files,
        )
        return draft

    def merge_with(
        self,
        other: MutableConfig,
        *,
        mode: CollationMode = CollationMode.REVISE,
    ) -> MutableConfig:
        """Return a new draft with ``other`` collated on top of this draft.

        Args:
            other (MutableConfig): The higher-precedence layer.
            mode (CollationMode): How keys set in both layers are combined.

        Returns:
            MutableConfig: The collated draft; neither input is modified.
        """
        merged: dict[str, Language] = dict(self.languages)
        set_keys: dict[str, frozenset[str]] = dict(self.set_keys)
        for name, graft in other.languages.items():
            keys: frozenset[str] = other.set_keys.get(name, _LANGUAGE_KEYS)
            base: Language | None = merged.get(name)
            merged[name] = graft if base is None else _collate_language(base, graft, keys, mode)
            set_keys[name] = set_keys.get(name, frozenset()) | keys
        return MutableConfig(
            languages=merged,
            config_files=[*self.config_files, *other.config_files],
            set_keys=set_keys,
        )


def _collate_language(
    base: Language,
    graft: Language,
    keys: frozenset[str],
    mode: CollationMode,
) -> Language:
    extensions: tuple[str, ...] = base.extensions
    if KEY_EXTENSIONS in keys:
        if mode is CollationMode.MERGE:
            extensions = tuple(dict.fromkeys((*base.extensions, *graft.extensions)))
        else:
            extensions = graft.extensions
    description: str = graft.description if KEY_DESCRIPTION in keys else base.description
    return Language(name=base.name, extensions=extensions, description=description)


def _parse_language(name: str, entry: Any, config_file: Path | None) -> Language:
    if not isinstance(entry, dict):
        raise ConfigError(f"'{KEY_LANGUAGES}.{name}' must be a table", config_file)

    extensions: Any = entry.get(KEY_EXTENSIONS, [])
    if not isinstance(extensions, list) or not all(isinstance(e, str) for e in extensions):
        raise ConfigError(
            f"'{KEY_LANGUAGES}.{name}.{KEY_EXTENSIONS}' must be a list of strings", config_file
        )

    description: Any = entry.get(KEY_DESCRIPTION, "")
    if not isinstance(description, str):
        raise ConfigError(
            f"'{KEY_LANGUAGES}.{name}.{KEY_DESCRIPTION}' must be a string", config_file
        )

    return Language(
        name=name,
        extensions=tuple(ext.lstrip(".") for ext in extensions),
        description=description,
    )
