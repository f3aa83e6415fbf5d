# topmark:header:start
#
#   project      : ShebangScan
#   file         : loaders.py
#   file_relpath : src/shebangscan/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Reads ShebangScan configuration from:
- the runtime defaults defined in code, and
- on-disk TOML files (``shebangscan.toml`` or ``[tool.shebangscan]`` in
  ``pyproject.toml``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from shebangscan.config.logging import ShebangScanLogger, get_logger
from shebangscan.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION
from shebangscan.languages.builtins import LANGUAGES

if TYPE_CHECKING:
    from pathlib import Path

logger: ShebangScanLogger = get_logger(__name__)

TomlTable = dict[str, Any]

KEY_LANGUAGES = "languages"
KEY_EXTENSIONS = "extensions"
KEY_DESCRIPTION = "description"


class ConfigError(Exception):
    """Raised when a configuration source cannot be read or has an invalid shape."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(f"{path}: {message}" if path is not None else message)
        self.path = path


def load_defaults_dict() -> TomlTable:
    """Return the runtime defaults as a TOML-shaped dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.
    """
    return {
        KEY_LANGUAGES: {
            lang.name: {
                KEY_EXTENSIONS: list(lang.extensions),
                KEY_DESCRIPTION: lang.description,
            }
            for lang in LANGUAGES
        }
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"cannot read file ({e.strerror or e})", path) from e
    except UnicodeDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError("file is not valid UTF-8", path) from e
    except TomlkitParseError as e:
        logger.error("Error parsing TOML from %s: %s", path, e)
        raise ConfigError(f"invalid TOML ({e})", path) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_config_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the ShebangScan table of a parsed config file.

    ``pyproject.toml`` files contribute their ``[tool.shebangscan]`` section (or
    nothing when it is absent); any other file is used as a whole.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
        return None
    return cast("TomlTable", section)


def discover_config_files(directory: Path) -> list[Path]:
    """Return the config files found in ``directory``, lowest precedence first.

    ``pyproject.toml`` is listed before ``shebangscan.toml`` so the tool file
    overrides it when both exist.
    """
    found: list[Path] = []
    for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
        candidate: Path = directory / name
        if candidate.is_file():
            found.append(candidate)
    logger.debug("Discovered config files in %s: %s", directory, found)
    return found
