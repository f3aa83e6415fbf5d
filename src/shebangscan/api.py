# topmark:header:start
#
#   project      : ShebangScan
#   file         : api.py
#   file_relpath : src/shebangscan/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public ShebangScan API (stable surface).

This module exposes a **small, typed API** for integrations that want to use
ShebangScan programmatically without going through the CLI. Internal modules
remain private; the names re-exported here follow semver.

Notes:
-----
- `recognize`, `resolve` and `find_injection` are pure and never raise.
- `apply_injection` hands the body to a caller-supplied formatter; exceptions
  raised by that formatter propagate unchanged.
- `detect_language` accepts either a plain **mapping** mirroring the TOML shape
  or a frozen [`Config`][shebangscan.config.model.Config]. With ``config=None``
  the built-in languages are used (no config discovery).

```python
from pathlib import Path

from shebangscan import api

result = api.recognize("#!/usr/bin/env -S zsh -f\\nls\\n")
assert api.resolve(result.shebang) is api.InjectionTag.ZSH

lang = api.detect_language(
    Path("build.sh"),
    config={"languages": {"ksh": {"extensions": ["ksh"]}}},
)
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from shebangscan.config.model import Config, MutableConfig
from shebangscan.constants import SHEBANGSCAN_VERSION
from shebangscan.languages import detect as _detect
from shebangscan.languages.detect import (
    LanguageDetectionError,
    NoExtensionError,
    UnknownExtensionError,
)
from shebangscan.languages.registry import LanguageRegistry
from shebangscan.scan.injection import BodyFormatter, apply_injection
from shebangscan.scan.model import InjectionTag, Interpreter, ParseResult, ShebangForm, ShebangLine
from shebangscan.scan.recognizer import recognize
from shebangscan.scan.resolver import Injection, find_injection, resolve

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from shebangscan.languages.base import Language

__all__ = [
    "BodyFormatter",
    "Injection",
    "InjectionTag",
    "Interpreter",
    "LanguageDetectionError",
    "NoExtensionError",
    "ParseResult",
    "ShebangForm",
    "ShebangLine",
    "UnknownExtensionError",
    "apply_injection",
    "detect_language",
    "find_injection",
    "get_version",
    "recognize",
    "resolve",
]


def _registry_for(config: Mapping[str, Any] | Config | None) -> LanguageRegistry:
    if config is None:
        return LanguageRegistry.builtin()
    if isinstance(config, Config):
        return LanguageRegistry.from_config(config)
    overlay: MutableConfig = MutableConfig.from_toml_dict(dict(config))
    return LanguageRegistry.from_config(MutableConfig.from_defaults().merge_with(overlay).freeze())


def detect_language(path: Path, *, config: Mapping[str, Any] | Config | None = None) -> Language:
    """Detect the language of a file.

    Args:
        path (Path): File to classify.
        config (Mapping[str, Any] | Config | None): Languages overlaid on the
            built-ins (mapping), a resolved config, or None for built-ins only.

    Returns:
        Language: The detected language.

    Raises:
        LanguageDetectionError: If no registered language matches the file.
        ConfigError: If a mapping ``config`` has an invalid shape.
    """
    return _detect.detect_language(path, _registry_for(config))


def get_version() -> str:
    """Return the installed ShebangScan version."""
    return SHEBANGSCAN_VERSION
