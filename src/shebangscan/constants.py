# topmark:header:start
#
#   project      : ShebangScan
#   file         : constants.py
#   file_relpath : src/shebangscan/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShebangScan Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

SHEBANGSCAN_VERSION: str = get_version("shebangscan")

# Two-character marker that opens a shebang line (must sit at offset 0).
SHEBANG_MARKER: Final[str] = "#!"

# Upper bound on the bytes read for a shebang line during file detection.
MAX_SHEBANG_LINE_BYTES: Final[int] = 4096

# Final path segment of the launcher used to locate an interpreter on PATH.
LAUNCHER_NAME: Final[str] = "env"

# Intraline whitespace accepted between shebang tokens.
INLINE_WHITESPACE: Final[str] = " \t"

# Characters that end a path, flag, or interpreter token.
TOKEN_TERMINATORS: Final[str] = " \t\r\n"

# Configuration discovery
CONFIG_FILE_NAME: Final[str] = "shebangscan.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "shebangscan"

LOG_LEVEL_ENV_VAR: Final[str] = "SHEBANGSCAN_LOG_LEVEL"
