# topmark:header:start
#
#   project      : ShebangScan
#   file         : builtins.py
#   file_relpath : src/shebangscan/languages/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in shell languages.

Both dialects claim ``.sh``; for such files the shebang line decides, and the
first language listed here wins when it cannot.

Exports:
    LANGUAGES: Concrete definitions for Bash and Zsh.
"""

from __future__ import annotations

from shebangscan.languages.base import Language

LANGUAGES: list[Language] = [
    Language(
        name="bash",
        extensions=("bash", "sh"),
        description="Bash scripts (*.bash, *.sh)",
    ),
    Language(
        name="zsh",
        extensions=("zsh", "sh"),
        description="Zsh scripts (*.zsh, *.sh)",
    ),
]
