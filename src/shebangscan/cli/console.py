# topmark:header:start
#
#   project      : ShebangScan
#   file         : console.py
#   file_relpath : src/shebangscan/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

Commands write results through a `ConsoleLike` object stored in
``ctx.obj["console"]``; `logging` is reserved for diagnostics.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...


class ClickConsole:
    """Program-output console backed by `click.echo`.

    Args:
        enable_color (bool): If True, emit ANSI styles; otherwise plain text.
        out (TextIO | None): Stream for standard output (defaults to ``sys.stdout``).
        err (TextIO | None): Stream for error output (defaults to ``sys.stderr``).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        click.echo(text, nl=nl, file=self.out or sys.stdout, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        click.secho(
            text, nl=nl, file=self.err or sys.stderr, color=self.enable_color, fg="yellow"
        )

    def error(self, text: str, *, nl: bool = True) -> None:
        click.secho(
            text, nl=nl, file=self.err or sys.stderr, color=self.enable_color, fg="bright_red"
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged when color is off."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)


def get_console(ctx: click.Context | None = None) -> ConsoleLike:
    """Return the console stored on the Click context, or a plain one."""
    ctx = ctx or click.get_current_context(silent=True)
    if ctx is not None and isinstance(ctx.obj, dict):
        console: ConsoleLike | None = ctx.obj.get("console")
        if console is not None:
            return console
    return ClickConsole(enable_color=False)
