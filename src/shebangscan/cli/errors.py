# topmark:header:start
#
#   project      : ShebangScan
#   file         : errors.py
#   file_relpath : src/shebangscan/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ShebangScan CLI.

Raise these from commands to abort with a standardized message and exit code.
Errors are written through the project console when one is present in the Click
context, and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from shebangscan.cli.exit_codes import ExitCode


class ShebangScanError(click.ClickException):
    """Base class for all ShebangScan CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class ShebangScanUsageError(ShebangScanError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ShebangScanConfigError(ShebangScanError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
