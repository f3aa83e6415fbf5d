# topmark:header:start
#
#   project      : ShebangScan
#   file         : cmd_common.py
#   file_relpath : src/shebangscan/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by several commands: reading inputs losslessly, mapping
per-file failures to exit codes, and exiting with the worst code at the end of
a run.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from shebangscan.cli.console import get_console
from shebangscan.cli.errors import ShebangScanUsageError
from shebangscan.cli.exit_codes import ExitCode
from shebangscan.config.logging import ShebangScanLogger, get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shebangscan.cli.console import ConsoleLike

logger: ShebangScanLogger = get_logger(__name__)

STDIN_SENTINEL = "-"
STDIN_LABEL = "<stdin>"


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group (0 if unset)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def require_paths(paths: Iterable[str]) -> list[str]:
    """Return ``paths`` as a list, rejecting an empty list and repeated STDIN."""
    items: list[str] = list(paths)
    if not items:
        raise ShebangScanUsageError("No input paths given (use '-' to read from STDIN).")
    if items.count(STDIN_SENTINEL) > 1:
        raise ShebangScanUsageError("'-' (STDIN) may be given at most once.")
    return items


def read_source(arg: str) -> str:
    """Read an input as UTF-8 text without newline translation.

    Args:
        arg (str): A filesystem path, or ``-`` for STDIN.

    Returns:
        str: The exact text content.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the content is not valid UTF-8.
    """
    if arg == STDIN_SENTINEL:
        data: bytes = sys.stdin.buffer.read()
        return data.decode("utf-8")
    with Path(arg).open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


def display_label(arg: str) -> str:
    """Return the label used to report an input in output."""
    return STDIN_LABEL if arg == STDIN_SENTINEL else arg


def exit_code_for_exception(exc: BaseException) -> ExitCode:
    """Map an input-reading failure to an exit code.

    FILE_NOT_FOUND → FileNotFoundError / IsADirectoryError
    PERMISSION_DENIED → PermissionError
    ENCODING_ERROR → UnicodeDecodeError
    IO_ERROR → any other OSError
    """
    if isinstance(exc, (FileNotFoundError, IsADirectoryError)):
        return ExitCode.FILE_NOT_FOUND
    if isinstance(exc, PermissionError):
        return ExitCode.PERMISSION_DENIED
    if isinstance(exc, UnicodeDecodeError):
        return ExitCode.ENCODING_ERROR
    if isinstance(exc, OSError):
        return ExitCode.IO_ERROR
    return ExitCode.FAILURE


def report_input_error(label: str, exc: OSError | UnicodeDecodeError) -> ExitCode:
    """Log and print a per-file read failure; return its exit code."""
    code: ExitCode = exit_code_for_exception(exc)
    logger.error("Cannot read %s: %s", label, exc)
    console: ConsoleLike = get_console()
    if isinstance(exc, UnicodeDecodeError):
        console.error(f"{label}: not valid UTF-8 ({exc.reason} at byte {exc.start})")
    else:
        console.error(f"{label}: {exc.strerror or exc}")
    return code


def worst_exit_code(codes: Iterable[ExitCode]) -> ExitCode:
    """Return the highest exit code, or SUCCESS for an empty iterable."""
    return max(codes, default=ExitCode.SUCCESS)


def exit_with(code: ExitCode) -> None:
    """Exit the current Click context with ``code`` unless it is SUCCESS."""
    if code is not ExitCode.SUCCESS:
        click.get_current_context().exit(int(code))
