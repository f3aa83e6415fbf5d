# topmark:header:start
#
#   project      : ShebangScan
#   file         : options.py
#   file_relpath : src/shebangscan/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and their resolution logic.

Centralizes the reusable options (verbosity, color, output format, config
files) so the group and its commands stay thin. The helpers here are
Click-aware.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from shebangscan.cli.cli_types import EnumChoiceParam, OutputFormat
from shebangscan.cli.errors import ShebangScanUsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v`` and ``-q`` counts.

    Returns:
        int: ``0`` by default, the ``-v`` count when verbose, or the negated
            ``-q`` count when quiet.

    Raises:
        ShebangScanUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ShebangScanUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return verbose_count
    return -quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (e.g. show the node partition of each shebang line).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress per-file output; only errors and the exit code remain.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Machine formats are always colorless. Otherwise ``--color`` wins, then
    ``FORCE_COLOR`` and ``NO_COLOR``, and finally whether stdout is a TTY.
    """
    if output_format is not None and output_format.is_machine:
        return False
    if cli_mode is ColorMode.ALWAYS:
        return True
    if cli_mode is ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--format`` option to a command."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)


def config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config``, ``--no-config`` and ``--merge-config`` options to a command."""
    f = click.option(
        "--config",
        "-c",
        "config_paths",
        multiple=True,
        type=click.Path(dir_okay=False, path_type=str),
        help="Additional config file(s) to merge after discovered ones (later wins).",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        help="Ignore pyproject.toml and shebangscan.toml in the working directory.",
    )(f)
    f = click.option(
        "--merge-config",
        "-M",
        "merge_config",
        is_flag=True,
        help="Union language extensions across config layers instead of replacing them.",
    )(f)
    return f
