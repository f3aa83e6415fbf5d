# topmark:header:start
#
#   project      : ShebangScan
#   file         : logging.py
#   file_relpath : src/shebangscan/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShebangScan logging with a TRACE level.

Adds a TRACE level below DEBUG (used for per-character scanner decisions), a
logger class exposing ``trace()``, and a chalk-colored formatter for terminal
output. The level is taken from ``SHEBANGSCAN_LOG_LEVEL`` unless given
explicitly.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from shebangscan.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class ShebangScanLogger(logging.Logger):
    """Logger class with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Optional extra information for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(ShebangScanLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ChalkFormatter(logging.Formatter):
    """Formatter that colors log records by severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record and color it according to its level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colorized message.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


def parse_log_level(value: str | None) -> int | None:
    """Convert a level name (``"TRACE"``, ``"debug"``) or number (``"10"``) to an int.

    Returns:
        int | None: The logging level, or ``None`` if ``value`` is empty or unknown.
    """
    if not value:
        return None
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return the logging level requested via ``SHEBANGSCAN_LOG_LEVEL``, if any."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with colored output.

    If ``level`` is None, the environment is consulted via
    `resolve_env_log_level`. Default is CRITICAL when unspecified.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str) -> ShebangScanLogger:
    """Retrieve a ShebangScanLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        ShebangScanLogger: The logger.
    """
    logger = logging.getLogger(name)
    return cast("ShebangScanLogger", logger)
