# topmark:header:start
#
#   project      : ShebangScan
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ShebangScan test suite.

Sets the log level to TRACE for every run so scanner decisions are exercised
and captured, and keeps the developer's environment from leaking into tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from shebangscan.config import logging
from shebangscan.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def silence_shebangscan_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Log at TRACE level for the whole test session."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an empty working directory (no config files to discover).

    Returns:
        Path: The new working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def write_script(directory: Path, name: str, content: str) -> Path:
    """Write ``content`` to ``directory / name`` without newline translation."""
    path: Path = directory / name
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(content)
    return path
