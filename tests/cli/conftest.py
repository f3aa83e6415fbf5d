# topmark:header:start
#
#   project      : ShebangScan
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running ShebangScan in a controlled working directory.

`run_cli_in()` changes the process working directory to the given ``tmp_path``
before invoking the Click CLI, so relative input paths and config discovery
(``pyproject.toml`` / ``shebangscan.toml``) are resolved against the temporary
test directory.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

import pytest
from click.testing import CliRunner, Result

from shebangscan.cli.exit_codes import ExitCode
from shebangscan.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep color-forcing environment variables out of CLI output."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["scan", "a.sh"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input (for ``-``).

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["detect", "build.sh"])
        assert res.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on files created in
    ``tmp_path`` (e.g. ``version`` or STDIN input) or when all paths are absolute.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


def assert_ENCODING_ERROR(result: Result) -> None:
    """Assert that the command exited with ENCODING_ERROR (code 65)."""
    assert result.exit_code == ExitCode.ENCODING_ERROR, result.output


def assert_UNSUPPORTED_FILE_TYPE(result: Result) -> None:
    """Assert that the command exited with UNSUPPORTED_FILE_TYPE (code 69)."""
    assert result.exit_code == ExitCode.UNSUPPORTED_FILE_TYPE, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
