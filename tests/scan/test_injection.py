# topmark:header:start
#
#   project      : ShebangScan
#   file         : test_injection.py
#   file_relpath : tests/scan/test_injection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for splicing a downstream formatter into the script body."""

from __future__ import annotations

import pytest

from shebangscan.scan.injection import apply_injection
from shebangscan.scan.model import InjectionTag


class RecordingFormatter:
    """Upper-cases the body and records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, InjectionTag]] = []

    def __call__(self, body: str, language: InjectionTag) -> str:
        self.calls.append((body, language))
        return body.upper()


def test_body_is_formatted_and_line_kept() -> None:
    """The formatter sees only the body; the shebang line is copied verbatim."""
    fmt = RecordingFormatter()
    out = apply_injection("#!/usr/bin/env -S zsh -f\nls -la\n", fmt)

    assert out == "#!/usr/bin/env -S zsh -f\nLS -LA\n"
    assert fmt.calls == [("ls -la\n", InjectionTag.ZSH)]


@pytest.mark.parametrize("text", ["#!/bin/fish\necho\n", "echo\n", "#!/bin/bash"])
def test_opaque_body_passes_through(text: str) -> None:
    """Without a supported interpreter the text is returned unchanged."""
    fmt = RecordingFormatter()

    assert apply_injection(text, fmt) == text
    assert fmt.calls == []


def test_formatter_errors_propagate() -> None:
    """Failures of the external formatter reach the caller."""

    def failing(body: str, language: InjectionTag) -> str:
        raise RuntimeError("syntax error")

    with pytest.raises(RuntimeError, match="syntax error"):
        apply_injection("#!/bin/bash\nif\n", failing)
