# topmark:header:start
#
#   project      : ShebangScan
#   file         : test_resolver.py
#   file_relpath : tests/scan/test_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for interpreter resolution and injection points."""

from __future__ import annotations

import pytest

from shebangscan.scan import InjectionTag, Span, find_injection, recognize, resolve


@pytest.mark.parametrize(
    ("text", "tag"),
    [
        ("#!/bin/bash\n", InjectionTag.BASH),
        ("#!/usr/bin/env zsh\n", InjectionTag.ZSH),
        ("#!/usr/bin/env -S bash -e\n", InjectionTag.BASH),
        ("#!/bin/fish\n", InjectionTag.NONE),
        ("#!/bin/sh\n", InjectionTag.NONE),
        ("echo hi\n", InjectionTag.NONE),
    ],
)
def test_resolve(text: str, tag: InjectionTag) -> None:
    """The tag follows the interpreter; unknown and absent both give ``none``."""
    assert resolve(recognize(text).shebang) is tag


def test_resolve_none() -> None:
    """No shebang line resolves to ``none``."""
    assert resolve(None) is InjectionTag.NONE


def test_resolve_is_idempotent() -> None:
    """Resolving the same value twice yields the same tag."""
    shebang = recognize("#!/bin/zsh\n").shebang
    assert resolve(shebang) is resolve(shebang) is InjectionTag.ZSH


def test_find_injection_points_at_body() -> None:
    """The injection covers exactly the body span."""
    text = "#!/usr/bin/env bash\necho hi\n"
    injection = find_injection(recognize(text))

    assert injection is not None
    assert injection.language is InjectionTag.BASH
    assert injection.content == Span(20, len(text))
    assert injection.content.text(text) == "echo hi\n"


@pytest.mark.parametrize("text", ["#!/bin/fish\nfoo\n", "plain\n", ""])
def test_find_injection_none(text: str) -> None:
    """Opaque bodies produce no injection."""
    assert find_injection(recognize(text)) is None


def test_find_injection_on_empty_body() -> None:
    """A shebang-only file still yields an (empty) injection."""
    injection = find_injection(recognize("#!/bin/bash\n"))

    assert injection is not None
    assert injection.content.is_empty
