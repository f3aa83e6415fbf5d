# topmark:header:start
#
#   project      : ShebangScan
#   file         : test_spans.py
#   file_relpath : tests/scan/test_spans.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Span`."""

from __future__ import annotations

import pytest

from shebangscan.scan import Span, recognize


def test_basic_accessors() -> None:
    span = Span(2, 5)

    assert len(span) == 3
    assert not span.is_empty
    assert span.text("abcdefg") == "cde"
    assert str(span) == "[2, 5)"


@pytest.mark.parametrize(("start", "end"), [(-1, 2), (3, 2)])
def test_invalid_spans_are_rejected(start: int, end: int) -> None:
    with pytest.raises(ValueError, match="Invalid span"):
        Span(start, end)


def test_byte_range_counts_utf8_bytes() -> None:
    """Character offsets map to UTF-8 byte offsets."""
    text = "#!/usr/bin/env bash --é\nécho\n"
    result = recognize(text)
    start, end = result.body.span.byte_range(text)

    assert text.encode("utf-8")[start:end].decode("utf-8") == "écho\n"
    assert end == len(text.encode("utf-8"))


def test_spans_order_by_start() -> None:
    assert sorted([Span(4, 5), Span(0, 2), Span(0, 1)]) == [Span(0, 1), Span(0, 2), Span(4, 5)]
