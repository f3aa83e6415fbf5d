# topmark:header:start
#
#   project      : ShebangScan
#   file         : test_recognizer_properties.py
#   file_relpath : tests/scan/test_recognizer_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the recognizer: totality, losslessness and partitioning.

These run with a modest example budget in the default suite; the
``hypothesis_slow`` variant at the bottom explores many more inputs.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, assume, given, settings
from hypothesis import strategies as st

from shebangscan.scan import InjectionTag, Interpreter, ParseResult, ShebangLine, recognize, resolve
from tests.strategies_shebangscan import s_script, s_shebang_script


def _assert_partition(result: ParseResult) -> None:
    """Check every invariant that ties the parts of a result to its source."""
    text: str = result.source
    assert result.reconstruct() == text

    shebang: ShebangLine | None = result.shebang
    if shebang is None:
        assert result.body.span.start == 0
    else:
        assert shebang.span.start == 0
        assert shebang.span.end == result.body.span.start
        assert text[shebang.span.end - 1] == "\n"
        assert "\n" not in text[: shebang.span.end - 1]

        cursor: int = 0
        for node in shebang.nodes:
            assert node.span.start == cursor
            assert not node.span.is_empty
            cursor = node.span.end
        assert cursor == shebang.span.end

    assert result.body.span.end == len(text)
    assert result.body.injection_tag is resolve(shebang)


@settings(max_examples=200, deadline=None)
@given(text=st.text())
def test_arbitrary_text_is_partitioned(text: str) -> None:
    """Any string yields a lossless partition."""
    _assert_partition(recognize(text))


@settings(max_examples=300, deadline=None)
@given(text=s_script())
def test_generated_scripts_are_partitioned(text: str) -> None:
    """Generated scripts (well-formed or not) yield a lossless partition."""
    _assert_partition(recognize(text))


@settings(max_examples=300, deadline=None, suppress_health_check=[HealthCheck.filter_too_much])
@given(text=s_shebang_script())
def test_recognized_line_fields_match_nodes(text: str) -> None:
    """Classified fields agree with the text of the corresponding nodes."""
    result: ParseResult = recognize(text)
    assume(result.shebang is not None)
    shebang: ShebangLine | None = result.shebang
    assert shebang is not None

    line: str = result.header_text
    assert line.startswith("#!")
    assert shebang.interpreter_token in line
    if shebang.arguments is not None:
        assert shebang.arguments == shebang.arguments.strip(" \t")
        assert shebang.arguments
    for flag in shebang.launcher_flags:
        assert flag.startswith("-")
    assert (shebang.interpreter_name is Interpreter.UNRECOGNIZED) == (
        shebang.interpreter_token not in ("bash", "zsh")
    )


@settings(max_examples=100, deadline=None)
@given(text=s_script())
def test_tagging_is_idempotent(text: str) -> None:
    """Resolving the same line twice gives the same tag."""
    shebang: ShebangLine | None = recognize(text).shebang
    first: InjectionTag = resolve(shebang)
    assert resolve(shebang) is first


@settings(max_examples=100, deadline=None)
@given(text=s_script(), body=st.text())
def test_body_content_never_affects_the_line(text: str, body: str) -> None:
    """Appending text after a recognized line changes only the body."""
    result: ParseResult = recognize(text)
    assume(result.shebang is not None)
    extended: ParseResult = recognize(text + body)

    assert extended.shebang == result.shebang
    assert extended.body_text == result.body_text + body


@pytest.mark.hypothesis_slow
@settings(max_examples=5000, deadline=None, suppress_health_check=[HealthCheck.too_slow])
@given(text=s_script())
def test_generated_scripts_are_partitioned_exhaustive(text: str) -> None:
    """Long-running variant of the partition property."""
    _assert_partition(recognize(text))
