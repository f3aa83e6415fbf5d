# topmark:header:start
#
#   project      : ShebangScan
#   file         : strategies_shebangscan.py
#   file_relpath : tests/strategies_shebangscan.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating shebang lines and whole scripts.

The generators build plausible first lines from the same pieces the recognizer
looks for (marker, whitespace, path prefixes, launcher, flags, interpreter,
arguments, newline) and mix them with arbitrary text, so property tests reach
both well-formed and malformed lines.
"""

from __future__ import annotations

from typing import Any, Callable

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

PATH_PREFIXES: tuple[str, ...] = ("", "/", "/bin/", "/usr/bin/", "/usr/local/bin/", "./", "C:/x/")
INTERPRETERS: tuple[str, ...] = ("bash", "zsh", "sh", "fish", "python3", "bash5", "env", "")
LAUNCHER_FLAGS: tuple[str, ...] = ("-S", "-i", "-u", "--split-string", "-", "-vS")
LINE_ENDINGS: tuple[str, ...] = ("\n", "\r\n", "")
BOMS: tuple[str, ...] = ("\ufeff", "")

BLACKLIST_CATEGORIES: tuple[Any, ...] = ("Cs",)

s_ws: st.SearchStrategy[str] = st.text(alphabet=" \t", max_size=3)
s_ws1: st.SearchStrategy[str] = st.text(alphabet=" \t", min_size=1, max_size=3)
s_token: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(blacklist_characters=" \t\r\n", blacklist_categories=BLACKLIST_CATEGORIES),
    max_size=8,
)
s_line_text: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(blacklist_characters="\n", blacklist_categories=BLACKLIST_CATEGORIES),
    max_size=20,
)
s_body: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(blacklist_categories=BLACKLIST_CATEGORIES),
    max_size=40,
)


@st.composite
def s_direct_line(draw: Draw) -> str:
    """Generate a direct-form first line (possibly unterminated)."""
    prefix: str = draw(st.sampled_from(PATH_PREFIXES))
    name: str = draw(st.sampled_from(INTERPRETERS) | s_token)
    tail: str = draw(st.just("") | st.tuples(s_ws1, s_line_text).map("".join))
    return "#!" + draw(s_ws) + prefix + name + tail + draw(s_ws) + draw(st.sampled_from(LINE_ENDINGS))


@st.composite
def s_launcher_line(draw: Draw) -> str:
    """Generate a launcher-form first line (possibly malformed or unterminated)."""
    prefix: str = draw(st.sampled_from(PATH_PREFIXES))
    flags: list[str] = draw(st.lists(st.sampled_from(LAUNCHER_FLAGS), max_size=3))
    parts: list[str] = [prefix + "env"]
    for flag in flags:
        parts.append(draw(s_ws1) + flag)
    interpreter: str = draw(st.sampled_from(INTERPRETERS) | s_token)
    parts.append(draw(s_ws) + interpreter)
    if draw(st.booleans()):
        parts.append(draw(s_ws1) + draw(s_line_text))
    return "#!" + draw(s_ws) + "".join(parts) + draw(st.sampled_from(LINE_ENDINGS))


@st.composite
def s_script(draw: Draw) -> str:
    """Generate a whole file: optional BOM, a first line of any shape, and a body."""
    bom: str = draw(st.sampled_from(BOMS) if draw(st.integers(0, 9)) == 0 else st.just(""))
    first: str = draw(s_direct_line() | s_launcher_line() | s_line_text | st.just("#!"))
    return bom + first + draw(s_body)


@st.composite
def s_shebang_script(draw: Draw) -> str:
    """Generate a file whose first line is a newline-terminated shebang line."""
    first: str = draw(s_direct_line() | s_launcher_line())
    if not first.endswith("\n"):
        first += draw(st.sampled_from(("\n", "\r\n")))
    return first + draw(s_body)
