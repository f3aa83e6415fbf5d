# topmark:header:start
#
#   project      : ShebangScan
#   file         : test_detect.py
#   file_relpath : tests/languages/test_detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for extension- and shebang-based language detection.

Covers the shared ``.sh`` extension (where the shebang decides), the dedicated
``.bash``/``.zsh`` extensions, extensionless scripts, and the error paths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from shebangscan.constants import MAX_SHEBANG_LINE_BYTES
from shebangscan.languages.base import Language
from shebangscan.languages.detect import (
    NoExtensionError,
    UnknownExtensionError,
    detect_language,
    read_shebang_line,
    shebang_language,
)
from shebangscan.languages.registry import LanguageRegistry
from shebangscan.scan.model import InjectionTag
from tests.conftest import write_script

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def registry() -> LanguageRegistry:
    return LanguageRegistry.builtin()


@pytest.mark.parametrize(
    ("name", "content", "expected"),
    [
        ("test.sh", "#!/bin/bash\necho hi\n", "bash"),
        ("test.sh", "#!/bin/zsh\necho hi\n", "zsh"),
        ("test.sh", "#!/usr/bin/env bash\necho hi\n", "bash"),
        ("test.sh", "#!/usr/bin/env zsh\necho hi\n", "zsh"),
        ("test.sh", "#!/usr/bin/env -S bash\necho hi\n", "bash"),
        ("test.sh", "#!/bin/zsh -f\necho hi\n", "zsh"),
        ("test.sh", "#!/usr/bin/env -S zsh -f\r\necho hi\r\n", "zsh"),
        ("test.bash", "echo hi\n", "bash"),
        ("test.zsh", "echo hi\n", "zsh"),
        # the dedicated extension wins over a contradicting shebang
        ("test.bash", "#!/bin/zsh\necho hi\n", "bash"),
        ("test.sh", "echo hi\n", "bash"),
        ("test.sh", "#!/bin/sh\necho hi\n", "bash"),
        ("test.sh", "#!/bin/zsh", "zsh"),
        ("test.sh", "\ufeff#!/bin/zsh\necho hi\n", "bash"),
    ],
)
def test_detect_with_extension(
    tmp_path: Path, registry: LanguageRegistry, name: str, content: str, expected: str
) -> None:
    path = write_script(tmp_path, name, content)
    assert detect_language(path, registry).name == expected


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("#!/bin/bash\necho hi\n", "bash"),
        ("#!/usr/bin/env zsh\necho hi\n", "zsh"),
        ("#!/usr/bin/env -S bash -eu\n", "bash"),
    ],
)
def test_detect_without_extension(
    tmp_path: Path, registry: LanguageRegistry, content: str, expected: str
) -> None:
    path = write_script(tmp_path, "script", content)
    assert detect_language(path, registry).name == expected


@pytest.mark.parametrize("content", ["echo hi\n", "#!/bin/fish\necho hi\n", ""])
def test_no_extension_without_usable_shebang(
    tmp_path: Path, registry: LanguageRegistry, content: str
) -> None:
    path = write_script(tmp_path, "script", content)

    with pytest.raises(NoExtensionError) as excinfo:
        detect_language(path, registry)
    assert excinfo.value.path == path


def test_unknown_extension(tmp_path: Path, registry: LanguageRegistry) -> None:
    path = write_script(tmp_path, "test.py", "#!/bin/bash\n")

    with pytest.raises(UnknownExtensionError) as excinfo:
        detect_language(path, registry)
    assert excinfo.value.extension == "py"
    assert str(excinfo.value) == "no language registered for extension '.py'"


def test_unambiguous_extension_never_opens_the_file(
    tmp_path: Path, registry: LanguageRegistry
) -> None:
    """A missing ``.zsh`` file is still classified from its name."""
    assert detect_language(tmp_path / "missing.zsh", registry).name == "zsh"


def test_registry_order_breaks_ties(tmp_path: Path) -> None:
    """The first language claiming the extension wins when the shebang cannot decide."""
    reg = LanguageRegistry(
        [
            Language("zsh", ("zsh", "sh")),
            Language("bash", ("bash", "sh")),
        ]
    )
    path = write_script(tmp_path, "x.sh", "echo\n")
    assert detect_language(path, reg).name == "zsh"


def test_shebang_naming_a_non_candidate_falls_back(tmp_path: Path) -> None:
    reg = LanguageRegistry(
        [
            Language("bash", ("bash", "sh")),
            Language("posix", ("sh",)),
            Language("zsh", ("zsh",)),
        ]
    )
    path = write_script(tmp_path, "x.sh", "#!/bin/zsh\n")
    assert detect_language(path, reg).name == "bash"


def test_read_shebang_line_keeps_terminator(tmp_path: Path) -> None:
    path = write_script(tmp_path, "a.sh", "#!/bin/bash\r\necho\n")
    assert read_shebang_line(path) == "#!/bin/bash\r\n"


def test_read_shebang_line_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "a.sh"
    path.write_bytes(b"#!/bin/bash \xff\n")
    assert read_shebang_line(path) is None


def test_read_shebang_line_missing_file(tmp_path: Path) -> None:
    assert read_shebang_line(tmp_path / "nope.sh") is None


def test_read_shebang_line_overlong_first_line(tmp_path: Path) -> None:
    path = tmp_path / "a"
    path.write_bytes(b"#!/bin/bash " + b"x" * MAX_SHEBANG_LINE_BYTES * 4)
    assert read_shebang_line(path) is None
    assert shebang_language(path) is InjectionTag.NONE


def test_read_shebang_line_at_limit(tmp_path: Path) -> None:
    line = b"#!/bin/zsh " + b"x" * (MAX_SHEBANG_LINE_BYTES - 12) + b"\n"
    path = tmp_path / "a"
    path.write_bytes(line + b"y" * MAX_SHEBANG_LINE_BYTES)
    assert read_shebang_line(path) == line.decode("ascii")


def test_read_shebang_line_binary_without_newline(tmp_path: Path) -> None:
    path = tmp_path / "blob"
    path.write_bytes(b"\x7fELF" + bytes(range(256)).replace(b"\n", b"") * 64)
    assert read_shebang_line(path) is None


def test_shebang_language_of_unterminated_line(tmp_path: Path) -> None:
    path = write_script(tmp_path, "a", "#!/usr/bin/env zsh")
    assert shebang_language(path) is InjectionTag.ZSH
