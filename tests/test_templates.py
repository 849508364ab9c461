"""Tests for buildpick.templates."""

from __future__ import annotations

import pytest

from buildpick.models import PathInfo
from buildpick.pathinfo import extract_path_info
from buildpick.templates import expand_template, strip_comment


@pytest.fixture
def netscape() -> PathInfo:
    return extract_path_info("/usr/local/bin/netscape.bin")


def test_expand_stem_and_extension(netscape: PathInfo) -> None:
    assert expand_template("%n.%e", netscape) == "netscape.bin"


def test_expand_directory_and_file_name(netscape: PathInfo) -> None:
    assert expand_template("%d%f", netscape) == "/usr/local/bin/netscape.bin"


def test_expand_all_tokens(netscape: PathInfo) -> None:
    result = expand_template(
        "cc %a -o %b/%n -I%p [%f]", netscape, project_root="/proj", build_directory="/proj/out"
    )

    assert result == "cc /usr/local/bin/netscape.bin -o /proj/out/netscape -I/proj [netscape.bin]"


def test_expand_absent_values_become_empty() -> None:
    assert expand_template("make -C '%b' %p%a", PathInfo()) == "make -C '' "


def test_expand_is_case_sensitive_and_keeps_unknown_tokens(netscape: PathInfo) -> None:
    assert expand_template("%A %x 100%% %f", netscape) == "%A %x 100%% netscape.bin"


def test_expand_does_not_rescan_replacement_text() -> None:
    info = extract_path_info("/tmp/%p/%b.c")

    result = expand_template("%a", info, project_root="ROOT", build_directory="BUILD")

    assert result == "/tmp/%p/%b.c"


def test_expand_twice_is_noop_once_tokens_are_gone(netscape: PathInfo) -> None:
    once = expand_template("gdb %b/%n", netscape, build_directory="/build")

    assert expand_template(once, netscape, build_directory="/build") == once


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("gdb #realgud", "gdb"),
        ("gdb", "gdb"),
        ("  lldb --  ", "lldb --"),
        ("gdb -tui # text ui # again", "gdb -tui"),
        ("# only a comment", ""),
        (r"echo \# kept #dropped", r"echo \# kept"),
    ],
)
def test_strip_comment(raw: str, expected: str) -> None:
    assert strip_comment(raw) == expected
