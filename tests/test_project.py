"""Tests for buildpick.project."""

from __future__ import annotations

from pathlib import Path

from buildpick.project import find_project_root


def test_find_project_root_walks_upward(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    nested = tmp_path / "src" / "deep"
    nested.mkdir(parents=True)

    assert find_project_root(nested) == str(tmp_path.resolve())


def test_find_project_root_accepts_file_path(tmp_path: Path) -> None:
    (tmp_path / ".buildpick.yml").write_text("", encoding="utf-8")
    source = tmp_path / "main.c"
    source.write_text("int main(void) { return 0; }\n", encoding="utf-8")

    assert find_project_root(source) == str(tmp_path.resolve())


def test_find_project_root_prefers_nearest_marker(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    inner = tmp_path / "vendor" / "lib"
    (inner / ".hg").mkdir(parents=True)

    assert find_project_root(inner / "x.c") == str(inner.resolve())


def test_find_project_root_without_markers(tmp_path: Path) -> None:
    plain = tmp_path / "plain"
    plain.mkdir()

    assert find_project_root(plain, markers=(".no-such-marker",)) is None
    assert find_project_root(None) is None
