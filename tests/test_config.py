"""Tests for buildpick.config."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from buildpick.config import BuildpickConfig, ConfigError, load_config
from buildpick.discovery import DEFAULT_EXCLUDED_DIRS
from buildpick.models import AbsolutePath, ComputedExpression, Launcher, RelativePath, Unset


def _write_config(root: Path, text: str) -> Path:
    config_file = root / ".buildpick.yml"
    config_file.write_text(text, encoding="utf-8")
    return config_file


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, BuildpickConfig)
    assert config.root == tmp_path.resolve()
    assert config.build_dir == Unset()
    assert config.commands == []
    assert config.debuggers == []
    assert set(config.discovery.exclude_dirs) == set(DEFAULT_EXCLUDED_DIRS)


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = _write_config(
        tmp_path,
        """
build_dir: build/debug
commands:
  - "make -C %b test"
  - "%b/%n --verbose"
debuggers:
  - label: "gdb #remote"
    command: "gdb -ex 'target remote :1234' #remote"
    launcher: gdb
  - command: "valgrind --vgdb-error=0"
discovery:
  exclude_dirs: [".git", "CMakeFiles"]
""",
    )

    config = load_config(config_file)

    assert config.build_dir == RelativePath("build/debug")
    assert config.commands == ["make -C %b test", "%b/%n --verbose"]
    assert [entry.label for entry in config.debuggers] == [
        "gdb #remote",
        "valgrind --vgdb-error=0",
    ]
    assert config.debuggers[0].launcher is Launcher.GDB
    assert config.debuggers[1].launcher is Launcher.TERMINAL
    assert config.discovery.exclude_dirs == [".git", "CMakeFiles"]


def test_load_config_accepts_file_next_to_config(tmp_path: Path) -> None:
    _write_config(tmp_path, "commands: ninja -C %b\n")

    config = load_config(tmp_path / "src.c")

    assert config.commands == ["ninja -C %b"]


def test_build_dir_absolute_and_home(tmp_path: Path, monkeypatch) -> None:
    _write_config(tmp_path, f"build_dir: {tmp_path / 'out'}\n")
    assert load_config(tmp_path).build_dir == AbsolutePath(str(tmp_path / "out"))

    monkeypatch.setenv("HOME", str(tmp_path))
    _write_config(tmp_path, "build_dir: ~/builds\n")
    assert load_config(tmp_path).build_dir == AbsolutePath(os.path.join(str(tmp_path), "builds"))


def test_build_dir_expression_is_evaluated_lazily(tmp_path: Path, monkeypatch) -> None:
    _write_config(tmp_path, "build_dir:\n  expression: \"$BUILDPICK_OUT/bin\"\n")
    config = load_config(tmp_path)

    assert isinstance(config.build_dir, ComputedExpression)
    monkeypatch.setenv("BUILDPICK_OUT", "/opt/out")
    assert config.build_dir.evaluate() == "/opt/out/bin"


def test_build_dir_env_reads_single_variable(tmp_path: Path, monkeypatch) -> None:
    _write_config(tmp_path, "build_dir:\n  env: BUILDPICK_BUILD\n")
    config = load_config(tmp_path)

    monkeypatch.delenv("BUILDPICK_BUILD", raising=False)
    assert config.build_dir.evaluate() is None
    monkeypatch.setenv("BUILDPICK_BUILD", "/tmp/b")
    assert config.build_dir.evaluate() == "/tmp/b"


def test_empty_exclude_list_disables_pruning(tmp_path: Path) -> None:
    _write_config(tmp_path, "discovery:\n  exclude_dirs: []\n")

    assert load_config(tmp_path).discovery.exclude_dirs == []


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    _write_config(tmp_path, "\n")

    assert load_config(tmp_path).build_dir == Unset()


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "build_dir: [unbalanced\n",
        "build_dir:\n  other: x\n",
        "debuggers:\n  - label: nothing to run\n",
        "debuggers:\n  - command: gdb\n    launcher: ddd\n",
        "debuggers: gdb\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, text: str) -> None:
    _write_config(tmp_path, text)

    with pytest.raises(ConfigError):
        load_config(tmp_path)
