"""Configuration loading for buildpick (.buildpick.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .discovery import DEFAULT_EXCLUDED_DIRS
from .models import (
    AbsolutePath,
    BuildDirectorySpec,
    ComputedExpression,
    DebuggerEntry,
    Launcher,
    RelativePath,
    Unset,
)

CONFIG_FILENAME = ".buildpick.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class DiscoveryConfig:
    """Executable discovery settings."""

    exclude_dirs: List[str] = field(default_factory=lambda: sorted(DEFAULT_EXCLUDED_DIRS))


@dataclass
class BuildpickConfig:
    """Represents the project-local settings defined in .buildpick.yml."""

    root: Path
    build_dir: BuildDirectorySpec = field(default_factory=Unset)
    commands: List[str] = field(default_factory=list)
    debuggers: List[DebuggerEntry] = field(default_factory=list)
    discovery: DiscoveryConfig = field(default_factory=DiscoveryConfig)


def load_config(config_path: Path | str) -> BuildpickConfig:
    """Load configuration from disk.

    ``config_path`` may be the file itself or the directory holding it. A
    missing file yields the defaults.
    """
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent

    if not config_file.exists():
        return BuildpickConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = BuildpickConfig(root=root)
    config.build_dir = _parse_build_dir(data.get("build_dir"))
    config.commands = _as_str_list(data.get("commands"))
    config.debuggers = _parse_debuggers(data.get("debuggers"))

    discovery_data = _as_dict(data.get("discovery"))
    if "exclude_dirs" in discovery_data:
        config.discovery.exclude_dirs = _as_str_list(discovery_data.get("exclude_dirs"))

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _parse_build_dir(value: Any) -> BuildDirectorySpec:
    if value is None:
        return Unset()
    if isinstance(value, dict):
        expression = _as_str(value.get("expression"))
        if expression is not None:
            return ComputedExpression.from_environment(expression)
        env_name = _as_str(value.get("env"))
        if env_name is not None:
            return ComputedExpression.from_env_var(env_name)
        raise ConfigError("build_dir mapping needs an 'expression' or 'env' key")
    path = _as_str(value)
    if path is None or not path.strip():
        raise ConfigError("build_dir must be a path string or a mapping")
    path = os.path.expanduser(path)
    if os.path.isabs(path):
        return AbsolutePath(path)
    return RelativePath(path)


def _parse_debuggers(value: Any) -> List[DebuggerEntry]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError("debuggers must be a list of mappings")

    entries: List[DebuggerEntry] = []
    for item in value:
        data = _as_dict(item)
        command = _as_str(data.get("command"))
        if not command:
            raise ConfigError("Each debugger needs a 'command'")
        label = _as_str(data.get("label")) or command
        launcher_name = (_as_str(data.get("launcher")) or Launcher.TERMINAL.value).lower()
        try:
            launcher = Launcher(launcher_name)
        except ValueError as exc:
            known = ", ".join(member.value for member in Launcher)
            raise ConfigError(
                f"Unknown launcher {launcher_name!r} for debugger {label!r}; expected one of: {known}"
            ) from exc
        entries.append(DebuggerEntry(label=label, pattern=command, launcher=launcher))
    return entries


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "BuildpickConfig",
    "CONFIG_FILENAME",
    "ConfigError",
    "DiscoveryConfig",
    "load_config",
]
