"""Core data models shared across buildpick components."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union


@dataclass(frozen=True)
class ProjectContext:
    """Facts about the invocation site, recomputed for every workflow run."""

    current_file: Optional[str] = None
    project_root: Optional[str] = None


@dataclass(frozen=True)
class PathInfo:
    """Atomic path fragments derived from the current file."""

    absolute_path: str = ""
    file_name: str = ""
    stem: str = ""
    extension: str = ""
    directory: str = ""


@dataclass(frozen=True)
class ExecutableCandidate:
    """A discovered executable paired with its distance to the reference name."""

    path: str
    distance: int


# Build directory specifications. Exactly one of these is configured per project.


@dataclass(frozen=True)
class Unset:
    """No build directory override is configured."""


@dataclass(frozen=True)
class AbsolutePath:
    """An absolute build directory used as-is."""

    path: str


@dataclass(frozen=True)
class RelativePath:
    """A build directory relative to the project root or the current file."""

    path: str


@dataclass(frozen=True)
class ComputedExpression:
    """A build directory computed at resolution time.

    ``evaluate`` is called with no arguments and returns a path string, or
    ``None`` when the expression has nothing to offer.
    """

    evaluate: Callable[[], Optional[str]]
    source: str = ""

    @classmethod
    def from_environment(cls, text: str) -> "ComputedExpression":
        """Expand ``$VAR``/``${VAR}`` references and ``~`` in ``text`` when evaluated."""

        def _evaluate() -> Optional[str]:
            return os.path.expanduser(os.path.expandvars(text))

        return cls(evaluate=_evaluate, source=text)

    @classmethod
    def from_env_var(cls, name: str) -> "ComputedExpression":
        """Read a single environment variable; unset yields ``None``."""

        def _evaluate() -> Optional[str]:
            return os.environ.get(name)

        return cls(evaluate=_evaluate, source=f"${name}")


BuildDirectorySpec = Union[Unset, AbsolutePath, RelativePath, ComputedExpression]


class Launcher(str, Enum):
    """Closed set of debugger launch styles a host knows how to start."""

    GDB = "gdb"
    LLDB = "lldb"
    PDB = "pdb"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class DebuggerEntry:
    """Label plus raw invocation pattern (may carry a ``#comment`` suffix)."""

    label: str
    pattern: str
    launcher: Launcher


@dataclass(frozen=True)
class DebugPlan:
    """Resolved debugger invocation ready to hand to the host launcher."""

    label: str
    launcher: Launcher
    command: str
    executable: str


__all__ = [
    "AbsolutePath",
    "BuildDirectorySpec",
    "ComputedExpression",
    "DebugPlan",
    "DebuggerEntry",
    "ExecutableCandidate",
    "Launcher",
    "PathInfo",
    "ProjectContext",
    "RelativePath",
    "Unset",
]
