"""Find the executable you mean to run and expand build command templates."""

from .build_dir import BuildDirectoryResolver, InvalidPathError
from .discovery import ExecutableDiscovery
from .models import (
    AbsolutePath,
    ComputedExpression,
    DebugPlan,
    DebuggerEntry,
    ExecutableCandidate,
    Launcher,
    PathInfo,
    ProjectContext,
    RelativePath,
    Unset,
)
from .pathinfo import extract_path_info
from .ranking import edit_distance, rank_candidates
from .templates import expand_template, strip_comment

__all__ = [
    "AbsolutePath",
    "BuildDirectoryResolver",
    "ComputedExpression",
    "DebugPlan",
    "DebuggerEntry",
    "ExecutableCandidate",
    "ExecutableDiscovery",
    "InvalidPathError",
    "Launcher",
    "PathInfo",
    "ProjectContext",
    "RelativePath",
    "Unset",
    "edit_distance",
    "expand_template",
    "extract_path_info",
    "rank_candidates",
    "strip_comment",
]
