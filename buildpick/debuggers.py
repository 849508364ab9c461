"""Debugger table lookups."""

from __future__ import annotations

import shlex
from typing import Dict, Iterable, List, Optional, Sequence

from .models import DebugPlan, DebuggerEntry, PathInfo
from .templates import expand_template, strip_comment


class UnknownDebuggerError(KeyError):
    """Raised when a debugger label is not present in the table."""

    def __init__(self, label: str, known: Sequence[str]) -> None:
        super().__init__(label)
        self.label = label
        self.known = list(known)

    def __str__(self) -> str:
        known = ", ".join(self.known) or "(none)"
        return f"Unknown debugger {self.label!r}; choose one of: {known}"


def merge_debuggers(
    defaults: Iterable[DebuggerEntry], extra: Iterable[DebuggerEntry]
) -> List[DebuggerEntry]:
    """Append ``extra`` to ``defaults``; an entry with a known label replaces it in place."""
    merged: Dict[str, DebuggerEntry] = {entry.label: entry for entry in defaults}
    for entry in extra:
        merged[entry.label] = entry
    return list(merged.values())


def find_debugger(
    table: Sequence[DebuggerEntry], label: Optional[str] = None
) -> DebuggerEntry:
    """Return the entry for ``label``, or the first entry when no label is given."""
    if not table:
        raise UnknownDebuggerError(label or "", [])
    if label is None:
        return table[0]
    for entry in table:
        if entry.label == label:
            return entry
    raise UnknownDebuggerError(label, [entry.label for entry in table])


def build_debug_plan(
    entry: DebuggerEntry,
    executable: str,
    path_info: PathInfo,
    project_root: Optional[str] = None,
    build_directory: Optional[str] = None,
) -> DebugPlan:
    """Turn a table entry and a chosen executable into a launchable command."""
    base = expand_template(strip_comment(entry.pattern), path_info, project_root, build_directory)
    command = f"{base} {shlex.quote(executable)}".strip()
    return DebugPlan(
        label=entry.label,
        launcher=entry.launcher,
        command=command,
        executable=executable,
    )


__all__ = ["UnknownDebuggerError", "build_debug_plan", "find_debugger", "merge_debuggers"]
