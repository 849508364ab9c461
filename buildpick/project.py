"""Project root detection based on version-control and config markers."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from .logging import get_logger

PROJECT_MARKERS: tuple[str, ...] = (
    ".git",
    ".hg",
    ".svn",
    ".bzr",
    "_darcs",
    ".buildpick.yml",
)

_LOGGER = get_logger("project")


def find_project_root(
    start: str | Path | None, markers: Sequence[str] = PROJECT_MARKERS
) -> Optional[str]:
    """Return the nearest ancestor of ``start`` holding one of ``markers``."""
    if start is None:
        return None

    current = Path(start).expanduser().resolve()
    if not current.is_dir():
        current = current.parent

    for candidate in (current, *current.parents):
        for marker in markers:
            if (candidate / marker).exists():
                _LOGGER.debug("Project root %s (marker %s)", candidate, marker)
                return str(candidate)
    return None


__all__ = ["PROJECT_MARKERS", "find_project_root"]
