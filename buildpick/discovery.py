"""Executable discovery beneath a build directory."""

from __future__ import annotations

import os
from typing import Iterable, Iterator, List, Optional, Set

from .logging import get_logger

DEFAULT_EXCLUDED_DIRS = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        ".bzr",
        "_darcs",
    }
)


class UnreadableDirectoryError(OSError):
    """A subtree that could not be listed and was skipped."""


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


class ExecutableDiscovery:
    """Walks a directory tree and collects files the current user may execute.

    Symlinked directories are followed, but each real directory is visited
    once so link cycles terminate. Subtrees that cannot be listed are
    recorded on :attr:`skipped` and otherwise ignored.

    Directories named in ``exclude_dirs`` are not entered; by default that is
    version-control metadata (``.git``, ``.hg``, ...), whose hook scripts are
    executable. Pass an empty iterable to walk everything.
    """

    def __init__(self, exclude_dirs: Iterable[str] | None = None) -> None:
        self.exclude_dirs: Set[str] = set(
            DEFAULT_EXCLUDED_DIRS if exclude_dirs is None else exclude_dirs
        )
        self.skipped: List[UnreadableDirectoryError] = []
        self.logger = get_logger("discovery")

    def discover(self, directory: Optional[str]) -> List[str]:
        """Return absolute paths of executables under ``directory``, in walk order."""
        self.skipped = []
        if not directory:
            return []

        root = os.path.abspath(directory)
        found = list(self._iter_executables(root))
        self.logger.debug(
            "Found %d executables under %s (%d unreadable subtrees skipped)",
            len(found),
            root,
            len(self.skipped),
        )
        return found

    def _on_error(self, error: OSError) -> None:
        skipped = UnreadableDirectoryError(error.errno, error.strerror, error.filename)
        self.skipped.append(skipped)
        self.logger.debug("Skipping unreadable directory %s: %s", error.filename, error.strerror)

    def _iter_executables(self, root: str) -> Iterator[str]:
        visited: Set[str] = set()
        for dirpath, dirnames, filenames in os.walk(
            root, onerror=self._on_error, followlinks=True
        ):
            real = os.path.realpath(dirpath)
            if real in visited:
                dirnames[:] = []
                continue
            visited.add(real)

            dirnames[:] = sorted(
                name
                for name in dirnames
                if name not in self.exclude_dirs
                and os.path.realpath(os.path.join(dirpath, name)) not in visited
            )

            for filename in sorted(filenames):
                path = os.path.join(dirpath, filename)
                if _is_executable(path):
                    yield path


__all__ = ["DEFAULT_EXCLUDED_DIRS", "ExecutableDiscovery", "UnreadableDirectoryError"]
