"""Build directory resolution from layered project rules."""

from __future__ import annotations

import os
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .logging import get_logger
from .models import (
    AbsolutePath,
    BuildDirectorySpec,
    ComputedExpression,
    ProjectContext,
    RelativePath,
    Unset,
)
from .pathinfo import extract_path_info

Strategy = Callable[[ProjectContext, BuildDirectorySpec], Optional[str]]


class InvalidPathError(ValueError):
    """Raised when a configured build directory does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Build directory does not exist: {path}")
        self.path = path


def _override_candidate(
    context: ProjectContext, spec: BuildDirectorySpec
) -> Optional[str]:
    if isinstance(spec, Unset):
        return None
    if isinstance(spec, AbsolutePath):
        return spec.path
    if isinstance(spec, RelativePath):
        if context.project_root:
            return os.path.join(context.project_root, spec.path)
        directory = extract_path_info(context.current_file).directory
        if directory:
            return os.path.join(directory, spec.path)
        return None
    if isinstance(spec, ComputedExpression):
        value = spec.evaluate()
        return None if value is None else str(value)
    raise TypeError(f"Unsupported build directory spec: {spec!r}")


def explicit_override(context: ProjectContext, spec: BuildDirectorySpec) -> Optional[str]:
    """Resolve a configured override, validating that it exists."""
    candidate = _override_candidate(context, spec)
    if not candidate:
        return None
    if not os.path.exists(candidate):
        raise InvalidPathError(candidate)
    return os.path.realpath(os.path.abspath(candidate))


def project_root(context: ProjectContext, spec: BuildDirectorySpec) -> Optional[str]:
    """Use the project root when one was detected."""
    return context.project_root or None


def current_file_directory(
    context: ProjectContext, spec: BuildDirectorySpec
) -> Optional[str]:
    """Fall back to the directory holding the current file."""
    if not context.current_file:
        return None
    return os.path.dirname(context.current_file) or None


DEFAULT_STRATEGIES: Tuple[Tuple[str, Strategy], ...] = (
    ("override", explicit_override),
    ("project-root", project_root),
    ("current-file", current_file_directory),
)


def first_match(
    strategies: Iterable[Tuple[str, Strategy]],
    context: ProjectContext,
    spec: BuildDirectorySpec,
) -> Tuple[Optional[str], Optional[str]]:
    """Run strategies in order and return ``(name, value)`` of the first hit."""
    for name, strategy in strategies:
        value = strategy(context, spec)
        if value is not None:
            return name, value
    return None, None


class BuildDirectoryResolver:
    """Determines the directory searched for executables and used for ``%b``."""

    def __init__(self, strategies: Sequence[Tuple[str, Strategy]] | None = None) -> None:
        self.strategies: List[Tuple[str, Strategy]] = list(
            strategies if strategies is not None else DEFAULT_STRATEGIES
        )
        self.logger = get_logger("build_dir")

    def resolve(
        self, context: ProjectContext, spec: BuildDirectorySpec | None = None
    ) -> Optional[str]:
        """Return the resolved build directory, or ``None`` when nothing applies.

        Raises :class:`InvalidPathError` when an explicit override points at a
        path that does not exist.
        """
        name, value = first_match(self.strategies, context, spec or Unset())
        if value is None:
            self.logger.debug("No build directory could be resolved")
        else:
            self.logger.debug("Build directory %s (via %s)", value, name)
        return value


__all__ = [
    "BuildDirectoryResolver",
    "DEFAULT_STRATEGIES",
    "InvalidPathError",
    "current_file_directory",
    "explicit_override",
    "first_match",
    "project_root",
]
