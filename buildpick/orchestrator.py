"""Workflow orchestration for run, debug and run-command flows."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from .build_dir import BuildDirectoryResolver
from .config import CONFIG_FILENAME, BuildpickConfig, load_config
from .debuggers import build_debug_plan, find_debugger, merge_debuggers
from .discovery import ExecutableDiscovery
from .logging import get_logger
from .models import DebugPlan, DebuggerEntry, ExecutableCandidate, ProjectContext
from .pathinfo import extract_path_info
from .presets import DEFAULT_COMMANDS, DEFAULT_DEBUGGERS
from .project import find_project_root
from .ranking import rank_candidates
from .templates import expand_template

RootFinder = Callable[[Optional[str]], Optional[str]]


@dataclass
class Workspace:
    """Context and configuration captured for a single workflow run."""

    context: ProjectContext
    config: BuildpickConfig


class Orchestrator:
    """Coordinates build directory resolution, discovery, ranking and expansion."""

    def __init__(
        self,
        resolver: BuildDirectoryResolver | None = None,
        root_finder: RootFinder | None = None,
    ) -> None:
        self.resolver = resolver or BuildDirectoryResolver()
        self.root_finder = root_finder or find_project_root
        self.logger = get_logger("orchestrator")

    def workspace(
        self,
        current_file: Optional[str] = None,
        project_root: Optional[str] = None,
        config: BuildpickConfig | None = None,
    ) -> Workspace:
        """Capture a fresh context; nothing is reused between calls."""
        if current_file:
            current_file = os.path.abspath(os.path.expanduser(current_file))
        if project_root:
            project_root = os.path.abspath(os.path.expanduser(project_root))
        else:
            start = os.path.dirname(current_file) if current_file else os.getcwd()
            project_root = self.root_finder(start)

        context = ProjectContext(current_file=current_file, project_root=project_root)
        if config is None:
            config = self._load_config(context)
        return Workspace(context=context, config=config)

    def build_directory(self, workspace: Workspace) -> Optional[str]:
        """Resolve the build directory; may raise ``InvalidPathError``."""
        return self.resolver.resolve(workspace.context, workspace.config.build_dir)

    def run_candidates(self, workspace: Workspace) -> List[ExecutableCandidate]:
        """Executables under the build directory ranked against the current file name."""
        return self._ranked_candidates(workspace, self.build_directory(workspace))

    def _ranked_candidates(
        self, workspace: Workspace, build_dir: Optional[str]
    ) -> List[ExecutableCandidate]:
        discovery = ExecutableDiscovery(workspace.config.discovery.exclude_dirs)
        paths = discovery.discover(build_dir)
        reference = extract_path_info(workspace.context.current_file).file_name
        candidates = rank_candidates(reference, paths)
        if candidates:
            self.logger.info(
                "%d candidates under %s; best match %s",
                len(candidates),
                build_dir,
                candidates[0].path,
            )
        else:
            self.logger.info("No executables found under %s", build_dir or "(no directory)")
        return candidates

    def debuggers(self, workspace: Workspace) -> List[DebuggerEntry]:
        """The default debugger table merged with project entries."""
        return merge_debuggers(DEFAULT_DEBUGGERS, workspace.config.debuggers)

    def debug_plan(
        self,
        workspace: Workspace,
        label: Optional[str] = None,
        executable: Optional[str] = None,
    ) -> Optional[DebugPlan]:
        """Pair a debugger with an executable; ``None`` when there is nothing to debug."""
        entry = find_debugger(self.debuggers(workspace), label)
        build_dir = self.build_directory(workspace)
        if executable is None:
            candidates = self._ranked_candidates(workspace, build_dir)
            if not candidates:
                return None
            executable = candidates[0].path

        plan = build_debug_plan(
            entry,
            executable,
            extract_path_info(workspace.context.current_file),
            workspace.context.project_root,
            build_dir,
        )
        self.logger.debug("Debug plan %s via %s: %s", plan.label, plan.launcher.value, plan.command)
        return plan

    def command_templates(self, workspace: Workspace) -> List[str]:
        """Global presets followed by per-project commands."""
        return [*DEFAULT_COMMANDS, *workspace.config.commands]

    def expand_command(self, workspace: Workspace, template: str) -> str:
        """Expand ``template`` against the current file, project root and build directory."""
        build_dir = self.build_directory(workspace)
        expanded = expand_template(
            template,
            extract_path_info(workspace.context.current_file),
            workspace.context.project_root,
            build_dir,
        )
        self.logger.debug("Expanded %r to %r", template, expanded)
        return expanded

    def _load_config(self, context: ProjectContext) -> BuildpickConfig:
        # Only the directory's own file is read, even when the directory is missing.
        if context.project_root:
            directory = Path(context.project_root)
        elif context.current_file:
            directory = Path(context.current_file).parent
        else:
            directory = Path.cwd()
        return load_config(directory / CONFIG_FILENAME)


__all__ = ["Orchestrator", "Workspace"]
