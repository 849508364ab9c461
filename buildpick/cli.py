"""CLI entrypoints for buildpick commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .build_dir import InvalidPathError
from .config import ConfigError
from .debuggers import UnknownDebuggerError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_context_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--file",
        dest="current_file",
        default=None,
        help="The file you are working on; drives %%a %%f %%n %%e %%d and ranking.",
    )
    parser.add_argument(
        "--project-root",
        default=None,
        help="Project root to use instead of searching for VCS markers.",
    )


def _add_subcommand(subparsers, name: str, help_text: str) -> argparse.ArgumentParser:
    sub = subparsers.add_parser(name, help=help_text)
    _add_verbose_option(sub, suppress_default=True)
    _add_context_options(sub)
    return sub


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buildpick",
        description="Find the executable you mean to run and expand build command templates.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    _add_subcommand(subparsers, "build-dir", "Print the resolved build directory.")

    candidates_parser = _add_subcommand(
        subparsers,
        "candidates",
        "List executables under the build directory, closest name first.",
    )
    candidates_parser.add_argument(
        "--first",
        action="store_true",
        help="Print only the best match.",
    )

    debug_parser = _add_subcommand(
        subparsers,
        "debug",
        "Print the debugger command for an executable.",
    )
    debug_parser.add_argument(
        "--debugger",
        default=None,
        help="Debugger label from the table (defaults to the first entry).",
    )
    debug_parser.add_argument(
        "--list",
        action="store_true",
        help="List the debugger table instead of building a command.",
    )
    debug_parser.add_argument(
        "executable",
        nargs="?",
        default=None,
        help="Executable to debug (defaults to the best candidate).",
    )

    _add_subcommand(subparsers, "commands", "List preset and project command templates.")

    expand_parser = _add_subcommand(
        subparsers,
        "expand",
        "Expand %%a %%f %%n %%e %%d %%p %%b in a command template.",
    )
    expand_parser.add_argument("template", help="Command template to expand.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for buildpick commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    orchestrator = Orchestrator()

    try:
        workspace = orchestrator.workspace(
            current_file=args.current_file,
            project_root=args.project_root,
        )
        if args.command == "build-dir":
            print(orchestrator.build_directory(workspace) or "")
        elif args.command == "candidates":
            candidates = orchestrator.run_candidates(workspace)
            if not candidates:
                print("no candidates")
            elif args.first:
                print(candidates[0].path)
            else:
                for candidate in candidates:
                    print(f"{candidate.distance}\t{candidate.path}")
        elif args.command == "debug":
            if args.list:
                for entry in orchestrator.debuggers(workspace):
                    print(f"{entry.label}\t{entry.launcher.value}\t{entry.pattern}")
                return
            plan = orchestrator.debug_plan(workspace, args.debugger, args.executable)
            if plan is None:
                print("no candidates")
            else:
                print(f"{plan.launcher.value}\t{plan.command}")
        elif args.command == "commands":
            for template in orchestrator.command_templates(workspace):
                print(template)
        elif args.command == "expand":
            print(orchestrator.expand_command(workspace, args.template))
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except InvalidPathError as exc:
        parser.exit(1, f"{exc}\n")
    except UnknownDebuggerError as exc:
        parser.exit(1, f"{exc}\n")
    except ConfigError as exc:
        parser.exit(1, f"buildpick {args.command} failed: {exc}\n")


if __name__ == "__main__":
    main(sys.argv[1:])
