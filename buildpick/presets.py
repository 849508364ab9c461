"""Built-in command presets and debugger table."""

from __future__ import annotations

from .models import DebuggerEntry, Launcher

DEFAULT_COMMANDS: tuple[str, ...] = (
    "make -k -C %b",
    "cmake --build %b",
    "ninja -C %b",
    "cargo build --manifest-path %p/Cargo.toml",
    "gcc -g -Wall -o %d%n %a",
    "g++ -g -Wall -o %d%n %a",
    "python %a",
    "%d%n",
)

DEFAULT_DEBUGGERS: tuple[DebuggerEntry, ...] = (
    DebuggerEntry(label="gdb", pattern="gdb", launcher=Launcher.GDB),
    # Same tool as above; the comment keeps the labels distinct. -tui draws its own
    # curses interface, so it runs in a terminal rather than a gdb frontend.
    DebuggerEntry(label="gdb #tui", pattern="gdb -tui #tui", launcher=Launcher.TERMINAL),
    DebuggerEntry(label="lldb", pattern="lldb --", launcher=Launcher.LLDB),
    DebuggerEntry(label="pdb", pattern="python -m pdb", launcher=Launcher.PDB),
)


__all__ = ["DEFAULT_COMMANDS", "DEFAULT_DEBUGGERS"]
