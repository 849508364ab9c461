"""Command template expansion."""

from __future__ import annotations

import re
from typing import Dict, Optional

from .models import PathInfo

TEMPLATE_TOKENS: Dict[str, str] = {
    "a": "absolute path of the current file",
    "f": "file name",
    "n": "file name without extension",
    "e": "extension",
    "d": "directory of the current file, with trailing separator",
    "p": "project root",
    "b": "build directory",
}

_TOKEN_PATTERN = re.compile(r"%([" + "".join(TEMPLATE_TOKENS) + r"])")


def token_values(
    path_info: PathInfo,
    project_root: Optional[str] = None,
    build_directory: Optional[str] = None,
) -> Dict[str, str]:
    """Return the replacement text for every template token letter."""
    return {
        "a": path_info.absolute_path,
        "f": path_info.file_name,
        "n": path_info.stem,
        "e": path_info.extension,
        "d": path_info.directory,
        "p": project_root or "",
        "b": build_directory or "",
    }


def expand_template(
    template: str,
    path_info: PathInfo,
    project_root: Optional[str] = None,
    build_directory: Optional[str] = None,
) -> str:
    """Replace ``%a %f %n %e %d %p %b`` in ``template``.

    Substitution happens in a single pass, so replacement text is never
    scanned again. Other ``%`` sequences pass through unchanged.
    """
    values = token_values(path_info, project_root, build_directory)
    return _TOKEN_PATTERN.sub(lambda match: values[match.group(1)], template)


def strip_comment(command: str) -> str:
    """Drop everything from the first unescaped ``#`` and trim whitespace.

    A backslash-escaped ``\\#`` is kept verbatim so the shell still sees a
    literal hash.
    """
    escaped = False
    for index, char in enumerate(command):
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == "#":
            return command[:index].strip()
    return command.strip()


__all__ = ["TEMPLATE_TOKENS", "expand_template", "strip_comment", "token_values"]
