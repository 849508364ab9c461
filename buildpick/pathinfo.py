"""Derive path fragments from the file the user is working on."""

from __future__ import annotations

import os
from typing import Optional

from .models import PathInfo


def extract_path_info(current_file: Optional[str]) -> PathInfo:
    """Split ``current_file`` into absolute path, name, stem, extension and directory.

    Every field is the empty string when ``current_file`` is absent.
    """
    if not current_file:
        return PathInfo()

    directory, file_name = os.path.split(current_file)
    _, dot, extension = file_name.rpartition(".")
    if not dot:
        extension = ""
    stem = file_name[: -(len(extension) + 1)] if extension else file_name

    if directory and not directory.endswith(os.sep):
        directory += os.sep

    return PathInfo(
        absolute_path=current_file,
        file_name=file_name,
        stem=stem,
        extension=extension,
        directory=directory,
    )


__all__ = ["extract_path_info"]
