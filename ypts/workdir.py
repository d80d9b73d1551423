"""Switching the working directory to the directory of the running program."""

from __future__ import annotations

import os
import sys


def executable_dir(executable: str | None = None) -> str | None:
    """Directory part of *executable* (default: the running program), or None."""
    path = executable if executable is not None else os.path.abspath(sys.argv[0])
    cut = max(path.rfind("\\"), path.rfind("/"))
    if cut < 0:
        return None
    return path[:cut]


def set_current_dir_to_executable_dir(executable: str | None = None) -> bool:
    """Change into the program's directory; return whether that succeeded."""
    directory = executable_dir(executable)
    if directory is None:
        return False
    try:
        os.chdir(directory)
    except OSError:
        return False
    return True