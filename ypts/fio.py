"""Small file helpers: whole-file writes, appends, reads and path string tools."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

_SEPARATORS = re.compile(r"[\\/]")


def file_write_new(fpath: str | os.PathLike, text: str) -> None:
    """Replace the file's contents with *text*; raises OSError if it cannot be opened."""
    with open(fpath, "w", encoding="utf-8") as handle:
        handle.write(text)


def file_write_c(fpath: str | os.PathLike, text: str) -> None:
    """Append *text* to the file, creating it if needed; raises OSError on failure."""
    with open(fpath, "a", encoding="utf-8") as handle:
        handle.write(text)


def file_read_all(fpath: str | os.PathLike) -> str:
    """Return the whole file, or an empty string if it cannot be read."""
    try:
        with open(fpath, encoding="utf-8") as handle:
            return handle.read()
    except OSError:
        return ""


def file_read_lines(fpath: str | os.PathLike) -> list[str]:
    """Return the file's lines without terminators; an unreadable file gives no lines."""
    try:
        with open(fpath, encoding="utf-8") as handle:
            content = handle.read()
    except OSError:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def file_read_line(fpath: str | os.PathLike, line_num: int) -> str:
    """Return one line; 0 is the first, negative numbers count from the end.

    A line number outside the file, or an unreadable file, gives an empty string.
    """
    lines = file_read_lines(fpath)
    index = line_num if line_num >= 0 else len(lines) + line_num
    if 0 <= index < len(lines):
        return lines[index]
    return ""


def _file_name(path: str) -> str:
    return _SEPARATORS.split(path)[-1]


def _extension(path: str) -> str:
    """Extension without the dot, following the usual filesystem-path rules."""
    name = _file_name(path)
    if name in (".", ".."):
        return ""
    dot = name.rfind(".")
    if dot <= 0:
        return ""
    return name[dot + 1 :]


def filter_files_by_extension(files: Iterable[str], fileextname: str) -> list[str]:
    """Keep the paths whose extension (without the dot) equals *fileextname*."""
    return [file for file in files if _extension(file) == fileextname]


def get_file_extension(file: str) -> str:
    """Extension without the dot; a dot-file such as ``.bashrc`` gives its name."""
    extension = _extension(file)
    name = _file_name(file)
    if not extension and name.startswith(".") and len(name) > 1:
        return name[1:]
    return extension


def trans_path_to_dot(path: str) -> str:
    """Flatten a path: the last separator becomes ``_``, the others ``.``."""
    normalized = path.replace("\\", "/")
    head, sep, tail = normalized.rpartition("/")
    if not sep:
        return normalized
    return head.replace("/", ".") + "_" + tail


def remove_prefix(text: str, prefix: str) -> str:
    """Return *text* without *prefix* if it starts with it."""
    return text.removeprefix(prefix)