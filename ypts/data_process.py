"""Directory listing and string splitting helpers."""

from __future__ import annotations

import os
from pathlib import Path


def get_all_files(root_path: str | os.PathLike) -> list[str]:
    """Return every regular file below *root_path*, recursively.

    Raises FileNotFoundError or NotADirectoryError if *root_path* is not a directory.
    """
    root = Path(root_path)
    if not root.exists():
        raise FileNotFoundError(f"no such directory: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"not a directory: {root}")
    return [str(path) for path in root.rglob("*") if path.is_file()]


def is_dir_has_file(root_path: str | os.PathLike) -> bool:
    """True if *root_path* is an existing, non-empty directory."""
    try:
        path = Path(root_path)
        if not path.exists():
            print(f"路径不存在: {root_path}")
            return False
        if not path.is_dir():
            print(f"路径不是目录: {root_path}")
            return False
        with os.scandir(path) as entries:
            return any(True for _ in entries)
    except OSError as exc:
        print(f"文件系统错误: {exc}")
        return False


def part_str(text: str, part_by: str) -> list[str]:
    """Split *text* on every occurrence of *part_by*; an empty separator raises ValueError."""
    return text.split(part_by)


def part_str_once(text: str, part_by: str) -> tuple[str, str]:
    """Split *text* at the first *part_by*; without a match the second part is empty."""
    if not part_by:
        return "", text
    head, _, tail = text.partition(part_by)
    return head, tail