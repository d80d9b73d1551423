"""Logger that prints each record and appends it to a daily file."""

from __future__ import annotations

import enum
import os
from pathlib import Path

from ypts import fio, paths, timeutil


class Level(enum.Enum):
    """Record levels, written as a single letter."""

    ERROR = "E"
    WARNING = "W"
    DEBUG = "D"
    INFO = "I"


def write(level: Level | str, msg: str, logpath: str | os.PathLike | None = None) -> str:
    """Format, print and append a record to ``<cwd>/<logpath>/<date>.log``; return it.

    A log file that cannot be written is skipped silently; the record is still printed.
    """
    level = Level(level)
    record = f"[{timeutil.utc_p0800()}]{level.value}:{msg}\n"
    directory = paths.log() if logpath is None else logpath
    log_file = Path.cwd() / directory / f"{timeutil.date()}.log"
    try:
        fio.file_write_c(log_file, record)
    except OSError:
        pass
    print(record)
    return record


def error(msg: str, logpath: str | os.PathLike | None = None) -> str:
    """Write an error record."""
    return write(Level.ERROR, msg, logpath)


def warning(msg: str, logpath: str | os.PathLike | None = None) -> str:
    """Write a warning record."""
    return write(Level.WARNING, msg, logpath)


def debug(msg: str, logpath: str | os.PathLike | None = None) -> str:
    """Write a debug record."""
    return write(Level.DEBUG, msg, logpath)


def info(msg: str, logpath: str | os.PathLike | None = None) -> str:
    """Write an info record."""
    return write(Level.INFO, msg, logpath)