"""Enabling, disabling and starting plugs, tracked in ``data/plugs.ypts``."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from ypts import fio, logger, paths

#: Start functions of available plugs, by plug name. Each receives the run arguments.
HANDLERS: dict[str, Callable[[list[str]], Any]] = {}


class PlugCommandError(ValueError):
    """Raised for an unknown or incomplete plug command."""


def _plugs_file() -> str:
    return paths.data() + "plugs.ypts"


def enable(name: str) -> None:
    """Add *name* to the enabled-plug list."""
    fio.file_write_c(_plugs_file(), name + "\n")


def disable(name: str) -> None:
    """Remove every entry of *name* from the enabled-plug list."""
    remaining = [line for line in fio.file_read_lines(_plugs_file()) if line != name]
    fio.file_write_new(_plugs_file(), "".join(line + "\n" for line in remaining))


def disable_all() -> None:
    """Clear the enabled-plug list."""
    fio.file_write_new(_plugs_file(), "")


def plug_main(argu: Sequence[str]) -> None:
    """Handle ``able <name>``, ``unable <name>`` and ``unable_all``."""
    if len(argu) > 1 and argu[0] == "able":
        enable(argu[1])
    elif len(argu) > 1 and argu[0] == "unable":
        disable(argu[1])
    elif len(argu) > 0 and argu[0] == "unable_all":
        disable_all()
    else:
        logger.error("plug:未知指令")
        raise PlugCommandError("plug:未知指令")


def list_plugs() -> list[str]:
    """Return the enabled plugs in the order they were enabled."""
    return fio.file_read_lines(_plugs_file())


def load(plug_name: str, argu: Sequence[str]) -> Any:
    """Start *plug_name* through its registered handler; return what it returns."""
    handler = HANDLERS.get(plug_name)
    if handler is None:
        return None
    return handler(list(argu))