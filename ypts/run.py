"""The ``run`` command: start an enabled plug or a built-in function by name."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from ypts import logger, plug

#: Built-in functions reachable through ``run``, by name. Each receives the run arguments.
BUILTINS: dict[str, Callable[[list[str]], Any]] = {}


class RunArgumentError(ValueError):
    """Raised when ``run`` gets no name."""


def run_main(argu: Sequence[str]) -> Any:
    """Start ``argu[0]``: an enabled plug takes precedence over a built-in."""
    enabled = plug.list_plugs()
    if not argu:
        logger.error("run:参数错误")
        raise RunArgumentError("run:参数错误")
    name = argu[0]
    if name in enabled:
        return plug.load(name, argu)
    builtin = BUILTINS.get(name)
    if builtin is None:
        return None
    return builtin(list(argu))