"""Relative names of the working directories the tool keeps next to itself."""


def data() -> str:
    """Directory holding persistent state such as the enabled-plug list."""
    return "data/"


def res() -> str:
    """Directory holding resources."""
    return "res/"


def rep() -> str:
    """Directory holding reports."""
    return "rep/"


def log() -> str:
    """Directory holding the daily log files."""
    return "log/"


def bin() -> str:  # noqa: A001 - mirrors the directory name
    """Directory holding binaries."""
    return "bin/"


def temp() -> str:
    """Directory holding temporary files."""
    return "temp/"