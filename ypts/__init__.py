"""Path, file, text, time and logging helpers with a plain-text plug-in registry."""

__version__ = "0.1.0"