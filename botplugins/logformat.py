"""Coloured single-line log formatting."""

from __future__ import annotations

import logging

_COLOR_FATAL = "\x1b[1;31m"
_COLOR_ERROR = "\x1b[31m"
_COLOR_WARN = "\x1b[33m"
_COLOR_INFO = "\x1b[37m"
_COLOR_DEBUG = "\x1b[32m"
_COLOR_TRACE = "\x1b[36m"
COLOR_RESET = "\x1b[0m"


def level_color(levelno: int) -> str:
    """Return the ANSI colour code for a logging level."""
    if levelno >= logging.CRITICAL:
        return _COLOR_FATAL
    if levelno >= logging.ERROR:
        return _COLOR_ERROR
    if levelno >= logging.WARNING:
        return _COLOR_WARN
    if levelno >= logging.INFO:
        return _COLOR_INFO
    if levelno >= logging.DEBUG:
        return _COLOR_DEBUG
    return _COLOR_TRACE


class ColorFormatter(logging.Formatter):
    """Format records as ``[LEVEL] message`` in the level's colour.

    The formatted text ends with its own newline, so pair it with a handler
    whose ``terminator`` is the empty string.
    """

    def format(self, record: logging.LogRecord) -> str:
        return (
            f"{level_color(record.levelno)}[{record.levelname.upper()}] "
            f"{record.getMessage()} \n{COLOR_RESET}"
        )