"""Logging setup for command-line use.

The library emits records through ``loguru.logger`` but stays disabled
until the host opts in (see ``toggl_client/__init__.py``), so applications
embedding the client keep full control.  The ``toggl`` CLI calls
``setup_logging`` once on startup, which installs a sink and enables the
package.
"""

from __future__ import annotations

import logging
import sys

from loguru import logger

_CLI_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"
_DEBUG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

_PACKAGE = "toggl_client"


class _StdlibBridge(logging.Handler):
    """Re-emit stdlib records (httpx, httpcore) through loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        logger.opt(depth=_stdlib_depth(), exception=record.exc_info).log(_loguru_level(record), record.getMessage())


def _loguru_level(record: logging.LogRecord) -> str | int:
    try:
        return logger.level(record.levelname).name
    except ValueError:
        return record.levelno


def _stdlib_depth() -> int:
    """Frames between ``emit`` and the code that called the stdlib logger."""
    # Frame 2 is emit's caller, i.e. loguru depth 1.
    depth = 1
    frame = sys._getframe(2)
    while frame is not None and frame.f_code.co_filename == logging.__file__:
        frame = frame.f_back
        depth += 1
    return depth


def setup_logging(level: str = "INFO") -> None:
    """Route all logging to stderr at *level* and enable the package logs.

    DEBUG switches to a format with timestamps and call sites; otherwise
    output stays short enough for a terminal.
    """
    level = level.upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format=_DEBUG_FORMAT if level == "DEBUG" else _CLI_FORMAT)
    logger.enable(_PACKAGE)

    logging.basicConfig(handlers=[_StdlibBridge()], level=0, force=True)

    # httpx logs every request at INFO; our transport already logs at DEBUG.
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)
