"""Logging setup for the masked-textual command."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(log_level: str = "WARNING", log_file: Path | None = None) -> None:
    """Route the package's log records to stderr or a file.

    The package disables its logger on import; this enables it.  When a log
    file is given, records go only to the file so they do not draw over the
    terminal UI.

    Args:
        log_level: Minimum level name (e.g. ``"DEBUG"``).
        log_file: Optional path of a rotating log file.
    """
    logger.remove()
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=log_level, rotation="10 MB", retention="7 days")
    else:
        logger.add(sys.stderr, level=log_level, format=_CONSOLE_FORMAT)
    logger.enable("masked_textual")
