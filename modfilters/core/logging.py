"""Centralized logging configuration for the filter framework.

Every module logs through a child of the ``modfilters`` logger; this module
attaches the handlers once for command line use.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

__all__ = ["logger", "setup_logging"]

logger = logging.getLogger("modfilters")


def setup_logging(
    level: int | str = logging.INFO,
    log_file: Path | None = None,
) -> None:
    """Configure the application logger.

    Args:
        level: The logging level, either numeric or a level name such as "DEBUG".
        log_file: Optional path to a log file. If provided, logs will
            also be written to this file.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)

    if logger.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    # stderr keeps stdout free for rendered descriptors and HTML
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
