"""Log output for the ``gridpuzzle`` package."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridpuzzle.config import GameConfig

PACKAGE_LOGGER = "gridpuzzle"
LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-28s | %(message)s"


def setup_logging(config: GameConfig) -> logging.Logger:
    """Send package log records to stdout at ``config.log_level``.

    Only the package logger is configured; the root logger and other
    libraries are left alone. Calling it again replaces the handler.
    """
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return package_logger
