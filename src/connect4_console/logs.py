# src/connect4_console/logs.py

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

from connect4_console.config import LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL

ROOT_LOGGER = "connect4_console"

_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.
    Safe to call more than once; later calls only adjust the level.
    """
    global _handler

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level if level is not None else LOG_LEVEL)

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
        logger.propagate = False

    return logger
