"""Tests for logging setup."""

import logging

from connect4_console.logs import ROOT_LOGGER, configure_logging


def test_configure_logging_is_idempotent():
    logger = configure_logging("DEBUG")
    assert logger.level == logging.DEBUG
    configure_logging(logging.INFO)

    assert logger is logging.getLogger(ROOT_LOGGER)
    streams = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    assert len(streams) == 1
    assert logger.level == logging.INFO
    assert not logger.propagate


def test_module_loggers_inherit_level():
    configure_logging("WARNING")
    child = logging.getLogger("connect4_console.game.controller")
    assert child.getEffectiveLevel() == logging.WARNING
