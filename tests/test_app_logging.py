"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from sovereignty_scorer import app_logging
from sovereignty_scorer.app_logging import get_logger, setup_logging, setup_logging_from_config
from sovereignty_scorer.config import LoggingConfig


@pytest.fixture(autouse=True)
def restore_logger():
    logger = logging.getLogger(app_logging.ROOT_LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    configured = app_logging._logging_configured
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    app_logging._logging_configured = configured


class TestGetLogger:

    def test_component_logger_is_child_of_root(self):
        assert get_logger("advisor.gateway").name == "sovereignty.advisor.gateway"

    def test_empty_name_is_root(self):
        assert get_logger().name == "sovereignty"

    def test_same_logger_is_returned(self):
        assert get_logger("state") is get_logger("state")


class TestSetupLogging:

    def test_plain_handler_outside_dev_mode(self):
        logger = setup_logging(level="debug")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], RichHandler)
        assert logger.propagate is False
        assert app_logging.is_configured()

    def test_unknown_level_means_info(self):
        assert setup_logging(level="chatty").level == logging.INFO

    def test_repeated_setup_replaces_handlers(self):
        setup_logging(dev_mode=True)
        logger = setup_logging(dev_mode=True)
        assert len(logger.handlers) == 1

    def test_without_console_stays_silent(self):
        logger = setup_logging(include_console=False)
        assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_from_config(self):
        logger = setup_logging_from_config(LoggingConfig(level="WARNING", dev_mode=True))
        assert logger.level == logging.WARNING
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.handlers[0].level == logging.WARNING
