"""
Logging for the sovereignty assessment.

All modules log under the ``sovereignty`` logger. ``setup_logging`` attaches
the handlers once per process: Rich console output for the CLI and local
runs, a plain stream otherwise, and Logfire when enabled in the config.
"""

import logging
import sys
from typing import TYPE_CHECKING

import logfire
from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

if TYPE_CHECKING:
    from .config import LoggingConfig


ROOT_LOGGER_NAME = 'sovereignty'

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# EU blue and gold for levels that need attention
_console = Console(
    theme=Theme({
        "logging.level.info": "blue",
        "logging.level.warning": "bold yellow",
        "logging.level.error": "bold red",
    }),
    stderr=True,
)

_logging_configured = False


def _console_handler(rich: bool) -> logging.Handler:
    if rich:
        return RichHandler(console=_console, show_path=False, rich_tracebacks=True, markup=False)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logging(
    level: str = 'INFO',
    dev_mode: bool = False,
    include_console: bool = True,
    include_logfire: bool = False,
) -> logging.Logger:
    """
    Configure the 'sovereignty' logger and return it.

    Args:
        level: Level name; unknown names mean INFO
        dev_mode: Rich console output instead of a plain stream handler
        include_console: Log to stderr
        include_logfire: Forward records through Logfire's logging handler

    Calling it again replaces the previous handlers.
    """
    global _logging_configured

    level_value = logging.getLevelName(level.upper())
    if not isinstance(level_value, int):
        level_value = logging.INFO

    handlers: list[logging.Handler] = []
    if include_console:
        handlers.append(_console_handler(dev_mode))
    if include_logfire:
        handlers.append(logfire.LogfireLoggingHandler(fallback=logging.NullHandler()))

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level_value)
    logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(level_value)
        logger.addHandler(handler)
    if not handlers:
        logger.addHandler(logging.NullHandler())
    logger.propagate = False

    _logging_configured = True
    return logger


def setup_logging_from_config(config: "LoggingConfig") -> logging.Logger:
    """Configure logging from the ``logging`` section of the app config."""
    return setup_logging(
        level=config.level,
        dev_mode=config.dev_mode,
        include_logfire=config.include_logfire,
    )


def is_configured() -> bool:
    return _logging_configured


def get_logger(name: str = "") -> logging.Logger:
    """Logger for a component, e.g. ``get_logger("advisor.gateway")`` -> ``sovereignty.advisor.gateway``."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}" if name else ROOT_LOGGER_NAME)


# Silent until setup_logging runs
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
