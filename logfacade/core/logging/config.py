"""
Logging configuration and setup for the log facade internals.

The facade's own diagnostics (subscriber failures, configuration loading,
dispatch tracing) go through a plain-text ``logging`` logger named
``logfacade``. Facade messages themselves are never written here unless a
``LoggingSubscriber`` is registered.
"""

import logging
import os
from typing import Optional

LOGGER_NAME = "logfacade"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class FacadeFormatter(logging.Formatter):
    """
    Plain-text formatter that appends the facade category when a record has one.
    """

    def __init__(self, fmt=None, datefmt=None):
        super().__init__(fmt or DEFAULT_FORMAT, datefmt or "%Y-%m-%dT%H:%M:%S%z")

    def format(self, record):
        formatted = super().format(record)

        category = getattr(record, "category", None)
        if category:
            formatted = f"{formatted} | category={category}"

        return formatted


def setup_logging(log_level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``logfacade`` logger.

    Calling it again replaces the handlers, so repeated setup never duplicates
    output.

    Args:
        log_level: Level name; falls back to the LOG_LEVEL environment variable.
        log_file: Optional path of a log file; falls back to LOG_FILE.

    Returns:
        logging.Logger: Configured logger instance
    """
    level_name = (log_level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    formatter = FacadeFormatter()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    log_file = log_file or os.environ.get("LOG_FILE")
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    return logger
