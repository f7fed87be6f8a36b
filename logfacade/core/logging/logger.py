"""
Small Logger wrapper used by the facade for its own diagnostics.
"""

import logging
from typing import Optional

from .config import setup_logging


class Logger:
    """
    Thin wrapper over the ``logfacade`` logger.

    Keyword arguments passed to the level methods are attached to the record
    as ``extra`` fields.
    """

    def __init__(self, log_level: Optional[str] = None, log_file: Optional[str] = None):
        self._logger = setup_logging(log_level=log_level, log_file=log_file)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def is_debug_enabled(self) -> bool:
        """Check if debug logging is enabled."""
        return self._logger.isEnabledFor(logging.DEBUG)

    def info(self, message: str, **kwargs):
        self._logger.info(message, extra=kwargs or None)

    def debug(self, message: str, **kwargs):
        self._logger.debug(message, extra=kwargs or None)

    def warning(self, message: str, **kwargs):
        self._logger.warning(message, extra=kwargs or None)

    def error(self, message: str, exc_info: bool = True, **kwargs):
        """Log an error message, with the active exception by default."""
        self._logger.error(message, extra=kwargs or None, exc_info=exc_info)

    def dispatch(self, level: str, category: Optional[str], subscriber_count: int):
        """Trace a deferred notification batch when LOG_LEVEL=DEBUG."""
        if not self.is_debug_enabled():
            return

        message_parts = ["Dispatch", f"level={level}", f"subscribers={subscriber_count}"]
        self.debug(" | ".join(message_parts), category=category)
