"""
Internal logging infrastructure for the log facade.

Provides the shared diagnostics Logger and the stdlib bridge subscriber.
"""

from .bridge import LoggingSubscriber
from .config import FacadeFormatter, setup_logging
from .logger import Logger

# Единый экземпляр логгера
_logger_instance = None


def get_logger():
    """Получить единый экземпляр логгера."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = Logger()
    return _logger_instance


logger = get_logger()

__all__ = ['logger', 'get_logger', 'Logger', 'LoggingSubscriber', 'FacadeFormatter', 'setup_logging']
