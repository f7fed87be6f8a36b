"""
Subscriber that forwards facade messages into the standard ``logging`` tree.
"""

import logging
from typing import Optional


class LoggingSubscriber:
    """
    Facade subscriber writing every message to a stdlib logger.

    Messages with a category go to the child logger ``<logger_name>.<category>``
    so handlers and levels can be configured per category.
    """

    def __init__(self, logger_name: str = "logfacade.messages", level: int = logging.INFO):
        self.logger_name = logger_name
        self.level = level

    def logger_for(self, category: Optional[str]) -> logging.Logger:
        if category:
            return logging.getLogger(f"{self.logger_name}.{category}")
        return logging.getLogger(self.logger_name)

    def __call__(self, message: str, category: Optional[str] = None):
        self.logger_for(category).log(self.level, message, extra={"category": category})
