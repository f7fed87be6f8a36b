"""
Error Types and Context Definitions

This module defines standardized error types and context information for
consistent error handling across the log facade.
"""

from enum import Enum
from typing import Dict, Any, Optional


class ErrorType(Enum):
    """Enumeration of standard error types in the facade."""

    SERIALIZATION_FAILED = ("serialization_failed", "Context could not be serialized: {error_details}")
    SUBSCRIBER_FAILED = ("subscriber_failed", "Subscriber '{subscriber}' raised: {error_details}")
    INVALID_SUBSCRIBER = ("invalid_subscriber", "Subscriber must be callable, got {subscriber_type}")
    SCHEDULER_FAILED = ("scheduler_failed", "Deferred notification could not be scheduled: {error_details}")
    CONFIG_ERROR = ("config_error", "Configuration error: {error_details}")

    def __init__(self, code: str, message_template: str):
        self.code = code
        self.message_template = message_template

    def format_message(self, **kwargs) -> str:
        """Format the error message with provided parameters."""
        try:
            return self.message_template.format(**kwargs)
        except KeyError:
            return self.message_template


class ErrorContext:
    """Context information for error handling."""

    def __init__(
        self,
        category: Optional[str] = None,
        level: Optional[str] = None,
        subscriber: Optional[str] = None,
        **additional_context
    ):
        self.category = category
        self.level = level
        self.subscriber = subscriber
        self.additional_context = additional_context

    def format_kwargs(self) -> Dict[str, Any]:
        """Values usable in ErrorType message templates."""
        values = {
            "category": self.category,
            "level": self.level,
            "subscriber": self.subscriber,
        }
        values.update(self.additional_context)
        return values

    def to_log_extra(self) -> Dict[str, Any]:
        """Convert context to logging extra dictionary."""
        extra = {
            "log_type": "error"
        }

        if self.category:
            extra["category"] = self.category
        if self.level:
            extra["level"] = self.level
        if self.subscriber:
            extra["subscriber"] = self.subscriber

        extra.update(self.additional_context)
        return extra
