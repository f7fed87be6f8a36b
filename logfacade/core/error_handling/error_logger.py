"""
Error Logging Utility

Centralized error logging for the facade's own failures.
"""

from typing import Dict, Any, Optional

from .error_types import ErrorType, ErrorContext
from ..logging import get_logger


def describe_callable(callback) -> str:
    """Readable name of a subscriber for log output."""
    name = getattr(callback, "__qualname__", None) or getattr(callback, "__name__", None)
    if name is None:
        name = type(callback).__qualname__
    module = getattr(callback, "__module__", None)
    return f"{module}.{name}" if module else name


class ErrorLogger:
    """Единый логгер ошибок, использующий общую систему."""

    @staticmethod
    def _get_logger():
        return get_logger().logger

    @staticmethod
    def log_error(
        error_type: ErrorType,
        context: ErrorContext,
        original_exception: Optional[Exception] = None,
        additional_data: Optional[Dict[str, Any]] = None,
        message: Optional[str] = None
    ):
        """Логировать ошибку с использованием единой системы."""
        logger = ErrorLogger._get_logger()

        log_extra = context.to_log_extra()
        log_extra["error_code"] = error_type.code

        if additional_data:
            log_extra.update(additional_data)

        format_kwargs = context.format_kwargs()
        if original_exception is not None:
            format_kwargs.setdefault("error_details", str(original_exception))
            log_extra["original_exception_type"] = type(original_exception).__name__

        log_message = message or error_type.format_message(**format_kwargs)

        if original_exception is not None:
            logger.error(
                log_message,
                extra=log_extra,
                exc_info=(type(original_exception), original_exception, original_exception.__traceback__)
            )
        else:
            logger.error(log_message, extra=log_extra)

    @staticmethod
    def log_subscriber_error(
        callback,
        original_exception: Exception,
        category: Optional[str] = None,
        level: Optional[str] = None
    ):
        """Log an exception raised by a subscriber during a notification batch."""
        context = ErrorContext(
            category=category,
            level=level,
            subscriber=describe_callable(callback)
        )
        ErrorLogger.log_error(
            error_type=ErrorType.SUBSCRIBER_FAILED,
            context=context,
            original_exception=original_exception
        )
