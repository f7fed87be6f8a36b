from typing import Optional

from .error_handling.error_types import ErrorType, ErrorContext
from .error_handling.error_logger import ErrorLogger


class FacadeError(Exception):
    """Base exception for log facade failures."""

    error_type = ErrorType.CONFIG_ERROR

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        original_exception: Optional[Exception] = None,
        log_error: bool = True
    ):
        super().__init__(message)
        self.message = message
        self.error_code = self.error_type.code
        self.context = context or ErrorContext()
        self.original_exception = original_exception

        # Log the exception when it's created
        if log_error:
            ErrorLogger.log_error(
                error_type=self.error_type,
                context=self.context,
                original_exception=original_exception,
                additional_data={"exception_type": type(self).__name__},
                message=message
            )


class SerializationError(FacadeError, TypeError):
    """Raised when a log context cannot be converted to JSON."""

    error_type = ErrorType.SERIALIZATION_FAILED


class InvalidSubscriberError(FacadeError, TypeError):
    """Raised when something other than a callable is subscribed."""

    error_type = ErrorType.INVALID_SUBSCRIBER


class SchedulerError(FacadeError, RuntimeError):
    """Raised when a deferred notification cannot be enqueued."""

    error_type = ErrorType.SCHEDULER_FAILED
