"""
Main Error Handler

Builds the facade's exceptions with a standardized message and context.
"""

from typing import Optional, Type

from .error_types import ErrorType, ErrorContext


class ErrorHandler:
    """Centralized error handling utility."""

    @staticmethod
    def create_exception(
        error_type: ErrorType,
        context: Optional[ErrorContext] = None,
        original_exception: Optional[Exception] = None,
        log_error: bool = True,
        **format_kwargs
    ):
        """
        Create a facade exception matching ``error_type``.

        Args:
            error_type: The type of error to create
            context: Error context information
            original_exception: Original exception that caused this error
            log_error: Whether to log the error
            **format_kwargs: Additional kwargs for message formatting

        Returns:
            FacadeError subclass instance
        """
        if context is None:
            context = ErrorContext()

        format_dict = {**context.format_kwargs(), **format_kwargs}
        if original_exception is not None:
            format_dict.setdefault("error_details", str(original_exception))

        exception_class = ErrorHandler._exception_class(error_type)
        return exception_class(
            error_type.format_message(**format_dict),
            context=context,
            original_exception=original_exception,
            log_error=log_error
        )

    @staticmethod
    def _exception_class(error_type: ErrorType) -> Type[Exception]:
        from ..exceptions import (
            FacadeError,
            InvalidSubscriberError,
            SchedulerError,
            SerializationError,
        )

        return {
            ErrorType.SERIALIZATION_FAILED: SerializationError,
            ErrorType.INVALID_SUBSCRIBER: InvalidSubscriberError,
            ErrorType.SCHEDULER_FAILED: SchedulerError,
        }.get(error_type, FacadeError)

    @staticmethod
    def handle_serialization_error(
        original_exception: Exception,
        context: ErrorContext
    ):
        """Handle a context that json could not encode."""
        return ErrorHandler.create_exception(
            error_type=ErrorType.SERIALIZATION_FAILED,
            context=context,
            original_exception=original_exception
        )

    @staticmethod
    def handle_invalid_subscriber(callback, context: Optional[ErrorContext] = None):
        """Handle a non-callable passed to subscribe."""
        return ErrorHandler.create_exception(
            error_type=ErrorType.INVALID_SUBSCRIBER,
            context=context,
            subscriber_type=type(callback).__name__
        )

    @staticmethod
    def handle_scheduler_error(original_exception: Exception, context: ErrorContext):
        """Handle a scheduler that refused a deferred notification."""
        return ErrorHandler.create_exception(
            error_type=ErrorType.SCHEDULER_FAILED,
            context=context,
            original_exception=original_exception
        )
