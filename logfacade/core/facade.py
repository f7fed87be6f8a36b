"""
Log facade: message formatting and deferred fan-out to subscribers.

``LoggerFacade.emit`` formats a message, returns it right away and leaves the
notification of subscribers to a scheduler, so no subscriber ever runs
before the logging call has returned.
"""

import json
import threading
from typing import Any, Callable, List, Optional, Tuple

from .error_handling import ErrorContext, ErrorHandler, ErrorLogger
from .logging import logger
from .scheduling import EventLoopScheduler, Scheduler

Subscriber = Callable[[str, Optional[str]], None]


def serialize_context(context: Any) -> str:
    """Compact JSON for a log context, e.g. ``{"userId":123}``."""
    return json.dumps(context, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def format_message(message: str, context: Any = None, category: Optional[str] = None) -> str:
    """
    Build ``[category] message {json(context)}``.

    The category prefix and the context suffix are only added when the value
    is truthy.

    Raises:
        SerializationError: context cannot be encoded as JSON.
    """
    parts = []
    if category:
        parts.append(f"[{category}]")
    parts.append(f"{message}")
    if context:
        try:
            parts.append(serialize_context(context))
        except (TypeError, ValueError) as e:
            raise ErrorHandler.handle_serialization_error(
                e, ErrorContext(category=category)
            ) from e
    return " ".join(parts)


class LogEntryPoints:
    """
    The five logging entry points ``l``, ``w``, ``e``, ``i``, ``d``.

    All of them format identically; the level only shows up in the facade's
    debug diagnostics. ``log``, ``warn``, ``error``, ``info`` and ``debug``
    are aliases.
    """

    def __init__(self, facade: "LoggerFacade"):
        self._facade = facade

    def l(self, message: str, context: Any = None, category: Optional[str] = None) -> str:
        return self._facade.emit("log", message, context, category)

    def w(self, message: str, context: Any = None, category: Optional[str] = None) -> str:
        return self._facade.emit("warn", message, context, category)

    def e(self, message: str, context: Any = None, category: Optional[str] = None) -> str:
        return self._facade.emit("error", message, context, category)

    def i(self, message: str, context: Any = None, category: Optional[str] = None) -> str:
        return self._facade.emit("info", message, context, category)

    def d(self, message: str, context: Any = None, category: Optional[str] = None) -> str:
        return self._facade.emit("debug", message, context, category)

    log = l
    warn = w
    error = e
    info = i
    debug = d


class LoggerFacade:
    """
    Formats log messages and broadcasts them to subscribers.

    Args:
        scheduler: Where deferred notifications are queued. Defaults to an
            ``EventLoopScheduler``.
        isolate_subscriber_errors: When True a raising subscriber is logged
            and the remaining subscribers of the batch still run. When False
            the exception escapes the notification task and ends the batch.
    """

    def __init__(self, scheduler: Optional[Scheduler] = None, isolate_subscriber_errors: bool = True):
        self.scheduler = scheduler if scheduler is not None else EventLoopScheduler()
        self.isolate_subscriber_errors = isolate_subscriber_errors
        self._subscribers: List[Subscriber] = []
        self._lock = threading.Lock()
        self.log = LogEntryPoints(self)

    @property
    def subscribers(self) -> Tuple[Subscriber, ...]:
        with self._lock:
            return tuple(self._subscribers)

    def emit(self, level: str, message: str, context: Any = None, category: Optional[str] = None) -> str:
        """Format the message, queue subscriber notification and return the text."""
        formatted = format_message(message, context, category)
        try:
            self.scheduler.schedule(lambda: self._notify(level, formatted, category))
        except RuntimeError as e:
            raise ErrorHandler.handle_scheduler_error(
                e, ErrorContext(category=category, level=level)
            ) from e
        return formatted

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register ``callback`` and return a closure removing this registration.

        The same callback may be registered several times; each registration
        is notified.
        """
        if not callable(callback):
            raise ErrorHandler.handle_invalid_subscriber(callback)

        with self._lock:
            self._subscribers.append(callback)

        removed = False

        def unsubscribe() -> None:
            nonlocal removed
            if removed:
                return
            removed = True
            self.unsubscribe(callback)

        return unsubscribe

    def unsubscribe(self, callback: Subscriber) -> None:
        """Remove the first registration of ``callback``; unknown callbacks are ignored."""
        with self._lock:
            for index, registered in enumerate(self._subscribers):
                if registered is callback:
                    del self._subscribers[index]
                    return

    def _notify(self, level: str, formatted: str, category: Optional[str]) -> None:
        # Subscribers are read when the task runs, not when emit was called.
        subscribers = self.subscribers
        logger.dispatch(level, category, len(subscribers))

        for callback in subscribers:
            if not self.isolate_subscriber_errors:
                callback(formatted, category)
                continue
            try:
                callback(formatted, category)
            except Exception as e:
                ErrorLogger.log_subscriber_error(callback, e, category=category, level=level)


def create_logger(scheduler: Optional[Scheduler] = None, config=None) -> LoggerFacade:
    """
    Build a facade, taking the subscriber isolation policy from a ConfigManager.
    """
    isolate = True if config is None else config.isolate_subscriber_errors
    return LoggerFacade(scheduler=scheduler, isolate_subscriber_errors=isolate)
