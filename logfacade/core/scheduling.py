"""
Schedulers used to defer subscriber notification.

Every scheduler exposes ``schedule(callback)``: the callback is queued and run
later, in FIFO order, never from inside the ``schedule`` call itself (the
``ImmediateScheduler`` test helper being the one exception).
"""

import asyncio
import threading
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Deque, Optional, Protocol

from .logging import logger

Task = Callable[[], None]


class Scheduler(Protocol):
    def schedule(self, callback: Task) -> None:
        ...


def _report_worker_failure(future) -> None:
    exc = future.exception()
    if exc is not None:
        logger.logger.error(
            "Deferred notification failed on worker thread",
            exc_info=(type(exc), exc, exc.__traceback__)
        )


class EventLoopScheduler:
    """
    Zero-delay scheduling on an asyncio event loop.

    The callback is posted with ``call_soon`` so it runs on the next loop
    iteration, after the current synchronous code has returned. Without a
    bound or running loop, callbacks go to a single worker thread, which
    keeps them in submission order.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop
        self._executor: Optional[ThreadPoolExecutor] = None
        self._executor_lock = threading.Lock()

    def _target_loop(self) -> Optional[asyncio.AbstractEventLoop]:
        if self._loop is not None and not self._loop.is_closed():
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            return None

    def _fallback_executor(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            if self._executor is None:
                logger.debug("No running event loop, notifications dispatched to worker thread")
                self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="logfacade")
            return self._executor

    def schedule(self, callback: Task) -> None:
        loop = self._target_loop()
        if loop is None:
            future = self._fallback_executor().submit(callback)
            future.add_done_callback(_report_worker_failure)
            return

        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        if running is loop:
            loop.call_soon(callback)
        else:
            loop.call_soon_threadsafe(callback)

    def shutdown(self, wait: bool = True) -> None:
        """Stop the fallback worker thread, if one was started."""
        with self._executor_lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=wait)


class ManualScheduler:
    """FIFO queue that only runs when stepped with ``run_pending``."""

    def __init__(self):
        self._queue: Deque[Task] = deque()
        self._lock = threading.Lock()

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._queue)

    def schedule(self, callback: Task) -> None:
        with self._lock:
            self._queue.append(callback)

    def run_pending(self) -> int:
        """Run queued callbacks, including ones queued meanwhile. Returns how many ran."""
        count = 0
        while True:
            with self._lock:
                if not self._queue:
                    return count
                callback = self._queue.popleft()
            callback()
            count += 1


class ImmediateScheduler:
    """Runs callbacks synchronously. Only meant for tests."""

    def schedule(self, callback: Task) -> None:
        callback()
