from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
import logging
from threading import Lock

from gasstation.application.ports.write_dispatcher_port import WriteDispatcherPort


logger = logging.getLogger(__name__)


class BackgroundWriteDispatcher(WriteDispatcherPort):
    """Runs store writes on a thread pool without waiting for them.

    Failures are logged from the future's done callback and never reach the
    caller that submitted the write.
    """

    def __init__(self, *, max_workers: int = 4):
        if max_workers <= 0:
            raise ValueError("max_workers must be positive.")
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="estimate-writer",
        )
        self._lock = Lock()
        self._pending: set[Future] = set()

    def submit(self, write: Callable[[], None], *, description: str) -> None:
        future = self._executor.submit(write)
        with self._lock:
            self._pending.add(future)
        future.add_done_callback(lambda done: self._on_done(done, description))

    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    def shutdown(self, *, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def _on_done(self, future: Future, description: str) -> None:
        with self._lock:
            self._pending.discard(future)
        if future.cancelled():
            logger.warning("write_dispatcher: write_cancelled write=%s", description)
            return
        exc = future.exception()
        if exc is not None:
            logger.error(
                "write_dispatcher: write_failed write=%s error=%s",
                description,
                exc,
                exc_info=exc,
            )
