"""Background executor for fire-and-forget work.

Wraps a lazily created ThreadPoolExecutor. The worker count bounds how many
tasks run concurrently, and a pending-task cap bounds the backlog: when it is
reached new submissions are dropped and logged instead of queueing without
limit. Task exceptions are logged in the worker so submitters are never
affected. Each task runs in a copy of the submitter's context so request
context bound to structlog follows the task.
"""

import contextvars
from concurrent.futures import ThreadPoolExecutor
from threading import BoundedSemaphore, Lock
from typing import Any, Callable, Optional

from infrastructure.logging import get_module_logger

logger = get_module_logger()


class BackgroundExecutor:
    """Bounded, unsupervised task runner.

    Attributes:
        name: Name used for worker threads and log context
        max_workers: Maximum number of tasks running at once
        max_pending: Maximum number of tasks queued or running

    Example:
        executor = BackgroundExecutor("notifications", max_workers=4)
        executor.submit(deliver, channel, message)
        ...
        executor.shutdown(wait=True)
    """

    def __init__(self, name: str, max_workers: int = 8, max_pending: int = 256):
        self.name = name
        self.max_workers = max_workers
        self.max_pending = max_pending
        self._executor: Optional[ThreadPoolExecutor] = None
        self._lock = Lock()
        self._shutdown = False
        self._slots = BoundedSemaphore(max_pending)

    @property
    def is_shutdown(self) -> bool:
        return self._shutdown

    def _get_or_create_executor(self) -> Optional[ThreadPoolExecutor]:
        """Lazily create the thread pool.

        Returns:
            ThreadPoolExecutor instance or None if shut down.
        """
        with self._lock:
            if self._shutdown:
                return None
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.max_workers,
                    thread_name_prefix=self.name,
                )
                logger.debug(
                    "created_background_executor",
                    executor=self.name,
                    max_workers=self.max_workers,
                )
            return self._executor

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> bool:
        """Schedule fn(*args, **kwargs) without waiting for it.

        Args:
            fn: Callable to run on a worker thread.
            *args: Positional arguments for fn.
            **kwargs: Keyword arguments for fn.

        Returns:
            True if the task was scheduled, False if it was dropped because
            the executor is saturated, shut down or its pool failed to start.
        """
        if not self._slots.acquire(blocking=False):
            logger.warning(
                "background_executor_saturated",
                executor=self.name,
                max_pending=self.max_pending,
                task=getattr(fn, "__name__", "unknown"),
            )
            return False

        try:
            executor = self._get_or_create_executor()
            if executor is None:
                self._slots.release()
                logger.error(
                    "background_executor_unavailable",
                    executor=self.name,
                    task=getattr(fn, "__name__", "unknown"),
                )
                return False

            context = contextvars.copy_context()
            executor.submit(self._run, context, fn, args, kwargs)
        except Exception:
            # Pool creation failed or submit lost a race with shutdown()
            self._slots.release()
            logger.exception(
                "failed_to_submit_background_task",
                executor=self.name,
                task=getattr(fn, "__name__", "unknown"),
            )
            return False
        return True

    def _run(
        self,
        context: contextvars.Context,
        fn: Callable[..., Any],
        args: tuple,
        kwargs: dict,
    ) -> None:
        try:
            context.run(fn, *args, **kwargs)
        except Exception as e:
            logger.exception(
                "background_task_failed",
                executor=self.name,
                task=getattr(fn, "__name__", "unknown"),
                error=str(e),
            )
        finally:
            self._slots.release()

    def shutdown(self, wait: bool = True) -> None:
        """Shut down the pool and refuse further submissions.

        Idempotent. Tasks still queued when wait is False are dropped with
        the process.

        Args:
            wait: If True, block until running and queued tasks finish.
        """
        with self._lock:
            executor = self._executor
            self._executor = None
            self._shutdown = True
        if executor is not None:
            executor.shutdown(wait=wait)
            logger.debug("background_executor_shut_down", executor=self.name, wait=wait)
