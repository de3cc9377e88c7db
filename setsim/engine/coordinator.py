"""
Fire-and-join task coordination on a worker pool.

Per-input work (shingling, signatures, bands) is submitted as independent
tasks and joined at an explicit barrier before the next stage starts. There is
no cancellation and no timeout: a join waits until every task has finished.
"""

from concurrent.futures import (
    ALL_COMPLETED,
    CancelledError,
    Executor,
    Future,
    ThreadPoolExecutor,
    wait,
)
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, Sequence, Tuple, TypeVar
import logging

from .errors import TaskExecutionError

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


@dataclass
class TaskHandle(Generic[T]):
    """A submitted unit of work."""

    label: str
    future: "Future[T]"

    @property
    def done(self) -> bool:
        return self.future.done()

    def join(self, stage: str = 'general') -> T:
        """
        Block until the task finishes and return its result.

        Any failure inside the task is re-raised as TaskExecutionError with the
        original exception as its cause.
        """
        try:
            return self.future.result()
        except CancelledError as e:
            logger.error(f"Task {self.label} was cancelled")
            raise TaskExecutionError(
                f"Task {self.label} was cancelled before completing",
                stage=stage,
                details={'task': self.label},
            ) from e
        except Exception as e:
            logger.error(f"Task {self.label} failed: {e}")
            raise TaskExecutionError(
                f"There was a problem processing {stage}: {e}",
                stage=stage,
                details={'task': self.label},
            ) from e


def is_shut_down(executor: Executor) -> bool:
    """
    Best-effort check whether an executor refuses new work.

    Thread pools set ``_shutdown``; process pools set ``_shutdown_thread``.
    """
    return bool(
        getattr(executor, '_shutdown', False)
        or getattr(executor, '_shutdown_thread', False)
    )


class ExecutionCoordinator:
    """
    Submits tasks to a worker pool and joins them at barriers.

    If ``executor`` is None (or already shut down) the coordinator owns a
    fresh ThreadPoolExecutor and shuts it down, waiting for all tasks, when
    the ``with`` block exits. A caller-supplied executor is never shut down.
    A caller pool that turns out to refuse work on submit is replaced by an
    owned pool for the rest of the scope.
    """

    def __init__(
        self,
        executor: Optional[Executor] = None,
        max_workers: Optional[int] = None
    ):
        """
        Initialize coordinator.

        Args:
            executor: Caller-owned pool to submit to
            max_workers: Worker count for an internally created pool
        """
        self.max_workers = max_workers
        self._external = executor if executor is not None and not is_shut_down(executor) else None
        if executor is not None and self._external is None:
            logger.debug("Supplied executor is shut down; using an internal pool")
        self._executor: Optional[Executor] = self._external
        self._scoped = False

    @property
    def owns_executor(self) -> bool:
        return self._external is None

    @property
    def executor(self) -> Optional[Executor]:
        """The pool tasks go to; None for an owned pool outside a scope."""
        return self._executor

    @property
    def active(self) -> bool:
        """True inside a ``with`` block."""
        return self._scoped

    def __enter__(self):
        """Context manager entry."""
        self.start()
        self._scoped = True
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self._scoped = False
        self.shutdown()

    def start(self):
        """Create the internal pool if this coordinator owns one."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.max_workers,
                thread_name_prefix='setsim',
            )
            logger.debug("Started internal worker pool")

    def shutdown(self):
        """Shut down the internal pool, blocking until its tasks drain."""
        if self.owns_executor and self._executor is not None:
            executor = self._executor
            self._executor = None
            executor.shutdown(wait=True)
            logger.debug("Internal worker pool shut down")

    def submit(self, label: str, func: Callable[..., T], *args: Any) -> TaskHandle[T]:
        """
        Submit ``func(*args)`` and return its handle.

        An owned pool only exists inside a ``with`` block; submitting outside
        one raises TaskExecutionError instead of starting a pool nothing
        would shut down.
        """
        if self._executor is None:
            raise TaskExecutionError(
                f"Could not submit task {label}: coordinator has no running pool; "
                "use it as a context manager",
                stage='submit',
                details={'task': label},
            )
        try:
            future = self._executor.submit(func, *args)
        except RuntimeError as e:
            if self.owns_executor or not self._scoped:
                raise TaskExecutionError(
                    f"Could not submit task {label}: {e}",
                    stage='submit',
                    details={'task': label},
                ) from e
            logger.debug(f"Supplied executor refused task {label}; using an internal pool")
            self._external = None
            self._executor = None
            self.start()
            return self.submit(label, func, *args)
        return TaskHandle(label=label, future=future)

    def join_all(self, handles: Sequence[TaskHandle], stage: str = 'general') -> List[Any]:
        """
        Barrier: wait for every handle, then return results in submission order.

        All tasks are allowed to finish before the first failure is raised.
        """
        wait([h.future for h in handles], return_when=ALL_COMPLETED)
        return [h.join(stage) for h in handles]

    def map_pair(self, stage: str, func: Callable[[T], R], first: T, second: T) -> Tuple[R, R]:
        """
        Run ``func`` on both inputs concurrently and join.

        Outside a ``with`` block the pair runs in its own scope, so an owned
        pool is torn down before this returns.
        """
        if not self._scoped:
            with self:
                return self._run_pair(stage, func, first, second)
        return self._run_pair(stage, func, first, second)

    def _run_pair(self, stage, func, first, second):
        handles = [
            self.submit(f"{stage}[0]", func, first),
            self.submit(f"{stage}[1]", func, second),
        ]
        result1, result2 = self.join_all(handles, stage)
        return result1, result2
