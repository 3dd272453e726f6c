"""
Bounded worker pool for per-icon and per-file tasks.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Callable, List, Sequence, TypeVar

from ..constants import DEFAULT_MAX_WORKERS
from .logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class BoundedTaskRunner:
    """
    Runs independent tasks on a fixed-size thread pool.

    Results come back in input order no matter which task finishes first.
    The first failing task cancels everything not yet started and its
    exception is re-raised to the caller.
    """

    def __init__(self, max_workers: int = DEFAULT_MAX_WORKERS, pool_id: str = "default") -> None:
        """
        Initialize the runner.

        Args:
            max_workers: Maximum number of worker threads
            pool_id: Pool identifier used for thread names
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.max_workers = max_workers
        self.pool_id = pool_id

    def map_ordered(self, fn: Callable[[T], R], items: Sequence[T]) -> List[R]:
        """
        Apply fn to every item concurrently.

        Args:
            fn: Task function
            items: Task inputs

        Returns:
            Results aligned with items
        """
        if not items:
            return []

        workers = min(self.max_workers, len(items))
        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix=f"pool_{self.pool_id}")
        logger.debug(f"Running {len(items)} tasks on pool {self.pool_id} with {workers} workers")

        try:
            futures = [executor.submit(fn, item) for item in items]
            done, _ = wait(futures, return_when=FIRST_EXCEPTION)

            for future in futures:
                if future in done and not future.cancelled() and future.exception() is not None:
                    for pending in futures:
                        pending.cancel()
                    raise future.exception()

            return [future.result() for future in futures]
        finally:
            executor.shutdown(wait=True, cancel_futures=True)
