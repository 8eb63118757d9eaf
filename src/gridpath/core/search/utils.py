"""
Utility functions for search operations.
"""

import gc
import logging
import os
import time
from contextlib import contextmanager
from typing import Generator, List, Optional

import psutil  # type: ignore # Missing stubs

# Configure logging
logger = logging.getLogger(__name__)


def split_distance(distance: int, runs: int, min_run: int, max_run: int) -> Optional[List[int]]:
    """
    Split ``distance`` cells into ``runs`` straight runs within ``[min_run, max_run]``.

    Leading runs are filled up to ``max_run``, then one trimmed run takes the
    remainder, and any runs left keep ``min_run``. This keeps the trimmed run legal
    whatever ``distance % max_run`` is.

    Returns:
        Run lengths summing to ``distance``, or None if no such split exists

    Example:
        >>> split_distance(23, 3, 4, 10)
        [10, 9, 4]
    """
    if runs <= 0 or not runs * min_run <= distance <= runs * max_run:
        return None
    parts = [min_run] * runs
    extra = distance - runs * min_run
    for i in range(runs):
        added = min(extra, max_run - min_run)
        parts[i] += added
        extra -= added
    return parts


def feasible_run_counts(distance: int, min_run: int, max_run: int) -> range:
    """Numbers of runs that can cover ``distance`` cells within the run limits."""
    fewest = max(1, -(-distance // max_run))
    most = distance // min_run
    return range(fewest, most + 1)


@contextmanager
def timer(label: str = "") -> Generator[None, None, None]:
    """Context manager for timing operations."""
    start = time.perf_counter()
    yield
    duration = time.perf_counter() - start
    if label:
        logger.debug(f"{label}: {duration*1000:.1f}ms")


class MemoryManager:
    """
    Tracks resident memory of the search process against an optional growth limit.

    Growth is measured from the baseline taken at construction or at the last
    ``reset_peak_memory``, so memory held before a search starts is not charged to it.
    Samples are taken at most every ``sample_interval`` seconds.
    """

    def __init__(self, max_memory_mb: Optional[float] = None, sample_interval: float = 0.1):
        self.limit_bytes = int(max_memory_mb * 1024 * 1024) if max_memory_mb else None
        self.sample_interval = sample_interval
        self.reset_peak_memory()

    def check_memory(self) -> None:
        """
        Sample memory usage and enforce the growth limit.

        Raises:
            MemoryError: If growth over the baseline stays above the limit after a
                garbage collection
        """
        now = time.monotonic()
        if now - self._sampled_at < self.sample_interval:
            return
        self._sampled_at = now

        usage = self._sample()
        if self.limit_bytes is None or usage - self.baseline <= self.limit_bytes:
            return

        gc.collect()
        usage = self._sample()
        if usage - self.baseline > self.limit_bytes:
            message = (
                f"Search grew memory by {(usage - self.baseline) / 1024 / 1024:.1f}MB, "
                f"limit is {self.limit_bytes / 1024 / 1024:.1f}MB"
            )
            logger.warning(message)
            raise MemoryError(message)

    @property
    def peak_memory_mb(self) -> float:
        """Peak resident memory since the last reset, in MB."""
        return self._peak / 1024 / 1024

    @property
    def peak_memory_bytes(self) -> int:
        return self._peak

    def reset_peak_memory(self) -> None:
        """Take a new baseline and restart peak tracking."""
        self.baseline = get_memory_usage()
        self._peak = self.baseline
        self._sampled_at = time.monotonic()

    def _sample(self) -> int:
        usage = get_memory_usage()
        self._peak = max(self._peak, usage)
        return usage


def get_memory_usage() -> int:
    """Resident set size of the current process in bytes."""
    return int(psutil.Process(os.getpid()).memory_info().rss)
