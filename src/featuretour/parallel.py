# src/featuretour/parallel.py
"""
Sequential and parallel sorting of generated identifiers.
"""

import heapq
import logging
import time
import uuid
from concurrent.futures import ProcessPoolExecutor
from typing import Callable, List, Sequence

from .config import SortTiming
from .system import number_of_cores


logger = logging.getLogger(__name__)


def generate_identifiers(count: int) -> List[str]:
    """Create ``count`` random UUID strings."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return [str(uuid.uuid4()) for _ in range(count)]


def resolve_workers(workers: int) -> int:
    """Map 0 to the number of logical cores; reject negative values."""
    if workers < 0:
        raise ValueError(f"workers must be >= 0, got {workers}")
    return workers or number_of_cores()


def _chunk(values: Sequence[str], parts: int) -> List[Sequence[str]]:
    size = -(-len(values) // parts)  # ceiling division
    return [values[i:i + size] for i in range(0, len(values), size)]


def sequential_sort(values: Sequence[str]) -> List[str]:
    return sorted(values)


def parallel_sort(values: Sequence[str], workers: int = 0) -> List[str]:
    """Sort chunks in worker processes and merge the sorted runs."""
    workers = resolve_workers(workers)
    if not values:
        return []
    if workers == 1 or len(values) < workers:
        return sorted(values)

    chunks = _chunk(values, workers)
    logger.debug(f"Sorting {len(values)} items in {len(chunks)} chunks")
    with ProcessPoolExecutor(max_workers=workers) as executor:
        runs = list(executor.map(sorted, chunks))
    return list(heapq.merge(*runs))


def timed_sort(sort: Callable[[Sequence[str]], List[str]], values: Sequence[str]) -> SortTiming:
    """Run ``sort`` and report the result size with elapsed milliseconds."""
    t0 = time.perf_counter_ns()
    count = len(sort(values))
    millis = (time.perf_counter_ns() - t0) // 1_000_000
    logger.info(f"{getattr(sort, '__name__', 'sort')} of {count} items took {millis} ms")
    return SortTiming(count=count, millis=millis)
