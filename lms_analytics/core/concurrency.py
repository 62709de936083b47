"""Ordered fan-out for independent per-student computations."""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, TypeVar

from lms_analytics.core.settings import get_settings

T = TypeVar("T")
R = TypeVar("R")


def fan_out(fn: Callable[[T], R], items: Iterable[T], max_workers: int | None = None) -> List[R]:
    """Apply ``fn`` to every item, in threads when more than one worker is allowed.

    Results come back in input order either way. ``max_workers=None`` uses the
    configured ANALYTICS_MAX_WORKERS.
    """
    items = list(items)
    workers = max_workers if max_workers is not None else get_settings().max_workers
    if workers <= 1 or len(items) <= 1:
        return [fn(item) for item in items]
    with ThreadPoolExecutor(max_workers=min(workers, len(items))) as executor:
        return list(executor.map(fn, items))
