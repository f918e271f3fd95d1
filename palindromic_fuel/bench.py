"""Micro-benchmark for the forward search."""

import time
from typing import Tuple

from .search import DEFAULT_EPSILON, forward_search


def do_iters(price: float, max_volume: float, iters: int,
             epsilon: float = DEFAULT_EPSILON) -> Tuple[int, int, int]:
    """
    Runs forward_search `iters` times.
    Returns (results found by the last run, total results over all runs,
    elapsed nanoseconds).
    """
    acc = 0
    last = 0
    start_time = time.perf_counter_ns()

    for _ in range(iters):
        last = len(forward_search(price, max_volume, epsilon))
        acc += last

    nanos = time.perf_counter_ns() - start_time
    return last, acc, nanos
