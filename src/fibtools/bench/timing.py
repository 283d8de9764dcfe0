from __future__ import annotations

import time
from typing import Optional, Sequence, Tuple

from fibtools.engine.sequential import Recurrence, iter_sequence


def generate_bench(
    seconds: float,
    init: Sequence[int],
    k: int,
    recurrence: Recurrence,
    modulus: Optional[int] = None,
) -> Tuple[int, float]:
    """
    Generate terms past the seeds until *seconds* have elapsed.

    Returns (terms_generated, elapsed_seconds). The clock is checked after
    every term, so elapsed overshoots the budget by at most one step.
    """
    if seconds < 0:
        raise ValueError(f"time budget must be non-negative, got {seconds}")

    it = iter_sequence(init, k, recurrence, modulus)
    for _ in range(k):
        next(it)

    count = 0
    t0 = time.perf_counter()
    elapsed = 0.0
    while elapsed < seconds:
        next(it)
        count += 1
        elapsed = time.perf_counter() - t0
    return count, elapsed
