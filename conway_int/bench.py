# conway_int/bench.py
"""
Wall-clock timing for a single surreal operation.

The unary encoding makes costs grow with magnitude, so the useful question
is how one operation scales as its operands grow:

    from conway_int.bench import benchmark_operation
    from conway_int import num, mul

    benchmark_operation(lambda: (num(30), num(-20)), mul, repeats=5)

``builder`` produces fresh operands for each run and only the call to
``operation`` sits inside the timer, so building the operands (itself
O(|k|) steps) is not counted.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, List, Sequence

from .core.surreal import Surreal


def _time_once(operation: Callable[..., Any], operands: Sequence[Surreal]) -> float:
    start = time.perf_counter()
    operation(*operands)
    return time.perf_counter() - start


def benchmark_operation(
    builder: Callable[[], Sequence[Surreal]],
    operation: Callable[..., Any],
    repeats: int = 10,
) -> Dict[str, Any]:
    """
    Time ``operation(*builder())`` over ``repeats`` runs.

    The result maps ``repeats`` to the run count and ``min_s``, ``max_s``,
    ``avg_s`` and ``total_s`` to durations in seconds.
    """
    if repeats <= 0:
        raise ValueError("repeats must be > 0")

    samples: List[float] = [_time_once(operation, builder()) for _ in range(repeats)]
    total = sum(samples)
    return dict(
        repeats=repeats,
        min_s=min(samples),
        max_s=max(samples),
        avg_s=total / repeats,
        total_s=total,
    )
