"""Wall-clock timing of query and update batches."""

from __future__ import annotations

import time
from typing import Iterable, Protocol


class PrefixSummable(Protocol):
    def prefix_sum(self, index: int) -> int | float: ...

    def update(self, new_value: float, index: int) -> bool: ...


def time_queries(structure: PrefixSummable, queries: Iterable[int]) -> tuple[float, float]:
    """Run ``prefix_sum`` for every index in *queries*.

    Returns:
        ``(elapsed_seconds, checksum)`` where checksum is the sum of all
        answers, so two structures can be compared on the same workload.
    """
    checksum = 0
    start = time.perf_counter()
    for index in queries:
        checksum += structure.prefix_sum(int(index))
    return time.perf_counter() - start, checksum


def time_updates(
    structure: PrefixSummable, updates: Iterable[tuple[float, int]]
) -> float:
    """Apply every ``(new_value, index)`` in *updates*; return elapsed seconds."""
    start = time.perf_counter()
    for value, index in updates:
        structure.update(value, int(index))
    return time.perf_counter() - start
