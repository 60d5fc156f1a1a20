"""Brute-force sequence with the same query API as :class:`FenwickTree`."""

from __future__ import annotations

from typing import Sequence

from fenwick_tree.errors import InvalidRangeError, OutOfRangeError


class NaiveSequence:
    """Plain list answering sums by linear scans.

    O(1) updates and O(n) queries; serves as a correctness oracle and as
    the benchmark baseline.
    """

    def __init__(self, values: Sequence[float]) -> None:
        self._values = list(values)

    def update(self, new_value: float, index: int) -> bool:
        self._check_position(index, "update")
        self._values[index] = new_value
        return True

    def prefix_sum(self, index: int) -> int | float:
        if not -1 <= index < len(self._values):
            raise OutOfRangeError(
                f"prefix_sum index must be in -1..{len(self._values) - 1}, got: {index!r}"
            )
        return sum(self._values[: index + 1])

    def range_sum(self, start: int, end: int) -> int | float:
        self._check_position(start, "range_sum start")
        self._check_position(end, "range_sum end")
        if start > end:
            raise InvalidRangeError(f"range_sum start {start} is greater than end {end}")
        return sum(self._values[start : end + 1])

    def get(self, index: int) -> int | float:
        self._check_position(index, "get")
        return self._values[index]

    def values(self) -> list[int | float]:
        return list(self._values)

    @property
    def total(self) -> int | float:
        return sum(self._values)

    def size(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def _check_position(self, index: int, name: str) -> None:
        if not 0 <= index < len(self._values):
            raise OutOfRangeError(
                f"{name} must be in 0..{len(self._values) - 1}, got: {index!r}"
            )
