"""Fenwick tree (binary indexed tree) for O(log n) prefix sums."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from fenwick_tree.errors import InvalidRangeError, OutOfRangeError, UninitializedOriginalError


def lowbit(index: int) -> int:
    """Value of the lowest set bit of a positive *index*."""
    return index & -index


class FenwickTree:
    """A fixed-size array of partial sums supporting point updates and
    prefix-sum queries, both in O(log n).

    Slot ``i`` (1-based) of the backing array holds the sum of the
    ``lowbit(i)`` logical values ending at position ``i``.  Slot 0 is an
    unused sentinel, so the array has length ``n + 1``.

    Index conventions differ per operation, matching the classic API:
    :meth:`insert` takes a 1-based slot, everything else takes 0-based
    logical positions.
    """

    def __init__(self, size: int, dtype: np.dtype | type = np.int64) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got: {size!r}")
        self._n = size
        self._tree = np.zeros(size + 1, dtype=dtype)
        # Logical values; only known after construct()
        self._original: np.ndarray | None = None

    @classmethod
    def from_values(
        cls, values: Sequence[float], dtype: np.dtype | type = np.int64
    ) -> FenwickTree:
        """Build a fully populated tree from *values*."""
        tree = cls(len(values), dtype=dtype)
        return tree.construct(values)

    # ── construction ──────────────────────────────────────────────────────

    def construct(self, values: Sequence[float]) -> FenwickTree:
        """Reset the tree and populate it from exactly ``size()`` *values*.

        The values are copied and tracked so that :meth:`update` can
        compute deltas.  Integer trees reject non-integral values with
        ``ValueError`` instead of truncating them.
        """
        if len(values) != self._n:
            raise ValueError(f"Expected {self._n} values, got {len(values)}")
        original = self._coerce(values, "values")
        self._tree[:] = 0
        self._original = original
        for i, value in enumerate(self._original):
            self._add(i + 1, value)
        return self

    def insert(self, value: float, index: int) -> bool:
        """Add *value* at 1-based slot *index* and every slot covering it.

        Not idempotent: inserting twice adds twice.
        """
        if not 1 <= index <= self._n:
            raise OutOfRangeError(f"insert index must be in 1..{self._n}, got: {index!r}")
        value = self._coerce(value, "value")[()]
        self._add(index, value)
        if self._original is not None:
            self._original[index - 1] += value
        return True

    # ── updates ───────────────────────────────────────────────────────────

    def update(self, new_value: float, index: int) -> bool:
        """Set the logical value at 0-based *index* to *new_value*."""
        if self._original is None:
            raise UninitializedOriginalError(
                "update requires a tree built from values; use insert() on size-only trees"
            )
        self._check_position(index, "update")
        new_value = self._coerce(new_value, "new_value")[()]
        delta = new_value - self._original[index]
        self._add(index + 1, delta)
        self._original[index] = new_value
        return True

    def _add(self, index: int, delta: float) -> None:
        """Climb from 1-based *index* toward the root, adding *delta*."""
        while index <= self._n:
            self._tree[index] += delta
            index += lowbit(index)

    # ── queries ───────────────────────────────────────────────────────────

    def prefix_sum(self, index: int) -> int | float:
        """Sum of logical values at 0-based positions ``0..index``.

        ``index == -1`` denotes the empty prefix and returns 0.
        """
        if not -1 <= index < self._n:
            raise OutOfRangeError(
                f"prefix_sum index must be in -1..{self._n - 1}, got: {index!r}"
            )
        total = self._tree.dtype.type(0)
        i = index + 1
        while i > 0:
            total += self._tree[i]
            i -= lowbit(i)
        return total.item()

    def range_sum(self, start: int, end: int) -> int | float:
        """Sum of logical values at 0-based positions ``start..end``."""
        self._check_position(start, "range_sum start")
        self._check_position(end, "range_sum end")
        if start > end:
            raise InvalidRangeError(f"range_sum start {start} is greater than end {end}")
        return self.prefix_sum(end) - self.prefix_sum(start - 1)

    def get(self, index: int) -> int | float:
        """Logical value at 0-based *index*."""
        return self.range_sum(index, index)

    def values(self) -> list[int | float]:
        """Recover the logical sequence from the partial sums."""
        prefix = [self.prefix_sum(i) for i in range(-1, self._n)]
        return [b - a for a, b in zip(prefix, prefix[1:])]

    @property
    def total(self) -> int | float:
        """Sum of all logical values."""
        return self.prefix_sum(self._n - 1)

    def size(self) -> int:
        """Number of logical values (the sentinel slot is not counted)."""
        return self._n

    def __len__(self) -> int:
        return self._n

    # ── formatting ────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Internal partial-sum array, sentinel included."""
        return "[" + ",".join(str(v) for v in self._tree.tolist()) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._n})"

    def _coerce(self, values: Sequence[float] | float, name: str) -> np.ndarray:
        """Cast *values* to the tree dtype, refusing lossy casts to integers."""
        raw = np.asarray(values)
        cast = raw.astype(self._tree.dtype)
        if np.issubdtype(self._tree.dtype, np.integer) and not np.array_equal(cast, raw):
            raise ValueError(
                f"{name} must be integral for a {self._tree.dtype} tree, got: {values!r}"
            )
        return cast

    def _check_position(self, index: int, name: str) -> None:
        if not 0 <= index < self._n:
            raise OutOfRangeError(f"{name} must be in 0..{self._n - 1}, got: {index!r}")
