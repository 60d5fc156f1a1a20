"""Fenwick tree (binary indexed tree) with a brute-force reference."""

from __future__ import annotations

from fenwick_tree.errors import (
    FenwickTreeError,
    InvalidRangeError,
    OutOfRangeError,
    UninitializedOriginalError,
)
from fenwick_tree.naive import NaiveSequence
from fenwick_tree.tree import FenwickTree, lowbit

__all__ = [
    "FenwickTree",
    "FenwickTreeError",
    "InvalidRangeError",
    "NaiveSequence",
    "OutOfRangeError",
    "UninitializedOriginalError",
    "lowbit",
]
