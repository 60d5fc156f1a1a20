"""Tests for RNG seeding."""

from __future__ import annotations

import random

import numpy as np

from fenwick_tree.utils.seeding import seed_everything


def test_seed_everything_is_reproducible() -> None:
    first = seed_everything(7).integers(0, 1000, size=5)
    py_first, np_first = random.random(), np.random.random()
    second = seed_everything(7).integers(0, 1000, size=5)
    assert np.array_equal(first, second)
    assert random.random() == py_first
    assert np.random.random() == np_first
