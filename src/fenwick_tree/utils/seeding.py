"""Reproducible random number generation."""

from __future__ import annotations

import random

import numpy as np


def seed_everything(seed: int) -> np.random.Generator:
    """Seed Python and NumPy global RNGs and return a fresh generator."""
    random.seed(seed)
    np.random.seed(seed)
    return np.random.default_rng(seed)
