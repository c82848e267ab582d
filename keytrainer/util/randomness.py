from __future__ import annotations

"""Randomness helpers for seeding and building random sources."""

import os
import random
from typing import Optional

import numpy as np

from ..policy.selection import RandomSource


def seed_if_needed() -> None:
    """Seed RNGs if SEED env var is set."""
    seed = os.environ.get("SEED")
    if seed is None:
        return
    try:
        s = int(seed)
    except ValueError:
        return
    random.seed(s)
    np.random.seed(s)


def make_random_source(seed: Optional[int] = None) -> RandomSource:
    """Return a zero-argument callable yielding floats in [0, 1).

    Without a seed this is the process-wide generator.
    """
    if seed is None:
        return random.random
    return random.Random(seed).random
