"""Random helpers used by gameplay code."""

from __future__ import annotations

import random


def _source(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def rand_bool(rng: random.Random | None = None) -> bool:
    return _source(rng).random() < 0.5


def rand_int(low: int, high: int, rng: random.Random | None = None) -> int:
    """Return an integer in ``[low, high]``, both ends included."""
    if high < low:
        raise ValueError(f"empty range [{low}, {high}]")
    return _source(rng).randint(low, high)


def rand_unit(rng: random.Random | None = None) -> float:
    """Return a float in ``[0, 1)``."""
    return _source(rng).random()


def rand_double(low: float, high: float, rng: random.Random | None = None) -> float:
    """Return a float in ``[low, high)``."""
    return low + (high - low) * rand_unit(rng)