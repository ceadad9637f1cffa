"""Shared random number source for the game."""

import random

_rng = random.Random()


def seed(value):
    """Reseed the shared generator so draws become reproducible."""
    _rng.seed(value)


def get_int(low, high):
    """Return a uniformly chosen integer between low and high, inclusive."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return _rng.randint(low, high)