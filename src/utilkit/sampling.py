"""
Random selection helpers.

Every pick takes an optional ``rng``. Without one, the process-wide default
generator is used; pass a seeded ``random.Random`` for reproducible picks.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

_DEFAULT_RNG: random.Random = random.Random()


def get_default_rng() -> random.Random:
    return _DEFAULT_RNG


def seed_default_rng(seed: Optional[int]) -> None:
    """Reseed the shared generator; ``None`` seeds from system entropy."""
    _DEFAULT_RNG.seed(seed)


def random_element(sequence: Sequence[T], rng: Optional[random.Random] = None) -> T:
    if not len(sequence):
        raise IndexError("cannot choose from an empty sequence")
    if rng is None:
        rng = _DEFAULT_RNG
    return sequence[rng.randrange(len(sequence))]


def random_choice(*values: T, rng: Optional[random.Random] = None) -> T:
    return random_element(values, rng)
