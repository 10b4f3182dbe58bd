"""
Per-frame growth of a single seed.

Seeds burst open during their first few age units and then settle: the growth
rate drops to a tenth once age reaches BLOOM_AGE, and the (1 - size/150) term
pulls size asymptotically towards SOFT_SIZE_CAP long before the hard expiry.
"""

from dataclasses import replace
from typing import Tuple

from .seed import Seed

AGE_RATE = 0.02
GROWTH_RATE = 0.3
SOFT_SIZE_CAP = 150.0
BLOOM_AGE = 10.0
SETTLED_FACTOR = 0.1

MAX_AGE = 120.0
MAX_SIZE = 220.0


def is_expired(seed: Seed) -> bool:
    return seed.age > MAX_AGE or seed.size > MAX_SIZE


def advance(seed: Seed, speed: float) -> Tuple[Seed, bool]:
    """Return the grown seed and whether it has now expired."""
    age = seed.age + AGE_RATE * speed
    phase = 1.0 if age < BLOOM_AGE else SETTLED_FACTOR
    growth = GROWTH_RATE * speed * (1.0 - seed.size / SOFT_SIZE_CAP) * phase
    # Above the soft cap the formula turns negative; size never shrinks.
    size = seed.size + max(0.0, growth)

    grown = replace(seed, age=age, size=size)
    return grown, is_expired(grown)
