"""
generator.py — Random Array Generator
======================================
Produces the raw input for a fresh visualization: `size` independent
uniform integers in [min_value, max_value] inclusive.

Pass `seed` for a reproducible array (tests, shared links).  A private
random.Random is used so seeding never disturbs the global generator.
"""

import random
from typing import List, Optional


# ---------------------------------------------------------------------------
# Defaults (match the sliders of the web UI)
# ---------------------------------------------------------------------------
MIN_VALUE          = 5
MAX_VALUE          = 100
DEFAULT_ARRAY_SIZE = 30
MIN_ARRAY_SIZE     = 5
MAX_ARRAY_SIZE     = 100


def generate_random_array(
    size: int = DEFAULT_ARRAY_SIZE,
    min_value: int = MIN_VALUE,
    max_value: int = MAX_VALUE,
    seed: Optional[int] = None,
) -> List[int]:
    """
    Args:
        size      : Number of values, at least 1.
        min_value : Smallest possible value.
        max_value : Largest possible value (inclusive), >= min_value.
        seed      : Optional seed for a reproducible array.

    Raises:
        ValueError – when size < 1 or min_value > max_value.
    """
    if size < 1:
        raise ValueError(f"Array size must be at least 1, got {size}")
    if min_value > max_value:
        raise ValueError(f"min_value ({min_value}) is greater than max_value ({max_value})")

    rng = random.Random(seed)
    return [rng.randint(min_value, max_value) for _ in range(size)]
