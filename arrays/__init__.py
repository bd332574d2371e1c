"""
arrays/
-------
Input data layer.  Public API:

    from arrays import generate_random_array
    from arrays import MIN_VALUE, MAX_VALUE, DEFAULT_ARRAY_SIZE
"""

from arrays.generator import (
    generate_random_array,
    MIN_VALUE,
    MAX_VALUE,
    DEFAULT_ARRAY_SIZE,
    MIN_ARRAY_SIZE,
    MAX_ARRAY_SIZE,
)

__all__ = [
    "generate_random_array",
    "MIN_VALUE",
    "MAX_VALUE",
    "DEFAULT_ARRAY_SIZE",
    "MIN_ARRAY_SIZE",
    "MAX_ARRAY_SIZE",
]
