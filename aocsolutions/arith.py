"""Small number-theory helpers."""

from __future__ import annotations

import math
from collections.abc import Iterable
from functools import reduce


def lcm(numbers: Iterable[int]) -> int:
    """Least common multiple of all the numbers."""
    values = list(numbers)
    if not values:
        raise ValueError("lcm needs at least one number")
    return reduce(math.lcm, values)