"""
Common utility functions used by various packages
"""

import math
import random


def clamp(value: float, min_value: float, max_value: float) -> float:
    """
    Coerce value into [min_value, max_value]
    """
    if value <= min_value:
        return min_value
    if value >= max_value:
        return max_value
    return value


def is_in_range(value: float, min_value: float, max_value: float) -> bool:
    """
    Check if value lies within [min_value, max_value], both ends included
    """
    return min_value <= value <= max_value


def random_num_between(a: int, b: int, rng=random) -> int:
    """
    Draw an integer from [a, b). b itself is never returned.
    """
    return math.floor(rng.random() * (b - a) + a)
