"""
Small integer helpers for matrix construction.
"""

import math


def integral_sqrt(value: int) -> int | None:
    """
    Exact integer square root, if one exists.

    Uses integer arithmetic throughout, so large perfect squares are never
    misjudged by floating-point rounding.

    Args:
        value: Number whose square root is wanted

    Returns:
        r such that r * r == value, or None if value is negative or not a
        perfect square
    """
    if value < 0:
        return None
    root = math.isqrt(value)
    if root * root != value:
        return None
    return root
