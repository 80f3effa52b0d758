"""Canonical reduction shared by both rational variants."""

from math import gcd
from typing import Tuple


def reduce_fraction(numerator: int, denominator: int) -> Tuple[int, int]:
    """
    Reduce a fraction to lowest terms with a positive denominator.

    Args:
        numerator: Any integer
        denominator: Any non-zero integer

    Returns:
        ``(numerator, denominator)`` with ``gcd == 1`` and ``denominator > 0``;
        zero always reduces to ``(0, 1)``.
    """
    if 0 == numerator:
        return 0, 1
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    divisor = gcd(numerator, denominator)
    if 1 != divisor:
        numerator //= divisor
        denominator //= divisor
    return numerator, denominator


def truncated_quotient(numerator: int, denominator: int) -> int:
    """Integer quotient rounded toward zero (denominator > 0)."""
    if numerator < 0:
        return -(-numerator // denominator)
    return numerator // denominator


def is_power_of(base: int, value: int) -> bool:
    """Check whether ``value`` is ``base`` raised to a non-negative power."""
    if value < 1 or base < 2:
        return 1 == value
    while 0 == value % base:
        value //= base
    return 1 == value
