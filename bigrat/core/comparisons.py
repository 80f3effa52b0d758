"""Ordering helpers that work across both rational variants."""

from .base import BigRationalBase


def _check(value) -> None:
    if not isinstance(value, BigRationalBase):
        raise TypeError(f"Expected a rational, got {type(value).__name__}")


def compare(a: BigRationalBase, b: BigRationalBase) -> int:
    """
    Three-way comparison in the total order ``-Infinity < finite < Infinity < NaN``.

    Operands may be of different variants; values are compared, not types.

    Returns:
        -1, 0 or 1
    """
    _check(a)
    _check(b)
    return a._compare(b)


def equivalent(a: BigRationalBase, b: BigRationalBase) -> bool:
    """
    Numeric equality across variants, false whenever either side is special.

    ``FixedBigRational.ONE`` and ``FloatingBigRational.ONE`` are equivalent
    although ``==`` treats them as different objects.
    """
    _check(a)
    _check(b)
    return a.is_finite() and b.is_finite() and 0 == a._compare(b)
