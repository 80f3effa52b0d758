"""Rational variant that rejects zero denominators."""

import math
from decimal import Decimal
from typing import Any

import numpy as np

from .base import BigRationalBase
from .errors import DivisionByZeroError, NonFiniteError
from .floating import FloatingBigRational


def _is_non_finite(value: Any) -> bool:
    if isinstance(value, Decimal):
        return not value.is_finite()
    if isinstance(value, (float, np.floating)):
        return not math.isfinite(value)
    return False


class FixedBigRational(BigRationalBase):
    """
    Exact rational number with no special values.

    Division by zero, a zero reciprocal and any NaN or infinite input
    raise instead of producing a value. Comparisons are the exception:
    NaN and infinite floats take their place in the total order, as the
    floating variant's specials do.

    Examples:
        >>> FixedBigRational(2, 4)
        FixedBigRational(1, 2)
        >>> str(FixedBigRational.value_of("0.75") + 1)
        '7/4'
    """

    __slots__ = ()

    @classmethod
    def _zero_denominator(cls, numerator: int) -> "FixedBigRational":
        raise DivisionByZeroError(f"Division by zero: {numerator}/0")

    @classmethod
    def _special(cls, sign: int) -> "FixedBigRational":
        label = {0: "NaN", 1: "Infinity", -1: "-Infinity"}[sign]
        raise NonFiniteError(f"{label} is not representable as {cls.__name__}")

    def _comparable(self, other: Any) -> Any:
        if _is_non_finite(other):
            return FloatingBigRational.value_of(other)
        return super()._comparable(other)

    def to_continued_fraction(self):
        """Expand into a finite simple continued fraction."""
        from ..algebra.continued_fraction import FixedContinuedFraction
        return FixedContinuedFraction.value_of(self)


FixedBigRational.ZERO = FixedBigRational._create(0, 1)
FixedBigRational.ONE = FixedBigRational._create(1, 1)
FixedBigRational.TWO = FixedBigRational._create(2, 1)
FixedBigRational.TEN = FixedBigRational._create(10, 1)
FixedBigRational._CONSTANTS = {
    0: FixedBigRational.ZERO,
    1: FixedBigRational.ONE,
    2: FixedBigRational.TWO,
    10: FixedBigRational.TEN,
}


def over(numerator: Any, denominator: Any) -> FixedBigRational:
    """Infix-style constructor: ``over(3, 4)`` is ``3/4``."""
    return FixedBigRational.value_of(numerator, denominator)
