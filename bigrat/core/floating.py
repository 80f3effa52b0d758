"""
Rational variant extended with NaN and signed infinities.

Specials are stored with a zero denominator: ``0/0`` is NaN, ``1/0`` is
positive infinity and ``-1/0`` negative infinity. Each special is a single
shared instance, so identity checks are enough to detect them. Arithmetic
follows IEEE 754 conventions; nothing in this variant raises for a zero
divisor.
"""

from decimal import Decimal
from typing import Any, Optional, Union

from .base import BigRationalBase
from .errors import NonFiniteError
from .precision_config import PrecisionMode


class FloatingBigRational(BigRationalBase):
    """
    Exact rational number with IEEE-style NaN and infinities.

    Ordering is total: ``-Infinity < finite < Infinity < NaN``. Equality is
    structural except that NaN is never equal to anything, itself included.
    """

    __slots__ = ()

    NaN: "FloatingBigRational"
    POSITIVE_INFINITY: "FloatingBigRational"
    NEGATIVE_INFINITY: "FloatingBigRational"

    @classmethod
    def _zero_denominator(cls, numerator: int) -> "FloatingBigRational":
        return cls._special((numerator > 0) - (numerator < 0))

    @classmethod
    def _special(cls, sign: int) -> "FloatingBigRational":
        if 0 == sign:
            return cls.NaN
        return cls.POSITIVE_INFINITY if sign > 0 else cls.NEGATIVE_INFINITY

    # Queries

    def is_nan(self) -> bool:
        return self is FloatingBigRational.NaN

    def is_positive_infinity(self) -> bool:
        return self is FloatingBigRational.POSITIVE_INFINITY

    def is_negative_infinity(self) -> bool:
        return self is FloatingBigRational.NEGATIVE_INFINITY

    def is_infinite(self) -> bool:
        return self.is_positive_infinity() or self.is_negative_infinity()

    def is_finite(self) -> bool:
        return 0 != self._denominator

    def _rank(self) -> int:
        if self.is_finite():
            return 0
        if self.is_nan():
            return 2
        return self._numerator

    @property
    def sign(self) -> "FloatingBigRational":
        if self.is_nan():
            return self
        return super().sign

    # Arithmetic

    def _add(self, other):
        if self.is_nan() or other.is_nan():
            return FloatingBigRational.NaN
        if self.is_infinite():
            if other.is_infinite() and other is not self:
                return FloatingBigRational.NaN
            return self
        if other.is_infinite():
            return other
        return super()._add(other)

    def _mul(self, other):
        if self.is_nan() or other.is_nan():
            return FloatingBigRational.NaN
        if self.is_infinite() or other.is_infinite():
            if self.is_zero() or other.is_zero():
                return FloatingBigRational.NaN
            return self._special(self._signum() * other._signum())
        return super()._mul(other)

    def _div(self, other):
        if self.is_nan() or other.is_nan():
            return FloatingBigRational.NaN
        if self.is_infinite():
            if other.is_infinite():
                return FloatingBigRational.NaN
            # Dividing an infinity by zero keeps its sign
            return self._special(self._signum() * (other._signum() or 1))
        if other.is_infinite():
            return FloatingBigRational.ZERO
        return super()._div(other)

    def pow(self, exponent: int) -> "FloatingBigRational":
        if self.is_nan():
            return self
        if self.is_infinite() and 0 == exponent:
            return FloatingBigRational.NaN
        return super().pow(exponent)

    def rem(self, divisor: Any) -> "FloatingBigRational":
        divisor = self._operand(divisor)
        if self.is_nan() or divisor.is_nan():
            return FloatingBigRational.NaN
        return super().rem(divisor)

    def mediant(self, other: Any) -> "FloatingBigRational":
        other = self._operand(other)
        if self.is_nan() or other.is_nan():
            return FloatingBigRational.NaN
        if self.is_infinite() and other.is_infinite() and self is not other:
            return FloatingBigRational.ZERO
        return super().mediant(other)

    def sqrt(self) -> "FloatingBigRational":
        """Exact square root; NaN for negative input, infinity for infinity."""
        if self.is_nan() or self.is_positive_infinity():
            return self
        if self._numerator < 0:
            return FloatingBigRational.NaN
        return super().sqrt()

    def sqrt_approximated(self) -> "FloatingBigRational":
        if self.is_nan() or self.is_positive_infinity():
            return self
        if self._numerator < 0:
            return FloatingBigRational.NaN
        return super().sqrt_approximated()

    # Equality

    def __eq__(self, other):
        if self.is_nan():
            return False
        return super().__eq__(other)

    __hash__ = BigRationalBase.__hash__

    def __bool__(self) -> bool:
        # NaN is truthy, as float('nan') is
        return 0 != self._numerator or self.is_nan()

    # Conversion

    def _require_finite(self, target: str) -> None:
        if not self.is_finite():
            raise NonFiniteError(f"Cannot convert {self} to {target}")

    def to_ieee(self, precision: Optional[Union[PrecisionMode, str]] = None) -> float:
        if self.is_nan():
            return float("nan")
        if self.is_infinite():
            return float(self._numerator) * float("inf")
        return super().to_ieee(precision)

    def to_int(self) -> int:
        self._require_finite("int")
        return super().to_int()

    def to_decimal(self) -> Decimal:
        self._require_finite("Decimal")
        return super().to_decimal()

    # Rendering

    def __str__(self) -> str:
        if self.is_nan():
            return "NaN"
        if self.is_positive_infinity():
            return "Infinity"
        if self.is_negative_infinity():
            return "-Infinity"
        return super().__str__()

    def __repr__(self) -> str:
        if self.is_nan():
            return "FloatingBigRational.NaN"
        if self.is_positive_infinity():
            return "FloatingBigRational.POSITIVE_INFINITY"
        if self.is_negative_infinity():
            return "FloatingBigRational.NEGATIVE_INFINITY"
        return super().__repr__()


FloatingBigRational.ZERO = FloatingBigRational._create(0, 1)
FloatingBigRational.ONE = FloatingBigRational._create(1, 1)
FloatingBigRational.TWO = FloatingBigRational._create(2, 1)
FloatingBigRational.TEN = FloatingBigRational._create(10, 1)
FloatingBigRational.NaN = FloatingBigRational._create(0, 0)
FloatingBigRational.POSITIVE_INFINITY = FloatingBigRational._create(1, 0)
FloatingBigRational.NEGATIVE_INFINITY = FloatingBigRational._create(-1, 0)
FloatingBigRational._CONSTANTS = {
    0: FloatingBigRational.ZERO,
    1: FloatingBigRational.ONE,
    2: FloatingBigRational.TWO,
    10: FloatingBigRational.TEN,
}


def over(numerator: Any, denominator: Any) -> FloatingBigRational:
    """Infix-style constructor; ``over(1, 0)`` is positive infinity."""
    return FloatingBigRational.value_of(numerator, denominator)
