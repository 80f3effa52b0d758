"""
Complex numbers over fixed rationals.

Components are :class:`FixedBigRational`, so every result is exact and no
special values can appear; dividing by zero raises like the real variant.
"""

import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ..core.base import BigRationalBase
from ..core.fixed import FixedBigRational


@dataclass(frozen=True)
class FixedBigComplex:
    """
    Exact complex number ``real + imag·i``.

    Either component may be given as anything ``FixedBigRational.value_of``
    accepts. The usual entry point is arithmetic with the imaginary unit:

        >>> str(FixedBigRational.ONE + FixedBigRational.TWO * FixedBigComplex.I)
        '1+2i'
    """

    real: FixedBigRational = FixedBigRational.ZERO
    imag: FixedBigRational = FixedBigRational.ZERO

    def __post_init__(self):
        object.__setattr__(self, "real", FixedBigRational.value_of(self.real))
        object.__setattr__(self, "imag", FixedBigRational.value_of(self.imag))

    @classmethod
    def _coerce(cls, other: Any) -> Any:
        if isinstance(other, FixedBigComplex):
            return other
        if isinstance(other, (BigRationalBase, numbers.Real, Decimal)):
            return cls(other, FixedBigRational.ZERO)
        if isinstance(other, complex):
            return cls(other.real, other.imag)
        return NotImplemented

    # Arithmetic

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return FixedBigComplex(self.real + other.real, self.imag + other.imag)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return FixedBigComplex(self.real - other.real, self.imag - other.imag)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return FixedBigComplex(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + self.imag * other.real,
        )

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self * other.reciprocal()

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other * self.reciprocal()

    def __neg__(self) -> "FixedBigComplex":
        return FixedBigComplex(-self.real, -self.imag)

    def __pos__(self) -> "FixedBigComplex":
        return self

    def __pow__(self, exponent):
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented
        return self.pow(int(exponent))

    def plus(self, other: Any) -> "FixedBigComplex":
        return self + other

    def minus(self, other: Any) -> "FixedBigComplex":
        return self - other

    def times(self, other: Any) -> "FixedBigComplex":
        return self * other

    # Properties

    def conjugate(self) -> "FixedBigComplex":
        return FixedBigComplex(self.real, -self.imag)

    @property
    def det(self) -> FixedBigRational:
        """Squared modulus, ``real² + imag²``."""
        return self.real * self.real + self.imag * self.imag

    def reciprocal(self) -> "FixedBigComplex":
        """
        ``1/(a+bi)`` as ``(a-bi)/(a²+b²)``.

        Raises:
            DivisionByZeroError: For zero
        """
        det = self.det
        conjugate = self.conjugate()
        return FixedBigComplex(conjugate.real / det, conjugate.imag / det)

    def pow(self, exponent: int) -> "FixedBigComplex":
        """Integer power by repeated squaring; negative powers invert first."""
        if exponent < 0:
            return self.reciprocal().pow(-exponent)
        result, base = FixedBigComplex.ONE, self
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    def modulus(self) -> FixedBigRational:
        """Exact modulus; raises NoRationalRootError when irrational."""
        return self.det.sqrt()

    def modulus_approximated(self) -> FixedBigRational:
        return self.det.sqrt_approximated()

    def sqrt_approximated(self) -> "FixedBigComplex":
        """Principal square root, exact where the parts allow it."""
        modulus = self.modulus_approximated()
        gamma = ((self.real + modulus) / FixedBigRational.TWO).sqrt_approximated()
        delta = ((modulus - self.real) / FixedBigRational.TWO).sqrt_approximated()
        if self.imag < FixedBigRational.ZERO:
            delta = -delta
        return FixedBigComplex(gamma, delta)

    def is_real(self) -> bool:
        return self.imag.is_zero()

    def is_imaginary(self) -> bool:
        return self.real.is_zero()

    def to_rational(self) -> FixedBigRational:
        if not self.is_real():
            raise ValueError(f"Not real: {self}")
        return self.real

    def __str__(self) -> str:
        if self.imag < FixedBigRational.ZERO:
            return f"{self.real}-{-self.imag}i"
        return f"{self.real}+{self.imag}i"


FixedBigComplex.ZERO = FixedBigComplex(FixedBigRational.ZERO, FixedBigRational.ZERO)
FixedBigComplex.ONE = FixedBigComplex(FixedBigRational.ONE, FixedBigRational.ZERO)
FixedBigComplex.I = FixedBigComplex(FixedBigRational.ZERO, FixedBigRational.ONE)


def conjugate(z: FixedBigComplex) -> FixedBigComplex:
    return z.conjugate()
