"""
Shared contract of the fixed and floating rational variants.

Both variants store a numerator/denominator pair of Python integers in
canonical form. Construction always goes through :meth:`value_of`, which
reduces the pair and hands back the manifest constants (ZERO, ONE, TWO, TEN)
instead of fresh equal instances. The only place the variants differ is what
happens when a denominator of zero shows up: see ``_zero_denominator`` and
``_special`` in the subclasses.
"""

import math
import numbers
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Iterator, Optional, Tuple, Union

import numpy as np

from .canonical import is_power_of, reduce_fraction, truncated_quotient
from .errors import NoRationalRootError
from .precision_config import PrecisionConfig, PrecisionMode, resolve_mode
from .rounding import round_to_binary

_FRACTION_FORMAT = re.compile(r"""
    \A\s*
    (?P<num>[-+]?\d+(?:_\d+)*)      # signed numerator
    \s*/\s*                         # fraction slash
    (?P<den>[-+]?\d+(?:_\d+)*)      # signed denominator
    \s*\Z
""", re.VERBOSE)


def _signum(value: int) -> int:
    return (value > 0) - (value < 0)


class BigRationalBase:
    """
    Immutable rational number over arbitrary-precision integers.

    Do not instantiate directly; use a concrete variant. Calling a variant
    class, ``FixedBigRational(3, 6)``, is the same as calling its
    ``value_of`` and returns the canonical instance.
    """

    __slots__ = ("_numerator", "_denominator")

    ZERO: "BigRationalBase"
    ONE: "BigRationalBase"
    TWO: "BigRationalBase"
    TEN: "BigRationalBase"
    _CONSTANTS: dict = {}

    def __new__(cls, numerator: Any = 0, denominator: Any = None):
        return cls.value_of(numerator, denominator)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def _create(cls, numerator: int, denominator: int) -> "BigRationalBase":
        """Allocate without reduction. Only for constants and reduced pairs."""
        self = object.__new__(cls)
        object.__setattr__(self, "_numerator", numerator)
        object.__setattr__(self, "_denominator", denominator)
        return self

    @classmethod
    def _zero_denominator(cls, numerator: int) -> "BigRationalBase":
        raise NotImplementedError

    @classmethod
    def _special(cls, sign: int) -> "BigRationalBase":
        """Value for NaN (sign 0) or an infinity (sign ±1)."""
        raise NotImplementedError

    @classmethod
    def _from_pair(cls, numerator: int, denominator: int) -> "BigRationalBase":
        if 0 == denominator:
            return cls._zero_denominator(numerator)
        numerator, denominator = reduce_fraction(numerator, denominator)
        if 1 == denominator:
            constant = cls._CONSTANTS.get(numerator)
            if constant is not None:
                return constant
        return cls._create(numerator, denominator)

    @classmethod
    def value_of(cls, value: Any, denominator: Any = None) -> "BigRationalBase":
        """
        Build the canonical rational for ``value`` (or ``value / denominator``).

        Args:
            value: int, float, numpy scalar, Decimal, Fraction, decimal text
                (``"-1.25e3"``, ``"NaN"``), fraction text (``"3/4"``) or
                another rational of either variant
            denominator: Optional divisor of the same kinds

        Returns:
            Canonical instance of this variant

        Raises:
            DivisionByZeroError: Fixed variant with a zero denominator
            NonFiniteError: Fixed variant given NaN or an infinity
            TypeError: Unsupported input type
            ValueError: Malformed text
        """
        if denominator is not None:
            if isinstance(value, numbers.Integral) and isinstance(denominator, numbers.Integral):
                return cls._from_pair(int(value), int(denominator))
            return cls.value_of(value)._div(cls.value_of(denominator))

        if isinstance(value, cls):
            return value
        if isinstance(value, BigRationalBase):
            if not value.is_finite():
                return cls._special(value._signum())
            return cls._from_pair(value._numerator, value._denominator)
        if isinstance(value, numbers.Integral):
            return cls._from_pair(int(value), 1)
        if isinstance(value, float):
            return cls._from_float(float(value))
        if isinstance(value, np.floating):
            return cls._from_numpy_float(value)
        if isinstance(value, Decimal):
            return cls._from_decimal(value)
        if isinstance(value, numbers.Rational):
            return cls._from_pair(int(value.numerator), int(value.denominator))
        if isinstance(value, str):
            return cls._from_text(value)
        raise TypeError(f"Unsupported type for {cls.__name__}: {type(value).__name__}")

    @classmethod
    def value_of_single(cls, value: Union[float, np.floating]) -> "BigRationalBase":
        """Build from the single-precision (float32) reading of ``value``."""
        return cls._from_numpy_float(np.float32(value))

    @classmethod
    def _from_float(cls, value: float) -> "BigRationalBase":
        # Shortest round-tripping decimal, so 0.1 becomes 1/10
        if math.isnan(value):
            return cls._special(0)
        if math.isinf(value):
            return cls._special(1 if value > 0 else -1)
        return cls._from_decimal(Decimal(repr(value)))

    @classmethod
    def _from_numpy_float(cls, value: np.floating) -> "BigRationalBase":
        if np.isnan(value):
            return cls._special(0)
        if np.isinf(value):
            return cls._special(1 if value > 0 else -1)
        return cls._from_decimal(Decimal(np.format_float_scientific(value, unique=True)))

    @classmethod
    def _from_decimal(cls, value: Decimal) -> "BigRationalBase":
        if not value.is_finite():
            if value.is_nan():
                return cls._special(0)
            return cls._special(-1 if value.is_signed() else 1)
        sign, digits, exponent = value.as_tuple()
        unscaled = int("".join(map(str, digits)) or "0")
        if sign:
            unscaled = -unscaled
        if exponent >= 0:
            return cls._from_pair(unscaled * 10 ** exponent, 1)
        return cls._from_pair(unscaled, 10 ** -exponent)

    @classmethod
    def _from_text(cls, text: str) -> "BigRationalBase":
        match = _FRACTION_FORMAT.match(text)
        if match is not None:
            return cls._from_pair(int(match.group("num")), int(match.group("den")))
        try:
            parsed = Decimal(text.strip())
        except InvalidOperation:
            raise ValueError(f"Invalid literal for {cls.__name__}: {text!r}") from None
        return cls._from_decimal(parsed)

    # ------------------------------------------------------------------
    # Immutability and identity
    # ------------------------------------------------------------------

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # Rebuild through value_of so constants and specials stay singletons
        return type(self).value_of, (self._numerator, self._denominator)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _signum(self) -> int:
        return _signum(self._numerator)

    def _rank(self) -> int:
        """Position class in the total order: -1 -inf, 0 finite, 1 +inf, 2 NaN."""
        return 0

    def is_finite(self) -> bool:
        return True

    def is_infinite(self) -> bool:
        return False

    def is_nan(self) -> bool:
        return False

    def is_zero(self) -> bool:
        return self is type(self).ZERO

    def is_one(self) -> bool:
        return self is type(self).ONE

    def is_integer(self) -> bool:
        return 1 == self._denominator

    def is_dyadic(self) -> bool:
        """Check whether the denominator is a power of two."""
        return self.is_finite() and is_power_of(2, self._denominator)

    def is_p_adic(self, p: int) -> bool:
        """Check whether the denominator is a power of ``p``."""
        return self.is_finite() and is_power_of(p, self._denominator)

    @property
    def sign(self) -> "BigRationalBase":
        return self._from_pair(self._signum(), 1)

    @property
    def absolute_value(self) -> "BigRationalBase":
        return abs(self)

    # ------------------------------------------------------------------
    # Arithmetic kernels (both operands already of this variant)
    # ------------------------------------------------------------------

    def _coerce(self, other: Any) -> Any:
        cls = type(self)
        if isinstance(other, cls):
            return other
        if isinstance(other, (BigRationalBase, numbers.Real, Decimal, str)):
            return cls.value_of(other)
        return NotImplemented

    def _operand(self, other: Any) -> "BigRationalBase":
        coerced = self._coerce(other)
        if coerced is NotImplemented:
            raise TypeError(f"Unsupported operand type for {type(self).__name__}: {type(other).__name__}")
        return coerced

    def _add(self, other: "BigRationalBase") -> "BigRationalBase":
        if self._denominator == other._denominator:
            return self._from_pair(self._numerator + other._numerator, self._denominator)
        return self._from_pair(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def _sub(self, other: "BigRationalBase") -> "BigRationalBase":
        return self._add(-other)

    def _mul(self, other: "BigRationalBase") -> "BigRationalBase":
        return self._from_pair(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def _div(self, other: "BigRationalBase") -> "BigRationalBase":
        return self._from_pair(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._add(other)

    def __radd__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._add(self)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._sub(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._sub(self)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._mul(other)

    def __rmul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._mul(self)

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._div(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._div(self)

    def __neg__(self) -> "BigRationalBase":
        return self._from_pair(-self._numerator, self._denominator)

    def __pos__(self) -> "BigRationalBase":
        return self

    def __abs__(self) -> "BigRationalBase":
        if self._numerator < 0:
            return self._from_pair(-self._numerator, self._denominator)
        return self

    def __pow__(self, exponent):
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented
        return self.pow(int(exponent))

    def negate(self) -> "BigRationalBase":
        return -self

    def reciprocal(self) -> "BigRationalBase":
        """Multiplicative inverse; zero follows the variant's zero-denominator rule."""
        return self._from_pair(self._denominator, self._numerator)

    def pow(self, exponent: int) -> "BigRationalBase":
        if exponent < 0:
            return self.reciprocal().pow(-exponent)
        return self._from_pair(self._numerator ** exponent, self._denominator ** exponent)

    def inc(self) -> "BigRationalBase":
        return self._add(type(self).ONE)

    def dec(self) -> "BigRationalBase":
        return self._sub(type(self).ONE)

    def rem(self, divisor: Any) -> "BigRationalBase":
        """
        Remainder of exact division, which is always zero.

        A zero divisor follows the variant's zero-denominator rule.
        """
        divisor = self._operand(divisor)
        if divisor.is_zero():
            return self._from_pair(0, 0)
        return type(self).ZERO

    def divide_and_remainder(self, divisor: Any) -> Tuple["BigRationalBase", "BigRationalBase"]:
        """Truncated quotient and the matching remainder."""
        divisor = self._operand(divisor)
        quotient = self._div(divisor).truncate()
        return quotient, self._sub(divisor._mul(quotient))

    def __mod__(self, other):
        if self._coerce(other) is NotImplemented:
            return NotImplemented
        return self.rem(other)

    def __rmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.rem(self)

    def __divmod__(self, other):
        if self._coerce(other) is NotImplemented:
            return NotImplemented
        return self.divide_and_remainder(other)

    def __rdivmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.divide_and_remainder(self)

    def mediant(self, other: Any) -> "BigRationalBase":
        """``(a + c) / (b + d)``, which lies between ``a/b`` and ``c/d``."""
        other = self._operand(other)
        return self._from_pair(
            self._numerator + other._numerator,
            self._denominator + other._denominator,
        )

    def gcd(self, other: Any) -> "BigRationalBase":
        other = self._operand(other)
        if not (self.is_finite() and other.is_finite()):
            return self._from_pair(0, 0)
        return self._from_pair(
            math.gcd(self._numerator, other._numerator),
            math.lcm(self._denominator, other._denominator),
        )

    def lcm(self, other: Any) -> "BigRationalBase":
        other = self._operand(other)
        if not (self.is_finite() and other.is_finite()):
            return self._from_pair(0, 0)
        return self._from_pair(
            math.lcm(self._numerator, other._numerator),
            math.gcd(self._denominator, other._denominator),
        )

    def sqrt(self) -> "BigRationalBase":
        """
        Exact square root.

        Raises:
            NoRationalRootError: Negative value, or numerator or denominator
                is not a perfect square
        """
        if self._numerator < 0:
            raise NoRationalRootError(f"No rational square root: {self}")
        p = math.isqrt(self._numerator)
        q = math.isqrt(self._denominator)
        if p * p != self._numerator or q * q != self._denominator:
            raise NoRationalRootError(f"No rational square root: {self}")
        return self._from_pair(p, q)

    def sqrt_approximated(self) -> "BigRationalBase":
        """Exact square root when one exists, else the double-precision root."""
        try:
            return self.sqrt()
        except NoRationalRootError:
            if self._numerator < 0:
                raise
            return type(self).value_of(math.sqrt(self.to_double()))

    # ------------------------------------------------------------------
    # Rounding
    # ------------------------------------------------------------------

    def floor(self) -> "BigRationalBase":
        if not self.is_finite() or self.is_integer():
            return self
        return self._from_pair(self._numerator // self._denominator, 1)

    def ceil(self) -> "BigRationalBase":
        if not self.is_finite() or self.is_integer():
            return self
        return self._from_pair(-(-self._numerator // self._denominator), 1)

    def truncate(self) -> "BigRationalBase":
        if not self.is_finite() or self.is_integer():
            return self
        return self._from_pair(truncated_quotient(self._numerator, self._denominator), 1)

    def round(self) -> "BigRationalBase":
        """Round to the nearest integer, ties to even."""
        if not self.is_finite() or self.is_integer():
            return self
        quotient, remainder = divmod(self._numerator, self._denominator)
        twice = remainder << 1
        if twice > self._denominator or (twice == self._denominator and quotient & 1):
            quotient += 1
        return self._from_pair(quotient, 1)

    def truncate_and_fraction(self) -> Tuple["BigRationalBase", "BigRationalBase"]:
        truncation = self.truncate()
        return truncation, self._sub(truncation)

    def fraction(self) -> "BigRationalBase":
        return self.truncate_and_fraction()[1]

    # ------------------------------------------------------------------
    # Ordering and equality
    # ------------------------------------------------------------------

    def _compare(self, other: "BigRationalBase") -> int:
        if self is other:
            return 0
        mine, theirs = self._rank(), other._rank()
        if mine != theirs:
            return _signum(mine - theirs)
        if 0 != mine:
            return 0
        a = self._numerator * other._denominator
        b = other._numerator * self._denominator
        return _signum(a - b)

    def _comparable(self, other: Any) -> Any:
        if isinstance(other, BigRationalBase):
            return other
        if isinstance(other, (numbers.Real, Decimal)):
            return type(self).value_of(other)
        return NotImplemented

    def compare_to(self, other: Any) -> int:
        """
        Total order: -Infinity < finite values < Infinity < NaN.

        Returns:
            -1, 0 or 1
        """
        comparable = self._comparable(other)
        if comparable is NotImplemented:
            raise TypeError(f"Cannot compare {type(self).__name__} with {type(other).__name__}")
        return self._compare(comparable)

    def __lt__(self, other):
        other = self._comparable(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other):
        other = self._comparable(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other):
        other = self._comparable(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other):
        other = self._comparable(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) >= 0

    def __eq__(self, other):
        if not isinstance(other, BigRationalBase):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __hash__(self):
        return hash((type(self).__name__, self._numerator, self._denominator))

    def __bool__(self) -> bool:
        return 0 != self._numerator

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_ieee(self, precision: Optional[Union[PrecisionMode, str]] = None) -> float:
        """
        Round to a native float of the given precision (default: configured).

        Rounding is to nearest, ties to even, applied once.
        """
        mode = PrecisionConfig.get_precision() if precision is None else resolve_mode(precision)
        return round_to_binary(self._numerator, self._denominator, mode)

    def to_double(self) -> float:
        return self.to_ieee(PrecisionMode.FLOAT64)

    def to_float(self) -> float:
        """Single-precision value, returned as a Python float."""
        return self.to_ieee(PrecisionMode.FLOAT32)

    def to_int(self) -> int:
        """Integer part, truncated toward zero."""
        return truncated_quotient(self._numerator, self._denominator)

    def to_decimal(self) -> Decimal:
        """Quotient in the current :mod:`decimal` context."""
        return Decimal(self._numerator) / Decimal(self._denominator)

    def __float__(self) -> float:
        return self.to_double()

    def __int__(self) -> int:
        return self.to_int()

    def __trunc__(self) -> int:
        return self.to_int()

    def __floor__(self) -> int:
        return self.floor().to_int()

    def __ceil__(self) -> int:
        return self.ceil().to_int()

    def __round__(self, ndigits: Optional[int] = None):
        if ndigits is None:
            return self.round().to_int()
        scale = type(self).TEN.pow(ndigits)
        return self._mul(scale).round()._div(scale)

    # ------------------------------------------------------------------
    # Progressions and enumerations
    # ------------------------------------------------------------------

    def range_to(self, last: Any):
        """Ascending progression from this value to ``last`` with step ONE."""
        from ..sequences.progression import range_to
        return range_to(self, last)

    def down_to(self, last: Any):
        """Descending progression from this value to ``last`` with step -ONE."""
        from ..sequences.progression import down_to
        return down_to(self, last)

    @classmethod
    def cantor_spiral(cls) -> Iterator["BigRationalBase"]:
        from ..sequences.cantor import cantor_spiral
        return cantor_spiral(cls)

    @classmethod
    def cantor_positive(cls) -> Iterator["BigRationalBase"]:
        from ..sequences.cantor import cantor_positive
        return cantor_positive(cls)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        if 1 == self._denominator:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._numerator}, {self._denominator})"
