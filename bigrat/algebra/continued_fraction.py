"""
Finite simple continued fractions over fixed rationals.

A continued fraction ``[a0; a1, a2, ...]`` stands for
``a0 + 1/(a1 + 1/(a2 + ...))``. Index 0 holds the integer part and the
fractional terms keep their natural indices from 1. All numerators are 1.
Every term is an integral :class:`FixedBigRational`, so converting back is
always exact.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Tuple

from ..core.base import BigRationalBase
from ..core.errors import DivisionByZeroError
from ..core.fixed import FixedBigRational
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _expand(value: FixedBigRational) -> List[FixedBigRational]:
    """Floor and invert until the fractional part vanishes."""
    terms = []
    while True:
        integer = value.floor()
        terms.append(integer)
        fraction = value - integer
        if fraction.is_zero():
            return terms
        value = fraction.reciprocal()


def _check_length(n: int, constant: str) -> None:
    if n < 1:
        raise ValueError(f"Not enough terms to approximate {constant}: {n}")


@dataclass(frozen=True)
class FixedContinuedFraction:
    """
    Immutable finite simple continued fraction.

    Equality compares the terms, so ``[1; 2]`` and ``[1; 1, 1]`` differ even
    though both are 3/2; compare their rationals for numeric equality.
    Ordering is numeric.

    Attributes:
        terms: Integer part followed by the fractional terms
    """

    terms: Tuple[FixedBigRational, ...]

    def __post_init__(self):
        terms = tuple(FixedBigRational.value_of(term) for term in self.terms)
        if not terms:
            raise ValueError("A continued fraction needs at least an integer part")
        for index, term in enumerate(terms):
            if not term.is_integer():
                raise ValueError(f"Term {index} is not an integer: {term}")
            if index and term.is_zero():
                raise ValueError(f"Fractional term {index} is zero")
        object.__setattr__(self, "terms", terms)

    @classmethod
    def value_of(cls, value: Any) -> "FixedContinuedFraction":
        """
        Expand a rational into its canonical continued fraction.

        Args:
            value: Anything ``FixedBigRational.value_of`` accepts

        Returns:
            Continued fraction whose last term is not 1, except for 1 itself

        Raises:
            NonFiniteError: NaN or an infinity
        """
        value = FixedBigRational.value_of(value)
        terms = _expand(value)
        logger.debug("continued_fraction.expanded", value=value, terms=len(terms))
        return cls(tuple(terms))

    @classmethod
    def of(cls, integer_part: int, *fractional_parts: int) -> "FixedContinuedFraction":
        """Build from already decomposed terms: ``of(3, 4, 12, 4)`` is 649/200."""
        return cls((integer_part,) + fractional_parts)

    # Well-known constants as truncated expansions

    @classmethod
    def phi(cls, n: int) -> "FixedContinuedFraction":
        """Golden ratio, ``[1; 1, 1, ...]``, with ``n`` terms. Convergents are Fibonacci ratios."""
        _check_length(n, "phi")
        return cls((1,) * n)

    @classmethod
    def root2(cls, n: int) -> "FixedContinuedFraction":
        """Square root of two, ``[1; 2, 2, ...]``, with ``n`` terms."""
        _check_length(n, "root 2")
        return cls((1,) + (2,) * (n - 1))

    @classmethod
    def root3(cls, n: int) -> "FixedContinuedFraction":
        """Square root of three, ``[1; 1, 2, 1, 2, ...]``, with ``n`` terms."""
        _check_length(n, "root 3")
        return cls((1,) + tuple(1 if 0 == i % 2 else 2 for i in range(n - 1)))

    @classmethod
    def e(cls, n: int) -> "FixedContinuedFraction":
        """Euler's number, ``[2; 1, 2, 1, 1, 4, 1, 1, 6, ...]``, with ``n`` terms."""
        _check_length(n, "e")
        fractional = tuple(2 * (i // 3 + 1) if 1 == i % 3 else 1 for i in range(n - 1))
        return cls((2,) + fractional)

    # Sequence protocol

    def __len__(self) -> int:
        return len(self.terms)

    def __getitem__(self, index):
        return self.terms[index]

    def __iter__(self) -> Iterator[FixedBigRational]:
        return iter(self.terms)

    # Parts

    @property
    def integer_part(self) -> FixedBigRational:
        return self.terms[0]

    @property
    def fractional_parts(self) -> Tuple[FixedBigRational, ...]:
        return self.terms[1:]

    def truncated(self, fractional_terms: int) -> Tuple[FixedBigRational, ...]:
        """Integer part plus the first ``fractional_terms`` fractional terms."""
        if fractional_terms < 0:
            raise ValueError(f"Term count must be non-negative: {fractional_terms}")
        return self.terms[:fractional_terms + 1]

    # Conversion

    def to_rational(self) -> FixedBigRational:
        """Fold the terms back into the exact rational."""
        value = self.terms[-1]
        for term in reversed(self.terms[:-1]):
            value = value.reciprocal() + term
        return value

    def convergents(self) -> Iterator[FixedBigRational]:
        """
        Successive best approximations, ending with the value itself.

        The 0th convergent is the integer part.
        """
        h_prev, h = 1, self.terms[0].numerator
        k_prev, k = 0, 1
        yield FixedBigRational.value_of(h, k)
        for term in self.terms[1:]:
            a = term.numerator
            h_prev, h = h, a * h + h_prev
            k_prev, k = k, a * k + k_prev
            yield FixedBigRational.value_of(h, k)

    def convergent(self, n: int) -> FixedBigRational:
        """
        The ``n``-th convergent.

        Raises:
            IndexError: Negative ``n`` or ``n`` past the last term
        """
        if n < 0:
            raise IndexError(f"Convergents start from the 0th: {n}")
        if n >= len(self.terms):
            raise IndexError(f"Only {len(self.terms)} convergents: {n}")
        for index, value in enumerate(self.convergents()):
            if index == n:
                return value

    def to_double(self) -> float:
        return self.to_rational().to_double()

    def to_float(self) -> float:
        return self.to_rational().to_float()

    def to_int(self) -> int:
        return self.to_rational().to_int()

    def __float__(self) -> float:
        return self.to_double()

    def __int__(self) -> int:
        return self.to_int()

    # Arithmetic, through the rationals

    def _rational_of(self, other: Any) -> Any:
        if isinstance(other, FixedContinuedFraction):
            return other.to_rational()
        if isinstance(other, (BigRationalBase, int)):
            return FixedBigRational.value_of(other)
        return NotImplemented

    def __add__(self, other):
        other = self._rational_of(other)
        if other is NotImplemented:
            return NotImplemented
        return FixedContinuedFraction.value_of(self.to_rational() + other)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._rational_of(other)
        if other is NotImplemented:
            return NotImplemented
        return FixedContinuedFraction.value_of(self.to_rational() - other)

    def __mul__(self, other):
        other = self._rational_of(other)
        if other is NotImplemented:
            return NotImplemented
        return FixedContinuedFraction.value_of(self.to_rational() * other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._rational_of(other)
        if other is NotImplemented:
            return NotImplemented
        return FixedContinuedFraction.value_of(self.to_rational() / other)

    def __neg__(self) -> "FixedContinuedFraction":
        return FixedContinuedFraction.value_of(-self.to_rational())

    def reciprocal(self) -> "FixedContinuedFraction":
        """
        Multiplicative inverse by shifting the terms one place.

        Raises:
            DivisionByZeroError: For zero
        """
        if self.integer_part.is_zero():
            if 1 == len(self.terms):
                raise DivisionByZeroError("Zero has no reciprocal")
            return FixedContinuedFraction(self.fractional_parts)
        return FixedContinuedFraction((FixedBigRational.ZERO,) + self.terms)

    # Ordering

    def __lt__(self, other):
        other = self._rational_of(other)
        if other is NotImplemented:
            return NotImplemented
        return self.to_rational() < other

    def __le__(self, other):
        other = self._rational_of(other)
        if other is NotImplemented:
            return NotImplemented
        return self.to_rational() <= other

    def __gt__(self, other):
        other = self._rational_of(other)
        if other is NotImplemented:
            return NotImplemented
        return self.to_rational() > other

    def __ge__(self, other):
        other = self._rational_of(other)
        if other is NotImplemented:
            return NotImplemented
        return self.to_rational() >= other

    def __str__(self) -> str:
        if 1 == len(self.terms):
            return f"[{self.integer_part};]"
        return f"[{self.integer_part}; {', '.join(str(t) for t in self.fractional_parts)}]"
