"""
Lazy arithmetic progressions over rationals.

A progression is an immutable description (first, last, increment,
direction). Iterating it runs a generator whose only state is the current
element; each call to ``iter()`` starts again from ``first``, so any number
of independent cursors may walk the same progression.
"""

import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterator, Optional, Type

from ..core.base import BigRationalBase
from ..core.errors import IllegalProgressionStateError, InvalidStepError
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _variant_of(*values: Any) -> Type[BigRationalBase]:
    for value in values:
        if isinstance(value, BigRationalBase):
            return type(value)
    raise TypeError("At least one bound must be a rational, or pass variant=")


def _past(value: BigRationalBase, last: BigRationalBase, ascending: bool) -> bool:
    return value > last if ascending else value < last


def _next_state(
    current: BigRationalBase,
    last: BigRationalBase,
    increment: BigRationalBase,
    ascending: bool,
) -> Optional[BigRationalBase]:
    """Element after ``current``, or None once the bound would be crossed."""
    candidate = current + increment
    if _past(candidate, last, ascending):
        return None
    return candidate


@dataclass(frozen=True)
class BigRationalProgression:
    """
    Closed progression from ``first`` towards ``last`` by ``increment``.

    Attributes:
        first: First element
        last: Inclusive bound; only yielded when reached exactly
        increment: Non-zero step, positive when ascending
        ascending: Direction of travel
    """

    first: BigRationalBase
    last: BigRationalBase
    increment: BigRationalBase
    ascending: bool = True

    @property
    def variant(self) -> Type[BigRationalBase]:
        return type(self.first)

    def _check_iterable(self) -> None:
        for name in ("first", "last", "increment"):
            value = getattr(self, name)
            if not value.is_finite():
                logger.debug("progression.rejected", progression=self, field=name, value=value)
                raise IllegalProgressionStateError(
                    f"Cannot iterate {self}: {name} is {value}; the bound check never settles"
                )

    def __iter__(self) -> Iterator[BigRationalBase]:
        self._check_iterable()
        current = None if _past(self.first, self.last, self.ascending) else self.first
        while current is not None:
            yield current
            current = _next_state(current, self.last, self.increment, self.ascending)

    def __contains__(self, value: Any) -> bool:
        if not isinstance(value, (BigRationalBase, numbers.Real, Decimal)):
            return False
        low, high = (self.first, self.last) if self.ascending else (self.last, self.first)
        return low <= value <= high

    def contains(self, value: Any) -> bool:
        return value in self

    def is_empty(self) -> bool:
        return _past(self.first, self.last, self.ascending)

    def step(self, increment: Any) -> "BigRationalProgression":
        """Same bounds and direction with a new increment."""
        return step(self, increment)

    def __str__(self) -> str:
        if self.ascending:
            return f"{self.first}..{self.last} step {self.increment}"
        return f"{self.first} downTo {self.last} step {self.increment}"


def range_to(first: Any, last: Any, variant: Optional[Type[BigRationalBase]] = None) -> BigRationalProgression:
    """
    Ascending progression from ``first`` to ``last`` with increment ONE.

    Plain numbers are coerced to the variant of the rational operand (or
    ``variant`` when given).
    """
    variant = variant or _variant_of(first, last)
    return BigRationalProgression(variant.value_of(first), variant.value_of(last), variant.ONE, True)


def down_to(first: Any, last: Any, variant: Optional[Type[BigRationalBase]] = None) -> BigRationalProgression:
    """Descending progression from ``first`` to ``last`` with increment -ONE."""
    variant = variant or _variant_of(first, last)
    return BigRationalProgression(variant.value_of(first), variant.value_of(last), -variant.ONE, False)


def step(progression: BigRationalProgression, increment: Any) -> BigRationalProgression:
    """
    Rebuild ``progression`` with a caller-supplied increment.

    Args:
        progression: Progression whose bounds and direction are kept
        increment: Non-zero step; its sign must match the direction

    Returns:
        New progression

    Raises:
        InvalidStepError: Zero increment, or one pointing away from ``last``
    """
    variant = progression.variant
    increment = variant.value_of(increment)
    if increment.is_zero():
        logger.debug("progression.step_rejected", progression=progression, increment=increment)
        raise InvalidStepError(f"Step must be non-zero: {progression}")
    # NaN has no sign; it is rejected when the progression is first iterated
    if not increment.is_nan() and progression.ascending != (increment > variant.ZERO):
        logger.debug("progression.step_rejected", progression=progression, increment=increment)
        direction = "positive" if progression.ascending else "negative"
        raise InvalidStepError(f"Step must be {direction} for {progression}: {increment}")
    return BigRationalProgression(progression.first, progression.last, increment, progression.ascending)
