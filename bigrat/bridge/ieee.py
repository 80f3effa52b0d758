"""
IEEE bridge for rational numbers.

Converts native floats to exact rationals and back. Incoming floats are
read through their shortest round-tripping decimal, so ``from_ieee(0.1)``
is ``1/10`` rather than the binary expansion of the double.
"""

from decimal import Decimal
from typing import Optional, Type, Union

import numpy as np

from ..core.base import BigRationalBase
from ..core.floating import FloatingBigRational
from ..core.precision_config import PrecisionMode


def from_ieee(
    x: Union[float, np.floating],
    variant: Type[BigRationalBase] = FloatingBigRational,
) -> BigRationalBase:
    """
    Convert an IEEE float to a rational.

    Args:
        x: Python float or NumPy floating scalar
        variant: Rational class to build; NaN and infinities need
            :class:`FloatingBigRational`

    Returns:
        Canonical rational of the requested variant

    Raises:
        NonFiniteError: ``x`` is not finite and the variant has no specials
        TypeError: ``x`` is not a float
    """
    if not isinstance(x, (float, np.floating)):
        raise TypeError(f"from_ieee expects a float, got {type(x).__name__}")
    return variant.value_of(x)


def from_ieee_single(
    x: Union[float, np.floating],
    variant: Type[BigRationalBase] = FloatingBigRational,
) -> BigRationalBase:
    """Like :func:`from_ieee`, reading ``x`` as a float32 first."""
    return variant.value_of_single(x)


def from_decimal_text(
    text: str,
    variant: Type[BigRationalBase] = FloatingBigRational,
) -> BigRationalBase:
    """Parse decimal or ``n/d`` text exactly, without going through a float."""
    return variant.value_of(text)


def to_ieee(
    value: Union[BigRationalBase, int, Decimal],
    precision: Optional[Union[PrecisionMode, str]] = None,
) -> float:
    """
    Round a rational to an IEEE float.

    Args:
        value: Rational (or int/Decimal, read as a floating rational)
        precision: Target format; defaults to ``PrecisionConfig``

    Returns:
        Python float holding the correctly rounded value
    """
    if not isinstance(value, BigRationalBase):
        value = FloatingBigRational.value_of(value)
    return value.to_ieee(precision)
