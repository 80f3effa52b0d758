"""
Exact rounding of integer ratios to binary floating point.

A rational is rounded once, directly to the target format, with
round-half-to-even. Going through float64 first and then narrowing to
float32 would round twice and can land one ulp off.
"""

import math
import warnings

from .precision_config import PrecisionMode
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _at_least(numerator: int, denominator: int, exponent: int) -> bool:
    """Check ``numerator / denominator >= 2 ** exponent``."""
    if exponent >= 0:
        return numerator >= denominator << exponent
    return numerator << -exponent >= denominator


def round_to_binary(numerator: int, denominator: int, mode: PrecisionMode) -> float:
    """
    Round ``numerator / denominator`` to the nearest value of ``mode``.

    Args:
        numerator: Any integer
        denominator: Positive integer
        mode: Target precision

    Returns:
        Python float holding a value exactly representable in ``mode``;
        ``±inf`` on overflow and a signed zero on underflow.
    """
    if 0 == numerator:
        return 0.0
    negative = numerator < 0
    n = -numerator if negative else numerator
    d = denominator

    precision = mode.mantissa_bits
    # Exponent of the last significand bit of the smallest subnormal
    lowest = mode.min_exponent - precision + 1

    shift = n.bit_length() - d.bit_length() - precision
    if _at_least(n, d, shift + precision):
        shift += 1
    if shift < lowest:
        shift = lowest

    if shift >= 0:
        quotient, remainder = divmod(n, d << shift)
        divisor = d << shift
    else:
        quotient, remainder = divmod(n << -shift, d)
        divisor = d
    twice = remainder << 1
    if twice > divisor or (twice == divisor and quotient & 1):
        quotient += 1
    if quotient == 1 << precision:
        quotient >>= 1
        shift += 1

    if quotient.bit_length() + shift > mode.max_exponent:
        logger.debug("ieee.overflow", mode=mode.name, bits=n.bit_length() - d.bit_length())
        warnings.warn(
            f"Rational magnitude exceeds {mode.name} range; rounded to infinity",
            RuntimeWarning,
            stacklevel=3,
        )
        return -math.inf if negative else math.inf
    if 0 == quotient:
        logger.debug("ieee.underflow", mode=mode.name)

    value = math.ldexp(float(quotient), shift)
    value = float(mode.numpy_dtype(value))
    return -value if negative else value
