"""Bridges between rationals and native floating point."""

from .ieee import from_decimal_text, from_ieee, from_ieee_single, to_ieee
from .numpy_bridge import from_numpy, to_numpy

__all__ = [
    # Core IEEE
    "from_ieee",
    "from_ieee_single",
    "from_decimal_text",
    "to_ieee",
    # NumPy
    "from_numpy",
    "to_numpy",
]
