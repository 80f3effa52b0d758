"""Algebraic structures built on the rational core."""

from .complex_fixed import FixedBigComplex, conjugate
from .continued_fraction import FixedContinuedFraction
from .mod3 import Mod3Int

__all__ = [
    "FixedBigComplex",
    "conjugate",
    "FixedContinuedFraction",
    "Mod3Int",
]
