"""Lazy sequences over rationals: progressions and lattice enumerations."""

from .progression import BigRationalProgression, down_to, range_to, step
from .cantor import Direction, cantor_positive, cantor_spiral, nth, spiral_step, zigzag_step

__all__ = [
    # Progressions
    "BigRationalProgression",
    "range_to",
    "down_to",
    "step",
    # Enumerations
    "cantor_positive",
    "cantor_spiral",
    "nth",
    "Direction",
    "spiral_step",
    "zigzag_step",
]
