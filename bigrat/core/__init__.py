"""Core rational types, their error hierarchy and precision settings."""

from .base import BigRationalBase
from .fixed import FixedBigRational
from .floating import FloatingBigRational
from .comparisons import compare, equivalent
from .errors import (
    BigRationalError,
    DivisionByZeroError,
    IllegalProgressionStateError,
    InvalidStepError,
    NoRationalRootError,
    NonFiniteError,
)
from .precision_config import PrecisionConfig, PrecisionMode, precision_context

__all__ = [
    # Types
    "BigRationalBase",
    "FixedBigRational",
    "FloatingBigRational",
    # Ordering
    "compare",
    "equivalent",
    # Errors
    "BigRationalError",
    "DivisionByZeroError",
    "NonFiniteError",
    "InvalidStepError",
    "IllegalProgressionStateError",
    "NoRationalRootError",
    # Precision
    "PrecisionConfig",
    "PrecisionMode",
    "precision_context",
]
