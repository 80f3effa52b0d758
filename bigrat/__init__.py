# MIT License
# See LICENSE file in the project root for full license text.
"""
bigrat: Exact rational arithmetic over arbitrary-precision integers.

Two variants share one contract. ``FixedBigRational`` rejects division by
zero; ``FloatingBigRational`` extends the number line with NaN and signed
infinities so that every operation is total. Both convert to and from IEEE
floats with a single, correctly rounded step.
"""

__version__ = "0.1.0"
__author__ = "bigrat Team"

# Keep top-level import lightweight: core types, bridges and progressions.
# Subpackages (algebra, sequences, utils) can also be imported explicitly.

from .bridge.ieee import from_decimal_text, from_ieee, from_ieee_single, to_ieee
from .bridge.numpy_bridge import from_numpy, to_numpy
from .core import (
    BigRationalBase,
    BigRationalError,
    DivisionByZeroError,
    FixedBigRational,
    FloatingBigRational,
    IllegalProgressionStateError,
    InvalidStepError,
    NoRationalRootError,
    NonFiniteError,
    PrecisionConfig,
    PrecisionMode,
    compare,
    equivalent,
    precision_context,
)
from .sequences.progression import BigRationalProgression, down_to, range_to, step
from .algebra import FixedBigComplex, FixedContinuedFraction, Mod3Int, conjugate

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Rational types
    "BigRationalBase",
    "FixedBigRational",
    "FloatingBigRational",
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
    # Bridges
    "from_ieee",
    "from_ieee_single",
    "from_decimal_text",
    "to_ieee",
    "from_numpy",
    "to_numpy",
    # Progressions
    "BigRationalProgression",
    "range_to",
    "down_to",
    "step",
    # Algebra
    "FixedBigComplex",
    "FixedContinuedFraction",
    "Mod3Int",
    "conjugate",
    # Submodules (exposed lazily via __getattr__)
    "algebra",
    "sequences",
    "utils",
]


def __getattr__(name):  # Lazy import submodules on demand
    if name in {"algebra", "sequences", "utils"}:
        import importlib

        return importlib.import_module(f"{__name__}.{name}")
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
