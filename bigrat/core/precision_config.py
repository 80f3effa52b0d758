"""
Global precision configuration for bigrat.

This module manages the native floating-point precision that rationals are
rounded to when leaving the exact domain. By default, float64 is used.
"""

import numpy as np
from typing import Type, Union
from enum import Enum


class PrecisionMode(Enum):
    """Supported precision modes."""
    FLOAT16 = np.float16
    FLOAT32 = np.float32
    FLOAT64 = np.float64

    @property
    def numpy_dtype(self):
        """Get the numpy dtype for this precision."""
        return self.value

    @property
    def bits(self) -> int:
        """Get the number of bits for this precision."""
        return np.dtype(self.value).itemsize * 8

    @property
    def mantissa_bits(self) -> int:
        """Significand width including the implicit leading bit."""
        return int(np.finfo(self.value).nmant) + 1

    @property
    def min_exponent(self) -> int:
        """Binary exponent of the smallest normal value."""
        return int(np.finfo(self.value).minexp)

    @property
    def max_exponent(self) -> int:
        """Values at or above ``2 ** max_exponent`` overflow."""
        return int(np.finfo(self.value).maxexp)


_MODE_NAMES = {
    'float16': PrecisionMode.FLOAT16,
    'float32': PrecisionMode.FLOAT32,
    'float64': PrecisionMode.FLOAT64,
    'single': PrecisionMode.FLOAT32,
    'double': PrecisionMode.FLOAT64,
}


def resolve_mode(mode: Union[PrecisionMode, str]) -> PrecisionMode:
    """
    Turn a mode name or enum into a PrecisionMode.

    Raises:
        ValueError: If mode is not supported
    """
    if isinstance(mode, str):
        if mode not in _MODE_NAMES:
            raise ValueError(f"Unsupported precision mode: {mode}")
        return _MODE_NAMES[mode]
    if not isinstance(mode, PrecisionMode):
        raise ValueError(f"Invalid precision mode: {mode}")
    return mode


class PrecisionConfig:
    """
    Global precision configuration.

    The default mode only affects conversions that do not name a precision
    explicitly (``to_ieee`` and the NumPy bridge). ``to_double`` and
    ``to_float`` always round to float64 and float32.
    """

    _default_mode: PrecisionMode = PrecisionMode.FLOAT64

    @classmethod
    def set_precision(cls, mode: Union[PrecisionMode, str]) -> None:
        """
        Set the default precision mode.

        Args:
            mode: PrecisionMode enum or string ('float16', 'float32', 'float64')

        Raises:
            ValueError: If mode is not supported
        """
        cls._default_mode = resolve_mode(mode)

    @classmethod
    def get_precision(cls) -> PrecisionMode:
        """Get the current default precision mode."""
        return cls._default_mode

    @classmethod
    def get_dtype(cls) -> Type[np.floating]:
        """Get the numpy dtype for the current precision."""
        return cls._default_mode.numpy_dtype

    @classmethod
    def get_epsilon(cls) -> float:
        """Get machine epsilon for current precision."""
        return float(np.finfo(cls.get_dtype()).eps)

    @classmethod
    def get_max(cls) -> float:
        """Get maximum representable value for current precision."""
        return float(np.finfo(cls.get_dtype()).max)

    @classmethod
    def get_min(cls) -> float:
        """Get minimum positive normal value for current precision."""
        return float(np.finfo(cls.get_dtype()).tiny)

    @classmethod
    def reset(cls) -> None:
        cls._default_mode = PrecisionMode.FLOAT64


# Context manager for temporary precision changes
class precision_context:
    """
    Context manager for temporary precision changes.

    Example:
        with precision_context('float32'):
            # to_ieee rounds to float32
            x = to_ieee(value)
        # Back to previous precision
    """

    def __init__(self, mode: Union[PrecisionMode, str]):
        self.new_mode = mode
        self.old_mode = None

    def __enter__(self):
        self.old_mode = PrecisionConfig.get_precision()
        PrecisionConfig.set_precision(self.new_mode)
        return self

    def __exit__(self, _exc_type, _exc_val, _exc_tb):
        PrecisionConfig.set_precision(self.old_mode)
