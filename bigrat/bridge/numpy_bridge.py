"""
NumPy bridge for rational numbers.

Rationals live in object arrays; conversion to a float array rounds each
element once to the configured precision.
"""

from typing import Any, Iterable, Optional, Type, Union

import numpy as np

from ..core.base import BigRationalBase
from ..core.floating import FloatingBigRational
from ..core.precision_config import PrecisionConfig, PrecisionMode, resolve_mode


def to_numpy(
    values: Union[Iterable[BigRationalBase], np.ndarray],
    precision: Optional[Union[PrecisionMode, str]] = None,
) -> np.ndarray:
    """
    Convert rationals to a float ndarray.

    Args:
        values: Iterable or object ndarray of rationals; shape is preserved
        precision: Target format; defaults to ``PrecisionConfig``

    Returns:
        Array with the dtype of the chosen precision
    """
    mode = PrecisionConfig.get_precision() if precision is None else resolve_mode(precision)
    source = values if isinstance(values, np.ndarray) else np.array(list(values), dtype=object)
    result = np.empty(source.shape, dtype=mode.numpy_dtype)
    for index in np.ndindex(source.shape):
        element = source[index]
        if not isinstance(element, BigRationalBase):
            raise TypeError(f"Expected rationals, found {type(element).__name__}")
        result[index] = element.to_ieee(mode)
    return result


def from_numpy(
    arr: Any,
    variant: Type[BigRationalBase] = FloatingBigRational,
) -> np.ndarray:
    """
    Convert a numeric array to an object array of rationals.

    Float elements go through their shortest decimal in their own dtype, so
    a float32 ``0.1`` becomes ``1/10`` as well.

    Raises:
        NonFiniteError: Non-finite element and a variant without specials
    """
    arr = np.asarray(arr)
    if arr.dtype.kind not in "biuf":
        raise TypeError(f"Unsupported array dtype: {arr.dtype}")
    result = np.empty(arr.shape, dtype=object)
    for index in np.ndindex(arr.shape):
        element = arr[index]
        if arr.dtype.kind == "b":
            element = int(element)
        result[index] = variant.value_of(element)
    return result
