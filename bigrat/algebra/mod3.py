"""The ring of integers modulo 3."""

import numbers
from typing import Any


class Mod3Int:
    """
    Residue class modulo 3.

    Only three instances exist: ``ZERO``, ``ONE`` and ``TWO``. Every
    operation, :meth:`value_of` included, hands back one of them, so
    identity and equality agree.
    """

    __slots__ = ("_value",)

    ZERO: "Mod3Int"
    ONE: "Mod3Int"
    TWO: "Mod3Int"

    MODULUS = 3

    @classmethod
    def _create(cls, value: int) -> "Mod3Int":
        self = object.__new__(cls)
        object.__setattr__(self, "_value", value)
        return self

    @classmethod
    def value_of(cls, value: int) -> "Mod3Int":
        """Residue class of any integer; floored modulo keeps negatives in range."""
        if isinstance(value, Mod3Int):
            return value
        if not isinstance(value, numbers.Integral):
            raise TypeError(f"Mod3Int needs an integer, got {type(value).__name__}")
        return _RESIDUES[int(value) % cls.MODULUS]

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> int:
        return self._value

    def _coerce(self, other: Any) -> Any:
        if isinstance(other, (Mod3Int, numbers.Integral)):
            return Mod3Int.value_of(other)
        return NotImplemented

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Mod3Int.value_of(self._value + other._value)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Mod3Int.value_of(self._value - other._value)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Mod3Int.value_of(other._value - self._value)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Mod3Int.value_of(self._value * other._value)

    __rmul__ = __mul__

    def __neg__(self) -> "Mod3Int":
        return Mod3Int.value_of(-self._value)

    def __pos__(self) -> "Mod3Int":
        return self

    def plus(self, other: Any) -> "Mod3Int":
        return self + other

    def minus(self, other: Any) -> "Mod3Int":
        return self - other

    def times(self, other: Any) -> "Mod3Int":
        return self * other

    def unary_minus(self) -> "Mod3Int":
        return -self

    def __eq__(self, other):
        if not isinstance(other, Mod3Int):
            return NotImplemented
        return self is other

    def __hash__(self):
        return hash((Mod3Int.__name__, self._value))

    def __reduce__(self):
        return Mod3Int.value_of, (self._value,)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Mod3Int({self._value})"


Mod3Int.ZERO = Mod3Int._create(0)
Mod3Int.ONE = Mod3Int._create(1)
Mod3Int.TWO = Mod3Int._create(2)
_RESIDUES = (Mod3Int.ZERO, Mod3Int.ONE, Mod3Int.TWO)
