"""Exceptions raised by the rational number tower.

The floating variant never raises for zero denominators; it produces one of
its special values instead. Everything here is a deterministic, data-dependent
fault and is surfaced to the immediate caller.
"""


class BigRationalError(ArithmeticError):
    """Base class for all bigrat arithmetic faults."""


class DivisionByZeroError(BigRationalError, ZeroDivisionError):
    """A fixed rational was asked to hold a zero denominator."""


class NonFiniteError(DivisionByZeroError):
    """NaN or an infinity reached a place that only accepts finite values."""


class InvalidStepError(BigRationalError, ValueError):
    """A progression step is zero or points away from the last element."""


class IllegalProgressionStateError(BigRationalError, RuntimeError):
    """A progression cannot decide whether its bound has been reached."""


class NoRationalRootError(BigRationalError, ValueError):
    """An exact square root was requested for a value without one."""
