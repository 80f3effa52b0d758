"""
Enumerations of the rationals by walking the integer lattice.

Both walks are expressed as pure step functions on lattice coordinates;
the generators around them hold all traversal state locally, so every call
starts a fresh, independent walk from the origin.
"""

from enum import Enum
from itertools import islice
from math import gcd
from typing import Iterator, Tuple, Type, TypeVar

from ..core.base import BigRationalBase
from ..utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class Direction(Enum):
    """Heading of the square spiral."""
    N = "N"
    E = "E"
    S = "S"
    W = "W"


def zigzag_step(p: int, q: int) -> Tuple[int, int]:
    """
    Next pair on Cantor's boustrophedon walk over ``p, q >= 1``.

    Odd diagonals (``p + q`` odd) run towards larger ``p``, even ones
    towards larger ``q``; at an edge the walk moves to the next diagonal.
    """
    if (p + q) & 1:
        return (p + 1, q) if 1 == q else (p + 1, q - 1)
    return (p, q + 1) if 1 == p else (p - 1, q + 1)


def spiral_step(p: int, q: int, heading: Direction) -> Tuple[int, int, Direction]:
    """Next lattice point of the square spiral around the origin."""
    if heading is Direction.N:
        q += 1
        if q == abs(p) + 1:
            heading = Direction.E
    elif heading is Direction.E:
        p += 1
        if p == q:
            heading = Direction.S
    elif heading is Direction.S:
        q -= 1
        if abs(q) == p:
            heading = Direction.W
    else:
        p -= 1
        if p == q:
            heading = Direction.N
    return p, q, heading


def cantor_positive(variant: Type[BigRationalBase]) -> Iterator[BigRationalBase]:
    """
    Every positive rational exactly once, diagonal by diagonal.

    Pairs sharing a factor are skipped since a smaller pair already
    produced the same ratio. The first terms are 1, 1/2, 2, 3, 1/3, 1/4.
    """
    logger.debug("cantor.start", walk="positive", variant=variant.__name__)
    p, q = 1, 1
    while True:
        if 1 == gcd(p, q):
            yield variant.value_of(p, q)
        p, q = zigzag_step(p, q)


def cantor_spiral(variant: Type[BigRationalBase]) -> Iterator[BigRationalBase]:
    """
    Every rational (zero and negatives included) exactly once.

    Walks a square spiral over the integer lattice, reading each point
    ``(p, q)`` as ``p/q``. Points on the ``q == 0`` axis are skipped so the
    fixed variant can use the walk, as are ratios already produced.
    """
    logger.debug("cantor.start", walk="spiral", variant=variant.__name__)
    seen = set()
    p, q, heading = 0, 0, Direction.N
    while True:
        p, q, heading = spiral_step(p, q, heading)
        if 0 == q:
            continue
        value = variant.value_of(p, q)
        if value not in seen:
            seen.add(value)
            yield value


def nth(sequence: Iterator[T], index: int) -> T:
    """
    Element of ``sequence`` at ``index``.

    Raises:
        IndexError: Negative index, or a finite sequence that is too short
    """
    if index < 0:
        raise IndexError(f"Index must be non-negative: {index}")
    for value in islice(sequence, index, None):
        return value
    raise IndexError(f"Sequence has no element at index {index}")
