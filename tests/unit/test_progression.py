"""Unit tests for rational progressions."""

import logging

import pytest

from bigrat import (
    BigRationalProgression,
    FixedBigRational,
    FloatingBigRational,
    IllegalProgressionStateError,
    InvalidStepError,
    down_to,
    range_to,
    step,
)
from bigrat.core.fixed import over

ZERO = FixedBigRational.ZERO
ONE = FixedBigRational.ONE
TWO = FixedBigRational.TWO


class TestProgressionIteration:
    """Test the values a progression yields."""

    def test_default_ascending(self):
        """range_to steps by one."""
        assert list(range_to(ZERO, over(3, 1))) == [ZERO, ONE, TWO, over(3, 1)]

    def test_default_descending(self):
        """down_to steps by minus one."""
        assert list(down_to(TWO, ZERO)) == [TWO, ONE, ZERO]

    def test_stops_before_crossing_last(self):
        """The last element may fall short of the bound."""
        progression = step(range_to(ZERO, over(7, 3)), over(1, 2))
        assert list(progression) == [
            ZERO, over(1, 2), ONE, over(3, 2), TWO, over(5, 2),
        ]

    def test_includes_last_when_reached(self):
        """The bound is included when hit exactly."""
        progression = range_to(ZERO, ONE).step(over(1, 4))
        assert list(progression)[-1] is ONE
        assert len(list(progression)) == 5

    def test_descending_with_step(self):
        """Descending progressions take negative steps."""
        progression = down_to(ONE, over(-1, 2)).step(over(-1, 2))
        assert list(progression) == [ONE, over(1, 2), ZERO, over(-1, 2)]

    def test_single_element(self):
        """Equal bounds give one element."""
        assert list(range_to(ONE, ONE)) == [ONE]

    def test_empty_when_first_past_last(self):
        """A first element past the bound gives nothing."""
        assert list(range_to(TWO, ONE)) == []
        assert range_to(TWO, ONE).is_empty()
        assert list(down_to(ONE, TWO)) == []
        assert not range_to(ONE, TWO).is_empty()

    def test_restartable(self):
        """Iterating twice gives the same values."""
        progression = range_to(ZERO, TWO)
        assert list(progression) == list(progression)

    def test_independent_cursors(self):
        """Two iterators do not share state."""
        progression = range_to(ZERO, TWO)
        first, second = iter(progression), iter(progression)
        assert next(first) is ZERO
        assert next(first) is ONE
        assert next(second) is ZERO
        assert next(first) is TWO
        assert next(second) is ONE

    def test_mixed_bound_types(self):
        """Plain numbers are coerced into the variant."""
        progression = range_to(0, over(3, 2))
        assert progression.variant is FixedBigRational
        assert list(progression) == [ZERO, ONE]
        assert list(range_to(0.5, 2, variant=FloatingBigRational)) == [
            FloatingBigRational.value_of(1, 2),
            FloatingBigRational.value_of(3, 2),
        ]

    def test_needs_a_rational_or_variant(self):
        """Without a rational there is no variant to pick."""
        with pytest.raises(TypeError):
            range_to(0, 1)

    def test_rational_methods(self):
        """Rationals build progressions themselves."""
        assert ZERO.range_to(TWO) == range_to(ZERO, TWO)
        assert TWO.down_to(ZERO) == down_to(TWO, ZERO)


class TestProgressionValidation:
    """Test step validation and non-finite bounds."""

    def test_zero_step_rejected(self):
        """A zero step never advances."""
        with pytest.raises(InvalidStepError):
            step(range_to(ZERO, ONE), ZERO)

    def test_wrong_sign_rejected(self):
        """A step pointing away from the bound is rejected."""
        with pytest.raises(InvalidStepError):
            range_to(ZERO, ONE).step(-ONE)
        with pytest.raises(InvalidStepError):
            down_to(ONE, ZERO).step(ONE)
        # Also catchable as ValueError
        with pytest.raises(ValueError):
            down_to(ONE, ZERO).step(over(1, 2))

    def test_nan_bound_fails_on_first_advance(self):
        """NaN bounds fail when iteration starts."""
        progression = range_to(
            FloatingBigRational.POSITIVE_INFINITY, FloatingBigRational.NaN,
        )
        iterator = iter(progression)
        with pytest.raises(IllegalProgressionStateError):
            next(iterator)

    def test_nan_step_deferred_to_iteration(self):
        """A NaN step passes step() and fails on iteration."""
        progression = range_to(FloatingBigRational.ZERO, FloatingBigRational.ONE)
        stepped = progression.step(FloatingBigRational.NaN)
        with pytest.raises(IllegalProgressionStateError):
            list(stepped)

    def test_infinite_bound_rejected(self):
        """An infinite bound would never terminate."""
        progression = range_to(FloatingBigRational.ZERO, FloatingBigRational.POSITIVE_INFINITY)
        with pytest.raises(IllegalProgressionStateError):
            next(iter(progression))

    def test_rejection_is_logged(self, debug_logs):
        """Rejections are logged at debug."""
        progression = range_to(FloatingBigRational.NaN, FloatingBigRational.ONE)
        with pytest.raises(IllegalProgressionStateError):
            list(progression)
        messages = [r.getMessage() for r in debug_logs.records if r.levelno == logging.DEBUG]
        assert any(m.startswith("progression.rejected") for m in messages)


class TestProgressionValue:
    """Progressions are comparable, hashable value objects."""

    def test_str(self):
        """Rendering names the direction and step."""
        assert str(range_to(ZERO, ONE)) == "0..1 step 1"
        assert str(down_to(ONE, ZERO)) == "1 downTo 0 step -1"
        assert str(range_to(ZERO, ONE).step(over(1, 2))) == "0..1 step 1/2"

    def test_fields(self):
        """Fields are exposed as given."""
        progression = down_to(ONE, ZERO)
        assert progression.first is ONE
        assert progression.last is ZERO
        assert progression.increment == -ONE
        assert not progression.ascending

    def test_equality_and_hash(self):
        """Equal fields give equal, equally hashed progressions."""
        assert range_to(ZERO, ONE) == range_to(ZERO, ONE)
        assert range_to(ZERO, ONE) != range_to(ZERO, TWO)
        assert range_to(ZERO, ONE) != range_to(ZERO, ONE).step(over(1, 2))
        assert len({range_to(ZERO, ONE), range_to(0, 1, variant=FixedBigRational)}) == 1

    def test_immutable(self):
        """Fields cannot be reassigned."""
        progression = range_to(ZERO, ONE)
        with pytest.raises(AttributeError):
            progression.first = ONE

    def test_contains(self):
        """Membership is closed-range and ignores the step."""
        progression = range_to(ZERO, TWO).step(ONE)
        assert over(1, 2) in progression
        assert TWO in progression
        assert 3 not in progression
        assert progression.contains(ZERO)
        assert over(1, 2) in down_to(ONE, ZERO)
        assert "1" not in progression

    def test_is_a_progression(self):
        """Builders return BigRationalProgression."""
        assert isinstance(range_to(ZERO, ONE), BigRationalProgression)
