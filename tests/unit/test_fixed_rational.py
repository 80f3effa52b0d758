"""Unit tests for FixedBigRational."""

import math
import pickle
from decimal import Decimal
from fractions import Fraction

import pytest

from bigrat import (
    DivisionByZeroError,
    FixedBigRational,
    FloatingBigRational,
    NoRationalRootError,
    NonFiniteError,
)
from bigrat.core.fixed import over

ZERO = FixedBigRational.ZERO
ONE = FixedBigRational.ONE
TWO = FixedBigRational.TWO
TEN = FixedBigRational.TEN


class TestFixedConstruction:
    """Test construction and canonical form."""

    def test_reduces_to_lowest_terms(self):
        """Pairs are reduced by their gcd."""
        x = FixedBigRational.value_of(6, 8)
        assert (x.numerator, x.denominator) == (3, 4)
        assert repr(x) == "FixedBigRational(3, 4)"

    def test_sign_moves_to_numerator(self):
        """The denominator is always positive."""
        x = FixedBigRational.value_of(3, -6)
        assert (x.numerator, x.denominator) == (-1, 2)
        y = FixedBigRational.value_of(-3, -6)
        assert (y.numerator, y.denominator) == (1, 2)

    def test_constructor_call_is_value_of(self):
        """Calling the class goes through value_of."""
        assert FixedBigRational(2, 4) == over(1, 2)
        assert FixedBigRational() is ZERO
        assert FixedBigRational(7) == over(7, 1)

    def test_constants_are_interned(self):
        """Results equal to a constant are the constant."""
        assert FixedBigRational.value_of(0, 5) is ZERO
        assert FixedBigRational.value_of(3, 3) is ONE
        assert FixedBigRational.value_of(4, 2) is TWO
        assert FixedBigRational.value_of(10) is TEN
        assert ONE - ONE is ZERO

    def test_zero_denominator_raises(self):
        """A zero denominator is an error."""
        with pytest.raises(DivisionByZeroError):
            FixedBigRational.value_of(1, 0)
        # Also catchable as the builtin
        with pytest.raises(ZeroDivisionError):
            over(0, 0)

    def test_from_float_uses_shortest_decimal(self):
        """0.1 reads as 1/10, not its binary expansion."""
        assert FixedBigRational.value_of(0.1) == over(1, 10)
        assert FixedBigRational.value_of(-2.5) == over(-5, 2)
        assert FixedBigRational.value_of(1e20) == FixedBigRational.value_of(10 ** 20)

    def test_non_finite_float_raises(self):
        """NaN and infinities have no fixed value."""
        for x in (float("nan"), float("inf"), float("-inf")):
            with pytest.raises(NonFiniteError):
                FixedBigRational.value_of(x)

    def test_from_single(self):
        """float32 readings use the shortest single decimal."""
        assert FixedBigRational.value_of_single(0.1) == over(1, 10)
        assert FixedBigRational.value_of_single(0.5) == over(1, 2)

    def test_from_text(self):
        """Fraction and decimal text both parse."""
        assert FixedBigRational.value_of("3/4") == over(3, 4)
        assert FixedBigRational.value_of(" -6 / 8 ") == over(-3, 4)
        assert FixedBigRational.value_of("-1.25e1") == over(-25, 2)
        assert FixedBigRational.value_of("0.001") == over(1, 1000)
        assert FixedBigRational.value_of("12") == over(12, 1)

    def test_bad_text_raises_value_error(self):
        """Malformed text is a ValueError."""
        with pytest.raises(ValueError):
            FixedBigRational.value_of("one half")
        with pytest.raises(DivisionByZeroError):
            FixedBigRational.value_of("1/0")
        with pytest.raises(NonFiniteError):
            FixedBigRational.value_of("Infinity")

    def test_from_decimal_and_fraction(self):
        """Decimal and Fraction convert exactly."""
        assert FixedBigRational.value_of(Decimal("0.50")) == over(1, 2)
        assert FixedBigRational.value_of(Decimal("1E+3")) == over(1000, 1)
        assert FixedBigRational.value_of(Fraction(3, 9)) == over(1, 3)

    def test_from_non_integer_pair(self):
        """A non-integer pair divides its parts."""
        assert FixedBigRational.value_of(1.5, 0.5) == over(3, 1)
        assert FixedBigRational.value_of("1/2", 2) == over(1, 4)

    def test_from_other_variant(self):
        """Finite floating values convert; specials do not."""
        assert FixedBigRational.value_of(FloatingBigRational.value_of(1, 3)) == over(1, 3)
        assert FixedBigRational.value_of(FloatingBigRational.ONE) is ONE
        with pytest.raises(NonFiniteError):
            FixedBigRational.value_of(FloatingBigRational.NaN)

    def test_unsupported_type(self):
        """Lists are not numbers."""
        with pytest.raises(TypeError):
            FixedBigRational.value_of([1, 2])

    def test_immutable(self):
        """Fields cannot be reassigned."""
        with pytest.raises(AttributeError):
            ONE._numerator = 5

    def test_pickle_keeps_constants(self):
        """Unpickling returns the shared constants."""
        assert pickle.loads(pickle.dumps(ONE)) is ONE
        assert pickle.loads(pickle.dumps(over(2, 3))) == over(2, 3)


class TestFixedArithmetic:
    """Test arithmetic operators and named operations."""

    def test_basic_operators(self):
        """The four operations and negation."""
        assert over(1, 2) + over(1, 3) == over(5, 6)
        assert over(1, 2) - over(1, 3) == over(1, 6)
        assert over(2, 3) * over(3, 4) == over(1, 2)
        assert over(2, 3) / over(4, 9) == over(3, 2)
        assert -over(2, 3) == over(-2, 3)

    def test_mixed_operands(self):
        """ints, floats, Decimals and text are coerced."""
        assert 1 + over(1, 2) == over(3, 2)
        assert over(1, 2) * 4 is TWO
        assert 1 / over(1, 3) == over(3, 1)
        assert over(1, 2) + 0.25 == over(3, 4)
        assert over(1, 2) + Decimal("0.5") is ONE
        assert over(1, 2) + "1/2" is ONE

    def test_unknown_operand_type(self):
        """Unrelated types raise TypeError."""
        with pytest.raises(TypeError):
            ONE + [1]

    def test_division_by_zero_raises(self):
        """Dividing by zero raises."""
        with pytest.raises(DivisionByZeroError):
            ONE / ZERO
        with pytest.raises(DivisionByZeroError):
            ONE / 0
        with pytest.raises(DivisionByZeroError):
            ZERO.reciprocal()

    def test_reciprocal(self):
        """The reciprocal keeps the sign."""
        assert over(-2, 3).reciprocal() == over(-3, 2)

    def test_pow(self):
        """Negative powers invert first."""
        assert over(2, 3) ** 2 == over(4, 9)
        assert over(2, 3) ** -2 == over(9, 4)
        assert over(2, 3) ** 0 is ONE
        assert over(-1, 2).pow(3) == over(-1, 8)
        with pytest.raises(DivisionByZeroError):
            ZERO ** -1

    def test_abs_and_sign(self):
        """abs and sign."""
        assert abs(over(-3, 4)) == over(3, 4)
        assert over(-3, 4).absolute_value == over(3, 4)
        assert over(-3, 4).sign == -ONE
        assert ZERO.sign is ZERO
        assert over(3, 4).sign is ONE

    def test_rem_and_divmod(self):
        """Exact division leaves no remainder; divmod truncates."""
        assert over(7, 2).rem(3) is ZERO
        assert over(7, 2) % 3 is ZERO
        with pytest.raises(DivisionByZeroError):
            over(7, 2).rem(0)
        q, r = over(7, 1).divide_and_remainder(2)
        assert (q, r) == (over(3, 1), ONE)
        q, r = divmod(over(-7, 1), 2)
        assert (q, r) == (over(-3, 1), -ONE)

    def test_mediant(self):
        """The mediant adds numerators and denominators."""
        assert over(1, 2).mediant(over(2, 3)) == over(3, 5)

    def test_gcd_lcm(self):
        """gcd and lcm extend to rationals."""
        assert over(2, 3).gcd(over(4, 9)) == over(2, 9)
        assert over(1, 2).gcd(over(1, 3)) == over(1, 6)
        assert over(1, 2).lcm(over(1, 3)) is ONE
        assert ZERO.gcd(over(-3, 4)) == over(3, 4)

    def test_inc_dec(self):
        """inc and dec step by one."""
        assert over(1, 2).inc() == over(3, 2)
        assert over(1, 2).dec() == over(-1, 2)

    def test_sqrt(self):
        """Only perfect squares have an exact root."""
        assert over(4, 9).sqrt() == over(2, 3)
        with pytest.raises(NoRationalRootError):
            TWO.sqrt()
        with pytest.raises(NoRationalRootError):
            (-ONE).sqrt()

    def test_sqrt_approximated(self):
        """Falls back to the double root."""
        assert over(9, 16).sqrt_approximated() == over(3, 4)
        assert TWO.sqrt_approximated().to_double() == math.sqrt(2.0)
        with pytest.raises(NoRationalRootError):
            (-TWO).sqrt_approximated()


class TestFixedRounding:
    """Test integer rounding."""

    def test_positive(self):
        """Rounding a positive value."""
        x = over(7, 2)
        assert x.floor() == over(3, 1)
        assert x.ceil() == over(4, 1)
        assert x.truncate() == over(3, 1)
        assert x.round() == over(4, 1)

    def test_negative(self):
        """Rounding a negative value."""
        x = over(-7, 2)
        assert x.floor() == over(-4, 1)
        assert x.ceil() == over(-3, 1)
        assert x.truncate() == over(-3, 1)
        assert x.round() == over(-4, 1)

    def test_round_half_even(self):
        """Ties go to the even integer."""
        assert over(5, 2).round() is TWO
        assert over(1, 2).round() is ZERO
        assert over(3, 2).round() is TWO
        assert over(7, 3).round() is TWO

    def test_fraction(self):
        """The fraction keeps the sign of the value."""
        assert over(-7, 2).fraction() == over(-1, 2)
        assert over(7, 2).truncate_and_fraction() == (over(3, 1), over(1, 2))
        assert TWO.fraction() is ZERO

    def test_builtin_rounding(self):
        """math.floor, ceil, trunc and round."""
        assert math.floor(over(-7, 2)) == -4
        assert math.ceil(over(-7, 2)) == -3
        assert math.trunc(over(-7, 2)) == -3
        assert round(over(5, 2)) == 2
        assert round(over(1234, 1000), 2) == over(123, 100)


class TestFixedComparison:
    """Test ordering and equality."""

    def test_ordering(self):
        """Comparisons with rationals and plain numbers."""
        assert over(1, 3) < over(1, 2)
        assert over(-1, 2) < over(-1, 3)
        assert over(1, 2) <= over(2, 4)
        assert over(1, 2) > 0
        assert over(1, 2).compare_to(over(1, 3)) == 1
        assert over(1, 3).compare_to(over(1, 2)) == -1
        assert over(1, 2).compare_to(0.5) == 0

    def test_sorting(self):
        """sorted() uses the numeric order."""
        values = [over(1, 2), over(-3, 1), ZERO, over(1, 3), TWO]
        assert sorted(values) == [over(-3, 1), ZERO, over(1, 3), over(1, 2), TWO]

    def test_structural_equality(self):
        """== holds only within the variant."""
        assert over(1, 2) == FixedBigRational.value_of(0.5)
        assert over(1, 2) != over(1, 3)
        # Different variants are different values under ==
        assert ONE != FloatingBigRational.ONE
        assert ONE != 1

    def test_hash(self):
        """Equal values hash alike."""
        assert hash(over(1, 2)) == hash(over(2, 4))
        assert len({over(1, 2), over(2, 4), over(1, 3)}) == 2

    def test_bool(self):
        """Only zero is falsy."""
        assert not ZERO
        assert over(1, 2)

    def test_non_finite_floats_take_total_order(self):
        """NaN and infinite floats compare by the total order instead of raising."""
        nan, inf = float("nan"), float("inf")
        assert ONE < nan
        assert not ONE > nan
        assert ONE < inf
        assert ONE > -inf
        assert nan > ONE
        assert ONE.compare_to(nan) == -1
        assert ONE.compare_to(Decimal("-Infinity")) == 1
        assert ONE != nan


class TestFixedConversion:
    """Test conversion to native types."""

    def test_to_double(self):
        """Conversion to double."""
        assert over(1, 2).to_double() == 0.5
        assert over(1, 3).to_double() == 1.0 / 3.0
        assert float(over(-1, 10)) == -0.1

    def test_to_int(self):
        """int() truncates toward zero."""
        assert over(7, 2).to_int() == 3
        assert int(over(-7, 2)) == -3

    def test_to_decimal(self):
        """Conversion to Decimal."""
        assert over(1, 4).to_decimal() == Decimal("0.25")

    def test_predicates(self):
        """Queries on the denominator and constants."""
        assert over(3, 8).is_dyadic()
        assert not over(1, 3).is_dyadic()
        assert over(1, 9).is_p_adic(3)
        assert not over(1, 6).is_p_adic(3)
        assert TWO.is_integer()
        assert not over(1, 2).is_integer()
        assert ZERO.is_zero()
        assert ONE.is_one()
        assert ONE.is_finite()
        assert not ONE.is_nan()
        assert not ONE.is_infinite()

    def test_str(self):
        """n/d, or n for integers."""
        assert str(over(3, 4)) == "3/4"
        assert str(over(-3, 4)) == "-3/4"
        assert str(over(8, 4)) == "2"
