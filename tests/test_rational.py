"""Tests for numutil.rational."""

import pytest

from numutil.errors import UndefinedResultError
from numutil.rational import Rational


def test_str_whole_number() -> None:
    assert str(Rational(7, 1)) == "7"


def test_str_zero_numerator() -> None:
    assert str(Rational(0, 5)) == "0"


def test_str_fraction() -> None:
    assert str(Rational(-3, 4)) == "-3/4"


def test_str_not_normalized() -> None:
    assert str(Rational(4, 8)) == "4/8"


def test_default_denominator_is_one() -> None:
    assert Rational(3) == Rational(3, 1)


def test_is_undefined() -> None:
    assert Rational(1, 0).is_undefined
    assert not Rational(0, 1).is_undefined


def test_decimal_value() -> None:
    assert Rational(3, 4).decimal_value() == pytest.approx(0.75)


def test_decimal_value_of_undefined_raises() -> None:
    with pytest.raises(UndefinedResultError):
        Rational(3, 0).decimal_value()


def test_fields_are_mutable() -> None:
    f = Rational(1, 2)
    f.numerator = 5
    assert f == Rational(5, 2)
