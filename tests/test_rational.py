import pytest

from share_recovery.rational import (
    ONE,
    ZERO,
    Rational,
    add,
    multiply,
    negate,
    normalize_sign,
    reduce,
    to_exact_integer,
)


def test_reduce_normalizes_sign_and_terms():
    value = reduce(2, -4)
    assert (value.numerator, value.denominator) == (-1, 2)
    assert reduce(-6, -9) == Rational(2, 3)


def test_zero_is_canonical():
    zero = reduce(0, -17)
    assert (zero.numerator, zero.denominator) == (0, 1)
    assert zero == ZERO


def test_zero_denominator_rejected():
    with pytest.raises(ZeroDivisionError):
        Rational(1, 0)


def test_normalize_sign():
    assert normalize_sign(3, -5) == (-3, 5)
    assert normalize_sign(-3, 5) == (-3, 5)


def test_add_and_multiply():
    assert add(Rational(1, 2), Rational(1, 3)) == Rational(5, 6)
    assert add(Rational(1, 2), Rational(-1, 2)) == ZERO
    assert multiply(Rational(2, 3), Rational(3, 4)) == Rational(1, 2)
    assert Rational(1, 4) + Rational(3, 4) == ONE
    assert Rational(-2, 5) * Rational(5, -2) == ONE


def test_negate():
    assert negate(Rational(3, 7)) == Rational(-3, 7)
    assert -ZERO == ZERO


def test_to_exact_integer():
    assert to_exact_integer(Rational(6, 3)) == 2
    assert to_exact_integer(Rational(-10, 5)) == -2
    assert to_exact_integer(Rational(1, 2)) is None


def test_large_values_keep_precision():
    big = 2**521 - 1
    value = add(Rational(big, 3), Rational(-big, 3))
    assert value == ZERO
    assert to_exact_integer(multiply(Rational(big, 7), Rational(7, 1))) == big


def test_str():
    assert str(Rational(4, 2)) == "2"
    assert str(Rational(-1, 3)) == "-1/3"
