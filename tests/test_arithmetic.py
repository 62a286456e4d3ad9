# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Test driver for package 'bigfraction' (arithmetic)."""

import fractions
import operator

import pytest
from hypothesis import assume, given, strategies

from bigfraction import Fraction, InvalidDenominator


ARITH_OPS = (operator.add, operator.sub, operator.mul, operator.truediv)

fracs = strategies.tuples(
    strategies.integers(),
    strategies.integers(min_value=1)).map(lambda t: Fraction(*t))


@pytest.mark.parametrize(("x", "y", "meth", "result"),
                         (("3/4", "1/4", Fraction.add, "1"),
                          ("1/2", "1/3", Fraction.add, "5/6"),
                          ("-1/2", "1/3", Fraction.add, "-1/6"),
                          ("1/2", "1/3", Fraction.subtract, "1/6"),
                          ("1/3", "1/2", Fraction.subtract, "-1/6"),
                          ("2/3", "3/4", Fraction.multiply, "1/2"),
                          ("-2/3", "3/4", Fraction.multiply, "-1/2"),
                          ("2/3", "3/4", Fraction.divide, "8/9"),
                          ("2/3", "-3/4", Fraction.divide, "-8/9"),
                          ("0", "3/4", Fraction.divide, "0")),
                         ids=("add-to-one", "add", "add-neg", "sub",
                              "sub-neg", "mul", "mul-neg", "div",
                              "div-by-neg", "div-zero"))
def test_arith_methods(x, y, meth, result):
    res = meth(Fraction.from_string(x), Fraction.from_string(y))
    assert isinstance(res, Fraction)
    assert res.is_same_value_as(Fraction.from_string(result))
    assert str(res) == result


def test_add_to_one():
    res = Fraction(3, 4).add(Fraction(1, 4))
    assert res.is_same_value_as(Fraction(1, 1))
    assert res.to_string() == "1"


@pytest.mark.parametrize("x", ("0", "-0/7", "0 0/3"))
def test_divide_by_zero(x):
    with pytest.raises(InvalidDenominator):
        Fraction(1, 2).divide(Fraction.from_string(x))
    with pytest.raises(InvalidDenominator):
        Fraction(1, 2) / Fraction.from_string(x)


def test_operands_unchanged():
    x = Fraction(1, 2)
    y = Fraction(1, 3)
    x.add(y)
    x.multiply(y)
    assert x.as_integer_ratio() == (1, 2)
    assert y.as_integer_ratio() == (1, 3)


@pytest.mark.parametrize("op", ARITH_OPS, ids=lambda op: op.__name__)
@pytest.mark.parametrize("y", (7, -3, fractions.Fraction(-5, 6), True),
                         ids=("7", "-3", "Fraction(-5, 6)", "True"))
def test_mixed_operands(op, y):
    x = Fraction(17, 4)
    res = op(x, y)
    assert isinstance(res, Fraction)
    assert res.as_fraction() == op(fractions.Fraction(17, 4), y)
    res = op(y, x)
    assert isinstance(res, Fraction)
    assert res.as_fraction() == op(y, fractions.Fraction(17, 4))


@pytest.mark.parametrize("op", ARITH_OPS, ids=lambda op: op.__name__)
@pytest.mark.parametrize("y", (1.5, "1/2", None, 2j),
                         ids=("1.5", "'1/2'", "None", "2j"))
def test_unsupported_operands(op, y):
    x = Fraction(1, 2)
    with pytest.raises(TypeError):
        op(x, y)
    with pytest.raises(TypeError):
        op(y, x)


@pytest.mark.parametrize("value", ("17/8", "-1 1/3", "0"))
def test_unary(value):
    f = Fraction.from_string(value)
    assert +f is f
    assert -(-f) == f
    assert (-f).as_fraction() == -f.as_fraction()
    assert abs(f) >= 0
    assert abs(f).as_fraction() == abs(f.as_fraction())


@given(x=fracs, y=fracs)
def test_arith_hypo(x, y):
    fx, fy = x.as_fraction(), y.as_fraction()
    assert x.add(y).as_fraction() == fx + fy
    assert x.subtract(y).as_fraction() == fx - fy
    assert x.multiply(y).as_fraction() == fx * fy
    if y:
        assert x.divide(y).as_fraction() == fx / fy


@given(x=fracs, y=fracs)
def test_commutativity_hypo(x, y):
    assert x.add(y).is_same_value_as(y.add(x))
    assert x.multiply(y).is_same_value_as(y.multiply(x))
    # subtraction commutes up to sign
    assert x.subtract(y).is_same_value_as(-y.subtract(x))


@given(x=fracs, y=fracs, z=fracs)
def test_associativity_hypo(x, y, z):
    assert x.add(y).add(z).is_same_value_as(x.add(y.add(z)))
    assert x.multiply(y).multiply(z).is_same_value_as(
        x.multiply(y.multiply(z)))


@given(x=fracs, y=fracs)
def test_divide_multiply_hypo(x, y):
    assume(y)
    assert x.divide(y).multiply(y).is_eq(x)


@pytest.mark.parametrize("other", ["1/2", 0.5, None],
                         ids=("'1/2'", "0.5", "None"))
@pytest.mark.parametrize("meth",
                         (Fraction.add, Fraction.subtract, Fraction.multiply,
                          Fraction.divide),
                         ids=lambda m: m.__name__)
def test_arith_methods_non_rational(meth, other):
    with pytest.raises(TypeError):
        meth(Fraction(1, 2), other)


def test_arith_methods_int_operand():
    assert Fraction(1, 2).add(1).is_same_value_as(Fraction(3, 2))
    assert Fraction(1, 2).divide(-2).is_same_value_as(Fraction(-1, 4))
