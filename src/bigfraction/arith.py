# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Helpers for arbitrary-precision integer arithmetic.

Python's built-in `int` provides unbounded signed integers, so this module
only adds the few operations the fraction type needs on top of it.
"""

from __future__ import annotations

from numbers import Integral
from operator import index
import re
from typing import Any


__all__ = ['sgn', 'cmp', 'gcd', 'lcm', 'is_int', 'to_int', 'div_trunc',
           'quotient_str']


_INT_PATTERN = re.compile(r'[+-]?[0-9]+')


def sgn(value: int) -> int:
    """Return 1 if `value` is positive, -1 if negative and 0 otherwise."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def cmp(a: int, b: int) -> int:
    """Return the sign of `a - b`."""
    return sgn(a - b)


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of `a` and `b`.

    Euclid's algorithm on the absolute values: the larger value is always
    divided by the smaller one, until the remainder vanishes.
    """
    a, b = abs(a), abs(b)
    if a < b:
        a, b = b, a
    if b == 0:
        return a
    r = a % b
    while r > 0:
        a, b = b, r
        r = a % b
    return b


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of the positive ints `a` and `b`."""
    return a * b // gcd(a, b)


def is_int(value: Any) -> bool:
    """Return True if `value` is an integral number or an integer string."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Integral):
        return True
    return (isinstance(value, str) and
            _INT_PATTERN.fullmatch(value) is not None)


def to_int(value: Any) -> int:
    """Convert `value` (integral number or integer string) to `int`."""
    if isinstance(value, str):
        return int(value)
    return index(value)


def div_trunc(a: int, b: int) -> int:
    """Return the quotient `a / b` truncated towards zero."""
    q = abs(a) // abs(b)
    return -q if sgn(a) * sgn(b) < 0 else q


def quotient_str(dividend: int, divisor: int, scale: int) -> str:
    """Return `dividend / divisor` as decimal string with `scale` digits.

    Excess digits are truncated (rounding towards zero). The sign is only
    emitted for a non-zero result, so `quotient_str(-1, 300, 1)` gives
    '0.0'.

    Args:
        dividend (int): the numerator
        divisor (int): the denominator, must not be 0
        scale (int): number of fractional digits (>= 0)

    Raises:
        ZeroDivisionError: `divisor` is 0
    """
    q = div_trunc(dividend * 10 ** scale, divisor)
    sign = '-' if q < 0 else ''
    digits = str(abs(q)).rjust(scale + 1, '0')
    if scale == 0:
        return sign + digits
    return f"{sign}{digits[:-scale]}.{digits[-scale:]}"
