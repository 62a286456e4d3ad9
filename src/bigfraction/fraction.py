# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Exact fractions based on arbitrary-precision integers."""

from __future__ import annotations

import fractions
import math
from numbers import Integral, Rational
import re
from typing import Any, Optional, Tuple, Union

from . import arith
from .exceptions import (
    InvalidArgument, InvalidDenominator, InvalidNumerator)
from .rounding import Rounding, round_up, rounding_mode


__all__ = ['Fraction']


# W, N/D or W N/D
_FROM_STR_PATTERN = re.compile(r'(-?[0-9]+)(?:(?: ([0-9]+))?/([0-9]+))?')
_NUMERIC_STR_PATTERN = re.compile(r'-?[0-9]+(\.[0-9]+)?')

# max number of fractional digits taken from a float
_FLOAT_DIGITS = 8

IntOrStr = Union[int, str]


class Fraction:

    """Immutable exact fraction.

    Args:
        numerator (Union[int, str]): integer or integer string
        denominator (Union[int, str]): integer or integer string >= 1

    Returns:
        :class:`Fraction` instance in canonical form, i. e. numerator and
        denominator are coprime, the denominator is positive and zero is
        represented as 0/1.

    Raises:
        InvalidNumerator: `numerator` is not an integer or integer string
        InvalidDenominator: `denominator` is not an integer or integer
            string or is less than 1

    Examples:
        >>> Fraction(-2, 4)
        Fraction(-1, 2)
        >>> Fraction("12", "18")
        Fraction(2, 3)
        >>> Fraction(0, 7)
        Fraction(0)
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator: IntOrStr,
                 denominator: IntOrStr = 1) -> None:
        if not arith.is_int(numerator):
            raise InvalidNumerator(
                f"Numerator must be an integer: {numerator!r}")
        if not arith.is_int(denominator):
            raise InvalidDenominator(
                f"Denominator must be an integer: {denominator!r}")
        num = arith.to_int(numerator)
        den = arith.to_int(denominator)
        if arith.cmp(den, 1) == -1:
            raise InvalidDenominator(
                f"Denominator must be an integer greater than zero: "
                f"{denominator!r}")
        if arith.sgn(num) == 0:
            num, den = 0, 1
        else:
            divisor = arith.gcd(num, den)
            num, den = num // divisor, den // divisor
        object.__setattr__(self, '_numerator', num)
        object.__setattr__(self, '_denominator', den)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __copy__(self) -> Fraction:
        return self

    def __deepcopy__(self, memo: Any) -> Fraction:
        return self

    def __reduce__(self) -> Tuple[type, Tuple[int, int]]:
        return Fraction, (self._numerator, self._denominator)

    # factories

    @staticmethod
    def from_float(value: Union[float, int, str]) -> Fraction:
        """Return fraction approximating `value`.

        Args:
            value (Union[float, int, str]): float, integer or numeric string
                (like '-12.375')

        Floats are limited to 8 fractional digits in order to suppress
        binary representation noise, so `Fraction.from_float(0.1)` equals
        `Fraction(1, 10)`.

        Raises:
            InvalidArgument: `value` is not numeric
        """
        if isinstance(value, bool):
            raise InvalidArgument(
                f"Argument passed is not a numeric value: {value!r}")
        if isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidArgument(
                    f"Argument passed is not a finite value: {value!r}")
            if value.is_integer():
                return Fraction(int(value))
            text = f"{value:.{_FLOAT_DIGITS}f}".rstrip('0')
        elif isinstance(value, Integral):
            return Fraction(value)
        elif isinstance(value, str):
            if _NUMERIC_STR_PATTERN.fullmatch(value) is None:
                raise InvalidArgument(
                    f"Argument passed is not a numeric value: {value!r}")
            text = value
        else:
            raise InvalidArgument(
                f"Argument passed is not a numeric value: {value!r}")
        int_part, _, frac_part = text.partition('.')
        # shift the decimal point instead of multiplying
        return Fraction(int(int_part + frac_part), 10 ** len(frac_part))

    @staticmethod
    def from_string(text: str) -> Fraction:
        """Return fraction parsed from `text`.

        Args:
            text (str): whole number ('40'), simple fraction ('1/3') or mixed
                number ('3 4/5', '-20 34/67')

        The sign of a mixed number applies to the whole value, so '-3 4/5'
        gives -19/5.

        Raises:
            InvalidArgument: `text` can not be parsed
            InvalidDenominator: given denominator is 0
        """
        if not isinstance(text, str):
            raise InvalidArgument(f"Cannot parse {text!r}")
        match = _FROM_STR_PATTERN.fullmatch(text.strip())
        if match is None:
            raise InvalidArgument(f"Cannot parse {text!r}")
        whole, num, den = match.groups()
        if den is None:
            return Fraction(whole)
        if num is None:
            return Fraction(whole, den)
        value = Fraction(whole.lstrip('-')).add(Fraction(num, den))
        return -value if whole.startswith('-') else value

    # properties

    @property
    def numerator(self) -> int:
        """Numerator of `self` (carrying its sign)."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Denominator of `self` (always > 0)."""
        return self._denominator

    def as_integer_ratio(self) -> Tuple[int, int]:
        """Return the pair of numerator and denominator of `self`."""
        return self._numerator, self._denominator

    def as_fraction(self) -> fractions.Fraction:
        """Return an instance of `fractions.Fraction` equal to `self`."""
        return fractions.Fraction(self._numerator, self._denominator)

    def is_integer(self) -> bool:
        """Return True if `self` is an integral number."""
        return arith.cmp(1, self._denominator) == 0

    # arithmetic

    def multiply(self, other: Fraction) -> Fraction:
        """Return `self` * `other`."""
        other = _operand(other)
        return Fraction(self._numerator * other._numerator,
                        self._denominator * other._denominator)

    def divide(self, other: Fraction) -> Fraction:
        """Return `self` / `other`.

        Raises:
            InvalidDenominator: `other` is zero
        """
        other = _operand(other)
        num = self._numerator * other._denominator
        den = self._denominator * other._numerator
        if den < 0:
            num, den = -num, -den
        return Fraction(num, den)

    def add(self, other: Fraction) -> Fraction:
        """Return `self` + `other`."""
        other = _operand(other)
        return Fraction(self._numerator * other._denominator +
                        other._numerator * self._denominator,
                        self._denominator * other._denominator)

    def subtract(self, other: Fraction) -> Fraction:
        """Return `self` - `other`."""
        other = _operand(other)
        return Fraction(self._numerator * other._denominator -
                        other._numerator * self._denominator,
                        self._denominator * other._denominator)

    def __add__(self, other: Any) -> Fraction:
        """self + other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> Fraction:
        """other + self"""
        return self.__add__(other)

    def __sub__(self, other: Any) -> Fraction:
        """self - other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> Fraction:
        """other - self"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other: Any) -> Fraction:
        """self * other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Fraction:
        """other * self"""
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Fraction:
        """self / other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> Fraction:
        """other / self"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.divide(self)

    def __neg__(self) -> Fraction:
        """-self"""
        return Fraction(-self._numerator, self._denominator)

    def __pos__(self) -> Fraction:
        """+self"""
        return self

    def __abs__(self) -> Fraction:
        """abs(self)"""
        if self._numerator < 0:
            return -self
        return self

    # comparison

    def compare(self, other: Fraction) -> int:
        """Return 1 if `self` > `other`, -1 if `self` < `other`, else 0."""
        other = _operand(other)
        a = self._denominator
        b = other._denominator
        lcm = arith.lcm(a, b)
        return arith.cmp(self._numerator * (lcm // a),
                         other._numerator * (lcm // b))

    def is_gt(self, other: Fraction) -> bool:
        """Return True if `self` > `other`."""
        return self.compare(other) == 1

    def is_gte(self, other: Fraction) -> bool:
        """Return True if `self` >= `other`."""
        return self.compare(other) >= 0

    def is_lt(self, other: Fraction) -> bool:
        """Return True if `self` < `other`."""
        return self.compare(other) == -1

    def is_lte(self, other: Fraction) -> bool:
        """Return True if `self` <= `other`."""
        return self.compare(other) <= 0

    def is_eq(self, other: Fraction) -> bool:
        """Return True if `self` == `other`."""
        return self.compare(other) == 0

    def is_same_value_as(self, other: Fraction) -> bool:
        """Return True if numerators and denominators are equal.

        For canonical operands this is the same as :meth:`is_eq`, but
        cheaper.
        """
        other = _operand(other)
        return (arith.cmp(self._numerator, other._numerator) == 0 and
                arith.cmp(self._denominator, other._denominator) == 0)

    def __eq__(self, other: Any) -> bool:
        """self == other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.is_same_value_as(other)

    def __lt__(self, other: Any) -> bool:
        """self < other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.is_lt(other)

    def __le__(self, other: Any) -> bool:
        """self <= other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.is_lte(other)

    def __gt__(self, other: Any) -> bool:
        """self > other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.is_gt(other)

    def __ge__(self, other: Any) -> bool:
        """self >= other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.is_gte(other)

    def __hash__(self) -> int:
        """hash(self)"""
        return hash(self.as_fraction())

    # conversion

    def __bool__(self) -> bool:
        """bool(self)"""
        return self._numerator != 0

    def to_float(self) -> float:
        """Return nearest float to `self`."""
        return self._numerator / self._denominator

    __float__ = to_float

    def __int__(self) -> int:
        """math.trunc(self)"""
        return arith.div_trunc(self._numerator, self._denominator)

    __trunc__ = __int__

    def __floor__(self) -> int:
        """math.floor(self)"""
        return self._numerator // self._denominator

    def __ceil__(self) -> int:
        """math.ceil(self)"""
        return -(-self._numerator // self._denominator)

    def to_string(self) -> str:
        """Return shortest string representation of `self`.

        Examples:
            >>> Fraction(19, 5).to_string()
            '3 4/5'
            >>> Fraction(-3, 5).to_string()
            '-3/5'
        """
        num = self._numerator
        den = self._denominator
        if arith.cmp(num, den) == 0:
            return '1'
        if arith.cmp(-num, den) == 0:
            return '-1'
        if arith.cmp(1, den) == 0:
            return str(num)
        if arith.cmp(abs(num), den) == 1:
            whole = arith.div_trunc(num, den)
            return f"{whole} {abs(num) % den}/{den}"
        return f"{num}/{den}"

    __str__ = to_string

    def __repr__(self) -> str:
        """repr(self)"""
        if self.is_integer():
            return f"{type(self).__name__}({self._numerator})"
        return (f"{type(self).__name__}({self._numerator}, "
                f"{self._denominator})")

    def to_fixed(self, decimals: int,
                 rounding: Optional[Union[Rounding, int, str]] = None) -> str:
        """Return `self` as fixed-point decimal string.

        Args:
            decimals (int): number of fractional digits (>= 0)
            rounding (Rounding): rounding mode to apply (also accepted: the
                integer value or the name of a rounding mode); if not given,
                the current default rounding mode is used (see
                :func:`get_dflt_rounding_mode`)

        Only the first digit beyond `decimals` (the guard digit) decides
        about rounding.

        Raises:
            InvalidArgument: `decimals` is not an int or is negative
            InvalidRoundingMode: `rounding` is not a valid rounding mode

        Examples:
            >>> Fraction(1, 8).to_fixed(2)
            '0.13'
            >>> Fraction(1, 8).to_fixed(2, Rounding.ROUND_HALF_EVEN)
            '0.12'
        """
        if isinstance(decimals, bool) or not isinstance(decimals, int):
            raise InvalidArgument(
                f"Number of decimals must be an int: {decimals!r}")
        if decimals < 0:
            raise InvalidArgument(
                f"Number of decimals must be >= 0: {decimals!r}")
        rounding = rounding_mode(rounding)
        negative = self._numerator < 0
        # one more digit than requested
        value = arith.quotient_str(abs(self._numerator), self._denominator,
                                   decimals + 1)
        int_part, frac_part = value.split('.')
        point = len(int_part)
        # digit buffer, least significant digit first
        digits = [int(c) for c in reversed(int_part + frac_part)]
        guard = digits.pop(0)
        if guard != 0 and round_up(rounding, guard, digits[0], negative):
            carry = 1
            for idx in range(len(digits)):
                digits[idx] += carry
                if digits[idx] > 9:
                    digits[idx] = 0
                    carry = 1
                else:
                    carry = 0
                    break
            if carry:
                digits.append(1)
                point += 1
        text = ''.join(str(d) for d in reversed(digits))
        if decimals > 0:
            text = f"{text[:point]}.{text[point:]}"
        if negative and text != '0':
            return '-' + text
        return text


def _coerce(value: Any) -> Union[Fraction, Any]:
    if isinstance(value, Fraction):
        return value
    if isinstance(value, Rational):
        return Fraction(int(value.numerator), int(value.denominator))
    return NotImplemented


def _operand(value: Any) -> Fraction:
    other = _coerce(value)
    if other is NotImplemented:
        raise TypeError(f"Illegal operand: {value!r}")
    return other
