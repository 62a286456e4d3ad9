# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2018 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rounding modes for fixed-point rendering of fractions."""

from __future__ import annotations

from contextvars import ContextVar, Token
from enum import Enum, unique
from typing import Any

from .exceptions import InvalidRoundingMode


__all__ = ['Rounding', 'get_dflt_rounding_mode', 'set_dflt_rounding_mode',
           'rounding_mode', 'round_up']


@unique
class Rounding(Enum):
    """Enumeration of rounding modes."""

    def __new__(cls, value: int, doc: str) -> Rounding:
        """Return new member of the Enum."""
        member = object.__new__(cls)
        member._value_ = value
        member.__doc__ = doc
        return member

    ROUND_UP = (0, 'Round away from zero.')
    ROUND_DOWN = (1, 'Round towards zero.')
    ROUND_CEIL = (2, 'Round towards Infinity.')
    ROUND_FLOOR = (3, 'Round towards -Infinity.')
    ROUND_HALF_UP = (4, 'Round to nearest with ties going away from zero.')
    ROUND_HALF_DOWN = (5, 'Round to nearest with ties going towards zero.')
    ROUND_HALF_EVEN = (6, 'Round to nearest with ties going to nearest even '
                          'digit.')
    ROUND_HALF_ODD = (7, 'Round to nearest with ties going to nearest odd '
                         'digit.')
    ROUND_HALF_CEIL = (8, 'Round to nearest with ties always incrementing '
                          'the magnitude.')
    ROUND_HALF_FLOOR = (9, 'Round to nearest with ties going towards '
                           '-Infinity.')


_dflt_rounding: ContextVar[Rounding] = \
    ContextVar("dflt_rounding", default=Rounding.ROUND_HALF_UP)


def get_dflt_rounding_mode() -> Rounding:
    """Return default rounding mode."""
    return _dflt_rounding.get()


def set_dflt_rounding_mode(rounding: Rounding) -> Token:
    """Set default rounding mode.

    Args:
        rounding (Rounding): rounding mode to be set as default

    Returns:
        Token: can be used to restore the previous default

    Raises:
        InvalidRoundingMode: given 'rounding' is not a valid rounding mode
    """
    if not isinstance(rounding, Rounding):
        raise InvalidRoundingMode(f"Illegal rounding mode: {rounding!r}")
    return _dflt_rounding.set(rounding)


def rounding_mode(rounding: Any = None) -> Rounding:
    """Return the rounding mode denoted by `rounding`.

    `rounding` can be a member of `Rounding`, its integer value, its name or
    None (meaning the current default rounding mode).

    Raises:
        InvalidRoundingMode: `rounding` does not denote a rounding mode
    """
    if rounding is None:
        return get_dflt_rounding_mode()
    if isinstance(rounding, Rounding):
        return rounding
    if isinstance(rounding, str):
        try:
            return Rounding[rounding]
        except KeyError:
            pass
    elif isinstance(rounding, int) and not isinstance(rounding, bool):
        try:
            return Rounding(rounding)
        except ValueError:
            pass
    raise InvalidRoundingMode(f"Illegal rounding mode: {rounding!r}")


def _nearest(guard: int) -> bool:
    return guard > 5


def round_up(rounding: Rounding, guard: int, last: int,
             negative: bool) -> bool:
    """Return True if the magnitude of a truncated value has to be
    incremented.

    Args:
        rounding (Rounding): rounding mode to apply
        guard (int): first truncated digit (1 .. 9)
        last (int): last retained digit (0 .. 9)
        negative (bool): sign of the value

    Only the guard digit is taken into account, any digits beyond it are
    ignored.
    """
    if rounding is Rounding.ROUND_UP:
        return True
    if rounding is Rounding.ROUND_DOWN:
        return False
    if rounding is Rounding.ROUND_CEIL:
        return not negative
    if rounding is Rounding.ROUND_FLOOR:
        return negative
    if guard != 5:
        return _nearest(guard)
    # tie
    if rounding in (Rounding.ROUND_HALF_UP, Rounding.ROUND_HALF_CEIL):
        return True
    if rounding is Rounding.ROUND_HALF_DOWN:
        return False
    if rounding is Rounding.ROUND_HALF_EVEN:
        return last % 2 == 1
    if rounding is Rounding.ROUND_HALF_ODD:
        return last % 2 == 0
    if rounding is Rounding.ROUND_HALF_FLOOR:
        return negative
    raise InvalidRoundingMode(f"Illegal rounding mode: {rounding!r}")
