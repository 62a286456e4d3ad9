# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Exceptions raised by package 'bigfraction'."""


__all__ = [
    'FractionError',
    'InvalidNumerator',
    'InvalidDenominator',
    'InvalidArgument',
    'InvalidRoundingMode',
]


class FractionError(ValueError):
    """Base class of all errors raised by this package."""


class InvalidNumerator(FractionError):
    """Numerator is not an integer or integer string."""


class InvalidDenominator(FractionError):
    """Denominator is not an integer or integer string, or less than 1."""


class InvalidArgument(FractionError, TypeError):
    """Argument can not be converted to a fraction."""


class InvalidRoundingMode(FractionError, TypeError):
    """Given value is not a known rounding mode."""
