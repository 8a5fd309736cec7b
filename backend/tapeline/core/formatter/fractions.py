"""Fraction selection and reduction for inch displays."""

from __future__ import annotations

import math

from tapeline.core.types import InchDisplayFormat, InchDisplayFormatLike

DENOMINATORS: dict[InchDisplayFormat, int] = {
    InchDisplayFormat.IN: 1,
    InchDisplayFormat.IN16: 16,
    InchDisplayFormat.IN32: 32,
    InchDisplayFormat.IN64: 64,
}


def get_numerator(value: float, inch_format: InchDisplayFormatLike) -> int:
    """Numerator of the fractional part of ``value`` over the format's denominator.

    16ths round down so a cut is never longer than measured; 32nds and 64ths
    are finer than the cutting tolerance and round to nearest. Whole numbers
    and plain decimal display give 0.
    """
    fraction = value % 1
    if not fraction:
        return 0
    fmt = InchDisplayFormat(inch_format)
    if fmt is InchDisplayFormat.IN16:
        return math.floor(fraction * 16)
    if fmt in (InchDisplayFormat.IN32, InchDisplayFormat.IN64):
        return math.floor(fraction * DENOMINATORS[fmt] + 0.5)
    return 0


def get_denominator_value(inch_format: InchDisplayFormatLike) -> int:
    return DENOMINATORS[InchDisplayFormat(inch_format)]


def reduce_fraction(numerator: int, denominator: int) -> tuple[int, int]:
    """Reduce a power-of-two fraction to lowest terms, e.g. 4/16 -> 1/4."""
    while numerator >= 2 and numerator % 2 == 0:
        numerator //= 2
        denominator //= 2
    return numerator, denominator
