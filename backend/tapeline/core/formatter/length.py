"""Length formatters for display in labels and form fields.

Formatters never raise on numeric input: ``None``, NaN and infinities render
as 0. A ``None`` unit or format falls back to its default. Conversion is
skipped when the value is already in the display unit.
"""

from __future__ import annotations

import math
from typing import Callable, Union

from tapeline.core.formatter.fractions import get_denominator_value, get_numerator, reduce_fraction
from tapeline.core.types import (
    DEFAULTS,
    InchDisplayFormat,
    InchDisplayFormatLike,
    LengthDisplayFormat,
    LengthDisplayFormatLike,
    LengthUnit,
    LengthUnitLike,
    Measurement,
    coerce_measurement,
)
from tapeline.utils.numbers import number_format
from tapeline.utils.units import convert, length_unit

INCHES_PER_FOOT = 12

# Remainders closer than this to 0" or 12" collapse to whole feet.
EPSILON = 0.0001

MAX_DECIMALS: dict[LengthUnit, int] = {
    LengthUnit.MM: 0,
    LengthUnit.CM: 1,
    LengthUnit.M: 2,
    LengthUnit.IN: 2,
    LengthUnit.FT: 2,
}

UNIT_LABELS: dict[LengthUnit, str] = {
    LengthUnit.MM: " mm",
    LengthUnit.CM: " cm",
    LengthUnit.M: " m",
    LengthUnit.IN: '"',
    LengthUnit.FT: " ft",
}


def _inch_format(inch_format: InchDisplayFormatLike) -> InchDisplayFormat:
    return InchDisplayFormat(DEFAULTS.inch_format if inch_format is None else inch_format)


def _to_unit(value: Measurement, unit: LengthUnitLike, target: LengthUnit) -> float:
    # Each formatter defaults to its own display unit.
    number = coerce_measurement(value)
    source = length_unit(target if unit is None else unit)
    if source is target:
        return number
    return convert(number, source).to(target)


def _format_decimal(value: Measurement, unit: LengthUnitLike, target: LengthUnit, show_units: bool) -> str:
    amount = _to_unit(value, unit, target)
    label = UNIT_LABELS[target] if show_units else ""
    return number_format(amount, MAX_DECIMALS[target]) + label


def format_millimeters(value: Measurement = 0, unit: LengthUnitLike = LengthUnit.MM, show_units: bool = False) -> str:
    """Whole millimeters, e.g. "1,000 mm"."""
    return _format_decimal(value, unit, LengthUnit.MM, show_units)


def format_centimeters(value: Measurement = 0, unit: LengthUnitLike = LengthUnit.CM, show_units: bool = False) -> str:
    """Centimeters with up to 1 decimal place."""
    return _format_decimal(value, unit, LengthUnit.CM, show_units)


def format_meters(value: Measurement = 0, unit: LengthUnitLike = LengthUnit.M, show_units: bool = False) -> str:
    """Meters with up to 2 decimal places."""
    return _format_decimal(value, unit, LengthUnit.M, show_units)


def format_feet_decimal(value: Measurement = 0, unit: LengthUnitLike = LengthUnit.FT, show_units: bool = False) -> str:
    """Feet with up to 2 decimal places and the label " ft"."""
    return _format_decimal(value, unit, LengthUnit.FT, show_units)


def format_decimal_inches(value: Measurement = 0, unit: LengthUnitLike = LengthUnit.IN, show_units: bool = False) -> str:
    """Inches with up to 2 decimal places and the label '"'."""
    return _format_decimal(value, unit, LengthUnit.IN, show_units)


def format_whole_feet(
    value: Measurement = 0,
    unit: LengthUnitLike = LengthUnit.FT,
    units_option: Union[bool, str] = False,
) -> str:
    """Whole feet, dropping anything beyond the last whole foot.

    ``units_option`` True appends "'", a string is appended as given
    (e.g. " ft"), False appends nothing.
    """
    feet = math.floor(_to_unit(value, unit, LengthUnit.FT))
    if units_option is True:
        suffix = "'"
    elif isinstance(units_option, str):
        suffix = units_option
    else:
        suffix = ""
    return number_format(feet, 0) + suffix


def format_fractional_inches(
    value: Measurement = 0,
    unit: LengthUnitLike = LengthUnit.IN,
    inch_format: InchDisplayFormatLike = DEFAULTS.inch_format,
    show_units: bool = False,
) -> str:
    """Inches as a whole number and reduced fraction, e.g. 3.25 -> "3-1/4".

    The whole part is omitted below one inch ("3/16"), the fraction when it
    rounds away ("3"). A fraction that rounds up to a full inch carries into
    the whole part. Negative values get a leading "-".
    """
    inches = _to_unit(value, unit, LengthUnit.IN)
    fmt = _inch_format(inch_format)
    units = '"' if show_units else ""
    sign = "-" if inches < 0 else ""
    inches = abs(inches)

    if inches.is_integer():
        text = number_format(inches, 0)
    else:
        whole = math.floor(inches)
        numerator = get_numerator(inches, fmt)
        denominator = get_denominator_value(fmt)
        if numerator == denominator:
            whole += 1
            numerator = 0
        numerator, denominator = reduce_fraction(numerator, denominator)

        if not numerator:
            text = number_format(whole, 0)
        elif whole:
            text = f"{number_format(whole, 0)}-{numerator}/{denominator}"
        else:
            text = f"{numerator}/{denominator}"

    if text == "0":
        sign = ""
    return f"{sign}{text}{units}"


def _whole_feet_only(feet: int, sign: str) -> str:
    text = format_whole_feet(feet, LengthUnit.FT, " ft")
    return sign + text if feet else text


def _format_feet_and_inches(value: Measurement, unit: LengthUnitLike, format_inches: Callable[[float], str]) -> str:
    total = _to_unit(value, unit, LengthUnit.IN)
    sign = "-" if total < 0 else ""
    total = abs(total)

    whole_feet = math.floor(total / INCHES_PER_FOOT)
    inches = total - whole_feet * INCHES_PER_FOOT

    if inches < EPSILON:
        return _whole_feet_only(whole_feet, sign)
    if inches > INCHES_PER_FOOT - EPSILON:
        return _whole_feet_only(whole_feet + 1, sign)

    inches_str = format_inches(inches)
    if inches_str == '0"':
        return _whole_feet_only(whole_feet, sign)
    if inches_str == f'{INCHES_PER_FOOT}"':
        return _whole_feet_only(whole_feet + 1, sign)

    if whole_feet:
        return f"{sign}{format_whole_feet(whole_feet, LengthUnit.FT, True)} {inches_str}"
    return sign + inches_str


def format_feet_and_fractional_inches(
    value: Measurement = 0,
    unit: LengthUnitLike = LengthUnit.IN,
    inch_format: InchDisplayFormatLike = DEFAULTS.inch_format,
) -> str:
    """Whole feet and fractional inches, e.g. 3' 4-1/8", or "4 ft" with no inches."""
    fmt = _inch_format(inch_format)
    return _format_feet_and_inches(
        value, unit, lambda inches: format_fractional_inches(inches, LengthUnit.IN, fmt, True)
    )


def format_feet_and_decimal_inches(value: Measurement = 0, unit: LengthUnitLike = LengthUnit.IN) -> str:
    """Whole feet and decimal inches, e.g. 3' 4.13", or "4 ft" with no inches."""
    return _format_feet_and_inches(
        value, unit, lambda inches: format_decimal_inches(inches, LengthUnit.IN, True)
    )


def _format_inches(value: Measurement, unit: LengthUnitLike, fmt: InchDisplayFormat, show_units: bool) -> str:
    if fmt.is_fractional:
        return format_fractional_inches(value, unit, fmt, show_units)
    return format_decimal_inches(value, unit, show_units)


def _format_feet_inches(value: Measurement, unit: LengthUnitLike, fmt: InchDisplayFormat, show_units: bool) -> str:
    # Feet and inches always carry their markers.
    if fmt.is_fractional:
        return format_feet_and_fractional_inches(value, unit, fmt)
    return format_feet_and_decimal_inches(value, unit)


LENGTH_FORMATTERS: dict[LengthDisplayFormat, Callable[[Measurement, LengthUnitLike, InchDisplayFormat, bool], str]] = {
    LengthDisplayFormat.MM: lambda value, unit, fmt, show_units: format_millimeters(value, unit, show_units),
    LengthDisplayFormat.CM: lambda value, unit, fmt, show_units: format_centimeters(value, unit, show_units),
    LengthDisplayFormat.M: lambda value, unit, fmt, show_units: format_meters(value, unit, show_units),
    LengthDisplayFormat.FT: lambda value, unit, fmt, show_units: format_feet_decimal(value, unit, show_units),
    LengthDisplayFormat.IN: _format_inches,
    LengthDisplayFormat.FT_IN: _format_feet_inches,
}


def format_length(
    value: Measurement = 0,
    unit: LengthUnitLike = DEFAULTS.unit,
    display_format: LengthDisplayFormatLike = DEFAULTS.display_format,
    inch_format: InchDisplayFormatLike = DEFAULTS.inch_format,
    show_units: bool = False,
) -> str:
    """Format a length in any display format.

    Args:
        value: The length, in ``unit``. ``None`` renders as 0.
        unit: Unit of ``value``.
        display_format: How to render: a single unit, or "ft_in" for feet
            and inches.
        inch_format: Decimal ("in") or fractional tier for inch displays.
        show_units: Append the unit label. Feet-and-inches output always has
            its markers regardless.

    Returns:
        The formatted string, e.g. "1' 8-1/2\"" or "2,000 mm".
    """
    if display_format is None:
        display_format = DEFAULTS.display_format
    formatter = LENGTH_FORMATTERS[LengthDisplayFormat(display_format)]
    return formatter(value, DEFAULTS.unit if unit is None else unit, _inch_format(inch_format), show_units)
