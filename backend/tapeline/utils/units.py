"""Unit conversion utilities. Lengths pivot through millimeters, volumes through milliliters.

Factors are exact rationals so that, for example, 254 mm is exactly 10 in and
2.5 ft is exactly 30 in once rounded back to a float.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Union

from tapeline.core.types import LengthUnit, LengthUnitLike

Exact = Union[int, float, Decimal, Fraction]

UNIT_TO_MM: dict[LengthUnit, Fraction] = {
    LengthUnit.MM: Fraction(1),
    LengthUnit.CM: Fraction(10),
    LengthUnit.M: Fraction(1000),
    LengthUnit.IN: Fraction("25.4"),
    LengthUnit.FT: Fraction("304.8"),
}

VALID_UNITS = {unit.value for unit in UNIT_TO_MM}

ML_PER_OZ = Fraction("29.5735")
OZ_PER_ML = Fraction("0.03381413")


def exact(value: Exact) -> Fraction:
    """Exact rational for ``value``; floats are taken at their shortest repr, so 25.4 is 254/10."""
    if isinstance(value, float):
        return Fraction(repr(value))
    return Fraction(value)


def length_unit(unit: LengthUnitLike) -> LengthUnit:
    """Coerce a unit code such as ``"mm"`` to a LengthUnit."""
    try:
        return LengthUnit(unit)
    except ValueError:
        raise ValueError(f"Unknown unit '{unit}'. Valid: {sorted(VALID_UNITS)}") from None


@dataclass(frozen=True)
class Conversion:
    """A length waiting for its target unit: ``convert(3, "ft").to("in")``."""

    value: Fraction
    unit: LengthUnit

    def exact_to(self, unit: LengthUnitLike) -> Fraction:
        target = length_unit(unit)
        if target is self.unit:
            return self.value
        return self.value * UNIT_TO_MM[self.unit] / UNIT_TO_MM[target]

    def to(self, unit: LengthUnitLike) -> float:
        return float(self.exact_to(unit))


def convert(value: Exact, unit: LengthUnitLike) -> Conversion:
    """Start a conversion of ``value`` expressed in ``unit``."""
    return Conversion(exact(value), length_unit(unit))


def ml_to_oz(value: Exact) -> float:
    return float(exact(value) * OZ_PER_ML)


def oz_to_ml(value: Exact) -> float:
    return float(exact(value) * ML_PER_OZ)
