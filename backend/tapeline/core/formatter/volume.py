"""Volume formatter for milliliters and fluid ounces."""

from __future__ import annotations

from tapeline.core.types import DEFAULTS, Measurement, VolumeUnit, VolumeUnitLike, coerce_measurement
from tapeline.utils.numbers import number_format
from tapeline.utils.units import ml_to_oz

MAX_DECIMALS: dict[VolumeUnit, int] = {
    VolumeUnit.ML: 0,
    VolumeUnit.OZ: 1,
}


def format_volume(value: Measurement = 0, unit: VolumeUnitLike = DEFAULTS.volume_unit, show_units: bool = False) -> str:
    """Format a volume held in milliliters for display in ``unit``.

    >>> format_volume(1000, "oz", True)
    '33.8 oz'
    """
    ml = coerce_measurement(value)
    target = VolumeUnit(DEFAULTS.volume_unit if unit is None else unit)
    amount = ml_to_oz(ml) if target is VolumeUnit.OZ else ml
    label = f" {target.value}" if show_units else ""
    return number_format(amount, MAX_DECIMALS[target]) + label
