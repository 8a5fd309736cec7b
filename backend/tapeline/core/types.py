"""Closed unit enumerations and the documented call defaults."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

LOGGER = logging.getLogger(__name__)


class LengthUnit(str, Enum):
    MM = "mm"
    CM = "cm"
    M = "m"
    IN = "in"
    FT = "ft"


class LengthDisplayFormat(str, Enum):
    MM = "mm"        # 3 mm
    CM = "cm"        # 3.4 cm
    M = "m"          # 3.45 m
    IN = "in"        # 30.5" or 30-1/2", depending on the inch format
    FT = "ft"        # 3.4'
    FT_IN = "ft_in"  # 5' 3.5" or 5' 3-1/2"


class InchDisplayFormat(str, Enum):
    IN = "in"        # 3.25
    IN16 = "in16"    # 3-1/4, 3/16
    IN32 = "in32"    # 3/32
    IN64 = "in64"    # 3/64

    @property
    def is_fractional(self) -> bool:
        return self is not InchDisplayFormat.IN


class VolumeUnit(str, Enum):
    ML = "mL"
    OZ = "oz"


LengthUnitLike = Union[LengthUnit, str]
LengthDisplayFormatLike = Union[LengthDisplayFormat, str]
InchDisplayFormatLike = Union[InchDisplayFormat, str]
VolumeUnitLike = Union[VolumeUnit, str]

# A measurement a caller may not have yet (an empty form field). Formatters
# render it as 0; parsers return 0 for empty text.
Measurement = Optional[float]


@dataclass(frozen=True)
class LengthDefaults:
    """Defaults applied when a caller leaves an argument out.

    Attributes:
        unit: Unit of a length handed to ``format_length``.
        display_format: How ``format_length`` renders when not told otherwise.
        inch_format: Decimal or fractional tier for inch displays.
        target_unit: Unit ``parse_length`` returns.
        volume_unit: Unit ``parse_volume`` returns.
    """

    unit: LengthUnit = LengthUnit.IN
    display_format: LengthDisplayFormat = LengthDisplayFormat.IN
    inch_format: InchDisplayFormat = InchDisplayFormat.IN16
    target_unit: LengthUnit = LengthUnit.IN
    volume_unit: VolumeUnit = VolumeUnit.ML


DEFAULTS = LengthDefaults()


def coerce_measurement(value: Measurement) -> float:
    """Return ``value`` as a float, or 0.0 for the empty measurement.

    ``None``, NaN, infinities and anything that is not a number all count as
    empty. Display code calls this so that it never fails on missing data.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        LOGGER.debug("Non-numeric measurement %r rendered as 0", value)
        return 0.0
    if not math.isfinite(number):
        LOGGER.debug("Non-finite measurement %r rendered as 0", value)
        return 0.0
    return number
