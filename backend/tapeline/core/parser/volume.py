"""Volume parser for milliliters and fluid ounces."""

from __future__ import annotations

import logging
import re
from fractions import Fraction
from typing import Optional

from tapeline.core.errors import InvalidFormatError
from tapeline.core.types import DEFAULTS, VolumeUnit, VolumeUnitLike
from tapeline.utils.units import ml_to_oz, oz_to_ml

LOGGER = logging.getLogger(__name__)

_VOLUME_RE = re.compile(
    r"(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?)"
    r"\s*(?P<unit>milliliters?|ml|ounces?|oz)?",
    re.IGNORECASE,
)


def parse_volume(text: Optional[str] = None, unit: VolumeUnitLike = DEFAULTS.volume_unit) -> float:
    """Parse a volume and return it in ``unit``.

    A bare number is a quantity of milliliters; "3 oz" or "100 mL" declare
    their own unit. Signs and scientific notation are accepted, so "-10" and
    "1e3" are valid.

    Raises:
        InvalidFormatError: if ``text`` is not a number with an optional unit.
    """
    if text is None or not text.strip():
        return 0.0
    target = VolumeUnit(DEFAULTS.volume_unit if unit is None else unit)

    m = _VOLUME_RE.fullmatch(text.replace(",", "").strip())
    if m is None:
        LOGGER.debug("Cannot parse volume %r", text)
        raise InvalidFormatError(text)

    amount = Fraction(m.group("number"))
    declared = m.group("unit")
    source = VolumeUnit.OZ if declared and declared.lower().startswith("o") else VolumeUnit.ML

    if source is target:
        return float(amount)
    if target is VolumeUnit.OZ:
        return ml_to_oz(amount)
    return oz_to_ml(amount)
