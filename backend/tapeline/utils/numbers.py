"""Display formatting for plain decimal numbers."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext


def number_format(value: float, max_decimals: int = 0) -> str:
    """Render ``value`` with thousands separators and up to ``max_decimals`` decimals.

    Rounds half up on the shortest decimal form of the float, so 2.545 becomes
    2.55 at two places. Trailing zeros are dropped: 2.50 -> "2.5", 3.00 -> "3".

    >>> number_format(1234.5678, 2)
    '1,234.57'
    """
    number = Decimal(repr(float(value)))
    quantum = Decimal(1).scaleb(-max_decimals)
    with localcontext() as ctx:
        ctx.prec = max(28, number.adjusted() + max_decimals + 2)
        rounded = number.quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = abs(rounded)
    text = f"{rounded:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
