"""Length parsers: feet, inches and fractions, millimeters, centimeters, meters.

Every parser returns 0 for empty input and raises InvalidFormatError for text
it cannot read. Arithmetic is done on exact fractions and rounded to a float
once at the end, so "5' 4-1/2\"" in feet is exactly 5.375.

Accepted feet/inch forms::

    5          bare number, read in the default unit
    5.25
    5 ft       'ft', 'feet', 'foot' or a single quote
    5'
    6"         inches alone; '' or 'in', 'inch', 'inches' also work
    5'6"
    5' 6''
    5' 6-1/4"  fraction after a dash or a space
    5 ft 6-1/4 in
"""

from __future__ import annotations

import logging
from fractions import Fraction
from typing import Optional

from tapeline.core.errors import DivideByZeroError, InvalidFormatError
from tapeline.core.parser.tokenizer import Token, TokenType, tokenize
from tapeline.core.types import DEFAULTS, LengthUnit, LengthUnitLike
from tapeline.utils.units import convert, length_unit

LOGGER = logging.getLogger(__name__)

INCHES_PER_FOOT = 12

# Sniff order for metric suffixes; "m" last since "mm" and "cm" also end in it.
_METRIC_UNITS = (LengthUnit.MM, LengthUnit.CM, LengthUnit.M)


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def _invalid(text: str, token: Optional[Token] = None) -> InvalidFormatError:
    col = token.col if token is not None else None
    LOGGER.debug("Cannot parse measurement %r (col %s)", text, col)
    return InvalidFormatError(text, col=col)


def _tokens(text: str) -> tuple[int, list[Token]]:
    """Tokenize ``text`` and pull off a leading sign."""
    try:
        tokens = tokenize(text)
    except InvalidFormatError:
        LOGGER.debug("Cannot tokenize measurement %r", text)
        raise
    if tokens and tokens[0].type == TokenType.SIGN:
        return (-1 if tokens[0].value == "-" else 1), tokens[1:]
    return 1, tokens


def _split_at_feet(tokens: list[Token]) -> tuple[list[Token], Optional[list[Token]]]:
    """Return (tokens before the first feet marker, tokens after it or None)."""
    for i, tok in enumerate(tokens):
        if tok.type == TokenType.FEET:
            return tokens[:i], tokens[i + 1:]
    return tokens, None


def _fraction_value(tok: Token, text: str) -> Fraction:
    numerator, denominator = (Fraction(part) for part in tok.value.split("/"))
    if denominator == 0:
        LOGGER.debug("Zero denominator in %r", text)
        raise DivideByZeroError(text)
    return numerator / denominator


def _bare_number(tokens: list[Token]) -> Optional[Fraction]:
    if len(tokens) == 1 and tokens[0].type == TokenType.NUMBER:
        return Fraction(tokens[0].value)
    return None


def _feet_value(tokens: list[Token], text: str) -> Fraction:
    if not tokens:
        return Fraction(0)
    number = _bare_number(tokens)
    if number is None:
        bad = next((tok for tok in tokens if tok.type != TokenType.NUMBER), tokens[-1])
        raise _invalid(text, bad)
    return number


def _inches_value(tokens: list[Token], text: str) -> Fraction:
    inches = Fraction(0)
    for tok in tokens:
        if tok.type == TokenType.NUMBER:
            inches += Fraction(tok.value)
        elif tok.type == TokenType.FRACTION:
            inches += _fraction_value(tok, text)
        elif tok.type in (TokenType.INCH, TokenType.DASH):
            continue
        else:
            raise _invalid(text, tok)
    return inches


def _inches_and_feet_value(tokens: list[Token], default_unit: LengthUnit, text: str) -> Fraction:
    number = _bare_number(tokens)
    if number is not None:
        return number * INCHES_PER_FOOT if default_unit is LengthUnit.FT else number

    head, tail = _split_at_feet(tokens)
    if tail is None:
        return _inches_value(tokens, text)
    return _feet_value(head, text) * INCHES_PER_FOOT + _inches_value(tail, text)


def _metric_value(tokens: list[Token], unit: LengthUnit, text: str) -> Fraction:
    number: Optional[Fraction] = None
    for tok in tokens:
        if tok.type == TokenType.NUMBER and number is None:
            number = Fraction(tok.value)
        elif tok.type == TokenType.UNIT and tok.value == unit.value:
            continue
        else:
            raise _invalid(text, tok)
    if number is None:
        raise _invalid(text)
    return number


def parse_fraction(text: Optional[str] = None) -> float:
    """Parse a fraction such as "1/4" or '3/16"' into a decimal.

    Raises:
        InvalidFormatError: when there is no "/" or either side is not a number.
        DivideByZeroError: when the denominator is 0.
    """
    if _is_blank(text):
        return 0.0
    sign, tokens = _tokens(text)
    tokens = [tok for tok in tokens if tok.type != TokenType.INCH]
    if len(tokens) != 1 or tokens[0].type != TokenType.FRACTION:
        raise _invalid(text, tokens[0] if tokens else None)
    return float(sign * _fraction_value(tokens[0], text))


def parse_feet(text: Optional[str] = None) -> float:
    """Parse the feet in ``text``; anything after the feet marker is ignored."""
    if _is_blank(text):
        return 0.0
    sign, tokens = _tokens(text)
    head, _ = _split_at_feet(tokens)
    return float(sign * _feet_value(head, text))


def parse_inches(text: Optional[str] = None) -> float:
    """Parse inches with optional fractions; a feet part, if present, is skipped.

    Whole numbers and fractions are summed, so "5 1/4" and "5-1/4\"" are both 5.25.
    """
    if _is_blank(text):
        return 0.0
    sign, tokens = _tokens(text)
    head, tail = _split_at_feet(tokens)
    return float(sign * _inches_value(tail if tail is not None else head, text))


def parse_inches_and_feet(text: Optional[str] = None, default_unit: LengthUnitLike = LengthUnit.IN) -> float:
    """Parse feet and/or inches and return the total in inches.

    A bare number carries no unit and is read in ``default_unit``: feet are
    multiplied by 12, anything else is taken as inches.
    """
    if _is_blank(text):
        return 0.0
    sign, tokens = _tokens(text)
    return float(sign * _inches_and_feet_value(tokens, length_unit(default_unit), text))


def parse_millimeters(text: Optional[str] = None) -> float:
    if _is_blank(text):
        return 0.0
    sign, tokens = _tokens(text)
    return float(sign * _metric_value(tokens, LengthUnit.MM, text))


def parse_centimeters(text: Optional[str] = None) -> float:
    if _is_blank(text):
        return 0.0
    sign, tokens = _tokens(text)
    return float(sign * _metric_value(tokens, LengthUnit.CM, text))


def parse_meters(text: Optional[str] = None) -> float:
    if _is_blank(text):
        return 0.0
    sign, tokens = _tokens(text)
    return float(sign * _metric_value(tokens, LengthUnit.M, text))


def parse_length(
    text: Optional[str] = None,
    target_unit: LengthUnitLike = DEFAULTS.target_unit,
    default_unit: Optional[LengthUnitLike] = None,
) -> float:
    """Parse a length in any supported unit and return it in ``target_unit``.

    Args:
        text: Free-form input, e.g. "5' 3-1/2\"", "254 mm" or "1,000".
        target_unit: Unit of the returned value.
        default_unit: Unit assumed when ``text`` is a bare number. Falls back
            to ``target_unit``.

    Raises:
        InvalidFormatError: if ``text`` cannot be read as a length.
    """
    if _is_blank(text):
        return 0.0

    target = length_unit(target_unit)
    default = length_unit(default_unit) if default_unit else target

    sign, tokens = _tokens(text)
    types = {tok.type for tok in tokens}
    units = {tok.value for tok in tokens if tok.type == TokenType.UNIT}

    if TokenType.FEET in types or TokenType.INCH in types:
        inches = _inches_and_feet_value(tokens, default, text)
        return convert(sign * inches, LengthUnit.IN).to(target)

    for unit in _METRIC_UNITS:
        if unit.value in units:
            value = _metric_value(tokens, unit, text)
            return convert(sign * value, unit).to(target)

    number = _bare_number(tokens)
    if number is None:
        raise _invalid(text, tokens[0] if tokens else None)
    if default is LengthUnit.FT and target is LengthUnit.IN:
        return float(sign * number * INCHES_PER_FOOT)
    return convert(sign * number, default).to(target)
