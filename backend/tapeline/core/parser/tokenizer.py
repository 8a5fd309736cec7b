"""Tokenizer for free-form measurement text such as 5' 3-1/2" or 1,000 mm."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

from tapeline.core.errors import InvalidFormatError


class TokenType(Enum):
    SIGN = auto()      # leading + or -
    NUMBER = auto()    # 5, 5.25, .5, 1,000, 1e3
    FRACTION = auto()  # 1/4, 3 / 16
    FEET = auto()      # ' ft foot feet
    INCH = auto()      # " '' in inch inches
    UNIT = auto()      # mm, cm, m and their long forms
    DASH = auto()      # 5-1/4


_NUMBER = r"(?:\d[\d,]*(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?"

_SIGN_RE = re.compile(r"[+-](?=\.?\d)")
_FRACTION_RE = re.compile(rf"({_NUMBER})\s*/\s*({_NUMBER})")
_NUMBER_RE = re.compile(_NUMBER)
# Longest alternatives first: '' is an inch mark, never two feet marks.
_INCH_RE = re.compile(r"inches|inch|in|''|\"|″")
_FEET_RE = re.compile(r"feet|foot|ft|'|′|’")
_UNIT_RE = re.compile(r"millimeters?|mm|centimeters?|cm|meters?|m")
_SKIP = {","}

_UNIT_CODES = {
    "millimeters": "mm",
    "millimeter": "mm",
    "mm": "mm",
    "centimeters": "cm",
    "centimeter": "cm",
    "cm": "cm",
    "meters": "m",
    "meter": "m",
    "m": "m",
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    col: int


def tokenize(text: str) -> list[Token]:
    """Split measurement text into tokens in one left-to-right pass.

    Input is lowercased and thousands separators are dropped from numbers.
    UNIT tokens carry the canonical unit code ("mm", "cm", "m") as their value.

    Raises:
        InvalidFormatError: on a character that belongs to no token.
    """
    source = text.lower()
    tokens: list[Token] = []

    pos = 0
    while pos < len(source):
        if source[pos].isspace() or source[pos] in _SKIP:
            pos += 1
            continue

        if not tokens:
            m = _SIGN_RE.match(source, pos)
            if m:
                tokens.append(Token(TokenType.SIGN, m.group(0), pos))
                pos = m.end()
                continue

        # Fraction must come before number
        m = _FRACTION_RE.match(source, pos)
        if m:
            value = f"{m.group(1).replace(',', '')}/{m.group(2).replace(',', '')}"
            tokens.append(Token(TokenType.FRACTION, value, pos))
            pos = m.end()
            continue

        m = _NUMBER_RE.match(source, pos)
        if m:
            tokens.append(Token(TokenType.NUMBER, m.group(0).replace(",", ""), pos))
            pos = m.end()
            continue

        m = _INCH_RE.match(source, pos)
        if m:
            tokens.append(Token(TokenType.INCH, m.group(0), pos))
            pos = m.end()
            continue

        m = _FEET_RE.match(source, pos)
        if m:
            tokens.append(Token(TokenType.FEET, m.group(0), pos))
            pos = m.end()
            continue

        m = _UNIT_RE.match(source, pos)
        if m:
            tokens.append(Token(TokenType.UNIT, _UNIT_CODES[m.group(0)], pos))
            pos = m.end()
            continue

        if source[pos] == "-":
            tokens.append(Token(TokenType.DASH, "-", pos))
            pos += 1
            continue

        raise InvalidFormatError(text, col=pos, message=f"Unexpected character '{source[pos]}'")

    return tokens
