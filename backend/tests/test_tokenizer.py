"""Tests for the measurement tokenizer."""

import pytest
from tapeline.core.errors import InvalidFormatError
from tapeline.core.parser.tokenizer import tokenize, TokenType


def _types(text):
    return [t.type for t in tokenize(text)]


class TestTokenizer:
    def test_feet_and_fractional_inches(self):
        assert _types("5' 3-1/2\"") == [
            TokenType.NUMBER,    # 5
            TokenType.FEET,      # '
            TokenType.NUMBER,    # 3
            TokenType.DASH,      # -
            TokenType.FRACTION,  # 1/2
            TokenType.INCH,      # "
        ]

    def test_two_single_quotes_are_inches(self):
        assert _types("5''") == [TokenType.NUMBER, TokenType.INCH]

    def test_feet_words(self):
        for text in ("5ft", "5 ft", "5 feet", "5foot"):
            assert _types(text) == [TokenType.NUMBER, TokenType.FEET], text

    def test_inch_words_do_not_overlap(self):
        for text in ("5in", "5 inch", "5inches"):
            tokens = tokenize(text)
            assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.INCH], text
            assert tokens[1].value == text[1:].strip()

    def test_metric_units_canonicalised(self):
        assert [t.value for t in tokenize("5 millimeters") if t.type == TokenType.UNIT] == ["mm"]
        assert [t.value for t in tokenize("5centimeter") if t.type == TokenType.UNIT] == ["cm"]
        assert [t.value for t in tokenize("5 meters") if t.type == TokenType.UNIT] == ["m"]
        assert [t.value for t in tokenize("5m") if t.type == TokenType.UNIT] == ["m"]

    def test_thousands_separator_removed(self):
        tokens = tokenize("1,000 mm")
        assert tokens[0].type == TokenType.NUMBER
        assert tokens[0].value == "1000"

    def test_fraction_with_spaces(self):
        tokens = tokenize(" 3 / 16 ")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.FRACTION
        assert tokens[0].value == "3/16"

    def test_leading_sign(self):
        assert _types("-5 mm") == [TokenType.SIGN, TokenType.NUMBER, TokenType.UNIT]

    def test_dash_after_number_is_separator(self):
        assert _types("5-1/4") == [TokenType.NUMBER, TokenType.DASH, TokenType.FRACTION]

    def test_case_insensitive(self):
        assert _types("5 FT 6 IN") == [TokenType.NUMBER, TokenType.FEET, TokenType.NUMBER, TokenType.INCH]

    def test_scientific_notation(self):
        tokens = tokenize("1e3")
        assert [t.type for t in tokens] == [TokenType.NUMBER]
        assert tokens[0].value == "1e3"

    def test_empty_input(self):
        assert tokenize("") == []
        assert tokenize("   ") == []

    def test_unexpected_character(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            tokenize("5 x")
        assert exc_info.value.col == 2

    def test_columns(self):
        tokens = tokenize("5' 6\"")
        assert [t.col for t in tokens] == [0, 1, 3, 4]
