"""Errors raised by the measurement parsers."""

from __future__ import annotations

from typing import Optional

INVALID_FORMAT_MSG = "Invalid format"


class MeasurementError(ValueError):
    """Base class for text that cannot be read as a measurement."""

    def __init__(self, message: str, text: Optional[str] = None, col: Optional[int] = None):
        self.message = message
        self.text = text
        self.col = col
        detail = message
        if text is not None:
            detail = f"{message}: {text!r}"
        if col is not None:
            detail = f"{detail} (col {col})"
        super().__init__(detail)


class InvalidFormatError(MeasurementError):
    def __init__(self, text: Optional[str] = None, col: Optional[int] = None, message: str = INVALID_FORMAT_MSG):
        super().__init__(message, text=text, col=col)


class DivideByZeroError(MeasurementError, ZeroDivisionError):
    def __init__(self, text: Optional[str] = None):
        super().__init__("Divide by zero", text=text)
