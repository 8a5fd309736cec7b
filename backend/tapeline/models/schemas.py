"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, field_validator

from tapeline.config import settings
from tapeline.core.types import InchDisplayFormat, LengthDisplayFormat, LengthUnit, VolumeUnit


def _check_length(v: Optional[str]) -> Optional[str]:
    if v is not None and len(v) > settings.max_input_length:
        raise ValueError(f"Input longer than {settings.max_input_length} characters")
    return v


class ParseLengthRequest(BaseModel):
    text: Optional[str] = None
    target_unit: LengthUnit = settings.default_unit
    default_unit: Optional[LengthUnit] = None

    @field_validator("text")
    @classmethod
    def text_not_too_long(cls, v: Optional[str]) -> Optional[str]:
        return _check_length(v)


class ParseVolumeRequest(BaseModel):
    text: Optional[str] = None
    unit: VolumeUnit = settings.default_volume_unit

    @field_validator("text")
    @classmethod
    def text_not_too_long(cls, v: Optional[str]) -> Optional[str]:
        return _check_length(v)


class FormatLengthRequest(BaseModel):
    value: Optional[float] = None
    unit: LengthUnit = settings.default_unit
    display_format: LengthDisplayFormat = settings.default_display_format
    inch_format: InchDisplayFormat = settings.default_inch_format
    show_units: bool = False

    @field_validator("value")
    @classmethod
    def must_be_finite(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and not math.isfinite(v):
            raise ValueError("Length must be a finite number")
        return v


class FormatVolumeRequest(BaseModel):
    value: Optional[float] = None
    unit: VolumeUnit = settings.default_volume_unit
    show_units: bool = False

    @field_validator("value")
    @classmethod
    def must_be_finite(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and not math.isfinite(v):
            raise ValueError("Volume must be a finite number")
        return v


class ParsedValueResponse(BaseModel):
    value: float
    unit: str


class FormattedTextResponse(BaseModel):
    text: str
