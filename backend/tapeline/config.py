from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from tapeline.core.types import (
    DEFAULTS,
    InchDisplayFormat,
    LengthDisplayFormat,
    LengthUnit,
    VolumeUnit,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TAPELINE_")

    app_name: str = "Tapeline Measurement Service"
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    default_unit: LengthUnit = DEFAULTS.unit
    default_display_format: LengthDisplayFormat = DEFAULTS.display_format
    default_inch_format: InchDisplayFormat = DEFAULTS.inch_format
    default_volume_unit: VolumeUnit = DEFAULTS.volume_unit
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    max_input_length: int = 200  # characters


settings = Settings()
