"""Validated runtime settings for spiral conversions."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import configure_logging

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SpiralSettings(BaseSettings):
    """Switches consulted by the conversion layer, read from ``HEX_SPIRAL_*``."""

    model_config = SettingsConfigDict(env_prefix="HEX_SPIRAL_", extra="forbid", frozen=True)

    verify_conversions: bool = Field(default=False)
    log_level: str = Field(default="WARNING")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> str:
        if isinstance(value, int) and not isinstance(value, bool):
            value = logging.getLevelName(value)
        if not isinstance(value, str):
            raise TypeError("log_level must be a level name")
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"unknown log level: {value!r}")
        return level


_active = SpiralSettings()
configure_logging(_active.log_level)


def get_settings() -> SpiralSettings:
    return _active


def configure(settings: SpiralSettings | None = None, **overrides: Any) -> SpiralSettings:
    """Replace the active settings and apply their log level.

    Intended for start-up; conversions only ever read the active settings.
    """

    global _active
    base = settings if settings is not None else _active
    if overrides:
        base = SpiralSettings.model_validate({**base.model_dump(), **overrides})
    _active = base
    configure_logging(_active.log_level)
    return _active
