"""Configuration management with pydantic and YAML support."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, model_validator

from .constants import (
    DEFAULT_PHASE_SHIFT_SECONDS,
    DEFAULT_REFRESH_SECONDS,
    HALF_TIDE_SECONDS,
    HIGH_TIDE_PHASE,
    LOW_TIDE_PHASE,
    REFERENCE_NEW_MOON_EPOCH,
    SPRING_THRESHOLD,
    SYNODIC_MONTH_SECONDS,
    TWO_PI,
)
from .types import LunarConstants, TidalConstants


class TideConfig(BaseModel):
    """Semi-diurnal tide calibration."""

    half_tide_period_seconds: float = Field(default=HALF_TIDE_SECONDS, gt=0)
    phase_shift_seconds: float = DEFAULT_PHASE_SHIFT_SECONDS
    high_tide_phase_rad: float = Field(default=HIGH_TIDE_PHASE, ge=0, lt=TWO_PI)
    low_tide_phase_rad: float = Field(default=LOW_TIDE_PHASE, ge=0, lt=TWO_PI)

    @model_validator(mode="after")
    def _phases_half_turn_apart(self) -> TideConfig:
        separation = abs(self.low_tide_phase_rad - self.high_tide_phase_rad)
        if abs(separation - math.pi) > 1e-9:
            raise ValueError("high_tide_phase_rad and low_tide_phase_rad must be pi apart")
        return self


class LunarConfig(BaseModel):
    """Lunar month calibration."""

    reference_new_moon_epoch: int = REFERENCE_NEW_MOON_EPOCH
    synodic_month_seconds: float = Field(default=SYNODIC_MONTH_SECONDS, gt=0)
    spring_threshold: float = Field(default=SPRING_THRESHOLD, gt=0, lt=1)


class SchedulerConfig(BaseModel):
    """Refresh grid settings."""

    refresh_interval_seconds: int = Field(default=DEFAULT_REFRESH_SECONDS, ge=1)


class TideLunarConfig(BaseModel):
    """Root configuration object."""

    tide: TideConfig = Field(default_factory=TideConfig)
    lunar: LunarConfig = Field(default_factory=LunarConfig)
    scheduler: SchedulerConfig = Field(default_factory=SchedulerConfig)
    log_level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = "INFO"

    def tidal_constants(self) -> TidalConstants:
        """Immutable runtime constants for the tide model."""
        return TidalConstants(
            half_tide_period_seconds=self.tide.half_tide_period_seconds,
            phase_shift_seconds=self.tide.phase_shift_seconds,
            high_tide_phase=self.tide.high_tide_phase_rad,
            low_tide_phase=self.tide.low_tide_phase_rad,
        )

    def lunar_constants(self) -> LunarConstants:
        """Immutable runtime constants for the lunar model."""
        return LunarConstants(
            reference_new_moon_epoch=self.lunar.reference_new_moon_epoch,
            synodic_month_seconds=self.lunar.synodic_month_seconds,
            spring_threshold=self.lunar.spring_threshold,
        )


def load_config(path: str | Path) -> TideLunarConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Parsed TideLunarConfig object.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return TideLunarConfig.model_validate(data or {})


def save_config(config: TideLunarConfig, path: str | Path) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration to save.
        path: Output path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(), f, default_flow_style=False)


def default_config() -> TideLunarConfig:
    """Return default configuration."""
    return TideLunarConfig()


def merge_config(base: TideLunarConfig, overrides: dict[str, Any]) -> TideLunarConfig:
    """Merge overrides into base configuration.

    Args:
        base: Base configuration.
        overrides: Dictionary of override values.

    Returns:
        New configuration with overrides applied.
    """
    base_dict = base.model_dump()

    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    merged = deep_merge(base_dict, overrides)
    return TideLunarConfig.model_validate(merged)
