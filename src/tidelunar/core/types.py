"""Core types for tide/lunar prediction.

This module defines the immutable calibration inputs and the derived
results that flow from the models to the display sink.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .constants import (
    DEFAULT_PHASE_SHIFT_SECONDS,
    HALF_TIDE_SECONDS,
    HIGH_TIDE_PHASE,
    LOW_TIDE_PHASE,
    MAX_DISPLAY_HOURS,
    REFERENCE_NEW_MOON_EPOCH,
    SPRING_THRESHOLD,
    SYNODIC_MONTH_SECONDS,
    TWO_PI,
)


class RangeClass(str, Enum):
    """Tidal range class implied by the lunar month position."""

    SPRING = "SPRING"
    NEAP = "NEAP"


@dataclass(frozen=True)
class TidalConstants:
    """Calibration of the semi-diurnal tide model.

    Attributes:
        half_tide_period_seconds: Period of the dominant constituent (s).
        phase_shift_seconds: Local lunitidal lag, applied as a time shift (s).
        high_tide_phase: Phase of high water (rad).
        low_tide_phase: Phase of low water (rad), half a turn from high water.
    """

    half_tide_period_seconds: float = HALF_TIDE_SECONDS
    phase_shift_seconds: float = DEFAULT_PHASE_SHIFT_SECONDS
    high_tide_phase: float = HIGH_TIDE_PHASE
    low_tide_phase: float = LOW_TIDE_PHASE

    def __post_init__(self) -> None:
        if not (math.isfinite(self.half_tide_period_seconds) and self.half_tide_period_seconds > 0):
            raise ValueError(
                f"half_tide_period_seconds must be positive, got {self.half_tide_period_seconds}"
            )
        if not math.isfinite(self.phase_shift_seconds):
            raise ValueError(f"phase_shift_seconds must be finite, got {self.phase_shift_seconds}")
        for name in ("high_tide_phase", "low_tide_phase"):
            value = getattr(self, name)
            if not 0.0 <= value < TWO_PI:
                raise ValueError(f"{name} must lie in [0, 2pi), got {value}")
        separation = abs(self.low_tide_phase - self.high_tide_phase)
        if abs(separation - math.pi) > 1e-9:
            raise ValueError(
                f"high and low tide phases must be pi apart, got separation {separation}"
            )

    @property
    def angular_velocity(self) -> float:
        """Radians per second of the tidal phase."""
        return TWO_PI / self.half_tide_period_seconds


@dataclass(frozen=True)
class LunarConstants:
    """Calibration of the lunar month model.

    Attributes:
        reference_new_moon_epoch: Epoch seconds of a known new moon.
        synodic_month_seconds: Mean synodic month (s).
        spring_threshold: |cos(moon angle)| above which the range is SPRING.
    """

    reference_new_moon_epoch: int = REFERENCE_NEW_MOON_EPOCH
    synodic_month_seconds: float = SYNODIC_MONTH_SECONDS
    spring_threshold: float = SPRING_THRESHOLD

    def __post_init__(self) -> None:
        if not (math.isfinite(self.synodic_month_seconds) and self.synodic_month_seconds > 0):
            raise ValueError(
                f"synodic_month_seconds must be positive, got {self.synodic_month_seconds}"
            )
        if not 0.0 < self.spring_threshold < 1.0:
            raise ValueError(f"spring_threshold must lie in (0, 1), got {self.spring_threshold}")


@dataclass(frozen=True)
class TideEvent:
    """The next tidal extremum.

    Attributes:
        is_high: True for high water, False for low water.
        seconds_until: Whole seconds until the event (>= 0).
    """

    is_high: bool
    seconds_until: int

    @property
    def hours(self) -> int:
        """Whole hours until the event, capped for a two-digit display."""
        return min(self.seconds_until // 3600, MAX_DISPLAY_HOURS)

    @property
    def minutes(self) -> int:
        """Whole minutes past the hour (truncated)."""
        return (self.seconds_until % 3600) // 60

    @property
    def label(self) -> str:
        return "HIGH" if self.is_high else "LOW"


@dataclass(frozen=True)
class Prediction:
    """Everything computed at one refresh instant."""

    epoch: int
    tide: TideEvent
    range_class: RangeClass
    phase: float = 0.0
    height: float = 0.0
    moon_angle: float = 0.0
    moon_age_days: float = 0.0

    @property
    def is_spring(self) -> bool:
        return self.range_class is RangeClass.SPRING

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "epoch": self.epoch,
            "event": self.tide.label,
            "seconds_until": self.tide.seconds_until,
            "hours": self.tide.hours,
            "minutes": self.tide.minutes,
            "range": self.range_class.value,
            "phase_rad": self.phase,
            "height": self.height,
            "moon_angle_rad": self.moon_angle,
            "moon_age_days": self.moon_age_days,
        }
