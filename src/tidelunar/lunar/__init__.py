"""Lunar module — position in the synodic month and spring/neap class."""

from .model import (
    classify_range,
    moon_age_seconds,
    moon_angle,
    moon_illumination,
    moon_phase_name,
)

__all__ = [
    "classify_range",
    "moon_age_seconds",
    "moon_angle",
    "moon_illumination",
    "moon_phase_name",
]
