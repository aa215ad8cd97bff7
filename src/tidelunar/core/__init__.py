"""Core module — types, constants, normalization, configuration."""

from .phase import normalize_angle, normalize_mod
from .types import LunarConstants, Prediction, RangeClass, TidalConstants, TideEvent

__all__ = [
    "TidalConstants",
    "LunarConstants",
    "TideEvent",
    "RangeClass",
    "Prediction",
    "normalize_mod",
    "normalize_angle",
]
