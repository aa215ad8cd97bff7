"""Tide module — semi-diurnal phase model."""

from .model import predict_next_tide, tide_curve, tide_direction, tide_height, tide_phase

__all__ = ["predict_next_tide", "tide_phase", "tide_height", "tide_direction", "tide_curve"]
