"""Offline tide and lunar-range prediction for low-power clock faces."""

__version__ = "0.1.0"
