"""Semi-diurnal tide phase model.

A single dominant constituent drives the tidal elevation. The lunitidal lag
is applied as a pure time translation, the shifted time is mapped onto a
phase in [0, 2pi), and the next high/low water is the forward angular
distance to the configured target phases.

This is a first-order approximation. It is not a tide-table replacement.

Outputs:
    - predict_next_tide: nearer of the next high and low water
    - tide_height: fraction 0..1 of the tidal range
    - tide_direction: "UP" while rising, "DN" while falling
"""

from __future__ import annotations

import math

import numpy as np

from ..core.constants import PHASE_EPSILON
from ..core.phase import exact, forward_angle, normalize_angle, normalize_mod
from ..core.types import TidalConstants, TideEvent


def _shifted_offset(epoch, constants: TidalConstants):
    """Position of ``epoch + lag`` within the current period (s).

    Reducing in the time domain before multiplying by the angular velocity
    keeps integer epochs exact at any magnitude.
    """
    shifted = epoch + exact(constants.phase_shift_seconds)
    return normalize_mod(shifted, exact(constants.half_tide_period_seconds))


def tide_phase(epoch: int, constants: TidalConstants) -> float:
    """Current tidal phase in [0, 2pi).

    Args:
        epoch: Epoch seconds.
        constants: Tidal calibration.

    Returns:
        Phase (rad).
    """
    return float(normalize_angle(constants.angular_velocity * _shifted_offset(epoch, constants)))


def predict_next_tide(epoch: int, constants: TidalConstants) -> TideEvent:
    """Predict the next tidal extremum.

    Ties between high and low water go to high water. An event at the
    current instant reports zero seconds rather than a full period.

    Args:
        epoch: Epoch seconds (any sign).
        constants: Tidal calibration.

    Returns:
        TideEvent with the event type and whole seconds until it.
    """
    omega = constants.angular_velocity
    phase = tide_phase(epoch, constants)

    seconds_to_high = forward_angle(constants.high_tide_phase, phase, PHASE_EPSILON) / omega
    seconds_to_low = forward_angle(constants.low_tide_phase, phase, PHASE_EPSILON) / omega

    is_high = seconds_to_high <= seconds_to_low
    seconds = seconds_to_high if is_high else seconds_to_low

    total = int(math.floor(seconds + 0.5))
    return TideEvent(is_high=is_high, seconds_until=max(total, 0))


def tide_height(epoch: int, constants: TidalConstants) -> float:
    """Fraction of the tidal range at ``epoch``: 1 at high water, 0 at low."""
    phase = tide_phase(epoch, constants)
    return 0.5 * (1.0 + math.cos(phase - constants.high_tide_phase))


def tide_direction(epoch: int, constants: TidalConstants) -> str:
    """Return "UP" while the water rises toward high water, else "DN"."""
    return "UP" if predict_next_tide(epoch, constants).is_high else "DN"


def tide_curve(epochs: np.ndarray, constants: TidalConstants) -> np.ndarray:
    """Vectorized tide height for an array of epochs.

    Args:
        epochs: Epoch seconds, shape (n,).
        constants: Tidal calibration.

    Returns:
        Heights in [0, 1], shape (n,).
    """
    epochs = np.asarray(epochs)
    offset = _shifted_offset(epochs, constants)
    phase = normalize_angle(constants.angular_velocity * np.asarray(offset, dtype=np.float64))
    return 0.5 * (1.0 + np.cos(phase - constants.high_tide_phase))
