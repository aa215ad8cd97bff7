"""Lunar month position and tidal range classification.

The moon angle is 0 at new moon and pi at full moon. Near either, solar and
lunar tidal forces reinforce (spring tide); near the quarters they oppose
(neap tide). The cut-off is |cos(angle)| > cos 45 deg by default, an
empirical choice kept configurable on LunarConstants.
"""

from __future__ import annotations

import math

from ..core.constants import TWO_PI
from ..core.phase import exact, normalize_mod
from ..core.types import LunarConstants, RangeClass

# Upper bounds (fraction of the month) for each named phase
_PHASE_NAMES = (
    (0.03, "New Moon"),
    (0.22, "Waxing Crescent"),
    (0.28, "First Quarter"),
    (0.47, "Waxing Gibbous"),
    (0.53, "Full Moon"),
    (0.72, "Waning Gibbous"),
    (0.78, "Third Quarter"),
    (0.97, "Waning Crescent"),
)


def moon_age_seconds(epoch: int, constants: LunarConstants) -> float:
    """Seconds since the most recent new moon, in [0, synodic month)."""
    return float(
        normalize_mod(
            epoch - constants.reference_new_moon_epoch,
            exact(constants.synodic_month_seconds),
        )
    )


def moon_angle(epoch: int, constants: LunarConstants) -> float:
    """Position in the lunar month as an angle in [0, 2pi)."""
    fraction = moon_age_seconds(epoch, constants) / constants.synodic_month_seconds
    angle = fraction * TWO_PI
    return angle if angle < TWO_PI else 0.0


def classify_range(epoch: int, constants: LunarConstants) -> RangeClass:
    """Classify the tidal range at ``epoch`` as SPRING or NEAP.

    Args:
        epoch: Epoch seconds (any sign).
        constants: Lunar calibration.

    Returns:
        RangeClass.SPRING within roughly +/-45 deg of new or full moon,
        otherwise RangeClass.NEAP.
    """
    if abs(math.cos(moon_angle(epoch, constants))) > constants.spring_threshold:
        return RangeClass.SPRING
    return RangeClass.NEAP


def moon_illumination(epoch: int, constants: LunarConstants) -> float:
    """Illuminated fraction of the disc: 0 at new moon, 1 at full moon."""
    return 0.5 * (1.0 - math.cos(moon_angle(epoch, constants)))


def moon_phase_name(epoch: int, constants: LunarConstants) -> str:
    """Name of the lunar phase at ``epoch``."""
    fraction = moon_angle(epoch, constants) / TWO_PI
    for upper, name in _PHASE_NAMES:
        if fraction < upper:
            return name
    return "New Moon"
