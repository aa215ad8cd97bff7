"""Pytest configuration for tidelunar.

Shared calibration fixtures use the reference deployment values: half-tide
period 44 700 s, lag 18 720 s, and the 2000-01-06 new moon.
"""

from __future__ import annotations

import pytest

from tidelunar.core.logging import set_log_level
from tidelunar.core.types import LunarConstants, TidalConstants

HALF_PERIOD = 44700
PHASE_SHIFT = 18720
REFERENCE_NEW_MOON = 947182440
SYNODIC_MONTH = 2551442.8768992


@pytest.fixture
def tidal() -> TidalConstants:
    return TidalConstants(half_tide_period_seconds=HALF_PERIOD, phase_shift_seconds=PHASE_SHIFT)


@pytest.fixture
def lunar() -> LunarConstants:
    return LunarConstants(
        reference_new_moon_epoch=REFERENCE_NEW_MOON,
        synodic_month_seconds=SYNODIC_MONTH,
    )


@pytest.fixture(autouse=True)
def _restore_log_level():
    yield
    set_log_level("INFO")
