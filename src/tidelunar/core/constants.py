"""Core constants for the tide/lunar engine.

This module defines the canonical calibration values:
- Dominant semi-diurnal period and default lunitidal lag
- Synodic month and a reference new moon
- Phase conventions for high/low water and the spring/neap threshold
"""

from __future__ import annotations

import math

TWO_PI = 2.0 * math.pi

# Model versioning, reported by the CLI alongside each prediction.
# Update when the prediction arithmetic changes.
MODEL_VERSION_TIDE = "v1.0_20261017_single_constituent"

# Semi-diurnal constituent: 12 h 25 m
HALF_TIDE_SECONDS = 12 * 3600 + 25 * 60  # 44 700 s

# Local lag between lunar transit and high water (signed, per deployment)
DEFAULT_PHASE_SHIFT_SECONDS = 18720

# Lunar month
SYNODIC_MONTH_DAYS = 29.530588853
SYNODIC_MONTH_SECONDS = SYNODIC_MONTH_DAYS * 86400.0  # ~2 551 442.88 s
REFERENCE_NEW_MOON_EPOCH = 947182440  # 2000-01-06 18:14 UTC

# Tidal elevation convention: high water at pi/2, low water at 3pi/2
HIGH_TIDE_PHASE = math.pi / 2.0
LOW_TIDE_PHASE = 3.0 * math.pi / 2.0

# |cos(moon angle)| above this is a spring tide (cos 45 deg). Heuristic, not
# derived from solar/lunar force superposition.
SPRING_THRESHOLD = math.cos(math.pi / 4.0)

# Recompute grid
DEFAULT_REFRESH_SECONDS = 60

# Display limits
MAX_DISPLAY_HOURS = 99

# Forward distances within this many radians of a full turn are treated as
# zero (the event is happening now).
PHASE_EPSILON = 1e-9
