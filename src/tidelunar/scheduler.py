"""Low-power refresh scheduler.

Decides when the tide and lunar models must run. Recomputation is gated on a
single stored epoch aligned to a fixed grid, so refresh instants stay stable
however ticks are delivered.

State machine:
    STALE --maybe_recompute--> FRESH --(grid instant reached)--> FRESH ...
    activate() returns to STALE.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .core.constants import DEFAULT_REFRESH_SECONDS
from .core.logging import get_logger
from .core.types import LunarConstants, Prediction, TidalConstants
from .lunar.model import classify_range, moon_age_seconds, moon_angle
from .tide.model import predict_next_tide, tide_height, tide_phase

logger = get_logger(__name__)


class FaceStatus(str, Enum):
    STALE = "STALE"
    FRESH = "FRESH"


@dataclass
class EngineState:
    """Mutable scheduling state; never read by the models."""

    next_recompute_epoch: int = 0
    status: FaceStatus = FaceStatus.STALE
    recompute_count: int = 0

    def reset(self) -> None:
        self.next_recompute_epoch = 0
        self.status = FaceStatus.STALE
        self.recompute_count = 0


def next_refresh_epoch(now: int, refresh_interval: int) -> int:
    """Smallest multiple of ``refresh_interval`` strictly greater than ``now``."""
    if refresh_interval <= 0:
        raise ValueError(f"refresh_interval must be positive, got {refresh_interval}")
    return now - (now % refresh_interval) + refresh_interval


def predict(epoch: int, tidal: TidalConstants, lunar: LunarConstants) -> Prediction:
    """Run both models at ``epoch``."""
    return Prediction(
        epoch=epoch,
        tide=predict_next_tide(epoch, tidal),
        range_class=classify_range(epoch, lunar),
        phase=tide_phase(epoch, tidal),
        height=tide_height(epoch, tidal),
        moon_angle=moon_angle(epoch, lunar),
        moon_age_days=moon_age_seconds(epoch, lunar) / 86400.0,
    )


def maybe_recompute(
    now: int,
    state: EngineState,
    refresh_interval: int,
    tidal: TidalConstants,
    lunar: LunarConstants,
) -> Prediction | None:
    """Recompute if the stored threshold has been reached.

    Args:
        now: Current epoch seconds.
        state: Scheduling state, updated in place.
        refresh_interval: Grid size in seconds (> 0).
        tidal: Tide calibration.
        lunar: Lunar calibration.

    Returns:
        The new Prediction, or None when the display should stay unchanged.
    """
    if state.status is FaceStatus.FRESH and now < state.next_recompute_epoch:
        return None

    prediction = predict(now, tidal, lunar)
    state.next_recompute_epoch = next_refresh_epoch(now, refresh_interval)
    state.status = FaceStatus.FRESH
    state.recompute_count += 1

    logger.debug(
        "recomputed",
        now=now,
        next_recompute_epoch=state.next_recompute_epoch,
        event=prediction.tide.label,
        seconds_until=prediction.tide.seconds_until,
        range=prediction.range_class.value,
    )
    return prediction


class RefreshScheduler:
    """Holds calibration and the one mutable timestamp."""

    def __init__(
        self,
        tidal: TidalConstants | None = None,
        lunar: LunarConstants | None = None,
        refresh_interval: int = DEFAULT_REFRESH_SECONDS,
    ) -> None:
        if refresh_interval <= 0:
            raise ValueError(f"refresh_interval must be positive, got {refresh_interval}")
        self.tidal = tidal or TidalConstants()
        self.lunar = lunar or LunarConstants()
        self.refresh_interval = refresh_interval
        self.state = EngineState()

    @property
    def status(self) -> FaceStatus:
        return self.state.status

    def activate(self) -> None:
        """Mark the state STALE so the next tick recomputes immediately."""
        self.state.reset()
        logger.info("scheduler activated", refresh_interval=self.refresh_interval)

    def maybe_recompute(self, now: int) -> Prediction | None:
        return maybe_recompute(now, self.state, self.refresh_interval, self.tidal, self.lunar)
