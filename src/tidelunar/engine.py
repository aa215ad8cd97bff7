"""Tick-driven composition: clock -> scheduler -> display sink.

Data flows one way. The sink never feeds back into the models.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from .core.logging import get_logger
from .core.types import Prediction
from .display import FACE_LABEL, DisplaySink, format_frame
from .scheduler import RefreshScheduler

logger = get_logger(__name__)

ClockSource = Callable[[], int]


def system_clock() -> int:
    """Current epoch seconds from the host clock."""
    return int(time.time())


class TideEngine:
    """Runs the scheduler on every tick and pushes fresh frames to the sink."""

    def __init__(
        self,
        scheduler: RefreshScheduler,
        sink: DisplaySink,
        clock: ClockSource = system_clock,
        label: str = FACE_LABEL,
    ) -> None:
        self.scheduler = scheduler
        self.sink = sink
        self.clock = clock
        self.label = label

    def activate(self) -> Prediction | None:
        """Reset to STALE and render immediately."""
        self.scheduler.activate()
        return self.tick()

    def tick(self) -> Prediction | None:
        """Handle one periodic tick.

        Returns:
            The prediction rendered on this tick, or None if the display was
            left unchanged.
        """
        now = self.clock()
        with logger.timer("tick"):
            prediction = self.scheduler.maybe_recompute(now)
        if prediction is not None:
            self.sink.show(format_frame(prediction, self.label))
        return prediction
