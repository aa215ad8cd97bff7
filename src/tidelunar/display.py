"""Display frames and sinks.

A frame mirrors the segment layout of the watch face: two weekday cells with
a fixed label, two day cells naming the event ("HI" or "1O"), and the clock
cells holding the countdown as HH:MM with the colon on. A spring indicator
and the tidal height percentage ride alongside.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Protocol, TextIO

from .core.types import Prediction

FACE_LABEL = "TI"


@dataclass(frozen=True)
class DisplayFrame:
    weekday: str
    day: str
    hours: str
    minutes: str
    colon: bool = True
    spring: bool = False
    height_pct: int = 0

    @property
    def text(self) -> str:
        sep = ":" if self.colon else " "
        mark = "SP" if self.spring else "NP"
        return f"{self.weekday} {self.day} {self.hours}{sep}{self.minutes} {mark} {self.height_pct:02d}%"


def format_frame(prediction: Prediction, label: str = FACE_LABEL) -> DisplayFrame:
    """Map a prediction onto display cells."""
    tide = prediction.tide
    return DisplayFrame(
        weekday=label[:2],
        day="HI" if tide.is_high else "1O",
        hours=f"{tide.hours:02d}",
        minutes=f"{tide.minutes:02d}",
        spring=prediction.is_spring,
        height_pct=int(round(prediction.height * 100)),
    )


class DisplaySink(Protocol):
    """Anything that accepts a frame for display."""

    def show(self, frame: DisplayFrame) -> None: ...


class MemorySink:
    """Keeps every frame shown; used for previews and tests."""

    def __init__(self) -> None:
        self.frames: list[DisplayFrame] = []

    @property
    def last(self) -> DisplayFrame | None:
        return self.frames[-1] if self.frames else None

    def show(self, frame: DisplayFrame) -> None:
        self.frames.append(frame)


class StreamSink:
    """Writes one text line per frame."""

    def __init__(self, output: TextIO | None = None) -> None:
        self._output = output

    def show(self, frame: DisplayFrame) -> None:
        print(frame.text, file=self._output or sys.stdout)
