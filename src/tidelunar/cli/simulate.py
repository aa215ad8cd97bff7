"""Tick simulation CLI.

Usage:
    python -m tidelunar.cli.simulate --start 0 --duration 3600 --tick 1

Drives the engine with a synthetic clock and prints one JSON line per refresh,
followed by a summary line.
"""

from __future__ import annotations

import argparse
import json

import numpy as np
from pydantic import ValidationError


def main(argv: list[str] | None = None) -> int:
    """Run a tick simulation.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success, 2 = configuration error).
    """
    parser = argparse.ArgumentParser(description="Simulate periodic ticks through the scheduler")
    parser.add_argument("--start", type=int, default=0, help="First tick (epoch seconds)")
    parser.add_argument("--duration", type=int, default=3600, help="Simulated span (s)")
    parser.add_argument("--tick", type=int, default=1, help="Tick spacing (s)")

    from ._common import add_config_arguments, resolve_config

    add_config_arguments(parser)
    args = parser.parse_args(argv)

    from ..core.logging import get_logger
    from ..display import MemorySink
    from ..engine import TideEngine
    from ..scheduler import RefreshScheduler
    from ..tide.model import tide_curve

    logger = get_logger(__name__)

    if args.tick <= 0 or args.duration < 0:
        logger.error("tick must be positive and duration non-negative", tick=args.tick)
        return 2

    try:
        config = resolve_config(args)
        scheduler = RefreshScheduler(
            config.tidal_constants(),
            config.lunar_constants(),
            config.scheduler.refresh_interval_seconds,
        )
    except (FileNotFoundError, ValidationError, ValueError) as exc:
        logger.error("invalid configuration", error=str(exc))
        return 2

    ticks = np.arange(args.start, args.start + args.duration + 1, args.tick, dtype=np.int64)
    clock = {"now": int(ticks[0])}
    sink = MemorySink()
    engine = TideEngine(scheduler, sink, clock=lambda: clock["now"])
    scheduler.activate()

    for now in ticks.tolist():
        clock["now"] = now
        prediction = engine.tick()
        if prediction is not None:
            print(json.dumps({**prediction.to_dict(), "display": sink.last.text}))

    heights = tide_curve(ticks, scheduler.tidal)
    summary = {
        "ticks": int(len(ticks)),
        "recomputations": scheduler.state.recompute_count,
        "height_min": float(heights.min()),
        "height_max": float(heights.max()),
    }
    print(json.dumps({"summary": summary}))
    logger.info("simulation finished", **summary)

    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
