"""Single-instant prediction CLI.

Usage:
    python -m tidelunar.cli.predict --epoch 0

Outputs JSON with the next tide event, range class and lunar details to stdout.
"""

from __future__ import annotations

import argparse
import json

from pydantic import ValidationError


def main(argv: list[str] | None = None) -> int:
    """Run one prediction.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success, 2 = configuration error).
    """
    parser = argparse.ArgumentParser(description="Predict the next tide and the tidal range")
    parser.add_argument("--epoch", type=int, default=None, help="Epoch seconds (default: now)")

    from ._common import add_config_arguments, resolve_config

    add_config_arguments(parser)
    args = parser.parse_args(argv)

    from ..core.constants import MODEL_VERSION_TIDE
    from ..core.logging import get_logger
    from ..display import format_frame
    from ..engine import system_clock
    from ..lunar.model import moon_illumination, moon_phase_name
    from ..scheduler import predict
    from ..tide.model import tide_direction

    logger = get_logger(__name__)

    try:
        config = resolve_config(args)
        tidal = config.tidal_constants()
        lunar = config.lunar_constants()
    except (FileNotFoundError, ValidationError, ValueError) as exc:
        logger.error("invalid configuration", error=str(exc))
        return 2

    epoch = args.epoch if args.epoch is not None else system_clock()
    prediction = predict(epoch, tidal, lunar)

    output = {
        **prediction.to_dict(),
        "direction": tide_direction(epoch, tidal),
        "moon_phase": moon_phase_name(epoch, lunar),
        "moon_illumination": moon_illumination(epoch, lunar),
        "display": format_frame(prediction).text,
        "model_version": MODEL_VERSION_TIDE,
    }

    print(json.dumps(output, indent=2))

    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
