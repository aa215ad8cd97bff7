"""Shared CLI helpers: config loading with command-line overrides."""

from __future__ import annotations

import argparse
from typing import Any

from ..core.config import TideLunarConfig, default_config, load_config, merge_config
from ..core.logging import set_log_level


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--phase-shift", type=float, default=None, help="Lunitidal lag (s)")
    parser.add_argument("--period", type=float, default=None, help="Half-tide period (s)")
    parser.add_argument("--refresh", type=int, default=None, help="Refresh grid (s)")
    parser.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARN, ERROR")


def resolve_config(args: argparse.Namespace) -> TideLunarConfig:
    """Build the effective config from a file plus CLI overrides.

    Raises:
        FileNotFoundError: If --config points to a missing file.
        pydantic.ValidationError: If the result is invalid.
    """
    config = load_config(args.config) if args.config else default_config()

    overrides: dict[str, Any] = {}
    if args.phase_shift is not None:
        overrides.setdefault("tide", {})["phase_shift_seconds"] = args.phase_shift
    if args.period is not None:
        overrides.setdefault("tide", {})["half_tide_period_seconds"] = args.period
    if args.refresh is not None:
        overrides.setdefault("scheduler", {})["refresh_interval_seconds"] = args.refresh
    if args.log_level is not None:
        overrides["log_level"] = args.log_level.upper()
    if overrides:
        config = merge_config(config, overrides)

    set_log_level(config.log_level)
    return config
