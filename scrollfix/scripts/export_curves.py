#!/usr/bin/env python3
"""
SCROLLFIX - EXPORT ACCELERATION CURVES
======================================

Samples acceleration curves and writes them to CSV for plotting.

Usage:
    python -m scrollfix.scripts.export_curves --output curves.csv
    python -m scrollfix.scripts.export_curves --config config.yaml --preset precise
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

from scrollfix.config import load_config
from scrollfix.core.curves import AccelerationPreset, sample_acceleration_curve

logger = logging.getLogger(__name__)


def export_curves(
    config_path: Optional[str],
    presets: List[AccelerationPreset],
    num_points: int,
    x_end: Optional[float] = None
) -> pd.DataFrame:
    """
    Sample each preset's curve into one long-format DataFrame.

    Returns:
        DataFrame with columns preset, ticks_per_second, px_per_tick, region
    """
    config = load_config(config_path or "config.yaml")

    frames = []
    for preset in presets:
        curve = config.acceleration_curve(preset)
        logger.info("Sampling %s: %r", preset.value, curve)
        frame = sample_acceleration_curve(curve, num_points=num_points, x_end=x_end)
        frame.insert(0, "preset", preset.value)
        frames.append(frame)

    return pd.concat(frames, ignore_index=True)


def main(argv: Optional[List[str]] = None) -> int:
    """Main export workflow."""
    parser = argparse.ArgumentParser(
        description="Export scroll acceleration curves to CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # All presets with default config
  python -m scrollfix.scripts.export_curves --output curves.csv

  # Only the precise preset, 200 samples
  python -m scrollfix.scripts.export_curves \\
    --preset precise \\
    --points 200 \\
    --output precise.csv
        """
    )

    parser.add_argument(
        '--config',
        default=None,
        help='YAML config file (default: config.yaml if present)'
    )

    parser.add_argument(
        '--preset',
        action='append',
        choices=[p.value for p in AccelerationPreset],
        help='Preset to export (repeatable, default: all)'
    )

    parser.add_argument(
        '--points',
        type=int,
        default=100,
        help='Samples per curve (default: 100)'
    )

    parser.add_argument(
        '--x-end',
        type=float,
        default=None,
        help='Last tick rate to sample (default: 1.5 × x_max)'
    )

    parser.add_argument(
        '--output',
        default='curves.csv',
        help='Output CSV path (default: curves.csv)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(name)s] %(levelname)s: %(message)s"
    )

    if args.config and not Path(args.config).exists():
        logger.error("Config file not found: %s", args.config)
        return 1

    presets = [AccelerationPreset(p) for p in (args.preset or [p.value for p in AccelerationPreset])]

    try:
        df = export_curves(args.config, presets, args.points, args.x_end)
    except ValueError as e:
        logger.error("Export failed: %s", e)
        return 1

    df.to_csv(args.output, index=False)
    logger.info("Wrote %d rows to %s", len(df), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
