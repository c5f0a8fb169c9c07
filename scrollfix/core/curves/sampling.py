"""
Curve sampling into pandas DataFrames.

Useful for:
- Plotting and eyeballing presets
- Exporting curves to CSV
- Regression snapshots
"""
from __future__ import annotations

from typing import Optional

import pandas as pd

from .acceleration import AccelerationCurve
from .bezier import Curve


def sample_curve(curve: Curve, num_points: int = 20) -> pd.DataFrame:
    """
    Sample a curve at evenly spaced x values across its domain.

    Args:
        curve: Curve to sample
        num_points: Number of samples (>= 2)

    Returns:
        DataFrame with columns x, y, slope
    """
    if num_points < 2:
        raise ValueError("num_points must be >= 2")

    span = curve.x_max - curve.x_min
    rows = []
    for i in range(num_points):
        x = curve.x_min + span * i / (num_points - 1)
        rows.append({
            "x": x,
            "y": curve.evaluate(x),
            "slope": curve.derivative(x),
        })

    return pd.DataFrame(rows, columns=["x", "y", "slope"])


def sample_acceleration_curve(
    curve: AccelerationCurve,
    num_points: int = 50,
    x_start: float = 0.0,
    x_end: Optional[float] = None
) -> pd.DataFrame:
    """
    Sample an acceleration curve across all three regions.

    Args:
        curve: Curve to sample
        num_points: Number of samples (>= 2)
        x_start: First tick rate
        x_end: Last tick rate (default: 1.5 × x_max)

    Returns:
        DataFrame with columns ticks_per_second, px_per_tick, region
        (region ∈ {"flat", "curve", "linear"})
    """
    if num_points < 2:
        raise ValueError("num_points must be >= 2")
    if x_end is None:
        x_end = curve.x_max * 1.5
    if x_end <= x_start:
        raise ValueError(f"x_end ({x_end}) must be greater than x_start ({x_start})")

    rows = []
    for i in range(num_points):
        x = x_start + (x_end - x_start) * i / (num_points - 1)
        if x < curve.x_min:
            region = "flat"
        elif x <= curve.x_max:
            region = "curve"
        else:
            region = "linear"
        rows.append({
            "ticks_per_second": x,
            "px_per_tick": curve.evaluate(x),
            "region": region,
        })

    return pd.DataFrame(rows, columns=["ticks_per_second", "px_per_tick", "region"])
