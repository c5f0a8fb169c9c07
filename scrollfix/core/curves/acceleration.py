"""
SCROLLFIX - ACCELERATION CURVES
===============================

Maps scroll tick speed (ticks per second, x-axis) to scroll distance per
tick (pixels, y-axis).

The response y(x) has three regions:
- x < x_min:           y = y_min  (ticks too far apart to count as a swipe)
- x_min <= x <= x_max: y = b(x)   (cubic Bezier)
- x > x_max:           y = y_max + b'(x_max) * (x - x_max)  (tangent line)

Where:
- x_min = 1 / tick_interval_max        (slowest rate that still feels consecutive)
- x_max = 1 / tick_interval_accel_end  (rate at which acceleration is fully engaged)

The hump parameter shapes b(x) near x_min:
- hump < 0: the curve leaves (x_min, y_min) horizontally, so the join with
  the flat region has a continuous derivative
- hump >= 0: the curve leaves (x_min, y_min) steeply, the higher the hump
  the steeper
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .bezier import Curve, Point
from .errors import DomainError, InvalidControlPoints

logger = logging.getLogger(__name__)

ACCELERATION_EPSILON = 0.001

DEFAULT_TICK_INTERVAL_MAX = 160 / 1000
DEFAULT_TICK_INTERVAL_ACCEL_END = 15 / 1000


@dataclass(frozen=True)
class AccelerationCurveParams:
    """
    Inputs for building an acceleration curve.

    Attributes:
        px_per_tick_base: Output at x_min (and below)
        px_per_tick_end: Output at x_max
        tick_interval_max: Longest gap (s) between ticks that still counts as consecutive
        tick_interval_accel_end: Gap (s) below which acceleration is fully engaged
        acceleration_hump: Shape of the curve near x_min ∈ (-1, 1]
    """
    px_per_tick_base: float
    px_per_tick_end: float
    tick_interval_max: float = DEFAULT_TICK_INTERVAL_MAX
    tick_interval_accel_end: float = DEFAULT_TICK_INTERVAL_ACCEL_END
    acceleration_hump: float = 0.0

    def __post_init__(self):
        """Validate ranges."""
        if not (self.tick_interval_max > 0 and self.tick_interval_accel_end > 0):
            raise ValueError(
                f"Tick intervals must be > 0, got max={self.tick_interval_max}, "
                f"accel_end={self.tick_interval_accel_end}"
            )
        if not self.tick_interval_accel_end < self.tick_interval_max:
            raise ValueError(
                f"tick_interval_accel_end ({self.tick_interval_accel_end}) must be "
                f"shorter than tick_interval_max ({self.tick_interval_max})"
            )
        # At -1 the hump point lands on x_max and the curve arrives vertically,
        # leaving no finite slope to extend the curve with
        if not (-1.0 < self.acceleration_hump <= 1.0):
            raise ValueError(f"acceleration_hump must be in (-1, 1], got {self.acceleration_hump}")


class AccelerationCurve:
    """
    Three-region acceleration response built around a Bezier curve.

    Usage:
        curve = build_acceleration_curve(AccelerationCurveParams(60, 130))
        px = curve.evaluate(ticks_per_second)

    Immutable; one instance can serve any number of evaluations.
    """

    def __init__(self, curve: Curve, hump_point: Point):
        """
        Args:
            curve: Bezier core, its domain defines x_min and x_max
            hump_point: Second control point, in the unit square spanned by
                        (x_min, y_min) and (x_max, y_max)

        Raises:
            InvalidControlPoints: The curve has no finite slope at x_max
        """
        self.curve = curve
        self.hump_point = hump_point

        if not math.isfinite(curve.derivative(curve.x_max)):
            raise InvalidControlPoints(
                f"Curve has a vertical tangent at x_max={curve.x_max}, "
                f"it cannot be extended linearly"
            )

    @property
    def x_min(self) -> float:
        return self.curve.x_min

    @property
    def x_max(self) -> float:
        return self.curve.x_max

    @property
    def y_min(self) -> float:
        return self.curve.control_points[0].y

    @property
    def y_max(self) -> float:
        return self.curve.control_points[3].y

    @property
    def control_points(self):
        return self.curve.control_points

    @property
    def end_slope(self) -> float:
        """Slope of the linear extension beyond x_max."""
        return self.curve.derivative(self.x_max)

    def evaluate(self, x: float) -> float:
        """
        Pixels per tick at tick rate x.

        Args:
            x: Tick rate (ticks per second)

        Returns:
            px-per-tick, defined for every real x

        Raises:
            DomainError: x is NaN
        """
        if math.isnan(x):
            raise DomainError(x, self.x_min, self.x_max)
        if x < self.x_min:
            return self.y_min
        if x <= self.x_max:
            return self.curve.evaluate(x)
        return self.y_max + self.end_slope * (x - self.x_max)

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    def __repr__(self) -> str:
        return (
            f"AccelerationCurve(x=[{self.x_min:g}, {self.x_max:g}], "
            f"y=[{self.y_min:g}, {self.y_max:g}], hump=({self.hump_point.x:g}, {self.hump_point.y:g}))"
        )


class AccelerationCurveBuilder:
    """Builds AccelerationCurve instances from AccelerationCurveParams."""

    def __init__(self, epsilon: float = ACCELERATION_EPSILON):
        self.epsilon = epsilon

    @staticmethod
    def hump_point(acceleration_hump: float) -> Point:
        """
        Second control point in unit-square coordinates.

        Negative humps pull the point along the x-axis, positive humps
        push it up the y-axis.
        """
        if acceleration_hump < 0:
            return Point(-acceleration_hump, 0.0)
        return Point(0.0, acceleration_hump)

    def build(self, params: AccelerationCurveParams) -> AccelerationCurve:
        """
        Build the curve for params.

        Args:
            params: Curve inputs

        Returns:
            AccelerationCurve with control points
            [(x_min, y_min), hump, (x_max, y_max), (x_max, y_max)]
        """
        x_min = 1 / params.tick_interval_max
        y_min = float(params.px_per_tick_base)

        x_max = 1 / params.tick_interval_accel_end
        y_max = float(params.px_per_tick_end)

        hump = self.hump_point(params.acceleration_hump)
        x2 = x_min + hump.x * (x_max - x_min)
        y2 = y_min + hump.y * (y_max - y_min)

        # Third point sits on the end point, so nothing flattens out before x_max
        x3, y3 = x_max, y_max

        logger.debug(
            "Building acceleration curve: x=[%.3f, %.3f], y=[%.3f, %.3f], hump=%s",
            x_min, x_max, y_min, y_max, params.acceleration_hump
        )

        curve = Curve(
            [Point(x_min, y_min), Point(x2, y2), Point(x3, y3), Point(x_max, y_max)],
            epsilon=self.epsilon
        )
        return AccelerationCurve(curve, hump)


def build_acceleration_curve(params: AccelerationCurveParams) -> AccelerationCurve:
    """Build an acceleration curve with the default solver tolerance."""
    return AccelerationCurveBuilder().build(params)


# ============================================================================
# PRESETS
# ============================================================================

class AccelerationPreset(str, Enum):
    """Input device / use case profiles."""
    STANDARD = "standard"
    PRECISE = "precise"
    QUICK = "quick"


PRESETS: Dict[AccelerationPreset, Dict[str, float]] = {
    AccelerationPreset.STANDARD: {
        "px_per_tick_base": 60,
        "px_per_tick_end": 130,
        "acceleration_hump": 0.0,
    },
    # 2 px would feel better than 3 but trips assertions in pixel-snapping animators
    AccelerationPreset.PRECISE: {
        "px_per_tick_base": 3,
        "px_per_tick_end": 15,
        "acceleration_hump": -0.2,
    },
    AccelerationPreset.QUICK: {
        "px_per_tick_base": 80,
        "px_per_tick_end": 400,
        "acceleration_hump": -0.2,
    },
}


def preset_params(
    preset: AccelerationPreset | str,
    tick_interval_max: float = DEFAULT_TICK_INTERVAL_MAX,
    tick_interval_accel_end: float = DEFAULT_TICK_INTERVAL_ACCEL_END,
    acceleration_hump: Optional[float] = None
) -> AccelerationCurveParams:
    """
    Parameters for a named preset.

    Args:
        preset: Preset name or enum member
        tick_interval_max: Override for the consecutive-tick gap
        tick_interval_accel_end: Override for the full-acceleration gap
        acceleration_hump: Override for the preset's hump

    Raises:
        ValueError: Unknown preset name
    """
    values = dict(PRESETS[AccelerationPreset(preset)])
    if acceleration_hump is not None:
        values["acceleration_hump"] = acceleration_hump

    return AccelerationCurveParams(
        tick_interval_max=tick_interval_max,
        tick_interval_accel_end=tick_interval_accel_end,
        **values
    )
