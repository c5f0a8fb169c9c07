"""
SCROLLFIX - DRAG CURVES
=======================

Deceleration after a scroll animation hands over from its base curve.

Physics model:
    dv/dt = -c · v^e

where c is the drag coefficient and e the drag exponent. The animation
stops once v falls to the stop speed.

Closed forms (u = v₀^(1-e) - (1-e)·c·t):
- e = 1: v(t) = v₀·exp(-c·t)
- e ≠ 1: v(t) = u^(1/(1-e))
         For e < 1 the speed reaches zero in finite time (u = 0).
"""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class DragCurveParams:
    """
    Attributes:
        stop_speed: Speed (px/s) at which the animation ends
        drag_coefficient: c
        drag_exponent: e
    """
    stop_speed: float
    drag_coefficient: float
    drag_exponent: float

    def __post_init__(self):
        """Validate ranges."""
        if self.stop_speed < 0:
            raise ValueError(f"stop_speed must be >= 0, got {self.stop_speed}")
        if self.drag_coefficient <= 0:
            raise ValueError(f"drag_coefficient must be > 0, got {self.drag_coefficient}")
        if self.drag_exponent <= 0:
            raise ValueError(f"drag_exponent must be > 0, got {self.drag_exponent}")


# Default drag for scroll wheel animations when no momentum scrolls are sent
SCROLL_DRAG = DragCurveParams(stop_speed=50, drag_coefficient=23, drag_exponent=1.0)

# Snappiest drag and base curve duration that still let apps run their own
# momentum scroll. A snappier curve cuts off momentum in apps like Xcode.
MOMENTUM_DRAG = DragCurveParams(stop_speed=50, drag_coefficient=40, drag_exponent=0.7)
MOMENTUM_MS_PER_STEP = 205

# Trackpad emulation
TRACKPAD_DRAG = DragCurveParams(stop_speed=1.0, drag_coefficient=30, drag_exponent=0.7)


class DragCurve:
    """
    Speed and travelled distance under drag, starting at initial_speed.

    Usage:
        drag = DragCurve(initial_speed=2000, params=SCROLL_DRAG)
        duration = drag.time_to_stop
        distance = drag.distance_to_stop
    """

    def __init__(self, initial_speed: float, params: DragCurveParams):
        if initial_speed < 0:
            raise ValueError(f"initial_speed must be >= 0, got {initial_speed}")
        self.initial_speed = float(initial_speed)
        self.params = params

    def _u(self, t: float) -> float:
        e = self.params.drag_exponent
        c = self.params.drag_coefficient
        return self.initial_speed ** (1 - e) - (1 - e) * c * t

    def speed_at(self, t: float) -> float:
        """Speed after t seconds."""
        t = max(0.0, t)
        e = self.params.drag_exponent
        c = self.params.drag_coefficient
        if e == 1:
            return self.initial_speed * math.exp(-c * t)
        if self.initial_speed == 0:
            return 0.0
        u = self._u(t)
        if u <= 0:
            return 0.0
        return u ** (1 / (1 - e))

    def distance_at(self, t: float) -> float:
        """Distance travelled after t seconds."""
        t = max(0.0, t)
        v0 = self.initial_speed
        e = self.params.drag_exponent
        c = self.params.drag_coefficient

        if v0 == 0:
            return 0.0
        if e == 1:
            return v0 / c * (1 - math.exp(-c * t))
        if e == 2:
            return math.log1p(c * v0 * t) / c

        u = max(0.0, self._u(t))
        k = (2 - e) / (1 - e)
        return (v0 ** (2 - e) - u ** k) / ((2 - e) * c)

    @property
    def time_to_stop(self) -> float:
        """Seconds until the speed falls to stop_speed."""
        v0 = self.initial_speed
        vs = self.params.stop_speed
        e = self.params.drag_exponent
        c = self.params.drag_coefficient

        if v0 <= vs:
            return 0.0
        if e == 1:
            if vs == 0:
                return math.inf
            return math.log(v0 / vs) / c
        if e > 1 and vs == 0:
            return math.inf
        return (v0 ** (1 - e) - vs ** (1 - e)) / ((1 - e) * c)

    @property
    def distance_to_stop(self) -> float:
        """Distance travelled until the speed falls to stop_speed."""
        t = self.time_to_stop
        if math.isinf(t):
            e = self.params.drag_exponent
            if e < 2:
                return self.initial_speed ** (2 - e) / ((2 - e) * self.params.drag_coefficient)
            return math.inf
        return self.distance_at(t)
