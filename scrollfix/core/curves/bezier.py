"""
SCROLLFIX - CUBIC BEZIER CURVES
===============================

Cubic Bezier curves evaluated as functions y(x).

A curve is defined by four 2D control points. To read y at a given x we
first solve x(t) = x for the curve parameter t, then evaluate y(t).

Mathematical Foundation:
- Cubic Bezier: B(t) = (1-t)³P₀ + 3(1-t)²t P₁ + 3(1-t)t² P₂ + t³ P₃
- t ∈ [0, 1]: curve parameter (NOT the x coordinate)
- x(t) must be non-decreasing for x → t to be well defined

Solving x(t) = x:
- A few Newton iterations seeded with the linear guess
- Bisection on [0, 1] as fallback
- Hard cap on the total iteration count
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .errors import (
    CurveError,
    DomainError,
    InvalidControlPoints,
    RootFindingDidNotConverge,
)

logger = logging.getLogger(__name__)

DEFAULT_EPSILON = 0.08
MAX_NEWTON_ITERATIONS = 8
MAX_ITERATIONS = 64


@dataclass(frozen=True)
class Point:
    """
    2D control point.

    Attributes:
        x: Input coordinate
        y: Output coordinate
    """
    x: float
    y: float

    def __post_init__(self):
        """Reject NaN and infinities."""
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError(f"Point coordinates must be finite, got ({self.x}, {self.y})")


class Curve:
    """
    Cubic Bezier curve evaluated as y(x).

    Usage:
        curve = Curve([
            Point(0.0, 0.0),
            Point(0.4, 0.0),
            Point(0.6, 1.0),
            Point(1.0, 1.0)
        ], epsilon=0.001)

        y = curve.evaluate(0.5)
        slope = curve.derivative(0.5)

    Instances are immutable and safe to share between threads.
    """

    def __init__(self, control_points: Sequence[Point], epsilon: float = DEFAULT_EPSILON):
        """
        Initialize curve.

        Args:
            control_points: Exactly 4 points [P₀, P₁, P₂, P₃]
            epsilon: Tolerance on |x(t) - x| when solving for t

        Raises:
            InvalidControlPoints: Wrong point count, or x-coordinates decrease
            ValueError: epsilon is not strictly positive
        """
        if len(control_points) != 4:
            raise InvalidControlPoints(
                f"Cubic Bezier requires exactly 4 control points, got {len(control_points)}"
            )
        if not epsilon > 0:
            raise ValueError(f"epsilon must be > 0, got {epsilon}")

        points = tuple(control_points)

        # Non-decreasing control x-coordinates keep x(t) monotonic
        for i in range(1, 4):
            if points[i].x < points[i - 1].x:
                raise InvalidControlPoints(
                    f"Control point x-coordinates must be non-decreasing, "
                    f"got {[p.x for p in points]}"
                )
        if not points[3].x > points[0].x:
            raise InvalidControlPoints(
                f"Curve domain is empty: first x={points[0].x}, last x={points[3].x}"
            )

        self._points: Tuple[Point, Point, Point, Point] = points
        self._epsilon = float(epsilon)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def control_points(self) -> Tuple[Point, Point, Point, Point]:
        return self._points

    @property
    def epsilon(self) -> float:
        return self._epsilon

    @property
    def x_min(self) -> float:
        return self._points[0].x

    @property
    def x_max(self) -> float:
        return self._points[3].x

    # ------------------------------------------------------------------
    # Evaluation by curve parameter t
    # ------------------------------------------------------------------

    @staticmethod
    def _bernstein(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
        u = 1 - t
        return (
            u ** 3 * p0 +
            3 * u ** 2 * t * p1 +
            3 * u * t ** 2 * p2 +
            t ** 3 * p3
        )

    @staticmethod
    def _first_derivative(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
        # dB/dt = 3(1-t)²(P₁-P₀) + 6(1-t)t(P₂-P₁) + 3t²(P₃-P₂)
        u = 1 - t
        return (
            3 * u ** 2 * (p1 - p0) +
            6 * u * t * (p2 - p1) +
            3 * t ** 2 * (p3 - p2)
        )

    @staticmethod
    def _second_derivative(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
        return 6 * (1 - t) * (p2 - 2 * p1 + p0) + 6 * t * (p3 - 2 * p2 + p1)

    @staticmethod
    def _third_derivative(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
        return 6 * (p3 - 3 * p2 + 3 * p1 - p0)

    def _xs(self) -> List[float]:
        return [p.x for p in self._points]

    def _ys(self) -> List[float]:
        return [p.y for p in self._points]

    def x_at(self, t: float) -> float:
        """x-coordinate at curve parameter t (clamped to [0, 1])."""
        t = max(0.0, min(1.0, t))
        return self._bernstein(t, *self._xs())

    def y_at(self, t: float) -> float:
        """y-coordinate at curve parameter t (clamped to [0, 1])."""
        t = max(0.0, min(1.0, t))
        return self._bernstein(t, *self._ys())

    def point_at(self, t: float) -> Point:
        return Point(self.x_at(t), self.y_at(t))

    # ------------------------------------------------------------------
    # Evaluation by x
    # ------------------------------------------------------------------

    def solve_t(self, x: float) -> float:
        """
        Find the curve parameter t ∈ [0, 1] with x(t) = x.

        Args:
            x: Input value within [x_min, x_max]

        Returns:
            t such that |x(t) - x| < epsilon

        Raises:
            DomainError: x outside [x_min, x_max]
            RootFindingDidNotConverge: iteration cap exceeded
        """
        x_min, x_max = self.x_min, self.x_max
        if math.isnan(x) or x < x_min or x > x_max:
            raise DomainError(x, x_min, x_max)
        if x == x_min:
            return 0.0
        if x == x_max:
            return 1.0

        xs = self._xs()
        iterations = 0

        # Newton's method, seeded with the linear guess
        t = (x - x_min) / (x_max - x_min)
        for _ in range(MAX_NEWTON_ITERATIONS):
            iterations += 1
            residual = self._bernstein(t, *xs) - x
            if abs(residual) < self._epsilon:
                return t
            slope = self._first_derivative(t, *xs)
            if abs(slope) < 1e-12:
                break
            t = t - residual / slope
            if not 0.0 <= t <= 1.0:
                break

        # Fall back to bisection
        lo, hi = 0.0, 1.0
        residual = math.inf
        while iterations < MAX_ITERATIONS:
            iterations += 1
            t = (lo + hi) * 0.5
            residual = self._bernstein(t, *xs) - x
            if abs(residual) < self._epsilon:
                return t
            if residual < 0:
                lo = t
            else:
                hi = t

        logger.error("Root finding failed at x=%s for control points %s", x, self._points)
        raise RootFindingDidNotConverge(x, iterations, residual)

    def evaluate(self, x: float) -> float:
        """
        Evaluate y at x.

        Precondition: x_min <= x <= x_max. Anything outside the domain is
        the caller's job (see AccelerationCurve for flat/linear fallback).

        Raises:
            DomainError: x outside the domain
            RootFindingDidNotConverge: x(t) = x could not be solved
        """
        return self._bernstein(self.solve_t(x), *self._ys())

    def derivative(self, x: float) -> float:
        """
        Evaluate dy/dx at x, computed as (dy/dt) / (dx/dt).

        Where dx/dt and dy/dt both vanish (e.g. t = 1 when P₂ = P₃), the
        ratio of the next non-vanishing derivative order is used, which is
        the direction the curve actually leaves that point in. Where only
        dx/dt vanishes the tangent is vertical and ±inf is returned, signed
        by the direction the curve travels in with increasing t.

        Raises:
            DomainError: x outside the domain
            RootFindingDidNotConverge: x(t) = x could not be solved
        """
        t = self.solve_t(x)
        xs, ys = self._xs(), self._ys()
        tiny = 1e-12 * max(1.0, self.x_max - self.x_min)

        orders = (self._first_derivative, self._second_derivative, self._third_derivative)
        for k, order in enumerate(orders, start=1):
            dx = order(t, *xs)
            dy = order(t, *ys)
            if abs(dx) > tiny:
                return dy / dx
            if abs(dy) > tiny:
                # Arriving at t = 1, B(1) - B(1-s) ~ (-1)^(k+1) · s^k · Bₖ
                direction = (-1) ** (k + 1) if t == 1.0 else 1
                return math.copysign(math.inf, direction * dy)

        raise CurveError(f"Curve is degenerate at x={x}, derivative undefined")

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    def __repr__(self) -> str:
        points = ", ".join(f"({p.x:g}, {p.y:g})" for p in self._points)
        return f"Curve([{points}], epsilon={self._epsilon:g})"

    @classmethod
    def from_json(cls, points_json: List[List[float]], epsilon: float = DEFAULT_EPSILON) -> "Curve":
        """
        Create curve from JSON representation.

        Args:
            points_json: List of [x, y] pairs
                         Example: [[0, 0], [0, 0], [1, 1], [1, 1]]
            epsilon: Solver tolerance

        Returns:
            Curve instance
        """
        return cls([Point(x, y) for x, y in points_json], epsilon=epsilon)


# Straight diagonal y = x. The default epsilon of 0.08 makes animations
# driven by this curve visibly choppy, hence the tighter value.
LINEAR_CURVE = Curve(
    [Point(0, 0), Point(0, 0), Point(1, 1), Point(1, 1)],
    epsilon=0.001
)
