"""
Curve errors.

All of these are construction-time or contract errors: they are fully
determined by the inputs, so none of them is worth retrying.
"""
from __future__ import annotations


class CurveError(ValueError):
    """Base class for curve construction and evaluation failures."""


class InvalidControlPoints(CurveError):
    """Control points do not describe an x-monotonic curve."""


class RootFindingDidNotConverge(CurveError):
    """Solving x(t) = x exceeded the iteration cap."""

    def __init__(self, x: float, iterations: int, residual: float):
        super().__init__(
            f"Solving for t at x={x} did not converge after {iterations} "
            f"iterations (residual {residual:.3g})"
        )
        self.x = x
        self.iterations = iterations
        self.residual = residual


class DomainError(CurveError):
    """x lies outside the curve's [x_min, x_max] domain."""

    def __init__(self, x: float, x_min: float, x_max: float):
        super().__init__(f"x={x} is outside the curve domain [{x_min}, {x_max}]")
        self.x = x
        self.x_min = x_min
        self.x_max = x_max
