"""Tests for drag deceleration curves."""

from __future__ import annotations

import math

import pytest

from scrollfix.core.curves import (
    MOMENTUM_DRAG,
    MOMENTUM_MS_PER_STEP,
    SCROLL_DRAG,
    TRACKPAD_DRAG,
    DragCurve,
    DragCurveParams,
)


class TestDragCurveParams:
    """Parameter validation and presets."""

    def test_presets(self) -> None:
        assert SCROLL_DRAG == DragCurveParams(50, 23, 1.0)
        assert MOMENTUM_DRAG == DragCurveParams(50, 40, 0.7)
        assert MOMENTUM_MS_PER_STEP == 205
        assert TRACKPAD_DRAG == DragCurveParams(1.0, 30, 0.7)

    @pytest.mark.parametrize(
        "stop_speed, coefficient, exponent",
        [(-1, 23, 1.0), (50, 0, 1.0), (50, 23, 0)],
    )
    def test_invalid(self, stop_speed, coefficient, exponent) -> None:
        with pytest.raises(ValueError):
            DragCurveParams(stop_speed, coefficient, exponent)


class TestExponentialDrag:
    """Exponent 1: v(t) = v₀·exp(-c·t)."""

    def test_speed(self) -> None:
        drag = DragCurve(2000, SCROLL_DRAG)
        assert drag.speed_at(0) == 2000
        assert drag.speed_at(0.1) == pytest.approx(2000 * math.exp(-2.3))

    def test_time_to_stop(self) -> None:
        drag = DragCurve(2000, SCROLL_DRAG)
        assert drag.time_to_stop == pytest.approx(math.log(2000 / 50) / 23)
        assert drag.speed_at(drag.time_to_stop) == pytest.approx(50)

    def test_distance_to_stop(self) -> None:
        drag = DragCurve(2000, SCROLL_DRAG)
        assert drag.distance_to_stop == pytest.approx((2000 - 50) / 23)

    def test_already_slow(self) -> None:
        drag = DragCurve(10, SCROLL_DRAG)
        assert drag.time_to_stop == 0.0
        assert drag.distance_to_stop == 0.0

    def test_never_stops_without_stop_speed(self) -> None:
        drag = DragCurve(100, DragCurveParams(0, 10, 1.0))
        assert drag.time_to_stop == math.inf
        assert drag.distance_to_stop == pytest.approx(10)


class TestPowerLawDrag:
    """Exponents other than 1."""

    @pytest.mark.parametrize("params", [MOMENTUM_DRAG, TRACKPAD_DRAG, DragCurveParams(1, 0.01, 1.5)])
    def test_distance_derivative_is_speed(self, params) -> None:
        drag = DragCurve(1500, params)
        h = 1e-6
        t = drag.time_to_stop / 2
        numeric = (drag.distance_at(t + h) - drag.distance_at(t - h)) / (2 * h)
        assert numeric == pytest.approx(drag.speed_at(t), rel=1e-4)

    def test_momentum_reaches_stop_speed(self) -> None:
        drag = DragCurve(1500, MOMENTUM_DRAG)
        assert drag.time_to_stop > 0
        assert drag.speed_at(drag.time_to_stop) == pytest.approx(50)

    def test_sub_linear_exponent_stops_in_finite_time(self) -> None:
        drag = DragCurve(1500, DragCurveParams(0, 40, 0.7))
        stop = drag.time_to_stop
        assert math.isfinite(stop)
        assert drag.speed_at(stop + 1) == 0.0
        assert drag.distance_at(stop + 1) == pytest.approx(drag.distance_at(stop))

    def test_speed_decreases(self) -> None:
        drag = DragCurve(1500, TRACKPAD_DRAG)
        speeds = [drag.speed_at(i * 0.05) for i in range(20)]
        assert speeds == sorted(speeds, reverse=True)

    def test_exponent_two(self) -> None:
        drag = DragCurve(100, DragCurveParams(10, 0.01, 2.0))
        assert drag.speed_at(1) == pytest.approx(100 / (1 + 0.01 * 100))
        assert drag.distance_at(1) == pytest.approx(math.log(2) / 0.01)
        assert drag.time_to_stop == pytest.approx((1 / 10 - 1 / 100) / 0.01)

    def test_zero_initial_speed(self) -> None:
        drag = DragCurve(0, MOMENTUM_DRAG)
        assert drag.speed_at(1) == 0.0
        assert drag.distance_at(1) == 0.0
        assert drag.time_to_stop == 0.0

    def test_negative_initial_speed(self) -> None:
        with pytest.raises(ValueError):
            DragCurve(-1, SCROLL_DRAG)
