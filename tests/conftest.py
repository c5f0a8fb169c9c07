"""Shared pytest fixtures for scrollfix tests."""

from __future__ import annotations

import pytest

from scrollfix.core.curves import (
    AccelerationCurveBuilder,
    AccelerationCurveParams,
    AccelerationPreset,
    preset_params,
)

# ============================================================================
# Acceleration Fixtures
# ============================================================================


@pytest.fixture
def builder() -> AccelerationCurveBuilder:
    """Builder with the default solver tolerance."""
    return AccelerationCurveBuilder()


@pytest.fixture
def standard_params() -> AccelerationCurveParams:
    """Standard profile: 60 → 130 px per tick, no hump."""
    return AccelerationCurveParams(
        px_per_tick_base=60,
        px_per_tick_end=130,
        tick_interval_max=0.16,
        tick_interval_accel_end=0.015,
        acceleration_hump=0.0,
    )


@pytest.fixture
def precise_params() -> AccelerationCurveParams:
    """Precise profile: 3 → 15 px per tick, smooth low-speed join."""
    return preset_params(AccelerationPreset.PRECISE)


@pytest.fixture(params=list(AccelerationPreset), ids=lambda p: p.value)
def any_preset_params(request) -> AccelerationCurveParams:
    """Each preset in turn."""
    return preset_params(request.param)
