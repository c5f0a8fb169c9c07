"""
SCROLLFIX - CONFIGURATION MODELS
================================

Pydantic models for scroll configuration.

All models are immutable (frozen=True). To change a value, build a new
config with `with_overrides` (or `model_copy(update=...)`) and hand it to
whatever consumes it; there is no hidden per-property caching to invalidate.

Sections mirror the `scroll` block of the config file:
- analysis: tick / swipe detection and tick-rate smoothing
- fast_scroll: exponential speed-up on repeated swipes
- smooth: smooth scrolling base values and drag
- acceleration: acceleration curve shape
- modifiers: modifier key bindings
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..core.curves.acceleration import (
    AccelerationCurve,
    AccelerationCurveParams,
    AccelerationPreset,
    build_acceleration_curve,
    preset_params,
)
from ..core.curves.drag import (
    MOMENTUM_DRAG,
    MOMENTUM_MS_PER_STEP,
    TRACKPAD_DRAG,
    DragCurveParams,
)


# ============================================================================
# MODIFIER KEYS
# ============================================================================

class ModifierKey(str, Enum):
    """Modifier key names accepted in the config."""
    COMMAND = "command"
    CONTROL = "control"
    OPTION = "option"
    SHIFT = "shift"

    @property
    def flag_mask(self) -> int:
        """Event flag bitmask for this key (CGEventFlags values)."""
        return EVENT_FLAG_MASKS[self]


EVENT_FLAG_MASKS: Dict[ModifierKey, int] = {
    ModifierKey.SHIFT: 0x00020000,
    ModifierKey.CONTROL: 0x00040000,
    ModifierKey.OPTION: 0x00080000,
    ModifierKey.COMMAND: 0x00100000,
}


# ============================================================================
# SECTIONS
# ============================================================================

class AnalysisSettings(BaseModel):
    """Tick and swipe detection."""
    scroll_swipe_threshold_ticks: int = Field(
        2, ge=1, description="Consecutive ticks that make a swipe"
    )
    fast_scroll_threshold_swipes: int = Field(
        4, ge=1, description="Consecutive swipe on which fast scrolling starts"
    )
    scroll_swipe_max_ticks: int = Field(
        9, ge=1, description="Most ticks a swipe produces without a free-spinning wheel"
    )
    tick_interval_max: float = Field(
        160 / 1000, gt=0, description="Longest gap (s) between consecutive ticks"
    )
    tick_interval_min: float = Field(
        15 / 1000, gt=0, description="Shortest gap (s) a user produces naturally, used to cap observations"
    )
    swipe_interval_max: float = Field(
        350 / 1000, gt=0, description="Longest gap (s) between consecutive swipes"
    )
    tick_interval_accel_end: float = Field(
        15 / 1000, gt=0, description="Gap (s) below which the acceleration curve is linearly extended"
    )
    double_smoothing_input_weight: float = Field(0.5, ge=0, le=1)
    double_smoothing_trend_weight: float = Field(0.2, ge=0, le=1)
    smoothing_input_weight: float = Field(
        0.5, ge=0, le=1, description="1.0 turns exponential smoothing off"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_intervals(self) -> "AnalysisSettings":
        if self.tick_interval_accel_end >= self.tick_interval_max:
            raise ValueError("tick_interval_accel_end must be shorter than tick_interval_max")
        if self.tick_interval_min > self.tick_interval_max:
            raise ValueError("tick_interval_min must not exceed tick_interval_max")
        return self


class FastScrollSettings(BaseModel):
    """Speed-up on repeated swipes."""
    exponential_base: float = Field(1.35, gt=0, description="How quickly fast scrolling gains speed")
    factor: float = Field(1.0, gt=0)
    scale: float = Field(0.3, gt=0)

    model_config = ConfigDict(frozen=True)


class SmoothScrollSettings(BaseModel):
    """Smooth scrolling animation."""
    enabled: bool = True
    px_per_tick_base: float = Field(60, gt=0)
    px_per_tick_end: float = Field(130, gt=0)
    ms_per_step: int = Field(140, gt=0)
    stop_speed: float = Field(50.0, ge=0)
    drag_exponent: float = Field(1.0, gt=0)
    drag_coefficient: float = Field(23.0, gt=0)
    send_momentum_scrolls: bool = True

    model_config = ConfigDict(frozen=True)


class AccelerationSettings(BaseModel):
    """Acceleration curve shape."""
    use_system_acceleration: bool = Field(
        False, description="Skip our curve and use the values provided by the OS"
    )
    hump: float = Field(0.0, gt=-1, le=1, description="Negative values give a smooth low-speed join")

    model_config = ConfigDict(frozen=True)


class ModifierSettings(BaseModel):
    """Modifier key bindings."""
    horizontal_scroll_key: ModifierKey = ModifierKey.SHIFT
    horizontal_scroll_enabled: bool = True
    magnification_scroll_key: ModifierKey = ModifierKey.COMMAND
    magnification_scroll_enabled: bool = True

    model_config = ConfigDict(frozen=True)

    @property
    def horizontal_scroll_mask(self) -> int:
        return self.horizontal_scroll_key.flag_mask

    @property
    def magnification_scroll_mask(self) -> int:
        return self.magnification_scroll_key.flag_mask


# ============================================================================
# SCROLL CONFIG
# ============================================================================

class ScrollConfig(BaseModel):
    """
    Complete scroll configuration.

    Example:
        config = ScrollConfig()
        curve = config.acceleration_curve()
        px = curve.evaluate(ticks_per_second)

        precise = config.acceleration_curve(AccelerationPreset.PRECISE)
    """
    disable_all: bool = Field(False, description="Kill switch for all scroll interception")
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)
    fast_scroll: FastScrollSettings = Field(default_factory=FastScrollSettings)
    smooth: SmoothScrollSettings = Field(default_factory=SmoothScrollSettings)
    acceleration: AccelerationSettings = Field(default_factory=AccelerationSettings)
    modifiers: ModifierSettings = Field(default_factory=ModifierSettings)

    model_config = ConfigDict(frozen=True)

    def acceleration_params(
        self,
        preset: AccelerationPreset | str = AccelerationPreset.STANDARD
    ) -> AccelerationCurveParams:
        """
        Curve inputs for a preset.

        The standard preset takes its pixel values and hump from this
        config; precise and quick keep their fixed values. All presets
        share this config's tick intervals.
        """
        preset = AccelerationPreset(preset)
        if preset is AccelerationPreset.STANDARD:
            return AccelerationCurveParams(
                px_per_tick_base=self.smooth.px_per_tick_base,
                px_per_tick_end=self.smooth.px_per_tick_end,
                tick_interval_max=self.analysis.tick_interval_max,
                tick_interval_accel_end=self.analysis.tick_interval_accel_end,
                acceleration_hump=self.acceleration.hump
            )
        return preset_params(
            preset,
            tick_interval_max=self.analysis.tick_interval_max,
            tick_interval_accel_end=self.analysis.tick_interval_accel_end
        )

    def acceleration_curve(
        self,
        preset: AccelerationPreset | str = AccelerationPreset.STANDARD
    ) -> AccelerationCurve:
        """Build the acceleration curve for a preset."""
        return build_acceleration_curve(self.acceleration_params(preset))

    def drag_params(self) -> DragCurveParams:
        """Drag for scroll wheel animations without momentum scrolls."""
        return DragCurveParams(
            stop_speed=self.smooth.stop_speed,
            drag_coefficient=self.smooth.drag_coefficient,
            drag_exponent=self.smooth.drag_exponent
        )

    def momentum_drag_params(self) -> DragCurveParams:
        return MOMENTUM_DRAG

    def momentum_ms_per_step(self) -> int:
        """Base curve duration used when sending momentum scrolls."""
        return MOMENTUM_MS_PER_STEP

    def trackpad_drag_params(self) -> DragCurveParams:
        return TRACKPAD_DRAG

    def with_overrides(self, **sections: Dict[str, Any]) -> "ScrollConfig":
        """
        Copy with some values replaced.

        Args:
            **sections: Section name → dict of field overrides. Top-level
                        scalars (e.g. disable_all) are passed as-is.

        Returns:
            New validated ScrollConfig; self is unchanged

        Example:
            config.with_overrides(smooth={"px_per_tick_base": 40})
        """
        data = self.model_dump()
        for name, value in sections.items():
            if name not in type(self).model_fields:
                raise ValueError(f"Unknown config section: {name}")
            if isinstance(value, dict):
                data[name] = {**data[name], **value}
            else:
                data[name] = value
        return type(self).model_validate(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "ScrollConfig":
        """
        Create config from a plain mapping (e.g. parsed YAML).

        Missing sections and fields fall back to defaults.
        """
        return cls.model_validate(data or {})
