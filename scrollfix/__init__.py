"""
scrollfix - scroll acceleration curves and configuration.

Exports:
- Curve, Point, LINEAR_CURVE: Cubic Bezier evaluation
- AccelerationCurveBuilder: Tick rate → px-per-tick curves
- ScrollConfig, ConfigStore: Configuration
"""
from .core.curves import (
    Curve,
    Point,
    LINEAR_CURVE,
    AccelerationCurve,
    AccelerationCurveBuilder,
    AccelerationCurveParams,
    AccelerationPreset,
    build_acceleration_curve,
    preset_params,
    DragCurve,
    DragCurveParams,
    CurveError,
    InvalidControlPoints,
    RootFindingDidNotConverge,
    DomainError
)
from .config import ScrollConfig, ConfigStore, ModifierKey, load_config

__version__ = "1.0.0"

__all__ = [
    'Curve',
    'Point',
    'LINEAR_CURVE',
    'AccelerationCurve',
    'AccelerationCurveBuilder',
    'AccelerationCurveParams',
    'AccelerationPreset',
    'build_acceleration_curve',
    'preset_params',
    'DragCurve',
    'DragCurveParams',
    'CurveError',
    'InvalidControlPoints',
    'RootFindingDidNotConverge',
    'DomainError',
    'ScrollConfig',
    'ConfigStore',
    'ModifierKey',
    'load_config'
]
