"""
Curve engine for scroll acceleration.

Exports:
- Curve: Cubic Bezier evaluated as y(x)
- AccelerationCurveBuilder: Tick rate → px-per-tick curves
- DragCurve: Deceleration under drag
- sample_curve / sample_acceleration_curve: DataFrame sampling
"""
from .bezier import (
    Curve,
    Point,
    LINEAR_CURVE
)
from .acceleration import (
    AccelerationCurve,
    AccelerationCurveBuilder,
    AccelerationCurveParams,
    AccelerationPreset,
    build_acceleration_curve,
    preset_params
)
from .drag import (
    DragCurve,
    DragCurveParams,
    SCROLL_DRAG,
    MOMENTUM_DRAG,
    MOMENTUM_MS_PER_STEP,
    TRACKPAD_DRAG
)
from .errors import (
    CurveError,
    InvalidControlPoints,
    RootFindingDidNotConverge,
    DomainError
)
from .sampling import sample_curve, sample_acceleration_curve

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
    'SCROLL_DRAG',
    'MOMENTUM_DRAG',
    'MOMENTUM_MS_PER_STEP',
    'TRACKPAD_DRAG',
    'CurveError',
    'InvalidControlPoints',
    'RootFindingDidNotConverge',
    'DomainError',
    'sample_curve',
    'sample_acceleration_curve'
]
