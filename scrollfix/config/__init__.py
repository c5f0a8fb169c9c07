"""
Configuration package for scrollfix.

Exports:
- ScrollConfig: Immutable scroll configuration
- ConfigStore: Current config + change listeners
- load_config: YAML loading
"""
from .models import (
    ScrollConfig,
    AnalysisSettings,
    FastScrollSettings,
    SmoothScrollSettings,
    AccelerationSettings,
    ModifierSettings,
    ModifierKey,
    EVENT_FLAG_MASKS
)
from .loader import load_config, load_config_data
from .store import ConfigStore

__all__ = [
    'ScrollConfig',
    'AnalysisSettings',
    'FastScrollSettings',
    'SmoothScrollSettings',
    'AccelerationSettings',
    'ModifierSettings',
    'ModifierKey',
    'EVENT_FLAG_MASKS',
    'load_config',
    'load_config_data',
    'ConfigStore'
]
