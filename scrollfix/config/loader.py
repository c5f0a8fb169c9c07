"""
YAML config loading.

The config file holds a `scroll` section whose keys match ScrollConfig:

    scroll:
      smooth:
        px_per_tick_base: 60
        px_per_tick_end: 130
      acceleration:
        hump: -0.2
      modifiers:
        horizontal_scroll_key: shift
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from .models import ScrollConfig

logger = logging.getLogger(__name__)

SCROLL_SECTION = "scroll"


def load_config_data(path: str | Path) -> Dict[str, Any]:
    """
    Read the scroll section of a YAML config file.

    Args:
        path: Config file path

    Returns:
        Scroll section mapping; empty if the file or section is missing

    Raises:
        ValueError: File is not a YAML mapping
        yaml.YAMLError: File is not valid YAML
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.info("Config file %s not found, using defaults", config_path)
        return {}

    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    section = data.get(SCROLL_SECTION) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{SCROLL_SECTION}' section in {config_path} must be a mapping")
    return section


def load_config(path: str | Path) -> ScrollConfig:
    """Load a ScrollConfig from a YAML file, defaults for anything missing."""
    return ScrollConfig.from_dict(load_config_data(path))
