"""
Config store with change notifications.

Holds the current ScrollConfig and tells subscribers when it is replaced.
Consumers get the store (or a config) passed in explicitly; there is no
module-level singleton.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional

from .loader import load_config
from .models import ScrollConfig

logger = logging.getLogger(__name__)

ConfigListener = Callable[[ScrollConfig], None]


class ConfigStore:
    """
    Current scroll config plus listeners.

    Usage:
        store = ConfigStore()
        unsubscribe = store.subscribe(lambda cfg: rebuild(cfg.acceleration_curve()))
        store.update(store.current.with_overrides(acceleration={"hump": -0.2}))
        unsubscribe()
    """

    def __init__(self, initial: Optional[ScrollConfig] = None):
        self._current = initial if initial is not None else ScrollConfig()
        self._listeners: List[ConfigListener] = []

    @property
    def current(self) -> ScrollConfig:
        return self._current

    def subscribe(self, listener: ConfigListener) -> Callable[[], None]:
        """
        Register a listener called with every new config.

        Returns:
            Function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            self.unsubscribe(listener)

        return unsubscribe

    def unsubscribe(self, listener: ConfigListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def update(self, config: ScrollConfig) -> None:
        """
        Replace the current config and notify listeners in order.

        A listener that raises stops notification; the new config stays
        current and the error propagates.
        """
        if config == self._current:
            logger.debug("Config unchanged, skipping notification")
            return

        self._current = config
        logger.info("Scroll config updated, notifying %d listener(s)", len(self._listeners))

        for listener in list(self._listeners):
            try:
                listener(config)
            except Exception:
                logger.exception("Config listener %r failed", listener)
                raise

    def reload(self, path: str | Path) -> ScrollConfig:
        """Load config from a YAML file and make it current."""
        config = load_config(path)
        self.update(config)
        return config
