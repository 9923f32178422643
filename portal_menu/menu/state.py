"""Holder for the one active resolved menu.

Bootstrap composes the menu once and hands it to ``initialize``; readers call
``get``. Re-initialization (role switch, logout/login) is a full replace and
never merges with the previous config.

Concurrency: there is no lock. The holder assumes a single bootstrap writer
and any number of readers; ``initialize`` rebinds one reference, so readers see
either the old or the new config, never a mix. Callers with several concurrent
writers must serialize them.
"""

from __future__ import annotations

import logging

from .types import MenuConfig

logger = logging.getLogger(__name__)


class MenuState:
    def __init__(self) -> None:
        self._config: MenuConfig | None = None

    def initialize(self, config: MenuConfig) -> None:
        self._config = config
        logger.info("menu_initialized groups=%d", len(config.menus))

    def get(self) -> MenuConfig | None:
        return self._config

    def clear(self) -> None:
        self._config = None

    @property
    def is_initialized(self) -> bool:
        return self._config is not None


# Process-wide holder used by the application bootstrap. Components that need
# the menu should receive a MenuState explicitly; this instance is the default.
_DEFAULT_STATE = MenuState()


def get_menu_state() -> MenuState:
    return _DEFAULT_STATE


def initialize_menu_config(config: MenuConfig) -> None:
    """Called once per application instance, after composition and before serving."""
    _DEFAULT_STATE.initialize(config)


def get_menu_config() -> MenuConfig | None:
    return _DEFAULT_STATE.get()


def clear_menu_config() -> None:
    _DEFAULT_STATE.clear()
