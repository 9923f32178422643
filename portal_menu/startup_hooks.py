from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from fastapi import FastAPI

from .menu.composer import compose_menu
from .menu.errors import ConfigurationError
from .menu.routes import load_route_table
from .menu.state import MenuState, get_menu_state
from .menu.types import MenuConfig, RouteRecord
from .portals import get_portal_menu
from .settings.config import settings

logger = logging.getLogger(__name__)


def bootstrap_menu(
    portal_key: str | None = None,
    routes: Iterable[RouteRecord | Mapping[str, Any]] | None = None,
    state: MenuState | None = None,
) -> MenuConfig:
    """Compose the portal's menu against its route table and install it.

    Without explicit ``routes`` the table is read from ``settings.route_table_path``.
    Any ``ConfigurationError`` propagates; nothing is installed in that case.
    """
    portal = get_portal_menu(portal_key)
    if routes is None:
        if not settings.route_table_path:
            raise ConfigurationError("route_table_path is not configured")
        routes = load_route_table(settings.route_table_path)
    config = compose_menu(portal.get_skeleton(), routes)
    (state or get_menu_state()).initialize(config)
    logger.info("menu_bootstrapped portal=%s groups=%d", portal.portal_key, len(config.menus))
    return config


def register_startup_hooks(app: FastAPI) -> None:
    @app.on_event("startup")
    def _bootstrap_menu() -> None:
        """Build the sidebar menu before the first request is served."""
        try:
            bootstrap_menu(settings.active_portal)
        except ConfigurationError:
            logger.exception("menu_bootstrap_failed portal=%s", settings.active_portal)
            raise

    @app.on_event("shutdown")
    def _clear_menu() -> None:
        get_menu_state().clear()
