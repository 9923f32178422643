from __future__ import annotations

import importlib
import pkgutil
from typing import List, Type

from ..menu.errors import ConfigurationError
from ..settings.config import settings
from .interfaces import PortalMenu
from .registry import get_portal_menu_factory, register_portal_menu, registered_portal_keys

_BOOTSTRAPPED = False


def _ensure_builtin_portals() -> None:
    global _BOOTSTRAPPED
    if _BOOTSTRAPPED:
        return

    package = importlib.import_module(".projects", __package__)
    for module_info in pkgutil.iter_modules(package.__path__):
        if not module_info.ispkg:
            continue
        module = importlib.import_module(f"{package.__name__}.{module_info.name}")
        portal_cls = getattr(module, "PORTAL_MENU_CLASS", None)
        if portal_cls is None or not isinstance(portal_cls, type):
            continue
        portal_key = (getattr(module, "PORTAL_KEY", "") or module_info.name).strip().lower()
        if portal_key:
            register_portal_menu(portal_key, _factory_for(portal_cls))
    _BOOTSTRAPPED = True


def _factory_for(portal_cls: Type[PortalMenu]):
    def _build() -> PortalMenu:
        return portal_cls()

    return _build


def get_portal_menu(portal_key: str | None = None) -> PortalMenu:
    _ensure_builtin_portals()
    key = portal_key or settings.active_portal
    factory = get_portal_menu_factory(key)
    if factory is None:
        raise ConfigurationError(f"unknown portal: {key!r}")
    return factory()


def list_portals() -> List[str]:
    _ensure_builtin_portals()
    return registered_portal_keys()
