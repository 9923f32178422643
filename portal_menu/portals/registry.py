from __future__ import annotations

from typing import Callable, Dict, List

from .interfaces import PortalMenu

PortalMenuFactory = Callable[[], PortalMenu]

_REGISTRY: Dict[str, PortalMenuFactory] = {}


def _normalize_portal_key(portal_key: str | None) -> str:
    return (portal_key or "").strip().lower()


def register_portal_menu(portal_key: str, factory: PortalMenuFactory) -> None:
    normalized = _normalize_portal_key(portal_key)
    if not normalized:
        raise ValueError("portal_key is required")
    _REGISTRY[normalized] = factory


def get_portal_menu_factory(portal_key: str | None) -> PortalMenuFactory | None:
    return _REGISTRY.get(_normalize_portal_key(portal_key))


def registered_portal_keys() -> List[str]:
    return sorted(_REGISTRY)
