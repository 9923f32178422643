from .interfaces import PortalMenu
from .registry import register_portal_menu
from .service import get_portal_menu, list_portals

__all__ = [
    "PortalMenu",
    "get_portal_menu",
    "list_portals",
    "register_portal_menu",
]
