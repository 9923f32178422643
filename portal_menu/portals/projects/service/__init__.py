from .customization import ServicePortalMenu

PORTAL_KEY = "service"
PORTAL_MENU_CLASS = ServicePortalMenu

__all__ = [
    "ServicePortalMenu",
    "PORTAL_KEY",
    "PORTAL_MENU_CLASS",
]
