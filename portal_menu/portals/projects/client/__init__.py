from .customization import ClientPortalMenu

PORTAL_KEY = "client"
PORTAL_MENU_CLASS = ClientPortalMenu

__all__ = [
    "ClientPortalMenu",
    "PORTAL_KEY",
    "PORTAL_MENU_CLASS",
]
