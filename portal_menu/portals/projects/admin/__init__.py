from .customization import AdminPortalMenu

PORTAL_KEY = "admin"
PORTAL_MENU_CLASS = AdminPortalMenu

__all__ = [
    "AdminPortalMenu",
    "PORTAL_KEY",
    "PORTAL_MENU_CLASS",
]
