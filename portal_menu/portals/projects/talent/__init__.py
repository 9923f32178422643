from .customization import TalentPortalMenu

PORTAL_KEY = "talent"
PORTAL_MENU_CLASS = TalentPortalMenu

__all__ = [
    "TalentPortalMenu",
    "PORTAL_KEY",
    "PORTAL_MENU_CLASS",
]
