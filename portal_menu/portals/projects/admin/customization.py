from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ...defaults import DefaultPortalMenu
from .mappings import MENU_CONFIG


@dataclass(slots=True)
class AdminPortalMenu(DefaultPortalMenu):
    portal_key: str = "admin"
    title: str = "Admin Portal"

    def get_menu_config(self) -> Dict[str, Any]:
        return MENU_CONFIG
