from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ...defaults import DefaultPortalMenu
from .mappings import MENU_CONFIG


@dataclass(slots=True)
class ClientPortalMenu(DefaultPortalMenu):
    portal_key: str = "client"
    title: str = "Client Portal"

    def get_menu_config(self) -> Dict[str, Any]:
        return MENU_CONFIG
