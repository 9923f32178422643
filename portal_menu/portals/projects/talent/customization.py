from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ...defaults import DefaultPortalMenu
from .mappings import MENU_CONFIG


@dataclass(slots=True)
class TalentPortalMenu(DefaultPortalMenu):
    portal_key: str = "talent"
    title: str = "Talent Portal"

    def get_menu_config(self) -> Dict[str, Any]:
        return MENU_CONFIG
