from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..menu.types import MenuConfig
from .interfaces import PortalMenu


@dataclass(slots=True)
class DefaultPortalMenu(PortalMenu):
    portal_key: str = "default"
    title: str = "Portal"

    def get_menu_config(self) -> Dict[str, Any]:
        return {"menus": []}

    def get_skeleton(self) -> MenuConfig:
        return MenuConfig.from_dict(self.get_menu_config())
