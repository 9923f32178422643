from __future__ import annotations

from typing import Any, Dict, Protocol

from ..menu.types import MenuConfig


class PortalMenu(Protocol):
    portal_key: str
    title: str

    def get_menu_config(self) -> Dict[str, Any]:
        """Hand-written skeleton as a literal: ``{"menus": [{"title", "children": [{"name", "icon"}]}]}``.

        Leaves carry only a route name (and optionally an icon, title or meta);
        paths come from the route table at composition time.
        """
        ...

    def get_skeleton(self) -> MenuConfig:
        ...
