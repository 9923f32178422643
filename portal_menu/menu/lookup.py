"""Navigation lookups over a resolved menu (sidebar highlight, breadcrumbs).

Top-level entries are sidebar sections; lookups only search inside them.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Union

from .types import MenuItem

MenuNode = Union[MenuItem, Mapping[str, Any]]


def _coerce(items: Iterable[MenuNode]) -> List[MenuItem]:
    return [item if isinstance(item, MenuItem) else MenuItem.from_dict(item) for item in items]


def _section_children(menus: Iterable[MenuNode]) -> List[MenuItem]:
    children: List[MenuItem] = []
    for group in _coerce(menus):
        children.extend(group.children)
    return children


def menu_item_index(item: MenuNode) -> str:
    """The key used to address a menu entry; the route name."""
    if isinstance(item, MenuItem):
        return item.name or ""
    return str(item.get("name") or "")


def flatten_menu_items(items: Iterable[MenuNode]) -> List[MenuItem]:
    result: List[MenuItem] = []

    def _flatten(nodes: Iterable[MenuItem]) -> None:
        for node in nodes:
            result.append(node)
            if node.children:
                _flatten(node.children)

    _flatten(_coerce(items))
    return result


def find_menu_item_by_index(menus: Iterable[MenuNode], index: str) -> MenuItem | None:
    if not index:
        return None
    for item in flatten_menu_items(_section_children(menus)):
        if menu_item_index(item) == index:
            return item
    return None


def find_menu_item_by_route(menus: Iterable[MenuNode], route: MenuNode) -> MenuItem | None:
    return find_menu_item_by_index(menus, menu_item_index(route))


def get_menu_item_path(menus: Iterable[MenuNode], index: str) -> List[str]:
    """Indices from the section's child down to the matching entry.

    Unnamed nested groups contribute ``""`` so the trail keeps one element per level.
    """
    if not index:
        return []

    def _find(items: List[MenuItem], trail: List[str]) -> List[str] | None:
        for item in items:
            current = [*trail, menu_item_index(item)]
            if menu_item_index(item) == index:
                return current
            if item.children:
                found = _find(item.children, current)
                if found is not None:
                    return found
        return None

    for group in _coerce(menus):
        found = _find(group.children, [])
        if found is not None:
            return found
    return []


def get_active_menu_index(menus: Iterable[MenuNode], route_name: str | None = None, path: str | None = None) -> str:
    """Exact route-name match first, else the entry with the longest path prefix."""
    menus = _coerce(menus)
    if route_name:
        exact = find_menu_item_by_index(menus, route_name)
        if exact is not None:
            return menu_item_index(exact)

    if not path:
        return ""
    best_match = ""
    best_length = 0
    for item in flatten_menu_items(_section_children(menus)):
        if item.path and path.startswith(item.path) and len(item.path) > best_length:
            best_match = menu_item_index(item)
            best_length = len(item.path)
    return best_match
