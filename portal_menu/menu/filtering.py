"""Visibility filtering of a resolved menu.

Callers pass a ``permission_checker`` that answers for a single
``meta.permission`` value; ``create_permission_checker`` builds one from the
permissions granted to the current user.
"""

from __future__ import annotations

from typing import Iterable, List

from .types import MenuConfig, MenuFilterOptions, MenuItem, Permission, PermissionChecker


def create_permission_checker(user_permissions: Iterable[str]) -> PermissionChecker:
    """A string permission must be granted; a list needs every entry granted."""
    granted = frozenset(user_permissions)

    def _check(permission: Permission) -> bool:
        if isinstance(permission, str):
            return permission in granted
        return all(p in granted for p in permission)

    return _check


def _is_visible(item: MenuItem, options: MenuFilterOptions) -> bool:
    if not options.show_hidden and item.hidden:
        return False
    permission = item.permission
    if permission and options.permission_checker is not None and not options.permission_checker(permission):
        return False
    if options.custom_filter is not None and not options.custom_filter(item):
        return False
    return True


def filter_menu_items(items: List[MenuItem], options: MenuFilterOptions | None = None) -> List[MenuItem]:
    options = options or MenuFilterOptions()
    visible: List[MenuItem] = []
    for item in items:
        if not _is_visible(item, options):
            continue
        if item.is_leaf:
            visible.append(
                MenuItem(title=item.title, icon=item.icon, name=item.name, path=item.path, meta=dict(item.meta))
            )
            continue
        children = filter_menu_items(item.children, options)
        # A group is only worth rendering when something inside it survived.
        if not children and not options.keep_empty_groups:
            continue
        visible.append(
            MenuItem(
                title=item.title,
                icon=item.icon,
                name=item.name,
                path=item.path,
                meta=dict(item.meta),
                children=children,
            )
        )
    return visible


def filter_menu(config: MenuConfig, options: MenuFilterOptions | None = None) -> MenuConfig:
    return MenuConfig(menus=filter_menu_items(config.menus, options))
