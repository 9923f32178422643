"""Compose a hand-written menu skeleton with the auto-discovered route table.

The skeleton decides which entries exist, how they are grouped and in which
order they appear. The route table only contributes paths and route meta.
Composition is a pure function of its inputs: nothing is mutated, no I/O.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Mapping

from ..settings.config import settings
from .errors import ConfigurationError
from .routes import coerce_route_table, flatten_routes
from .types import EmptyGroupPolicy, MenuConfig, MenuItem, ResolutionMode, RouteRecord

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def humanize_name(name: str) -> str:
    """``"AIChat"`` -> ``"AI Chat"``, ``"work_visa"`` -> ``"Work Visa"``."""
    words = re.split(r"[\s_\-]+", _CAMEL_BOUNDARY.sub(" ", name).strip())
    words = [w if w.isupper() else w[:1].upper() + w[1:] for w in words if w]
    return " ".join(words) or name


def _resolve_leaf(item: MenuItem, route: RouteRecord) -> MenuItem:
    meta: Dict[str, Any] = {**route.meta, **item.meta}
    title = item.title or meta.get("title") or humanize_name(item.name or "")
    icon = item.icon if item.icon is not None else meta.get("icon")
    return MenuItem(title=title, icon=icon, name=item.name, path=route.path, meta=meta)


def compose_menu(
    skeleton: MenuConfig | Mapping[str, Any],
    routes: Iterable[RouteRecord | Mapping[str, Any]],
    *,
    mode: ResolutionMode | str | None = None,
    empty_groups: EmptyGroupPolicy | str | None = None,
    join_parent_paths: bool | None = None,
) -> MenuConfig:
    """Merge ``skeleton`` against ``routes`` into a resolved menu.

    Unresolved leaves are dropped in lenient mode and collected into a single
    ``ConfigurationError`` in strict mode. Groups whose children were all
    dropped are kept with an empty ``children`` list unless ``empty_groups``
    is ``remove``. An empty route table is always a configuration error.
    """
    mode = ResolutionMode(mode or settings.menu_resolution_mode)
    empty_groups = EmptyGroupPolicy(empty_groups or settings.menu_empty_group_policy)
    if join_parent_paths is None:
        join_parent_paths = settings.menu_join_parent_paths

    if not isinstance(skeleton, MenuConfig):
        skeleton = MenuConfig.from_dict(skeleton)
    route_list = coerce_route_table(routes)
    if not route_list:
        raise ConfigurationError("route table is empty; refusing to build a menu without routes")

    route_map = flatten_routes(route_list, join_parent_paths=join_parent_paths)
    unresolved: List[str] = []

    def _process(items: List[MenuItem]) -> List[MenuItem]:
        resolved: List[MenuItem] = []
        for item in items:
            if item.is_leaf:
                route = route_map.get(item.name)
                if route is None:
                    unresolved.append(item.name)
                    if mode is ResolutionMode.LENIENT:
                        logger.warning("menu_leaf_dropped name=%s reason=no_matching_route", item.name)
                    continue
                resolved.append(_resolve_leaf(item, route))
                continue

            children = _process(item.children)
            if not children and empty_groups is EmptyGroupPolicy.REMOVE:
                logger.debug("menu_group_removed title=%s", item.title)
                continue
            resolved.append(
                MenuItem(
                    title=item.title,
                    icon=item.icon,
                    name=item.name,
                    path=None,
                    meta=dict(item.meta),
                    children=children,
                )
            )
        return resolved

    menus = _process(skeleton.menus)
    if unresolved and mode is ResolutionMode.STRICT:
        raise ConfigurationError(
            f"menu references unknown route names: {', '.join(unresolved)}",
            unresolved=unresolved,
        )

    logger.debug(
        "menu_composed groups=%d routes=%d dropped=%d mode=%s",
        len(menus),
        len(route_map),
        len(unresolved),
        mode.value,
    )
    return MenuConfig(menus=menus)


# Name used by the portal bootstrap code.
generate_advanced_menu = compose_menu
