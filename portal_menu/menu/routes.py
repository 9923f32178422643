"""Route-table helpers: normalize, flatten by name, load the router's JSON dump."""

from __future__ import annotations

import json
import logging
import warnings
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

from .errors import ConfigurationError, DuplicateRouteNameWarning
from .types import RouteRecord

logger = logging.getLogger(__name__)


def coerce_route_table(routes: Iterable[RouteRecord | Mapping[str, Any]]) -> List[RouteRecord]:
    return [route if isinstance(route, RouteRecord) else RouteRecord.from_dict(route) for route in routes]


def _join_path(parent_path: str, path: str) -> str:
    if not parent_path or path.startswith("/"):
        return path
    if not path:
        return parent_path
    return f"{parent_path.rstrip('/')}/{path}"


def flatten_routes(
    routes: Iterable[RouteRecord | Mapping[str, Any]],
    *,
    join_parent_paths: bool = False,
) -> Dict[str, RouteRecord]:
    """Index every named route, depth first, by its name.

    Nested routes stay addressable by their own name. Paths are taken verbatim
    unless ``join_parent_paths`` is set, in which case a relative child path is
    mounted under its parent's resolved path. On duplicate names the first
    occurrence wins.
    """
    route_map: Dict[str, RouteRecord] = {}

    def _walk(route_list: List[RouteRecord], parent_path: str) -> None:
        for route in route_list:
            full_path = _join_path(parent_path, route.path) if join_parent_paths else route.path
            if route.name:
                if route.name in route_map:
                    logger.warning(
                        "duplicate_route_name name=%s kept=%s ignored=%s",
                        route.name,
                        route_map[route.name].path,
                        full_path,
                    )
                    warnings.warn(
                        f"duplicate route name {route.name!r}; keeping the first occurrence",
                        DuplicateRouteNameWarning,
                        stacklevel=2,
                    )
                else:
                    route_map[route.name] = RouteRecord(name=route.name, path=full_path, meta=dict(route.meta))
            if route.children:
                _walk(route.children, full_path)

    _walk(coerce_route_table(routes), "")
    return route_map


def load_route_table(path: str | Path) -> List[RouteRecord]:
    """Read the route table emitted by the file-based router at build time.

    Accepts either a bare JSON array or an object with a ``routes`` array.
    """
    route_path = Path(path)
    if not route_path.exists():
        raise ConfigurationError(f"route table not found: {route_path}")
    try:
        with route_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"route table is not valid JSON: {route_path}") from exc

    if isinstance(data, dict):
        data = data.get("routes")
    if not isinstance(data, list):
        raise ConfigurationError(f"route table must be a JSON array of routes: {route_path}")
    return coerce_route_table(item for item in data if isinstance(item, dict))
