from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from ..contracts import ApiMetaModel, ErrorCode, fail, map_exception_to_error, ok
from ..menu.errors import ConfigurationError
from ..menu.lookup import get_active_menu_index, get_menu_item_path
from ..menu.state import MenuState, get_menu_state
from ..menu.types import MenuConfig
from ..portals import get_portal_menu, list_portals
from ..settings.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/menu", tags=["menu"])


def _require_menu(state: MenuState) -> MenuConfig:
    config = state.get()
    if config is None:
        raise HTTPException(
            status_code=503,
            detail=fail(ErrorCode.MENU_NOT_INITIALIZED, "menu has not been initialized yet"),
        )
    return config


@router.get("")
def get_menu(state: MenuState = Depends(get_menu_state)):
    config = _require_menu(state)
    return ok(
        {"portal": settings.active_portal, "menu": config.to_dict()},
        meta=ApiMetaModel(portal=settings.active_portal),
    )


@router.get("/active")
def get_active_menu(
    route_name: str | None = Query(default=None),
    path: str | None = Query(default=None),
    state: MenuState = Depends(get_menu_state),
):
    if not route_name and not path:
        raise HTTPException(
            status_code=400,
            detail=fail(ErrorCode.INVALID_INPUT, "route_name or path is required"),
        )
    config = _require_menu(state)
    active_index = get_active_menu_index(config.menus, route_name=route_name, path=path)
    return ok(
        {
            "active_index": active_index,
            "breadcrumb": get_menu_item_path(config.menus, active_index),
        },
        meta=ApiMetaModel(portal=settings.active_portal),
    )


@router.get("/portals")
def get_portals():
    items = []
    try:
        for portal_key in list_portals():
            portal = get_portal_menu(portal_key)
            items.append(
                {
                    "portal_key": portal.portal_key,
                    "title": portal.title,
                    "skeleton": portal.get_skeleton().to_dict(),
                }
            )
    except ConfigurationError as exc:
        logger.warning("portal_skeleton_unavailable error=%s", exc)
        code, message, details = map_exception_to_error(exc)
        raise HTTPException(status_code=500, detail=fail(code, message, details=details)) from exc
    return ok({"active_portal": settings.active_portal, "items": items})
