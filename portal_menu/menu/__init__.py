from .composer import compose_menu, generate_advanced_menu, humanize_name
from .errors import ConfigurationError, DuplicateRouteNameWarning
from .filtering import create_permission_checker, filter_menu, filter_menu_items
from .lookup import (
    find_menu_item_by_index,
    find_menu_item_by_route,
    flatten_menu_items,
    get_active_menu_index,
    get_menu_item_path,
    menu_item_index,
)
from .routes import flatten_routes, load_route_table
from .state import MenuState, clear_menu_config, get_menu_config, get_menu_state, initialize_menu_config
from .types import (
    EmptyGroupPolicy,
    MenuConfig,
    MenuFilterOptions,
    MenuItem,
    PermissionChecker,
    ResolutionMode,
    ResolvedMenuConfig,
    RouteRecord,
    SimpleMenuConfig,
)

__all__ = [
    "ConfigurationError",
    "DuplicateRouteNameWarning",
    "EmptyGroupPolicy",
    "MenuConfig",
    "MenuFilterOptions",
    "MenuItem",
    "MenuState",
    "PermissionChecker",
    "ResolutionMode",
    "ResolvedMenuConfig",
    "RouteRecord",
    "SimpleMenuConfig",
    "clear_menu_config",
    "compose_menu",
    "create_permission_checker",
    "filter_menu",
    "filter_menu_items",
    "find_menu_item_by_index",
    "find_menu_item_by_route",
    "flatten_menu_items",
    "flatten_routes",
    "generate_advanced_menu",
    "get_active_menu_index",
    "get_menu_config",
    "get_menu_item_path",
    "get_menu_state",
    "humanize_name",
    "initialize_menu_config",
    "load_route_table",
    "menu_item_index",
]
