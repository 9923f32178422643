from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

# Icon references are opaque: a string key or any platform handle.
IconRef = Any

Permission = Union[str, Sequence[str]]
PermissionChecker = Callable[[Permission], bool]


class ResolutionMode(str, Enum):
    LENIENT = "lenient"
    STRICT = "strict"


class EmptyGroupPolicy(str, Enum):
    KEEP = "keep"
    REMOVE = "remove"


@dataclass(slots=True)
class MenuItem:
    title: str | None = None
    icon: IconRef = None
    name: str | None = None
    path: str | None = None
    meta: Dict[str, Any] = field(default_factory=dict)
    children: List["MenuItem"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        """A named node without children points at exactly one route."""
        return self.name is not None and not self.children

    @property
    def is_group(self) -> bool:
        return not self.is_leaf

    @property
    def permission(self) -> Permission | None:
        return self.meta.get("permission")

    @property
    def hidden(self) -> bool:
        return bool(self.meta.get("hidden", False))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "MenuItem":
        children = raw.get("children") or []
        meta = raw.get("meta") or {}
        return cls(
            title=raw.get("title"),
            icon=raw.get("icon"),
            name=raw.get("name"),
            path=raw.get("path"),
            meta=dict(meta),
            children=[child if isinstance(child, MenuItem) else cls.from_dict(child) for child in children],
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.title is not None:
            payload["title"] = self.title
        if self.icon is not None:
            payload["icon"] = self.icon
        if self.name is not None:
            payload["name"] = self.name
        if self.path is not None:
            payload["path"] = self.path
        if self.meta:
            payload["meta"] = dict(self.meta)
        if self.is_group:
            payload["children"] = [child.to_dict() for child in self.children]
        return payload


@dataclass(slots=True)
class MenuConfig:
    menus: List[MenuItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "MenuConfig":
        menus = raw.get("menus") or []
        return cls(menus=[item if isinstance(item, MenuItem) else MenuItem.from_dict(item) for item in menus])

    def to_dict(self) -> Dict[str, Any]:
        return {"menus": [item.to_dict() for item in self.menus]}


# A skeleton and a resolved menu share one shape; the names mark intent.
SimpleMenuConfig = MenuConfig
ResolvedMenuConfig = MenuConfig


@dataclass(slots=True)
class RouteRecord:
    name: str | None
    path: str = ""
    meta: Dict[str, Any] = field(default_factory=dict)
    children: List["RouteRecord"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "RouteRecord":
        name = raw.get("name")
        return cls(
            name=name if isinstance(name, str) else None,
            path=str(raw.get("path") or ""),
            meta=dict(raw.get("meta") or {}),
            children=[child if isinstance(child, RouteRecord) else cls.from_dict(child) for child in raw.get("children") or []],
        )


RouteTable = Sequence[RouteRecord]


@dataclass(slots=True)
class MenuFilterOptions:
    permission_checker: Optional[PermissionChecker] = None
    show_hidden: bool = False
    custom_filter: Optional[Callable[[MenuItem], bool]] = None
    keep_empty_groups: bool = False
