"""
Collections modules contribute to while being activated.

- `NavItemCollection`: navigation entries (label, href, icon) rendered by the
  main layout and exposed at `/api/nav/`.
- `IconsCollection`: icon slot -> icon mapping. A slot is a stable name used by
  templates (e.g. "diagnostic"); modules may override what a slot renders.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple, Union

from .exceptions import ServiceRegistrationError


@dataclass(frozen=True)
class NavItem:
    label: str
    href: str
    icon: str = ""

    def as_dict(self) -> Dict[str, str]:
        return {"label": self.label, "href": self.href, "icon": self.icon}


NavItemLike = Union[NavItem, Tuple[str, str], Tuple[str, str, str]]


class NavItemCollection:
    """Ordered navigation entries; hrefs must be unique."""

    def __init__(self) -> None:
        self._items: List[NavItem] = []

    def add(self, item: NavItemLike) -> "NavItemCollection":
        if not isinstance(item, NavItem):
            item = NavItem(*item)
        if any(existing.href == item.href for existing in self._items):
            raise ServiceRegistrationError(f"Navigation entry for '{item.href}' already registered")
        self._items.append(item)
        return self

    def __iter__(self) -> Iterator[NavItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def as_list(self) -> List[Dict[str, str]]:
        return [item.as_dict() for item in self._items]


@dataclass(frozen=True)
class Icon:
    """An icon: CSS class name for font packs, or inline SVG markup."""

    name: str
    markup: str = ""


@dataclass(frozen=True)
class IconSlot:
    """A named place in the UI that renders some icon."""

    name: str
    default: Icon


class IconsCollection:
    """Slot overrides; the last registration for a slot wins."""

    def __init__(self) -> None:
        self._icons: Dict[str, Icon] = {}

    def register_icon(self, slot: IconSlot, icon: Icon) -> "IconsCollection":
        self._icons[slot.name] = icon
        return self

    def resolve(self, slot: IconSlot) -> Icon:
        return self._icons.get(slot.name, slot.default)

    def __contains__(self, slot: object) -> bool:
        return isinstance(slot, IconSlot) and slot.name in self._icons

    def __len__(self) -> int:
        return len(self._icons)

    def as_dict(self) -> Dict[str, Icon]:
        return dict(self._icons)
