"""
Module declarations.

A module is a class deriving from `ModuleBase`. It names itself (defaults to the
class name), declares the modules it depends on, optionally lists Django apps it
ships, and overrides any of the activation hooks:

- `configure_services(application, services)` — contribute configuration to the
  shared `ServiceCollection`.
- `register_nav_items(nav_items)` — add entries to the navigation surface.
- `register_icons(icons)` — map icon slots to icons.
- `configure_pipeline(application, handler)` — run once the WSGI handler exists.

Edges are declared with the `depends_on` class decorator (stackable) or by
setting `dependencies` directly:

    @depends_on(TemplatesModule)
    @depends_on(MaterialDesignIconsModule)
    class ShellModule(ModuleBase):
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Tuple, Type, TypeVar

from .exceptions import ModuleDefinitionError

if TYPE_CHECKING:  # pragma: no cover
    from .application import ApplicationBase
    from .registries import IconsCollection, NavItemCollection
    from .services import ServiceCollection

M = TypeVar("M", bound=Type["ModuleBase"])


class ModuleBase:
    """Default (no-op) implementation of every activation hook."""

    name: str = ""
    dependencies: Tuple[Type["ModuleBase"], ...] = ()
    apps: Tuple[str, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.__dict__.get("name"):
            cls.name = cls.__name__

    def configure_services(self, application: "ApplicationBase", services: "ServiceCollection") -> None:
        pass

    def register_nav_items(self, nav_items: "NavItemCollection") -> None:
        pass

    def register_icons(self, icons: "IconsCollection") -> None:
        pass

    def configure_pipeline(self, application: "ApplicationBase", handler: Any) -> None:
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


def is_module(obj: Any) -> bool:
    """True for `ModuleBase` subclasses (not the base itself, not instances)."""
    return isinstance(obj, type) and issubclass(obj, ModuleBase) and obj is not ModuleBase


def depends_on(*modules: Type[ModuleBase]) -> Callable[[M], M]:
    """
    Class decorator adding depends-on edges.

    Stacked decorators keep reading order: the topmost decorator's modules come
    first in `dependencies`. Edges inherited from a parent module are kept.
    """
    for module in modules:
        if not is_module(module):
            raise ModuleDefinitionError(f"depends_on() expects module classes, got {module!r}")

    def decorate(cls: M) -> M:
        if not is_module(cls):
            raise ModuleDefinitionError(f"@depends_on can only decorate modules, got {cls!r}")
        existing = tuple(getattr(cls, "dependencies", ()))
        added = tuple(module for module in modules if module not in existing)
        cls.dependencies = added + existing
        return cls

    return decorate
