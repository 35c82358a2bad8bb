"""
Service collection: the configuration builder modules write into.

One `ServiceCollection` is created per composition and handed by reference to
every module's `configure_services` hook in activation order. Nothing here
touches Django directly; `apply()` writes the accumulated configuration into a
settings namespace (the `globals()` of a settings module) once activation is
complete.

What modules can contribute
---------------------------
- Django apps, middleware and template context processors (ordered, de-duplicated).
- Stylesheets linked by the main layout.
- Dict settings merged into existing ones (`merge_setting`); explicit settings
  in the settings module win over module contributions on conflicting keys.
- Defaults applied only when a setting is absent (`set_default`).
- API routes (DRF viewsets by dotted path) and URLconf mounts.
- Entity stores (`add_entity_store`), see `modulekit.stores`.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, MutableMapping, Optional, Tuple

from .exceptions import ServiceRegistrationError
from .stores import EntityStore, EntityStoreBuilder

ROUTER_PATH = "modulekit.stores.EntityStoreRouter"


@dataclass(frozen=True)
class ApiRoute:
    prefix: str
    viewset: str
    basename: Optional[str] = None


@dataclass(frozen=True)
class UrlMount:
    route: str
    urlconf: str
    namespace: Optional[str] = None


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge `override` into a copy of `base` (override wins)."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _append_unique(target: List[str], value: str) -> None:
    if value not in target:
        target.append(value)


class ServiceCollection:
    def __init__(self) -> None:
        self.apps: List[str] = []
        self.middleware: List[Tuple[str, Optional[str]]] = []
        self.context_processors: List[str] = []
        self.stylesheets: List[str] = []
        self.settings: Dict[str, Dict[str, Any]] = {}
        self.defaults: Dict[str, Any] = {}
        self.api_routes: List[ApiRoute] = []
        self.url_mounts: List[UrlMount] = []
        self.entity_stores: Dict[str, EntityStore] = {}

    # Registration --------------------------------------------------------
    def add_app(self, label: str) -> "ServiceCollection":
        _append_unique(self.apps, label)
        return self

    def add_middleware(self, path: str, *, before: Optional[str] = None) -> "ServiceCollection":
        """Append `path`, or insert it ahead of `before` when that entry is present."""
        if all(existing != path for existing, _ in self.middleware):
            self.middleware.append((path, before))
        return self

    def add_context_processor(self, path: str) -> "ServiceCollection":
        _append_unique(self.context_processors, path)
        return self

    def add_stylesheet(self, url: str) -> "ServiceCollection":
        _append_unique(self.stylesheets, url)
        return self

    def merge_setting(self, name: str, value: Dict[str, Any]) -> "ServiceCollection":
        self.settings[name] = deep_merge(self.settings.get(name, {}), value)
        return self

    def set_default(self, name: str, value: Any) -> "ServiceCollection":
        self.defaults.setdefault(name, value)
        return self

    def add_api_route(self, prefix: str, viewset: str, basename: Optional[str] = None) -> "ServiceCollection":
        if any(route.prefix == prefix for route in self.api_routes):
            raise ServiceRegistrationError(f"API route '{prefix}' already registered")
        self.api_routes.append(ApiRoute(prefix=prefix, viewset=viewset, basename=basename))
        return self

    def add_urls(self, route: str, urlconf: str, namespace: Optional[str] = None) -> "ServiceCollection":
        if any(mount.route == route and mount.urlconf == urlconf for mount in self.url_mounts):
            return self
        self.url_mounts.append(UrlMount(route=route, urlconf=urlconf, namespace=namespace))
        return self

    def add_entity_store(
        self,
        name: str,
        configure: Callable[[EntityStoreBuilder], EntityStoreBuilder],
    ) -> EntityStore:
        if name in self.entity_stores:
            raise ServiceRegistrationError(f"Entity store '{name}' already registered")
        builder = EntityStoreBuilder(name)
        store = (configure(builder) or builder).build()
        self.entity_stores[name] = store
        return store

    # Application ---------------------------------------------------------
    def apply(self, namespace: MutableMapping[str, Any]) -> None:
        """Write the collected configuration into a settings namespace."""
        installed = list(namespace.get("INSTALLED_APPS", []))
        for label in self.apps:
            _append_unique(installed, label)
        namespace["INSTALLED_APPS"] = installed

        middleware = list(namespace.get("MIDDLEWARE", []))
        for path, before in self.middleware:
            if path in middleware:
                continue
            if before in middleware:
                middleware.insert(middleware.index(before), path)
            else:
                middleware.append(path)
        namespace["MIDDLEWARE"] = middleware

        if self.context_processors:
            namespace["TEMPLATES"] = self._templates_with_processors(namespace.get("TEMPLATES", []))

        if self.entity_stores:
            self._apply_stores(namespace)

        for name, value in self.settings.items():
            explicit = namespace.get(name) or {}
            namespace[name] = deep_merge(value, explicit)

        for name, value in self.defaults.items():
            namespace.setdefault(name, value)

    def _templates_with_processors(self, templates: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        templates = copy.deepcopy(list(templates))
        for backend in templates:
            if backend.get("BACKEND") == "django.template.backends.django.DjangoTemplates":
                processors = backend.setdefault("OPTIONS", {}).setdefault("context_processors", [])
                for path in self.context_processors:
                    _append_unique(processors, path)
                return templates
        raise ServiceRegistrationError("Context processors registered but no DjangoTemplates backend is configured")

    def _apply_stores(self, namespace: MutableMapping[str, Any]) -> None:
        databases = dict(namespace.get("DATABASES", {}))
        for name, store in self.entity_stores.items():
            if name in databases:
                raise ServiceRegistrationError(f"Entity store '{name}' collides with an existing database alias")
            databases[name] = store.database_settings()
        namespace["DATABASES"] = databases

        routers = list(namespace.get("DATABASE_ROUTERS", []))
        _append_unique(routers, ROUTER_PATH)
        namespace["DATABASE_ROUTERS"] = routers

        namespace["ENTITY_STORES"] = {name: store.as_setting() for name, store in self.entity_stores.items()}
