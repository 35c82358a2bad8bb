"""
Entity stores: named databases holding a fixed set of model types.

Declaring a store
-----------------
Modules register stores on the service collection with a fluent builder:

    services.add_entity_store("TodoShellModule", lambda store: store
        .add_types("todo.Todo")
        .with_auto_create_option(AutoCreateOption.DATABASE_AND_SCHEMA)
        .in_memory()
    )

Types are referenced by model label ("app_label.ModelName") so modules can be
declared before Django's app registry is ready.

Runtime
-------
- Each store becomes a database alias named after the store. In-memory stores
  use a shared-cache SQLite memory database, reachable from every thread of the
  process and dropped when the process exits.
- `EntityStoreRouter` sends reads, writes and migrations of a store's types to
  its alias and keeps every other model off store aliases.
- `update_schema()` creates missing tables for a store's types, honoring the
  store's `AutoCreateOption`. The schema update module runs it at pipeline time.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import environ
from django.conf import settings

from .exceptions import ServiceRegistrationError

logger = logging.getLogger(__name__)


class AutoCreateOption(str, enum.Enum):
    NONE = "None"
    SCHEMA_ONLY = "SchemaOnly"
    DATABASE_AND_SCHEMA = "DatabaseAndSchema"
    SCHEMA_ALREADY_EXISTS = "SchemaAlreadyExists"

    @property
    def creates_schema(self) -> bool:
        return self in (AutoCreateOption.SCHEMA_ONLY, AutoCreateOption.DATABASE_AND_SCHEMA)


@dataclass(frozen=True)
class EntityStore:
    name: str
    types: Tuple[str, ...]
    auto_create: AutoCreateOption = AutoCreateOption.SCHEMA_ALREADY_EXISTS
    url: Optional[str] = None

    @property
    def is_in_memory(self) -> bool:
        return self.url is None

    def database_settings(self) -> Dict[str, Any]:
        """Django `DATABASES` entry for this store."""
        if self.is_in_memory:
            return {
                "ENGINE": "django.db.backends.sqlite3",
                "NAME": f"file:{self.name}?mode=memory&cache=shared",
            }
        return environ.Env.db_url_config(self.url)

    def as_setting(self) -> Dict[str, Any]:
        """Entry for the `ENTITY_STORES` setting read by the router."""
        return {
            "types": list(self.types),
            "auto_create": self.auto_create.value,
            "url": self.url,
        }


class EntityStoreBuilder:
    """Fluent configuration for one store; `build()` validates and freezes it."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._types: List[str] = []
        self._auto_create = AutoCreateOption.SCHEMA_ALREADY_EXISTS
        self._url: Optional[str] = None

    def add_types(self, *labels: str) -> "EntityStoreBuilder":
        for label in labels:
            if not isinstance(label, str) or label.count(".") != 1:
                raise ServiceRegistrationError(
                    f"Store '{self._name}': types are model labels like 'app.Model', got {label!r}"
                )
            if label not in self._types:
                self._types.append(label)
        return self

    def with_auto_create_option(self, option: AutoCreateOption) -> "EntityStoreBuilder":
        self._auto_create = AutoCreateOption(option)
        return self

    def in_memory(self) -> "EntityStoreBuilder":
        self._url = None
        return self

    def with_database_url(self, url: str) -> "EntityStoreBuilder":
        self._url = url
        return self

    def build(self) -> EntityStore:
        if not self._types:
            raise ServiceRegistrationError(f"Store '{self._name}' declares no types")
        return EntityStore(
            name=self._name,
            types=tuple(self._types),
            auto_create=self._auto_create,
            url=self._url,
        )


class EntityStoreRouter:
    """Django database router for entity stores (see `DATABASE_ROUTERS`)."""

    def __init__(self) -> None:
        self._routes: Dict[str, str] = {}
        for name, entry in getattr(settings, "ENTITY_STORES", {}).items():
            for label in entry["types"]:
                self._routes[label.lower()] = name
        self._aliases = set(self._routes.values())

    def store_for(self, model) -> Optional[str]:
        return self._routes.get(model._meta.label_lower)

    def db_for_read(self, model, **hints):
        return self.store_for(model)

    def db_for_write(self, model, **hints):
        return self.store_for(model)

    def allow_relation(self, obj1, obj2, **hints):
        first, second = self.store_for(type(obj1)), self.store_for(type(obj2))
        if first is None and second is None:
            return None
        return first == second

    def allow_migrate(self, db, app_label, model_name=None, **hints):
        if model_name is None:
            return False if db in self._aliases else None
        alias = self._routes.get(f"{app_label}.{model_name}".lower())
        if alias is not None:
            return db == alias
        if db in self._aliases:
            return False
        return None


def update_schema(store: EntityStore) -> List[str]:
    """
    Create tables for the store's types that do not exist yet.

    Returns:
        The names of the tables created (empty when the option forbids creation
        or everything already exists).
    """
    from django.apps import apps
    from django.db import connections

    if not store.auto_create.creates_schema:
        logger.info("Schema update skipped for store %s (auto_create=%s)", store.name, store.auto_create.value)
        return []

    connection = connections[store.name]
    existing = set(connection.introspection.table_names())
    created: List[str] = []
    with connection.schema_editor() as editor:
        for label in store.types:
            model = apps.get_model(label)
            table = model._meta.db_table
            if table in existing:
                continue
            editor.create_model(model)
            created.append(table)
    if created:
        logger.info("Created tables %s in store %s", ", ".join(created), store.name)
    return created
