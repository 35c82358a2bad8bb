"""
Application object and the fluent builder used by composition roots.

Lifecycle
---------
1. `WebApplicationBuilder.create_with_logging(log_name, factory)` creates the
   application logger and calls `factory(logger)`; the factory constructs the
   application (whose `__init__` typically adds root modules to `catalog` and
   picks `main_layout`).
2. `.use_server_context(namespace)` binds the settings namespace the services
   are written into; `.use_module(M)` adds another root module.
3. `.build_application()` resolves the module graph, activates every module
   exactly once (dependencies first), applies services and the log destination
   to the server context, and returns the application.
4. Later, `application.configure_pipeline(handler)` runs each module's pipeline
   hook once the WSGI handler exists.

Any error raised along the way propagates: startup aborts.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Generic, List, MutableMapping, Optional, Type, TypeVar

from .base import ModuleBase
from .catalog import ModuleCatalog
from .exceptions import ApplicationStateError
from .graph import activation_order
from .registries import IconsCollection, NavItemCollection
from .services import ServiceCollection

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT = "modulekit/layouts/default.html"


class ApplicationBase:
    """Owns the catalog, the activated modules and what they registered."""

    title = "Application"
    main_layout: str = DEFAULT_LAYOUT

    def __init__(
        self,
        configuration: Any,
        logger: logging.Logger,
        services: ServiceCollection,
        environment_name: str,
    ) -> None:
        self.configuration = configuration
        self.logger = logger
        self.services = services
        self.environment_name = environment_name
        self.catalog = ModuleCatalog()
        self.nav_items = NavItemCollection()
        self.icons = IconsCollection()
        self.modules: List[ModuleBase] = []
        self._activated = False
        self._pipeline_configured = False

    @property
    def is_development(self) -> bool:
        return self.environment_name.lower() == "development"

    @property
    def module_names(self) -> List[str]:
        return [module.name for module in self.modules]

    def get_module(self, module: Type[ModuleBase]) -> ModuleBase:
        for instance in self.modules:
            if type(instance) is module:
                return instance
        raise LookupError(f"Module '{module.name}' is not active")

    def activate(self) -> None:
        """Instantiate and activate every module reachable from the catalog."""
        if self._activated:
            raise ApplicationStateError("Application modules are already activated")
        for module_type in activation_order(self.catalog):
            module = module_type()
            for label in module.apps:
                self.services.add_app(label)
            module.configure_services(self, self.services)
            module.register_nav_items(self.nav_items)
            module.register_icons(self.icons)
            self.modules.append(module)
            logger.debug("Activated module %s", module.name)
        self._activated = True

    def configure_pipeline(self, handler: Any) -> Any:
        """Run pipeline hooks in activation order. Must be called exactly once."""
        if not self._activated:
            raise ApplicationStateError("configure_pipeline() called before the application was built")
        if self._pipeline_configured:
            raise ApplicationStateError("configure_pipeline() already called")
        for module in self.modules:
            module.configure_pipeline(self, handler)
        self._pipeline_configured = True
        self.logger.info(
            "%s started in %s with modules: %s",
            self.title,
            self.environment_name,
            ", ".join(self.module_names),
        )
        return handler

    def urlpatterns(self) -> list:
        from .urls import build_urlpatterns

        return build_urlpatterns(self)


@dataclass(frozen=True)
class LogDestination:
    """A log file every configured logger also writes to."""

    name: str
    directory: Path
    level: str = "INFO"

    @property
    def path(self) -> Path:
        return self.directory / self.name

    def apply(self, namespace: MutableMapping[str, Any]) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        config: Dict[str, Any] = copy.deepcopy(namespace.get("LOGGING") or {"version": 1})
        config.setdefault("version", 1)
        config.setdefault("disable_existing_loggers", False)
        config.setdefault("formatters", {})["application_file"] = {
            "format": "%(asctime)s level=%(levelname)s logger=%(name)s message=%(message)s",
        }
        config.setdefault("handlers", {})["application_file"] = {
            "class": "logging.FileHandler",
            "filename": str(self.path),
            "delay": True,
            "encoding": "utf-8",
            "formatter": "application_file",
        }
        root = config.setdefault("root", {"level": self.level, "handlers": []})
        root.setdefault("handlers", [])
        if "application_file" not in root["handlers"]:
            root["handlers"].append("application_file")
        for entry in config.get("loggers", {}).values():
            if entry.get("propagate", True) is False:
                handlers = entry.setdefault("handlers", [])
                if "application_file" not in handlers:
                    handlers.append("application_file")
        namespace["LOGGING"] = config


A = TypeVar("A", bound=ApplicationBase)


class WebApplicationBuilder(Generic[A]):
    def __init__(self, application: A, log_destination: Optional[LogDestination] = None) -> None:
        self._application = application
        self._log_destination = log_destination
        self._namespace: Optional[MutableMapping[str, Any]] = None
        self._built = False

    @classmethod
    def create_with_logging(
        cls,
        log_name: str,
        factory: Callable[[logging.Logger], A],
        *,
        log_dir: Optional[Path] = None,
        level: str = "INFO",
        logger_name: str = "modulekit.application",
    ) -> "WebApplicationBuilder[A]":
        destination = LogDestination(name=log_name, directory=Path(log_dir or "logs"), level=level)
        application = factory(logging.getLogger(logger_name))
        return cls(application, destination)

    @property
    def application(self) -> A:
        return self._application

    def use_server_context(self, namespace: MutableMapping[str, Any]) -> "WebApplicationBuilder[A]":
        self._namespace = namespace
        return self

    def use_module(self, module: Type[ModuleBase]) -> "WebApplicationBuilder[A]":
        self._application.catalog.add_module(module)
        return self

    def build_application(self) -> A:
        if self._built:
            raise ApplicationStateError("build_application() already called")
        self._application.activate()
        if self._namespace is not None:
            self._application.services.apply(self._namespace)
            if self._log_destination is not None:
                self._log_destination.apply(self._namespace)
        self._built = True
        return self._application
