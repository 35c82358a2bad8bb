"""
Module composition for Django applications.

Public surface:

- `ModuleBase`, `depends_on` — declare modules and their edges.
- `ApplicationBase`, `WebApplicationBuilder` — compose and build an application.
- `NavItem`, `Icon`, `IconSlot` — things modules register.
- `AutoCreateOption` — entity store schema creation policy.

Nothing imported here touches Django's app registry, so settings modules can
import it.
"""

from .application import ApplicationBase, WebApplicationBuilder
from .base import ModuleBase, depends_on
from .exceptions import (
    ApplicationStateError,
    DuplicateModuleError,
    ModuleCycleError,
    ModuleDefinitionError,
    ModuleError,
    ServiceRegistrationError,
)
from .registries import Icon, IconSlot, NavItem
from .services import ServiceCollection
from .stores import AutoCreateOption

__all__ = [
    "ApplicationBase",
    "WebApplicationBuilder",
    "ModuleBase",
    "depends_on",
    "ServiceCollection",
    "NavItem",
    "Icon",
    "IconSlot",
    "AutoCreateOption",
    "ModuleError",
    "ModuleDefinitionError",
    "DuplicateModuleError",
    "ModuleCycleError",
    "ServiceRegistrationError",
    "ApplicationStateError",
]
