"""
Exceptions raised while composing an application from modules.

All of these surface during startup (settings import or WSGI bootstrap) and are
fatal: the process must not start with a half-built module graph.
"""

from __future__ import annotations

from typing import Sequence


class ModuleError(Exception):
    """Base class for module composition failures."""


class ModuleDefinitionError(ModuleError):
    """A module declaration is malformed (e.g., depends on a non-module)."""


class DuplicateModuleError(ModuleError):
    """Two distinct module classes share the same name."""

    def __init__(self, name: str, first: type, second: type) -> None:
        self.name = name
        self.first = first
        self.second = second
        super().__init__(
            f"Module name '{name}' is defined by both "
            f"{first.__module__}.{first.__qualname__} and "
            f"{second.__module__}.{second.__qualname__}"
        )


class ModuleCycleError(ModuleError):
    """The depends-on relation contains a cycle; no activation order exists."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = tuple(cycle)
        super().__init__("Module dependency cycle: " + " -> ".join(self.cycle))


class ServiceRegistrationError(ModuleError):
    """A module registered a conflicting service (e.g., two stores with one name)."""


class ApplicationStateError(ModuleError):
    """An application lifecycle step was invoked out of order or twice."""
