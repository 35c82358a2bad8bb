"""Ordered registry of root modules an application starts from."""

from __future__ import annotations

from typing import Dict, Iterator, List, Type

from .base import ModuleBase, is_module
from .exceptions import DuplicateModuleError, ModuleDefinitionError


class ModuleCatalog:
    """
    Root modules added by the application (and by the builder's `use_module`).

    Adding the same class twice is a no-op; adding a different class under a name
    already taken raises `DuplicateModuleError`.
    """

    def __init__(self) -> None:
        self._modules: Dict[str, Type[ModuleBase]] = {}

    def add_module(self, module: Type[ModuleBase]) -> "ModuleCatalog":
        if not is_module(module):
            raise ModuleDefinitionError(f"{module!r} is not a module")
        known = self._modules.get(module.name)
        if known is not None and known is not module:
            raise DuplicateModuleError(module.name, known, module)
        self._modules[module.name] = module
        return self

    def __contains__(self, module: object) -> bool:
        return is_module(module) and self._modules.get(module.name) is module

    def __iter__(self) -> Iterator[Type[ModuleBase]]:
        return iter(list(self._modules.values()))

    def __len__(self) -> int:
        return len(self._modules)

    @property
    def names(self) -> List[str]:
        return list(self._modules)
