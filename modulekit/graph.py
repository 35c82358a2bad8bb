"""
Module dependency resolver.

Given root modules, transitively collect every declared dependency and compute
an activation order in which each module follows all of its dependencies.

Rules
-----
- Depth-first, dependencies in declaration order, roots in the order given. The
  result is deterministic for a given declaration.
- Each module appears exactly once, no matter how many paths reach it.
- A cycle raises `ModuleCycleError` with the offending path.
- Two different classes answering to the same `name` raise `DuplicateModuleError`.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Type

from .base import ModuleBase, is_module
from .exceptions import DuplicateModuleError, ModuleCycleError, ModuleDefinitionError

ModuleType = Type[ModuleBase]

_VISITING = 1
_DONE = 2


def _check(module: object, *, referenced_by: str | None = None) -> None:
    if not is_module(module):
        where = f" (declared by '{referenced_by}')" if referenced_by else ""
        raise ModuleDefinitionError(f"{module!r} is not a module{where}")


def activation_order(roots: Iterable[ModuleType]) -> List[ModuleType]:
    """Return every module reachable from `roots`, dependencies first."""
    order: List[ModuleType] = []
    state: Dict[str, int] = {}
    by_name: Dict[str, ModuleType] = {}
    stack: List[str] = []

    def claim(module: ModuleType) -> None:
        known = by_name.setdefault(module.name, module)
        if known is not module:
            raise DuplicateModuleError(module.name, known, module)

    def visit(module: ModuleType) -> None:
        claim(module)
        mark = state.get(module.name)
        if mark == _DONE:
            return
        if mark == _VISITING:
            start = stack.index(module.name)
            raise ModuleCycleError(stack[start:] + [module.name])

        state[module.name] = _VISITING
        stack.append(module.name)
        for dependency in module.dependencies:
            _check(dependency, referenced_by=module.name)
            visit(dependency)
        stack.pop()
        state[module.name] = _DONE
        order.append(module)

    for root in roots:
        _check(root)
        visit(root)
    return order


def collect(roots: Iterable[ModuleType]) -> Dict[str, ModuleType]:
    """Map of module name -> class for everything reachable from `roots`."""
    return {module.name: module for module in activation_order(roots)}


def edges(modules: Iterable[ModuleType]) -> List[tuple[str, str]]:
    """Flat (dependent, dependency) name pairs, handy for diagnostics."""
    return [(module.name, dep.name) for module in modules for dep in module.dependencies]
