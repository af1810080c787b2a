"""
Transitive dependency expansion over the component registry.

Requested names are expanded depth-first, dependencies before dependents:

    resolve_dependencies(registry, ["toolbar"])  # -> ["tooltip", "toolbar"]

A component is marked visited before its dependencies are walked, so cycles
terminate and diamond dependencies are emitted once, at the position of
their first encounter.
"""

from __future__ import annotations

from collections.abc import Sequence

from .errors import RegistryIntegrityError
from .registry import Registry


def resolve_dependencies(registry: Registry, requested: Sequence[str]) -> list[str]:
    """
    Expand requested components into a dependency-closed install order.

    Args:
        registry: Catalog to resolve against
        requested: Component names, already validated against the registry

    Returns:
        Ordered, duplicate-free list of component names

    Raises:
        RegistryIntegrityError: if a dependency is missing from the catalog
    """
    resolved: list[str] = []
    visited: set[str] = set()

    def visit(name: str, parent: str | None) -> None:
        if name in visited:
            return
        visited.add(name)

        component = registry.lookup(name)
        if component is None:
            if parent is None:
                raise RegistryIntegrityError(f"Unvalidated component name: {name}")
            raise RegistryIntegrityError(f"'{parent}' depends on unknown component '{name}'")

        for dep in component.dependencies:
            visit(dep, name)
        resolved.append(name)

    for name in requested:
        visit(name, None)

    return resolved


def extra_dependencies(resolved: Sequence[str], requested: Sequence[str]) -> list[str]:
    """Components pulled in by dependency expansion, in resolved order."""
    wanted = set(requested)
    return [name for name in resolved if name not in wanted]
