"""`chadcn list` - show the component catalog."""

from __future__ import annotations

from pathlib import Path

import typer

from chadcn.cli.utils import print_catalog, resolve_cwd
from chadcn.cli_ui import print_info
from chadcn.core.config import ConfigStore
from chadcn.core.registry import Registry, build_registry
from chadcn.core.runner import resolve_target_dir


def installed_components(registry: Registry, components_dir: Path) -> set[str]:
    """Components whose primary source file already exists in components_dir."""
    return {
        component.name
        for component in registry.all()
        if component.files and (components_dir / component.files[0]).is_file()
    }


def list_command(
    cwd: str | None = typer.Option(
        None, "--cwd", "-c", help="Project directory (defaults to current directory)"
    ),
) -> None:
    """
    List available components grouped by category.

    In an initialized project, components already present are marked.
    """
    project_root = resolve_cwd(cwd)
    registry = build_registry()

    installed: set[str] = set()
    config = ConfigStore(project_root).load()
    if config is not None:
        installed = installed_components(registry, resolve_target_dir(project_root, config))

    print_catalog(registry, installed)
    if installed:
        print_info(f"{len(installed)} of {len(registry)} components installed")
