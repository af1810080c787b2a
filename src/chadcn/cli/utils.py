"""
chadcn CLI utilities.

Shared helpers used across CLI command modules.
"""

from __future__ import annotations

import logging
import os
import platform
from pathlib import Path

import typer

from chadcn._version import get_version
from chadcn.cli_ui import SelectOption, group_options, print_error, print_groups
from chadcn.core.registry import (
    COMPONENT_CATEGORY_LABELS,
    THEME_CATEGORY_LABELS,
    DEFAULT_THEME,
    Registry,
)
from chadcn.core.templates import get_registry_url

LOG_LEVEL_ENV = "CHADCN_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"chadcn version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(
            f"  Python:        {platform.python_implementation()} {platform.python_version()}"
        )
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo("")
        typer.echo("Registry:")
        typer.echo(f"  URL:           {get_registry_url()}")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """
    Configure the root logger for CLI runs.

    --verbose forces DEBUG; otherwise CHADCN_LOG_LEVEL, defaulting to WARNING.
    """
    if verbose:
        level = logging.DEBUG
    else:
        name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("chadcn").setLevel(level)


def resolve_cwd(cwd: str | None) -> Path:
    """Project root for a command: --cwd if given, else the current directory."""
    root = Path(cwd).expanduser().resolve() if cwd else Path.cwd().resolve()
    if not root.is_dir():
        print_error(f"Directory does not exist: {root}")
        raise typer.Exit(code=1)
    return root


def display_path(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def component_options(
    registry: Registry, installed: set[str] | None = None
) -> list[SelectOption[str]]:
    """Catalog components as options, grouped by category label."""
    installed = installed or set()
    options = []
    for category, components in registry.by_category().items():
        label = COMPONENT_CATEGORY_LABELS.get(category, category.title())
        for component in components:
            options.append(
                SelectOption(
                    value=component.name,
                    label=component.name,
                    description=component.description,
                    group=label,
                    badge="installed" if component.name in installed else "",
                )
            )
    return options


def theme_options(registry: Registry) -> list[SelectOption[str]]:
    """Themes as options, grouped by theme family."""
    options = []
    for category, themes in registry.themes_by_category().items():
        label = THEME_CATEGORY_LABELS.get(category, category.title())
        for theme in themes:
            options.append(
                SelectOption(
                    value=theme.name,
                    label=theme.name,
                    description=f"{theme.label} - {theme.description}"
                    if theme.description
                    else theme.label,
                    group=label,
                    badge="default" if theme.name == DEFAULT_THEME else "",
                )
            )
    return options


def print_catalog(registry: Registry, installed: set[str] | None = None) -> None:
    """Print every component under its category heading."""
    options = component_options(registry, installed)
    print_groups(group_options(options), title="Available components")


def print_themes(registry: Registry) -> None:
    print_groups(group_options(theme_options(registry)), title="Available themes")
