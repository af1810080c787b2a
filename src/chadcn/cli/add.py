"""
`chadcn add` - copy components into the project.

Validation and dependency resolution happen before anything is written; a
declined extras confirmation exits cleanly with no files touched.
"""

from __future__ import annotations

from pathlib import Path

import typer

from chadcn.cli.utils import component_options, display_path, print_catalog, resolve_cwd
from chadcn.cli_ui import (
    confirm,
    console,
    multiselect,
    print_command,
    print_error,
    print_info,
    print_list,
    print_success,
    print_warning,
)
from chadcn.core.config import ProjectConfig, require_config
from chadcn.core.errors import (
    ChadcnError,
    InvalidComponentNameError,
    NotInitializedError,
    PackageInstallError,
)
from chadcn.core.packages import detect_package_manager, install_packages
from chadcn.core.registry import Registry, build_registry
from chadcn.core.runner import AddResult, AddRunner, plan_add, resolve_target_dir


def add_command(
    components: list[str] | None = typer.Argument(
        None, help="Components to add (prompts when omitted)"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompts"),
    overwrite: bool = typer.Option(
        False, "--overwrite", "-o", help="Replace files that already exist"
    ),
    all_components: bool = typer.Option(False, "--all", "-a", help="Add every component"),
    path: str | None = typer.Option(
        None, "--path", "-p", help="Target directory (defaults to the components alias)"
    ),
    cwd: str | None = typer.Option(
        None, "--cwd", "-c", help="Project directory (defaults to current directory)"
    ),
) -> None:
    """
    Add components to your project.

    Examples:
        chadcn add button                # One component
        chadcn add toolbar dialog        # Several (dependencies included)
        chadcn add --all --yes           # Everything, no prompts
        chadcn add button --overwrite    # Replace existing files
    """
    project_root = resolve_cwd(cwd)
    try:
        config = require_config(project_root)
    except NotInitializedError as e:
        print_error(e.message)
        print_info("Run `chadcn init` first.")
        raise typer.Exit(code=1)

    registry = build_registry()

    requested = list(components or [])
    if not requested and not all_components:
        selected = multiselect(
            component_options(registry),
            title="Which components would you like to add?",
        )
        if not selected:
            print_info("No components selected")
            return
        requested = selected

    try:
        plan = plan_add(registry, requested, all_components=all_components)
    except InvalidComponentNameError as e:
        print_error(f"Invalid component(s): {', '.join(e.invalid)}")
        print_catalog(registry)
        raise typer.Exit(code=1)

    if plan.needs_confirmation and not yes:
        print_info("The following dependencies will also be added:")
        print_list(plan.extras, style="highlight")
        if not confirm("Continue?", default=True):
            print_info("Cancelled, no files were written")
            return

    target_dir = resolve_target_dir(project_root, config, path)
    runner = AddRunner(registry, config, project_root)

    try:
        with console.status("Adding components...") as status:
            result = runner.run(plan, target_dir, overwrite=overwrite, progress=status.update)
    except (ChadcnError, OSError) as e:
        print_error(f"Failed to add components: {e}")
        raise typer.Exit(code=1)

    _print_result(result, project_root)
    _offer_install(project_root, result.packages, ask=bool(result.added_components) and not yes)

    if result.added_components:
        shown = next(
            (name for name in plan.requested if name in result.added_components),
            result.added_components[0],
        )
        _print_usage(registry, config, shown)


def _print_result(result: AddResult, project_root: Path) -> None:
    if result.added_files:
        print_success(f"Added {len(result.added_components)} component(s):")
        print_list(display_path(p, project_root) for p in result.added_files)
    else:
        print_info("No new files were written")

    if result.skipped_files:
        print_warning("Skipped existing files (use --overwrite to replace them):")
        print_list(display_path(p, project_root) for p in result.skipped_files)

    for warning in result.warnings:
        print_warning(warning)


def _offer_install(project_root: Path, packages: list[str], ask: bool) -> None:
    manager = detect_package_manager(project_root)
    command = " ".join(manager.install_command(packages))

    print_info("Required packages:")
    print_command(command)

    if not ask or not confirm("Install them now?", default=True):
        return

    try:
        with console.status(f"Running {manager.name}..."):
            install_packages(project_root, packages, manager)
    except PackageInstallError as e:
        print_error(e.message)
        print_info("Install them manually with:")
        print_command(command)
        return
    print_success("Packages installed")


def _print_usage(registry: Registry, config: ProjectConfig, name: str) -> None:
    component = registry.require(name)
    alias = config.aliases.components.rstrip("/")
    directory = component.files[0].split("/")[0] if component.files else component.pascal_name
    print_info("Usage:")
    print_command(f"import {{ {component.pascal_name} }} from '{alias}/{directory}';")
