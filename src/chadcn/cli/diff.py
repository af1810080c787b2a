"""`chadcn diff` - compare installed components with the registry."""

from __future__ import annotations

import typer

from chadcn.cli.utils import resolve_cwd
from chadcn.cli_ui import print_error, print_info, print_warning
from chadcn.core.config import require_config
from chadcn.core.errors import NotInitializedError


def diff_command(
    component: str | None = typer.Argument(None, help="Component to check (defaults to all)"),
    cwd: str | None = typer.Option(
        None, "--cwd", "-c", help="Project directory (defaults to current directory)"
    ),
) -> None:
    """
    Check installed components for upstream changes.

    Comparison is not implemented yet; the command only verifies the project
    is initialized.
    """
    project_root = resolve_cwd(cwd)
    try:
        require_config(project_root)
    except NotInitializedError as e:
        print_error(e.message)
        print_info("Run `chadcn init` first.")
        raise typer.Exit(code=1)

    print_info(f"Checking {component or 'all components'} for updates...")
    print_warning("Diff is not implemented yet.")
