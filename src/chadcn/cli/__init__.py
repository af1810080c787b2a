"""
chadcn CLI package.

- init.py: `chadcn init` project setup
- add.py: `chadcn add` component installation
- diff.py: `chadcn diff` (placeholder)
- catalog.py: `chadcn list`
- utils.py: Shared utilities
"""

from __future__ import annotations

import typer

from chadcn.cli.add import add_command
from chadcn.cli.catalog import list_command
from chadcn.cli.diff import diff_command
from chadcn.cli.init import init_command
from chadcn.cli.utils import configure_logging, version_callback

# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="""chadcn - add UI components to your project

  • Setup: init
    → Write chadcn.json, theme CSS and the cn() helper

  • Components: add, list, diff
    → Operate in an initialized project (or --cwd)
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """chadcn CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="init")(init_command)
app.command(name="add")(add_command)
app.command(name="diff")(diff_command)
app.command(name="list")(list_command)


def main() -> None:
    app(standalone_mode=True)


__all__ = ["app", "main"]
