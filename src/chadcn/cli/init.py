"""
`chadcn init` - set up a project to receive components.

Writes chadcn.json, a stylesheet with every theme's variables, the Tailwind
config (v3 only) and the cn() utils module.
"""

from __future__ import annotations

import typer

from chadcn.cli.utils import (
    display_path,
    print_catalog,
    print_themes,
    resolve_cwd,
    theme_options,
)
from chadcn.cli_ui import (
    SelectOption,
    confirm,
    print_command,
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
    prompt_text,
    select_interactive,
)
from chadcn.core.config import (
    DEFAULT_COMPONENTS_ALIAS,
    DEFAULT_UTILS_ALIAS,
    ConfigStore,
    ProjectConfig,
    ProjectInfo,
    detect_project,
)
from chadcn.core.errors import ConfigParseError, InitError
from chadcn.core.packages import BASELINE_PACKAGES, detect_package_manager
from chadcn.core.registry import DEFAULT_THEME, Registry, build_registry
from chadcn.core.scaffold import build_config, initialize_project


def init_command(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompts"),
    defaults: bool = typer.Option(
        False, "--defaults", "-d", help="Use detected defaults instead of prompting"
    ),
    theme: str | None = typer.Option(None, "--theme", "-t", help="Default theme"),
    cwd: str | None = typer.Option(
        None, "--cwd", "-c", help="Project directory (defaults to current directory)"
    ),
) -> None:
    """
    Initialize chadcn in a project.

    Examples:
        chadcn init                      # Interactive setup
        chadcn init --yes                # Detected defaults, no prompts
        chadcn init --theme dracula -y   # Pick the default theme
        chadcn init --cwd ./web          # Initialize another directory
    """
    project_root = resolve_cwd(cwd)
    registry = build_registry()

    if theme is not None and registry.theme(theme) is None:
        print_error(f"Unknown theme: {theme}")
        print_themes(registry)
        raise typer.Exit(code=1)

    store = ConfigStore(project_root)
    existing = store.config_path()
    if existing is not None:
        try:
            store.load_strict()
        except ConfigParseError as e:
            print_warning(f"{e.message}. It will be replaced.")
        if not yes and not confirm(f"{existing.name} already exists. Overwrite it?", default=False):
            print_info("Initialization cancelled")
            return

    info = detect_project(project_root)
    if not info.has_package_json:
        print_warning("No package.json found. Run this in a JavaScript project root.")

    if yes or defaults:
        config = build_config(info, theme=theme or DEFAULT_THEME)
    else:
        prompted = _prompt_config(info, registry, theme)
        if prompted is None:
            print_info("Initialization cancelled")
            return
        config = prompted

    typer.echo("")
    try:
        result = initialize_project(project_root, config, progress_callback=print_success)
    except InitError as e:
        print_error(f"Initialization failed: {e.message}")
        raise typer.Exit(code=1)

    print_header("chadcn is ready", f"Theme: {config.theme}")

    manager = detect_package_manager(project_root)
    print_info("Install the base dependencies:")
    print_command(" ".join(manager.install_command(BASELINE_PACKAGES)))

    if result.components_dir is not None:
        components_dir = display_path(result.components_dir, project_root)
        print_info(f"Components will be added to {components_dir}")
    print_info("Add components with:")
    print_command("chadcn add <component>")

    print_catalog(registry)


def _prompt_config(
    info: ProjectInfo, registry: Registry, theme: str | None
) -> ProjectConfig | None:
    """Ask the init questions; None if the user cancels any of them."""
    versions = [
        SelectOption(value="4", label="Tailwind CSS v4", description="CSS-first @theme config"),
        SelectOption(value="3", label="Tailwind CSS v3", description="tailwind.config file"),
    ]
    version = select_interactive(
        versions,
        title="Which Tailwind CSS version are you using?",
        subtitle=f"Detected: v{info.tailwind_version}",
        default_index=0 if info.tailwind_version == "4" else 1,
    )
    if version is None:
        return None

    if theme is None:
        options = theme_options(registry)
        default_index = next(
            (i for i, opt in enumerate(options) if opt.value == DEFAULT_THEME), 0
        )
        theme = select_interactive(
            options, title="Which theme would you like as default?", default_index=default_index
        )
        if theme is None:
            return None

    tailwind_config = None
    if version == "3":
        tailwind_config = prompt_text(
            "Where is your tailwind.config located?", info.default_tailwind_config
        )
        if tailwind_config is None:
            return None

    css_path = prompt_text("Where is your global CSS file?", info.default_css_path)
    if css_path is None:
        return None

    components_alias = prompt_text(
        "Configure the import alias for components", DEFAULT_COMPONENTS_ALIAS
    )
    if components_alias is None:
        return None

    utils_alias = prompt_text("Configure the import alias for utils", DEFAULT_UTILS_ALIAS)
    if utils_alias is None:
        return None

    typescript = confirm("Are you using TypeScript?", default=info.has_tsconfig)

    return build_config(
        info,
        theme=theme,
        tailwind_version=version,
        tailwind_config=tailwind_config,
        css_path=css_path,
        components_alias=components_alias,
        utils_alias=utils_alias,
        typescript=typescript,
    )
