"""
Project initialization for `chadcn init`.

build_config() turns detected project signals and user answers into a
ProjectConfig; initialize_project() writes the config, the theme
stylesheet, the Tailwind v3 config (when applicable), the cn() utils module
and the components directory.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .config import (
    DEFAULT_COMPONENTS_ALIAS,
    DEFAULT_UTILS_ALIAS,
    AliasSettings,
    ConfigStore,
    ProjectConfig,
    ProjectInfo,
    TailwindSettings,
)
from .errors import InitError
from .materializer import write_atomic
from .registry import DEFAULT_THEME
from .styles import generate_stylesheet, tailwind_config_template, utils_template

logger = logging.getLogger(__name__)


def build_config(
    info: ProjectInfo,
    theme: str = DEFAULT_THEME,
    tailwind_version: str | None = None,
    tailwind_config: str | None = None,
    css_path: str | None = None,
    components_alias: str = DEFAULT_COMPONENTS_ALIAS,
    utils_alias: str = DEFAULT_UTILS_ALIAS,
    typescript: bool | None = None,
) -> ProjectConfig:
    """
    Build a config, filling anything not given from detection.

    The Tailwind config path is only kept for v3; v4 is configured in CSS.
    """
    version = tailwind_version or info.tailwind_version
    config_path = None
    if version == "3":
        config_path = tailwind_config or info.default_tailwind_config

    return ProjectConfig(
        style="default",
        theme=theme,
        tailwind=TailwindSettings(
            config=config_path,
            css=css_path or info.default_css_path,
            base_color="slate",
            version=version,
        ),
        aliases=AliasSettings(components=components_alias, utils=utils_alias),
        typescript=info.has_tsconfig if typescript is None else typescript,
    )


@dataclass
class InitResult:
    """Files written by initialize_project, relative to the project root."""

    project_root: Path
    config_file: Path | None = None
    css_file: Path | None = None
    tailwind_config_file: Path | None = None
    utils_file: Path | None = None
    components_dir: Path | None = None
    files_created: list[Path] = field(default_factory=list)

    def add_file(self, path: Path) -> None:
        self.files_created.append(path)

    def relative(self, path: Path) -> str:
        try:
            return str(path.relative_to(self.project_root))
        except ValueError:
            return str(path)


def utils_file_path(utils_dir_alias: Path, typescript: bool) -> Path:
    """Module file for the utils alias, e.g. src/lib/utils -> src/lib/utils.ts."""
    extension = "ts" if typescript else "js"
    return utils_dir_alias.parent / f"{utils_dir_alias.name}.{extension}"


def initialize_project(
    project_root: Path,
    config: ProjectConfig,
    progress_callback: Callable[[str], None] | None = None,
) -> InitResult:
    """
    Write config and scaffold files into a project.

    Existing files at these locations are replaced.

    Raises:
        InitError: if any file cannot be written
    """

    def progress(message: str) -> None:
        logger.debug(message)
        if progress_callback:
            progress_callback(message)

    store = ConfigStore(project_root)
    paths = store.resolve_paths(config)
    result = InitResult(project_root=project_root)

    try:
        result.config_file = store.save(config)
        result.add_file(result.config_file)
        progress(f"Created {result.relative(result.config_file)}")

        css = generate_stylesheet(config.theme, config.tailwind.version)
        write_atomic(paths.tailwind_css, css)
        result.css_file = paths.tailwind_css
        result.add_file(paths.tailwind_css)
        progress(f"Created {result.relative(paths.tailwind_css)} with theme variables")

        if config.tailwind.version == "3" and paths.tailwind_config is not None:
            write_atomic(paths.tailwind_config, tailwind_config_template(config.typescript))
            result.tailwind_config_file = paths.tailwind_config
            result.add_file(paths.tailwind_config)
            progress(f"Created {result.relative(paths.tailwind_config)}")

        utils_path = utils_file_path(paths.utils, config.typescript)
        write_atomic(utils_path, utils_template(config.typescript))
        result.utils_file = utils_path
        result.add_file(utils_path)
        progress(f"Created {result.relative(utils_path)}")

        paths.components.mkdir(parents=True, exist_ok=True)
        result.components_dir = paths.components
        progress(f"Created {result.relative(paths.components)}/")

    except OSError as e:
        raise InitError(f"Failed to initialize project: {e}") from e

    return result
