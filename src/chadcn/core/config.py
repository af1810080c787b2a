"""
Per-project configuration.

The config lives in a JSON file at the project root:

    {
      "style": "default",
      "theme": "photoshop",
      "tailwind": {"config": "tailwind.config.ts", "css": "src/index.css",
                   "baseColor": "slate", "version": "3"},
      "aliases": {"components": "@/components/ui", "utils": "@/lib/utils"},
      "typescript": true
    }

ConfigStore reads the first file found among CONFIG_SEARCH_PLACES and always
writes the canonical CONFIG_FILE. detect_project() inspects a project for
defaults to offer during init; it is advisory and never required.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigParseError, NotInitializedError
from .registry import DEFAULT_THEME

logger = logging.getLogger(__name__)

CONFIG_FILE = "chadcn.json"

# Canonical name first, then legacy names kept for older projects
CONFIG_SEARCH_PLACES = (
    CONFIG_FILE,
    ".chadcnrc",
    ".chadcnrc.json",
    "chadchin.json",
)

DEFAULT_COMPONENTS_ALIAS = "@/components/ui"
DEFAULT_UTILS_ALIAS = "@/lib/utils"

TailwindVersion = Literal["3", "4"]


class TailwindSettings(BaseModel):
    """Styling tool paths and options."""

    model_config = ConfigDict(populate_by_name=True)

    config: str | None = None
    css: str
    base_color: str = Field(default="slate", alias="baseColor")
    version: TailwindVersion | None = None

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, value: Any) -> Any:
        # Accept 3 / 4 / "v4" as well as "3" / "4"
        if value is None:
            return None
        text = str(value).strip().lower().removeprefix("v")
        return text.split(".", 1)[0]


class AliasSettings(BaseModel):
    """Import prefixes used by the consuming project."""

    components: str
    utils: str


class ProjectConfig(BaseModel):
    """Complete project configuration."""

    model_config = ConfigDict(populate_by_name=True)

    style: str = "default"
    theme: str = DEFAULT_THEME
    tailwind: TailwindSettings
    aliases: AliasSettings
    typescript: bool = True

    def to_json(self) -> str:
        """Serialize with camelCase keys, omitting unset optional fields."""
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return json.dumps(data, indent=2) + "\n"


@dataclass(frozen=True)
class ResolvedPaths:
    """Absolute filesystem locations derived from a ProjectConfig."""

    tailwind_config: Path | None
    tailwind_css: Path
    components: Path
    utils: Path


def alias_to_path(project_root: Path, alias: str) -> Path:
    """
    Map an import alias to a directory in the project.

    Aliases land under src/ when the project has one, otherwise under the
    project root. A leading "@/" or "~/" is dropped first, so "@/components/ui"
    and "components/ui" name the same directory.
    """
    base = project_root / "src" if (project_root / "src").is_dir() else project_root
    for prefix in ("@/", "~/"):
        if alias.startswith(prefix):
            return base / alias[len(prefix) :]
    return base / alias


class ConfigStore:
    """
    Loads and saves the project config.

    Example:
        store = ConfigStore(Path.cwd())
        config = store.load()
        if config is None:
            ...  # not initialized (or config is malformed)
    """

    def __init__(self, project_root: Path):
        self.project_root = project_root

    def config_path(self) -> Path | None:
        """The config file load() would read, if any exists."""
        for name in CONFIG_SEARCH_PLACES:
            candidate = self.project_root / name
            if candidate.is_file():
                return candidate
        return None

    def load(self) -> ProjectConfig | None:
        """
        Load and validate the project config.

        Returns None if no config file exists. A file that cannot be parsed or
        fails validation is treated the same way.
        """
        try:
            return self.load_strict()
        except ConfigParseError as e:
            logger.warning("%s", e.message)
            return None

    def load_strict(self) -> ProjectConfig | None:
        """
        Load the project config, distinguishing malformed from missing.

        Raises:
            ConfigParseError: if a config file exists but is invalid
        """
        path = self.config_path()
        if path is None:
            logger.debug("No config file found in %s", self.project_root)
            return None

        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigParseError(path, str(e)) from e

        try:
            config = ProjectConfig.model_validate(raw)
        except ValidationError as e:
            raise ConfigParseError(path, _summarize_validation_error(e)) from e

        logger.debug("Loaded config from %s", path)
        return config

    def save(self, config: ProjectConfig) -> Path:
        """Write the config to the canonical file, replacing any existing one."""
        path = self.project_root / CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(config.to_json(), encoding="utf-8")
        logger.debug("Saved config to %s", path)
        return path

    def resolve_paths(self, config: ProjectConfig) -> ResolvedPaths:
        root = self.project_root
        return ResolvedPaths(
            tailwind_config=root / config.tailwind.config if config.tailwind.config else None,
            tailwind_css=root / config.tailwind.css,
            components=alias_to_path(root, config.aliases.components),
            utils=alias_to_path(root, config.aliases.utils),
        )


def require_config(project_root: Path) -> ProjectConfig:
    """
    Load the config of a project that must already be initialized.

    Raises:
        NotInitializedError: if no valid config file exists
    """
    config = ConfigStore(project_root).load()
    if config is None:
        raise NotInitializedError(project_root)
    return config


def _summarize_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


# =============================================================================
# Project detection
# =============================================================================

TAILWIND_CONFIG_FILES = (
    "tailwind.config.ts",
    "tailwind.config.js",
    "tailwind.config.mjs",
    "tailwind.config.cjs",
)

NEXT_CONFIG_FILES = ("next.config.js", "next.config.mjs", "next.config.ts")

CSS_CANDIDATES = (
    "src/index.css",
    "src/app/globals.css",
    "app/globals.css",
    "src/styles/globals.css",
    "styles/globals.css",
    "src/globals.css",
    "index.css",
)

TAILWIND_V4_PLUGINS = ("@tailwindcss/vite", "@tailwindcss/postcss", "@tailwindcss/cli")


@dataclass
class ProjectInfo:
    """Signals gathered from a project directory for init defaults."""

    has_package_json: bool = False
    has_tsconfig: bool = False
    has_next_config: bool = False
    has_src_dir: bool = False
    tailwind_version: TailwindVersion = "4"
    tailwind_config: str | None = None
    has_vite_plugin: bool = False
    css_path: str | None = None

    @property
    def default_css_path(self) -> str:
        if self.css_path:
            return self.css_path
        return "src/index.css" if self.has_src_dir else "index.css"

    @property
    def default_tailwind_config(self) -> str:
        if self.tailwind_config:
            return self.tailwind_config
        return "tailwind.config.ts" if self.has_tsconfig else "tailwind.config.js"


def _read_package_dependencies(package_json: Path) -> dict[str, str]:
    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug("Could not read %s: %s", package_json, e)
        return {}
    if not isinstance(data, dict):
        return {}

    deps: dict[str, str] = {}
    for key in ("dependencies", "devDependencies", "peerDependencies"):
        section = data.get(key)
        if isinstance(section, dict):
            deps.update({str(k): str(v) for k, v in section.items()})
    return deps


def _major_version(spec: str) -> str | None:
    digits = ""
    for char in spec.lstrip("^~>=< v"):
        if not char.isdigit():
            break
        digits += char
    return digits or None


def detect_project(project_root: Path) -> ProjectInfo:
    """Inspect a project directory for sensible init defaults."""
    info = ProjectInfo()
    package_json = project_root / "package.json"
    info.has_package_json = package_json.is_file()
    info.has_tsconfig = (project_root / "tsconfig.json").is_file()
    info.has_next_config = any((project_root / name).is_file() for name in NEXT_CONFIG_FILES)
    info.has_src_dir = (project_root / "src").is_dir()

    info.tailwind_config = next(
        (name for name in TAILWIND_CONFIG_FILES if (project_root / name).is_file()), None
    )
    info.css_path = next(
        (name for name in CSS_CANDIDATES if (project_root / name).is_file()), None
    )

    deps = _read_package_dependencies(package_json) if info.has_package_json else {}
    info.has_vite_plugin = "@tailwindcss/vite" in deps

    declared = deps.get("tailwindcss")
    major = _major_version(declared) if declared else None
    if major in ("3", "4"):
        info.tailwind_version = major  # type: ignore[assignment]
    elif any(plugin in deps for plugin in TAILWIND_V4_PLUGINS):
        info.tailwind_version = "4"
    elif info.tailwind_config:
        info.tailwind_version = "3"

    logger.debug("Detected project info for %s: %s", project_root, info)
    return info
