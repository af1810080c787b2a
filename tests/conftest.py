"""Shared pytest fixtures for chadcn tests."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from chadcn.core.config import (
    DEFAULT_COMPONENTS_ALIAS,
    DEFAULT_UTILS_ALIAS,
    AliasSettings,
    ConfigStore,
    ProjectConfig,
    TailwindSettings,
)
from chadcn.core.registry import Registry, build_registry


@pytest.fixture(autouse=True)
def offline() -> Iterator[None]:
    """Keep tests off the network: every remote template fetch misses."""
    with patch("chadcn.core.templates.fetch_remote", return_value=None):
        yield


@pytest.fixture
def registry() -> Registry:
    """Return the built-in component registry."""
    return build_registry()


@pytest.fixture
def project_config() -> ProjectConfig:
    """Return a config with the default aliases."""
    return ProjectConfig(
        theme="photoshop",
        tailwind=TailwindSettings(css="src/index.css", version="4"),
        aliases=AliasSettings(components=DEFAULT_COMPONENTS_ALIAS, utils=DEFAULT_UTILS_ALIAS),
        typescript=True,
    )


@pytest.fixture
def js_project(tmp_path: Path) -> Path:
    """Create an uninitialized JavaScript project with a src/ directory."""
    (tmp_path / "package.json").write_text('{"name": "demo", "dependencies": {}}\n')
    (tmp_path / "src").mkdir()
    return tmp_path.resolve()


@pytest.fixture
def initialized_project(js_project: Path, project_config: ProjectConfig) -> Path:
    """Create a project with chadcn.json already written."""
    ConfigStore(js_project).save(project_config)
    return js_project
