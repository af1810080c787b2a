"""Tests for the component registry."""

from __future__ import annotations

import pytest

from chadcn.core.errors import (
    InvalidComponentNameError,
    RegistryIntegrityError,
    UnknownComponentError,
)
from chadcn.core.registry import (
    COMPONENT_CATEGORY_LABELS,
    DEFAULT_THEME,
    ComponentCategory,
    ComponentDefinition,
    Registry,
    ThemeDefinition,
)


class TestBuiltinCatalog:
    def test_names_are_unique(self, registry: Registry) -> None:
        names = registry.names()
        assert len(names) == len(set(names))

    def test_every_dependency_is_in_catalog(self, registry: Registry) -> None:
        for component in registry.all():
            for dep in component.dependencies:
                assert dep in registry, f"{component.name} -> {dep}"

    def test_known_dependencies(self, registry: Registry) -> None:
        assert registry.require("toolbar").dependencies == ("tooltip",)
        assert registry.require("command-palette").dependencies == ("scroll-area",)
        assert registry.require("layer-stack").dependencies == ("scroll-area",)
        assert registry.require("gradient-editor").dependencies == ("color-input",)

    def test_every_component_declares_files(self, registry: Registry) -> None:
        for component in registry.all():
            assert component.files, component.name
            directory = component.files[0].split("/")[0]
            assert component.files[0] == f"{directory}/{directory}.tsx"

    def test_categories_have_labels(self, registry: Registry) -> None:
        for category in registry.by_category():
            assert category in COMPONENT_CATEGORY_LABELS

    def test_default_theme_exists(self, registry: Registry) -> None:
        assert registry.theme(DEFAULT_THEME) is not None
        assert DEFAULT_THEME in registry.theme_names()


class TestLookup:
    def test_lookup_hit(self, registry: Registry) -> None:
        button = registry.lookup("button")
        assert button is not None
        assert button.name == "button"
        assert button.category is ComponentCategory.INPUT

    def test_lookup_miss_returns_none(self, registry: Registry) -> None:
        assert registry.lookup("nonexistent-widget") is None

    def test_require_miss_raises(self, registry: Registry) -> None:
        with pytest.raises(UnknownComponentError) as exc_info:
            registry.require("nonexistent-widget")
        assert exc_info.value.name == "nonexistent-widget"

    def test_pascal_name(self, registry: Registry) -> None:
        assert registry.require("number-spinner").pascal_name == "NumberSpinner"
        assert registry.require("button").pascal_name == "Button"


class TestValidate:
    def test_valid_names_pass(self, registry: Registry) -> None:
        registry.validate(["button", "toolbar"])

    def test_reports_every_invalid_name(self, registry: Registry) -> None:
        with pytest.raises(InvalidComponentNameError) as exc_info:
            registry.validate(["button", "nope", "also-nope"])

        error = exc_info.value
        assert error.invalid == ["nope", "also-nope"]
        assert "button" in error.available
        assert "nope" in str(error)


class TestIntegrity:
    def test_duplicate_component_rejected(self) -> None:
        component = ComponentDefinition(name="a", files=("A/A.tsx",))
        with pytest.raises(RegistryIntegrityError, match="Duplicate component"):
            Registry([component, component])

    def test_duplicate_theme_rejected(self) -> None:
        theme = ThemeDefinition(name="dark", label="Dark")
        with pytest.raises(RegistryIntegrityError, match="Duplicate theme"):
            Registry([], [theme, theme])

    def test_unknown_dependency_rejected(self) -> None:
        component = ComponentDefinition(name="a", dependencies=("missing",))
        with pytest.raises(RegistryIntegrityError, match="missing"):
            Registry([component])

    def test_definitions_are_immutable(self, registry: Registry) -> None:
        button = registry.require("button")
        with pytest.raises(Exception):
            button.name = "changed"  # type: ignore[misc]


class TestGrouping:
    def test_by_category_keeps_catalog_order(self) -> None:
        registry = Registry(
            [
                ComponentDefinition(name="b", category=ComponentCategory.LAYOUT),
                ComponentDefinition(name="a", category=ComponentCategory.INPUT),
                ComponentDefinition(name="c", category=ComponentCategory.LAYOUT),
            ]
        )
        groups = registry.by_category()
        assert list(groups) == ["layout", "input"]
        assert [c.name for c in groups["layout"]] == ["b", "c"]

    def test_themes_by_category(self, registry: Registry) -> None:
        groups = registry.themes_by_category()
        assert set(groups) == {"creative", "daisyui", "retro-os", "accessibility"}
        assert sum(len(themes) for themes in groups.values()) == len(registry.themes())
