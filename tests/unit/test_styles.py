"""Tests for generated stylesheets and scaffold templates."""

from __future__ import annotations

from chadcn.core.registry import Registry
from chadcn.core.styles import (
    THEME_PALETTES,
    generate_css,
    generate_css_v4,
    generate_stylesheet,
    generate_theme_tokens,
    tailwind_config_template,
    utils_template,
)


class TestPalettes:
    def test_every_theme_has_palette(self, registry: Registry) -> None:
        assert set(THEME_PALETTES) == set(registry.theme_names())

    def test_tokens_are_complete(self) -> None:
        for palette in THEME_PALETTES.values():
            tokens = generate_theme_tokens(palette)
            assert tokens["surface"] == palette.surface
            assert tokens["accent"] == palette.accent
            assert "shadow-color" in tokens


class TestGenerateCss:
    def test_v3_layers(self) -> None:
        css = generate_css("dracula")

        assert css.startswith("@tailwind base;")
        assert "@layer base {" in css
        assert "  :root {" in css
        assert f"--surface: {THEME_PALETTES['dracula'].surface};" in css

    def test_every_theme_included(self) -> None:
        css = generate_css_v4()
        for name in THEME_PALETTES:
            assert f'[data-theme="{name}"]' in css

    def test_only_default_theme(self) -> None:
        css = generate_css_v4("nord", include_all=False)
        assert "[data-theme=" not in css
        assert f"--surface: {THEME_PALETTES['nord'].surface};" in css

    def test_v4_theme_block(self) -> None:
        css = generate_css_v4()

        assert css.startswith('@import "tailwindcss";')
        assert "@theme inline {" in css
        assert "--color-surface-raised: var(--surface-raised);" in css

    def test_unknown_theme_falls_back(self) -> None:
        css = generate_css_v4("not-a-theme", include_all=False)
        assert f"--surface: {THEME_PALETTES['photoshop'].surface};" in css

    def test_stylesheet_by_version(self) -> None:
        assert generate_stylesheet("photoshop", "3").startswith("@tailwind")
        assert generate_stylesheet("photoshop", "4").startswith("@import")
        assert generate_stylesheet("photoshop", None).startswith("@import")


class TestScaffoldTemplates:
    def test_utils_typescript(self) -> None:
        content = utils_template(typescript=True)
        assert "ClassValue" in content
        assert "export function cn" in content

    def test_utils_javascript(self) -> None:
        content = utils_template(typescript=False)
        assert "ClassValue" not in content
        assert "twMerge(clsx(inputs))" in content

    def test_tailwind_config(self) -> None:
        ts = tailwind_config_template(typescript=True)
        js = tailwind_config_template(typescript=False)

        assert "import type { Config } from 'tailwindcss';" in ts
        assert js.startswith("/** @type")
        assert "'raised': 'var(--surface-raised)'," in ts
        assert "DEFAULT': 'var(--surface)'" in js
