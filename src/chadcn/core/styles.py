"""
Stylesheet and scaffold file generation for `chadcn init`.

Themes are described by a small base palette; generate_theme_tokens()
expands a palette into the full set of CSS custom properties the components
use (surface, panel, control, input, text, accent, state, selection, icon).

generate_css() renders every theme into one stylesheet, the selected theme
on :root and each theme under [data-theme="<name>"], in either the
Tailwind v3 (@tailwind + @layer base) or v4 (@import + @theme) layout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .registry import DEFAULT_THEME

logger = logging.getLogger(__name__)

# =============================================================================
# Palettes
# =============================================================================


@dataclass(frozen=True)
class ThemePalette:
    """Base colors a theme is derived from."""

    surface: str
    raised: str
    sunken: str
    border: str
    text: str
    muted: str
    accent: str
    accent_hover: str
    success: str = "#4caf50"
    warning: str = "#ff9800"
    error: str = "#f44336"
    info: str = "#2196f3"
    dark: bool = True


THEME_PALETTES: dict[str, ThemePalette] = {
    "photoshop": ThemePalette(
        surface="#323232", raised="#3c3c3c", sunken="#262626", border="#1e1e1e",
        text="#d6d6d6", muted="#9a9a9a", accent="#2d8ceb", accent_hover="#4a9ff0",
    ),
    "blender": ThemePalette(
        surface="#303030", raised="#3d3d3d", sunken="#1d1d1d", border="#161616",
        text="#e5e5e5", muted="#a0a0a0", accent="#4772b3", accent_hover="#5680c2",
    ),
    "gimp": ThemePalette(
        surface="#454545", raised="#505050", sunken="#383838", border="#2a2a2a",
        text="#dcdcdc", muted="#a8a8a8", accent="#7a9ec2", accent_hover="#8cb0d4",
    ),
    "vscode": ThemePalette(
        surface="#1e1e1e", raised="#252526", sunken="#181818", border="#3c3c3c",
        text="#cccccc", muted="#8b8b8b", accent="#007acc", accent_hover="#1c8fe0",
    ),
    "cyberpunk": ThemePalette(
        surface="#0d0221", raised="#1a0b3d", sunken="#070112", border="#ff2a6d",
        text="#f0f0f0", muted="#05d9e8", accent="#ff2a6d", accent_hover="#ff5c8d",
        success="#01ffc3", warning="#f9f871", error="#ff124f", info="#05d9e8",
    ),
    "synthwave": ThemePalette(
        surface="#2b213a", raised="#342846", sunken="#1f1829", border="#4b3a66",
        text="#f9f7fd", muted="#b6a8d1", accent="#e779c1", accent_hover="#ee98d0",
        success="#72f1b8", warning="#fede5d", error="#fe4450", info="#36f9f6",
    ),
    "dracula": ThemePalette(
        surface="#282a36", raised="#343746", sunken="#21222c", border="#44475a",
        text="#f8f8f2", muted="#6272a4", accent="#bd93f9", accent_hover="#caa9fa",
        success="#50fa7b", warning="#f1fa8c", error="#ff5555", info="#8be9fd",
    ),
    "nord": ThemePalette(
        surface="#2e3440", raised="#3b4252", sunken="#272c36", border="#4c566a",
        text="#eceff4", muted="#d8dee9", accent="#88c0d0", accent_hover="#8fbcbb",
        success="#a3be8c", warning="#ebcb8b", error="#bf616a", info="#81a1c1",
    ),
    "retro": ThemePalette(
        surface="#ece3ca", raised="#f4eedb", sunken="#e4d8b4", border="#c9b98f",
        text="#282425", muted="#6b5e4b", accent="#ef9995", accent_hover="#e27f7a",
        success="#7fb069", warning="#e6a23c", error="#c0392b", info="#5b8fb9", dark=False,
    ),
    "coffee": ThemePalette(
        surface="#20161f", raised="#2c1f2b", sunken="#170f16", border="#3d2b3b",
        text="#c59f60", muted="#8c7152", accent="#db924b", accent_hover="#e6a565",
        success="#9db787", warning="#ffd25f", error="#fc9581", info="#8dcac1",
    ),
    "sunset": ThemePalette(
        surface="#121c22", raised="#1b262c", sunken="#0c1418", border="#2b3a42",
        text="#9fb9d0", muted="#6f8797", accent="#ff865b", accent_hover="#ff9f7f",
        success="#62ef83", warning="#efd057", error="#ff6f6f", info="#42b2ff",
    ),
    "aqua": ThemePalette(
        surface="#345da7", raised="#3d69b6", sunken="#2c5091", border="#27457c",
        text="#c8e1e7", muted="#9ac2cc", accent="#09ecf3", accent_hover="#5cf3f7",
        success="#2bd48c", warning="#ffd152", error="#ff6e6e", info="#a3e4ff",
    ),
    "win95": ThemePalette(
        surface="#c0c0c0", raised="#dfdfdf", sunken="#ffffff", border="#808080",
        text="#000000", muted="#404040", accent="#000080", accent_hover="#1084d0",
        success="#008000", warning="#808000", error="#800000", info="#000080", dark=False,
    ),
    "winxp": ThemePalette(
        surface="#ece9d8", raised="#f5f4ea", sunken="#ffffff", border="#7f9db9",
        text="#000000", muted="#575757", accent="#0054e3", accent_hover="#3d7bf0",
        success="#2d9a2d", warning="#d98c00", error="#c42b1c", info="#316ac5", dark=False,
    ),
    "macos9": ThemePalette(
        surface="#dddddd", raised="#eeeeee", sunken="#ffffff", border="#888888",
        text="#000000", muted="#555555", accent="#3d3bbd", accent_hover="#5856d6",
        success="#2c9f45", warning="#d58a00", error="#cc1f1f", info="#3d3bbd", dark=False,
    ),
    "light": ThemePalette(
        surface="#f5f5f5", raised="#ffffff", sunken="#e8e8e8", border="#d0d0d0",
        text="#1f1f1f", muted="#666666", accent="#0066cc", accent_hover="#0052a3",
        success="#2e7d32", warning="#ed6c02", error="#d32f2f", info="#0288d1", dark=False,
    ),
    "high-contrast": ThemePalette(
        surface="#000000", raised="#0a0a0a", sunken="#000000", border="#ffffff",
        text="#ffffff", muted="#ffff00", accent="#00ffff", accent_hover="#66ffff",
        success="#00ff00", warning="#ffff00", error="#ff0000", info="#00ffff",
    ),
}


def generate_theme_tokens(palette: ThemePalette) -> dict[str, str]:
    """Expand a palette into CSS custom property name -> value."""
    inverse = palette.surface if palette.dark else palette.raised
    return {
        "surface": palette.surface,
        "surface-raised": palette.raised,
        "surface-sunken": palette.sunken,
        "surface-overlay": palette.raised,
        "panel": palette.surface,
        "panel-header": palette.raised,
        "panel-border": palette.border,
        "control": palette.raised,
        "control-hover": palette.sunken if not palette.dark else palette.border,
        "control-active": palette.sunken,
        "control-disabled": palette.surface,
        "control-border": palette.border,
        "input": palette.sunken,
        "input-hover": palette.sunken,
        "input-focus": palette.sunken,
        "input-border": palette.border,
        "text": palette.text,
        "text-muted": palette.muted,
        "text-disabled": palette.muted,
        "text-inverse": inverse,
        "text-label": palette.muted,
        "accent": palette.accent,
        "accent-hover": palette.accent_hover,
        "accent-muted": palette.accent_hover,
        "state-success": palette.success,
        "state-warning": palette.warning,
        "state-error": palette.error,
        "state-info": palette.info,
        "selection": palette.accent,
        "selection-text": "#ffffff" if palette.dark else "#000000",
        "divider": palette.border,
        "icon": palette.text,
        "icon-muted": palette.muted,
        "icon-active": palette.accent,
        "shadow-color": "rgba(0, 0, 0, 0.5)" if palette.dark else "rgba(0, 0, 0, 0.15)",
    }


# Tailwind color name -> custom property, for the v4 @theme block
_THEME_COLOR_TOKENS = (
    "surface",
    "surface-raised",
    "surface-sunken",
    "surface-overlay",
    "panel",
    "panel-header",
    "panel-border",
    "control",
    "control-hover",
    "control-active",
    "control-disabled",
    "control-border",
    "input",
    "input-hover",
    "input-focus",
    "input-border",
    "text",
    "text-muted",
    "text-disabled",
    "text-inverse",
    "text-label",
    "accent",
    "accent-hover",
    "accent-muted",
    "state-success",
    "state-warning",
    "state-error",
    "state-info",
    "selection",
    "selection-text",
    "divider",
    "icon",
    "icon-muted",
    "icon-active",
)


def _render_block(selector: str, tokens: dict[str, str], indent: str = "") -> str:
    lines = [f"{indent}{selector} {{"]
    lines.extend(f"{indent}  --{name}: {value};" for name, value in tokens.items())
    lines.append(f"{indent}}}")
    return "\n".join(lines)


def _theme_blocks(theme: str, include_all: bool, indent: str = "") -> list[str]:
    palette = THEME_PALETTES.get(theme)
    if palette is None:
        logger.warning("Unknown theme %r, using %s", theme, DEFAULT_THEME)
        palette = THEME_PALETTES[DEFAULT_THEME]
    blocks = [_render_block(":root", generate_theme_tokens(palette), indent)]
    if include_all:
        for name, other in THEME_PALETTES.items():
            blocks.append(
                _render_block(f'[data-theme="{name}"]', generate_theme_tokens(other), indent)
            )
    return blocks


def generate_css(theme: str = DEFAULT_THEME, include_all: bool = True) -> str:
    """Tailwind v3 stylesheet with theme variables in @layer base."""
    body = "\n\n".join(_theme_blocks(theme, include_all, indent="  "))
    return f"""@tailwind base;
@tailwind components;
@tailwind utilities;

@layer base {{
{body}
}}
"""


def generate_css_v4(theme: str = DEFAULT_THEME, include_all: bool = True) -> str:
    """Tailwind v4 stylesheet: @theme maps utilities onto the theme variables."""
    colors = "\n".join(f"  --color-{name}: var(--{name});" for name in _THEME_COLOR_TOKENS)
    body = "\n\n".join(_theme_blocks(theme, include_all))
    return f"""@import "tailwindcss";

@theme inline {{
{colors}

  --radius-control: 3px;
  --radius-panel: 4px;
  --radius-button: 2px;

  --text-2xs: 10px;
  --text-2xs--line-height: 12px;

  --shadow-control: 0 1px 2px var(--shadow-color);
  --shadow-panel: 0 2px 8px var(--shadow-color);
  --shadow-dropdown: 0 4px 16px var(--shadow-color);
  --shadow-tooltip: 0 2px 4px var(--shadow-color);
}}

{body}
"""


def generate_stylesheet(theme: str, version: str | None) -> str:
    """Stylesheet for the configured Tailwind version (v4 unless "3")."""
    if version == "3":
        return generate_css(theme)
    return generate_css_v4(theme)


# =============================================================================
# Scaffold files
# =============================================================================

UTILS_TEMPLATE = """import { clsx, type ClassValue } from 'clsx';
import { twMerge } from 'tailwind-merge';

export function cn(...inputs: ClassValue[]) {
  return twMerge(clsx(inputs));
}
"""

UTILS_TEMPLATE_JS = """import { clsx } from 'clsx';
import { twMerge } from 'tailwind-merge';

export function cn(...inputs) {
  return twMerge(clsx(inputs));
}
"""


def _tailwind_colors() -> str:
    groups: dict[str, list[str]] = {}
    for token in _THEME_COLOR_TOKENS:
        group, _, shade = token.partition("-")
        groups.setdefault(group, []).append(shade or "DEFAULT")

    lines = []
    for group, shades in groups.items():
        if shades == ["DEFAULT"]:
            lines.append(f"        {group}: 'var(--{group})',")
            continue
        lines.append(f"        {group}: {{")
        for shade in shades:
            var = group if shade == "DEFAULT" else f"{group}-{shade}"
            lines.append(f"          '{shade}': 'var(--{var})',")
        lines.append("        },")
    return "\n".join(lines)


_TAILWIND_CONFIG_BODY = """{{
  content: ['./index.html', './src/**/*.{{js,ts,jsx,tsx}}', './app/**/*.{{js,ts,jsx,tsx}}'],
  darkMode: ['class', '[data-theme="dark"]'],
  theme: {{
    extend: {{
      colors: {{
{colors}
      }},
      borderRadius: {{
        control: '3px',
        panel: '4px',
        button: '2px',
      }},
      boxShadow: {{
        control: '0 1px 2px var(--shadow-color)',
        panel: '0 2px 8px var(--shadow-color)',
        dropdown: '0 4px 16px var(--shadow-color)',
        tooltip: '0 2px 4px var(--shadow-color)',
      }},
    }},
  }},
  plugins: [],
}}"""


def tailwind_config_template(typescript: bool) -> str:
    """tailwind.config.ts / .js for Tailwind v3 projects."""
    body = _TAILWIND_CONFIG_BODY.format(colors=_tailwind_colors())
    if typescript:
        return f"""import type {{ Config }} from 'tailwindcss';

const config: Config = {body};

export default config;
"""
    return f"""/** @type {{import('tailwindcss').Config}} */
export default {body};
"""


def utils_template(typescript: bool) -> str:
    return UTILS_TEMPLATE if typescript else UTILS_TEMPLATE_JS
