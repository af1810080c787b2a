"""
Component and theme registry.

The registry is the immutable catalog of everything chadcn can install:

- ComponentDefinition: a named set of source files plus the components and
  npm packages it needs
- ThemeDefinition: a named color theme shipped in the generated stylesheet

The built-in catalog is declared as constant tuples and turned into a
Registry by build_registry(). Tests build their own Registry from fake
catalogs instead of touching the built-in one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from enum import Enum
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidComponentNameError, RegistryIntegrityError, UnknownComponentError

logger = logging.getLogger(__name__)


class ComponentCategory(str, Enum):
    """Grouping used for interactive selection and listings."""

    INPUT = "input"
    LAYOUT = "layout"
    NAVIGATION = "navigation"
    OVERLAY = "overlay"
    FEEDBACK = "feedback"
    CREATIVE = "creative"
    UTILITY = "utility"


class ThemeCategory(str, Enum):
    """Theme families shown in the init prompt."""

    CREATIVE = "creative"
    DAISYUI = "daisyui"
    RETRO_OS = "retro-os"
    ACCESSIBILITY = "accessibility"


COMPONENT_CATEGORY_LABELS: dict[str, str] = {
    "input": "Input",
    "layout": "Layout",
    "navigation": "Navigation",
    "overlay": "Overlay",
    "feedback": "Feedback",
    "creative": "Creative Tools",
    "utility": "Utility",
}

THEME_CATEGORY_LABELS: dict[str, str] = {
    "creative": "Creative Tools",
    "daisyui": "DaisyUI Inspired",
    "retro-os": "Retro OS",
    "accessibility": "Accessibility",
}


class ComponentDefinition(BaseModel):
    """
    An installable component.

    Attributes:
        name: Unique kebab-case key (e.g. "number-spinner")
        description: One-line summary shown in prompts
        category: Grouping tag
        dependencies: Other components that must be installed alongside
        package_dependencies: npm packages the source imports
        files: Relative source paths, in install order
    """

    name: str
    description: str = ""
    category: ComponentCategory = ComponentCategory.UTILITY
    dependencies: tuple[str, ...] = ()
    package_dependencies: tuple[str, ...] = ()
    files: tuple[str, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    @property
    def pascal_name(self) -> str:
        """Component name as an export identifier ("tree-view" -> "TreeView")."""
        return "".join(part[:1].upper() + part[1:] for part in self.name.split("-"))


class ThemeDefinition(BaseModel):
    """A color theme available in the generated stylesheet."""

    name: str
    label: str
    description: str = ""
    category: ThemeCategory = ThemeCategory.CREATIVE

    model_config = ConfigDict(frozen=True)


class Registry:
    """
    Read-only lookup over a component and theme catalog.

    Construction validates the catalog: duplicate names and dependencies
    that point outside the catalog raise RegistryIntegrityError.
    """

    def __init__(
        self,
        components: Iterable[ComponentDefinition],
        themes: Iterable[ThemeDefinition] = (),
    ):
        self._components: dict[str, ComponentDefinition] = {}
        for component in components:
            if component.name in self._components:
                raise RegistryIntegrityError(f"Duplicate component: {component.name}")
            self._components[component.name] = component

        self._themes: dict[str, ThemeDefinition] = {}
        for theme in themes:
            if theme.name in self._themes:
                raise RegistryIntegrityError(f"Duplicate theme: {theme.name}")
            self._themes[theme.name] = theme

        for component in self._components.values():
            for dep in component.dependencies:
                if dep not in self._components:
                    raise RegistryIntegrityError(
                        f"Component '{component.name}' depends on unknown component '{dep}'"
                    )

    def __contains__(self, name: object) -> bool:
        return name in self._components

    def __len__(self) -> int:
        return len(self._components)

    def lookup(self, name: str) -> ComponentDefinition | None:
        """Get a component by name, or None if it is not in the catalog."""
        return self._components.get(name)

    def require(self, name: str) -> ComponentDefinition:
        component = self._components.get(name)
        if component is None:
            raise UnknownComponentError(name)
        return component

    def validate(self, names: Sequence[str]) -> None:
        """
        Check user-supplied names against the catalog.

        Raises:
            InvalidComponentNameError: listing every unknown name
        """
        invalid = [name for name in names if name not in self._components]
        if invalid:
            logger.debug("Rejected component names: %s", invalid)
            raise InvalidComponentNameError(invalid, self.names())

    def all(self) -> list[ComponentDefinition]:
        """All components in catalog order."""
        return list(self._components.values())

    def names(self) -> list[str]:
        return list(self._components)

    def by_category(self) -> dict[str, list[ComponentDefinition]]:
        """Components grouped by category, categories in first-seen order."""
        groups: dict[str, list[ComponentDefinition]] = {}
        for component in self._components.values():
            groups.setdefault(component.category.value, []).append(component)
        return groups

    def theme(self, name: str) -> ThemeDefinition | None:
        return self._themes.get(name)

    def themes(self) -> list[ThemeDefinition]:
        return list(self._themes.values())

    def theme_names(self) -> list[str]:
        return list(self._themes)

    def themes_by_category(self) -> dict[str, list[ThemeDefinition]]:
        groups: dict[str, list[ThemeDefinition]] = {}
        for theme in self._themes.values():
            groups.setdefault(theme.category.value, []).append(theme)
        return groups


# =============================================================================
# Built-in catalog
# =============================================================================


def _component(
    name: str,
    directory: str,
    description: str,
    category: ComponentCategory,
    *,
    packages: Sequence[str] = (),
    dependencies: Sequence[str] = (),
    index: bool = True,
) -> ComponentDefinition:
    files = [f"{directory}/{directory}.tsx"]
    if index:
        files.append(f"{directory}/index.ts")
    return ComponentDefinition(
        name=name,
        description=description,
        category=category,
        dependencies=tuple(dependencies),
        package_dependencies=tuple(packages),
        files=tuple(files),
    )


_C = ComponentCategory

BUILTIN_COMPONENTS: tuple[ComponentDefinition, ...] = (
    # Input
    _component(
        "button",
        "Button",
        "Compact button with multiple variants",
        _C.INPUT,
        packages=["@radix-ui/react-slot", "class-variance-authority"],
        index=False,
    ),
    _component("input", "Input", "Compact text input field", _C.INPUT, index=False),
    _component(
        "number-spinner",
        "NumberSpinner",
        "Number input with increment/decrement and scrubbing",
        _C.INPUT,
        packages=["lucide-react"],
        index=False,
    ),
    _component(
        "slider",
        "Slider",
        "Slider with optional value input",
        _C.INPUT,
        packages=["@radix-ui/react-slider"],
        index=False,
    ),
    _component(
        "checkbox",
        "Checkbox",
        "Compact checkbox with optional label",
        _C.INPUT,
        packages=["@radix-ui/react-checkbox", "lucide-react"],
        index=False,
    ),
    _component(
        "switch",
        "Switch",
        "Compact toggle switch",
        _C.INPUT,
        packages=["@radix-ui/react-switch"],
        index=False,
    ),
    _component(
        "select",
        "Select",
        "Compact dropdown select",
        _C.INPUT,
        packages=["@radix-ui/react-select", "lucide-react"],
        index=False,
    ),
    _component(
        "color-input",
        "ColorInput",
        "Color picker with hex input and presets",
        _C.INPUT,
        packages=["@radix-ui/react-popover"],
        index=False,
    ),
    # Layout
    _component(
        "panel",
        "Panel",
        "Collapsible panel container",
        _C.LAYOUT,
        packages=["@radix-ui/react-collapsible", "lucide-react"],
        index=False,
    ),
    _component(
        "toolbar",
        "Toolbar",
        "Toolbar with buttons and toggle groups",
        _C.LAYOUT,
        packages=["@radix-ui/react-toggle-group", "@radix-ui/react-tooltip"],
        dependencies=["tooltip"],
    ),
    _component(
        "property-row",
        "PropertyRow",
        "Label + control row for property panels",
        _C.LAYOUT,
        packages=["@radix-ui/react-label"],
        index=False,
    ),
    _component(
        "resizable-panes",
        "ResizablePanes",
        "Resizable split pane layout",
        _C.LAYOUT,
        packages=["lucide-react"],
        index=False,
    ),
    # Navigation
    _component(
        "tree-view",
        "TreeView",
        "Hierarchical tree with selection and expansion",
        _C.NAVIGATION,
        packages=["lucide-react"],
        index=False,
    ),
    _component(
        "tabs",
        "Tabs",
        "Tabbed interface with multiple variants",
        _C.NAVIGATION,
        packages=["@radix-ui/react-tabs"],
        index=False,
    ),
    _component(
        "accordion",
        "Accordion",
        "Collapsible accordion sections",
        _C.NAVIGATION,
        packages=["@radix-ui/react-accordion", "lucide-react"],
        index=False,
    ),
    _component(
        "breadcrumbs",
        "Breadcrumbs",
        "Breadcrumb navigation",
        _C.NAVIGATION,
        packages=["lucide-react"],
        index=False,
    ),
    _component(
        "command-palette",
        "CommandPalette",
        "Command palette with search",
        _C.NAVIGATION,
        packages=["@radix-ui/react-dialog", "lucide-react"],
        dependencies=["scroll-area"],
        index=False,
    ),
    _component(
        "menu-bar",
        "MenuBar",
        "Application menu bar",
        _C.NAVIGATION,
        packages=["@radix-ui/react-dropdown-menu", "lucide-react"],
    ),
    # Overlay
    _component(
        "context-menu",
        "ContextMenu",
        "Right-click context menu",
        _C.OVERLAY,
        packages=["@radix-ui/react-context-menu", "lucide-react"],
    ),
    _component(
        "tooltip",
        "Tooltip",
        "Tooltip overlay",
        _C.OVERLAY,
        packages=["@radix-ui/react-tooltip"],
    ),
    # Feedback
    _component("status-bar", "StatusBar", "Application status bar", _C.FEEDBACK),
    _component(
        "progress-indicator",
        "ProgressIndicator",
        "Progress bar with controls",
        _C.FEEDBACK,
        packages=["lucide-react"],
        index=False,
    ),
    _component(
        "toast",
        "Toast",
        "Toast notifications",
        _C.FEEDBACK,
        packages=["@radix-ui/react-toast", "lucide-react"],
    ),
    # Creative
    _component(
        "layer-stack",
        "LayerStack",
        "Layer management panel",
        _C.CREATIVE,
        packages=["lucide-react"],
        dependencies=["scroll-area"],
        index=False,
    ),
    _component(
        "swatch-palette",
        "SwatchPalette",
        "Color swatch palette",
        _C.CREATIVE,
        packages=["lucide-react"],
        index=False,
    ),
    _component(
        "gradient-editor",
        "GradientEditor",
        "Gradient editor with stops",
        _C.CREATIVE,
        packages=["lucide-react"],
        dependencies=["color-input"],
        index=False,
    ),
    # Utility
    _component(
        "scroll-area",
        "ScrollArea",
        "Custom scrollable area",
        _C.UTILITY,
        packages=["@radix-ui/react-scroll-area"],
    ),
    _component(
        "separator",
        "Separator",
        "Visual divider",
        _C.UTILITY,
        packages=["@radix-ui/react-separator"],
    ),
)

_T = ThemeCategory

BUILTIN_THEMES: tuple[ThemeDefinition, ...] = (
    ThemeDefinition(
        name="photoshop",
        label="Photoshop",
        description="Adobe Photoshop-inspired dark theme",
        category=_T.CREATIVE,
    ),
    ThemeDefinition(
        name="blender",
        label="Blender",
        description="Blender 3D-inspired darker theme",
        category=_T.CREATIVE,
    ),
    ThemeDefinition(
        name="gimp", label="GIMP", description="GIMP-inspired dark theme", category=_T.CREATIVE
    ),
    ThemeDefinition(
        name="vscode",
        label="VS Code",
        description="Visual Studio Code-inspired theme",
        category=_T.CREATIVE,
    ),
    ThemeDefinition(
        name="cyberpunk",
        label="Cyberpunk",
        description="Neon pink and cyan on dark - futuristic",
        category=_T.DAISYUI,
    ),
    ThemeDefinition(
        name="synthwave",
        label="Synthwave",
        description="Retro 80s purple and pink vibes",
        category=_T.DAISYUI,
    ),
    ThemeDefinition(
        name="dracula",
        label="Dracula",
        description="Popular dark theme with purple accent",
        category=_T.DAISYUI,
    ),
    ThemeDefinition(
        name="nord", label="Nord", description="Arctic, bluish color palette", category=_T.DAISYUI
    ),
    ThemeDefinition(
        name="retro", label="Retro", description="Warm cream and brown tones", category=_T.DAISYUI
    ),
    ThemeDefinition(
        name="coffee",
        label="Coffee",
        description="Rich coffee browns - warm and cozy",
        category=_T.DAISYUI,
    ),
    ThemeDefinition(
        name="sunset",
        label="Sunset",
        description="Warm orange and purple gradient",
        category=_T.DAISYUI,
    ),
    ThemeDefinition(
        name="aqua", label="Aqua", description="Ocean blue-green theme", category=_T.DAISYUI
    ),
    ThemeDefinition(
        name="win95",
        label="Windows 95/98",
        description="Classic 3D beveled look from the 90s",
        category=_T.RETRO_OS,
    ),
    ThemeDefinition(
        name="winxp",
        label="Windows XP",
        description="Luna Blue theme from Windows XP",
        category=_T.RETRO_OS,
    ),
    ThemeDefinition(
        name="macos9",
        label="Mac OS 9",
        description="Classic Platinum appearance",
        category=_T.RETRO_OS,
    ),
    ThemeDefinition(
        name="light",
        label="Light",
        description="Light theme for accessibility",
        category=_T.ACCESSIBILITY,
    ),
    ThemeDefinition(
        name="high-contrast",
        label="High Contrast",
        description="High contrast theme for accessibility",
        category=_T.ACCESSIBILITY,
    ),
)

DEFAULT_THEME = "photoshop"


@lru_cache(maxsize=1)
def build_registry() -> Registry:
    """Build the registry for the built-in catalog (once per process)."""
    return Registry(BUILTIN_COMPONENTS, BUILTIN_THEMES)
