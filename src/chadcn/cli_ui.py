"""
Rich interactive UI components for the chadcn CLI.

Provides cursor-navigable selection menus, grouped multi-select and styled
status lines. Every prompt falls back to numbered input when stdin or stdout
is not a TTY.
"""

import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from rich import box
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

logger = logging.getLogger(__name__)

# Check if we're in a TTY for interactive features
IS_TTY = sys.stdin.isatty() and sys.stdout.isatty()

console = Console()

T = TypeVar("T")

_CLEAR = "\033[2J\033[H"


@dataclass
class SelectOption(Generic[T]):
    """An option in a selection menu."""

    value: T
    label: str
    description: str = ""
    group: str = ""  # heading the option is listed under
    badge: str = ""  # e.g., "INSTALLED", "DEFAULT"


# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "subtitle": Style(color="bright_black"),
    "group": Style(color="magenta", bold=True),
    "selected": Style(color="bright_white", bgcolor="blue", bold=True),
    "unselected": Style(color="white"),
    "checked": Style(color="green", bold=True),
    "description": Style(color="bright_black"),
    "badge": Style(color="yellow", bold=True),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "warning": Style(color="yellow"),
    "info": Style(color="cyan"),
    "muted": Style(color="bright_black"),
    "highlight": Style(color="bright_cyan"),
    "code": Style(color="bright_white", bold=True),
}


def print_header(title: str, subtitle: str = "") -> None:
    """Print a styled header."""
    console.print()
    console.print(Text(title, style=STYLES["title"]))
    if subtitle:
        console.print(Text(subtitle, style=STYLES["subtitle"]))
    console.print()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(f"✓ {message}", style=STYLES["success"]))


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(Text(f"✗ {message}", style=STYLES["error"]))


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(Text(f"⚠ {message}", style=STYLES["warning"]))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(Text(f"ℹ {message}", style=STYLES["info"]))


def print_command(command: str) -> None:
    """Print a shell command the user can copy."""
    console.print(Text(f"  {command}", style=STYLES["code"]))


def print_list(items: Iterable[str], style: str = "muted") -> None:
    """Print an indented bullet list."""
    for item in items:
        console.print(Text(f"  - {item}", style=STYLES[style]))


def print_groups(
    groups: dict[str, list[SelectOption]],
    title: str = "",
) -> None:
    """Print options under their group headings (non-interactive)."""
    if title:
        print_header(title)

    for group, options in groups.items():
        console.print(Text(group, style=STYLES["group"]))
        table = Table(box=None, show_header=False, padding=(0, 2))
        table.add_column("Name", style="white bold")
        table.add_column("Badge", style="yellow")
        table.add_column("Description", style="bright_black")
        for opt in options:
            table.add_row(Text(f"  {opt.label}"), Text(opt.badge), Text(opt.description))
        console.print(table)
    console.print()


def group_options(options: list[SelectOption[T]]) -> dict[str, list[SelectOption[T]]]:
    """Group options by their group heading, keeping first-seen order."""
    groups: dict[str, list[SelectOption[T]]] = {}
    for opt in options:
        groups.setdefault(opt.group, []).append(opt)
    return groups


# =============================================================================
# Single selection
# =============================================================================


def select_interactive(
    options: list[SelectOption[T]],
    title: str = "Select an option",
    subtitle: str = "",
    default_index: int = 0,
) -> T | None:
    """
    Interactive selection with keyboard navigation.

    Uses arrow keys for navigation and Enter to select.
    Falls back to numbered input if not in a TTY.

    Args:
        options: List of SelectOption items
        title: Title shown above the menu
        subtitle: Optional subtitle
        default_index: Option highlighted first (and chosen on empty input)

    Returns:
        Selected value or None if cancelled
    """
    if not options:
        return None

    if not IS_TTY:
        return _select_simple(options, title, subtitle, default_index)

    try:
        return _select_with_keyboard(options, title, subtitle, default_index)
    except Exception as e:
        logger.debug("Keyboard selection unavailable: %s", e)
        return _select_simple(options, title, subtitle, default_index)


def _get_key() -> str:
    """Get a single keypress."""
    import termios
    import tty

    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
        # Arrow keys arrive as escape sequences
        if ch == "\x1b":
            ch += sys.stdin.read(2)
        return ch
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def _select_with_keyboard(
    options: list[SelectOption[T]],
    title: str,
    subtitle: str,
    default_index: int,
) -> T | None:
    """Keyboard-navigable selection menu."""
    selected_idx = default_index if 0 <= default_index < len(options) else 0

    def render_menu() -> None:
        console.print(_CLEAR, end="")
        print_header(title, subtitle)

        current_group = None
        for i, opt in enumerate(options):
            if opt.group and opt.group != current_group:
                current_group = opt.group
                console.print(Text(opt.group, style=STYLES["group"]))

            is_selected = i == selected_idx
            prefix = "› " if is_selected else "  "
            line = Text()
            line.append(prefix, style=STYLES["highlight"] if is_selected else STYLES["muted"])
            label_style = STYLES["selected"] if is_selected else STYLES["unselected"]
            line.append(opt.label, style=label_style)
            if opt.badge:
                line.append(f" [{opt.badge}]", style=STYLES["badge"])
            console.print(line)

            if is_selected and opt.description:
                console.print(Text(f"    {opt.description}", style=STYLES["description"]))

        console.print()
        console.print(Text("↑/↓ Navigate  Enter Select  q Cancel", style=STYLES["muted"]))

    try:
        while True:
            render_menu()
            key = _get_key()

            if key == "\x1b[A":
                selected_idx = (selected_idx - 1) % len(options)
            elif key == "\x1b[B":
                selected_idx = (selected_idx + 1) % len(options)
            elif key in ("\r", "\n"):
                console.print(_CLEAR, end="")
                return options[selected_idx].value
            elif key in ("q", "Q", "\x03"):
                console.print(_CLEAR, end="")
                return None

    except KeyboardInterrupt:
        console.print(_CLEAR, end="")
        return None


def _print_numbered(options: list[SelectOption[T]]) -> None:
    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Num", style="cyan", width=4)
    table.add_column("Name", style="white")
    table.add_column("Description", style="bright_black")

    current_group = None
    for i, opt in enumerate(options, 1):
        if opt.group and opt.group != current_group:
            current_group = opt.group
            table.add_row("", Text(opt.group, style=STYLES["group"]), "")
        label = f"{opt.label} [{opt.badge}]" if opt.badge else opt.label
        description = opt.description
        if len(description) > 50:
            description = description[:50] + "..."
        table.add_row(f"{i}.", Text(label), Text(description))

    console.print(table)
    console.print()


def _match_option(choice: str, options: list[SelectOption[T]]) -> int | None:
    """Index of the option a typed number or name refers to."""
    try:
        idx = int(choice) - 1
        if 0 <= idx < len(options):
            return idx
        return None
    except ValueError:
        pass

    choice_lower = choice.lower()
    for idx, opt in enumerate(options):
        if opt.label.lower() == choice_lower:
            return idx
    for idx, opt in enumerate(options):
        if opt.label.lower().startswith(choice_lower):
            return idx
    return None


def _select_simple(
    options: list[SelectOption[T]],
    title: str,
    subtitle: str,
    default_index: int,
) -> T | None:
    """Simple numbered selection (fallback for non-TTY)."""
    print_header(title, subtitle)
    _print_numbered(options)

    default = options[default_index] if 0 <= default_index < len(options) else None
    hint = f" [{default.label}]" if default else ""

    while True:
        try:
            choice = console.input(Text(f"Enter number or name{hint}: ", style=STYLES["info"]))
            choice = choice.strip()

            if not choice:
                return default.value if default else None
            if choice.lower() in ("q", "quit", "cancel"):
                return None

            idx = _match_option(choice, options)
            if idx is not None:
                return options[idx].value

            message = f"Invalid choice. Enter 1-{len(options)} or option name."
            console.print(Text(message, style=STYLES["error"]))

        except (KeyboardInterrupt, EOFError):
            console.print()
            return None


# =============================================================================
# Multiple selection
# =============================================================================


def multiselect(
    options: list[SelectOption[T]],
    title: str = "Select options",
    subtitle: str = "",
) -> list[T] | None:
    """
    Pick any number of options, listed under their group headings.

    In a TTY, arrow keys move, Space toggles, `a` toggles everything and
    Enter confirms. Otherwise the user types numbers or names separated by
    spaces or commas.

    Returns:
        Chosen values in option order (possibly empty), or None if cancelled
    """
    if not options:
        return []

    if not IS_TTY:
        return _multiselect_simple(options, title, subtitle)

    try:
        return _multiselect_with_keyboard(options, title, subtitle)
    except Exception as e:
        logger.debug("Keyboard selection unavailable: %s", e)
        return _multiselect_simple(options, title, subtitle)


def _multiselect_with_keyboard(
    options: list[SelectOption[T]],
    title: str,
    subtitle: str,
) -> list[T] | None:
    cursor = 0
    checked: set[int] = set()

    def render_menu() -> None:
        console.print(_CLEAR, end="")
        print_header(title, subtitle)

        current_group = None
        for i, opt in enumerate(options):
            if opt.group and opt.group != current_group:
                current_group = opt.group
                console.print(Text(opt.group, style=STYLES["group"]))

            is_cursor = i == cursor
            line = Text()
            line.append("› " if is_cursor else "  ", style=STYLES["highlight"])
            if i in checked:
                line.append("◉ ", style=STYLES["checked"])
            else:
                line.append("○ ", style=STYLES["muted"])
            line.append(opt.label, style=STYLES["selected"] if is_cursor else STYLES["unselected"])
            if opt.description:
                line.append(f"  {opt.description}", style=STYLES["description"])
            console.print(line)

        console.print()
        console.print(
            Text(
                f"{len(checked)} selected  "
                "↑/↓ Navigate  Space Toggle  a All  Enter Confirm  q Cancel",
                style=STYLES["muted"],
            )
        )

    try:
        while True:
            render_menu()
            key = _get_key()

            if key == "\x1b[A":
                cursor = (cursor - 1) % len(options)
            elif key == "\x1b[B":
                cursor = (cursor + 1) % len(options)
            elif key == " ":
                checked.symmetric_difference_update({cursor})
            elif key in ("a", "A"):
                checked = set() if len(checked) == len(options) else set(range(len(options)))
            elif key in ("\r", "\n"):
                console.print(_CLEAR, end="")
                return [opt.value for i, opt in enumerate(options) if i in checked]
            elif key in ("q", "Q", "\x03"):
                console.print(_CLEAR, end="")
                return None

    except KeyboardInterrupt:
        console.print(_CLEAR, end="")
        return None


def _multiselect_simple(
    options: list[SelectOption[T]],
    title: str,
    subtitle: str,
) -> list[T] | None:
    """Numbered multi-selection (fallback for non-TTY)."""
    print_header(title, subtitle)
    _print_numbered(options)

    while True:
        try:
            answer = console.input(
                Text("Enter numbers or names (space/comma separated): ", style=STYLES["info"])
            )
        except (KeyboardInterrupt, EOFError):
            console.print()
            return None

        tokens = answer.replace(",", " ").split()
        if not tokens:
            return []
        if len(tokens) == 1 and tokens[0].lower() in ("q", "quit", "cancel"):
            return None

        chosen: set[int] = set()
        invalid = []
        for token in tokens:
            idx = _match_option(token, options)
            if idx is None:
                invalid.append(token)
            else:
                chosen.add(idx)

        if not invalid:
            return [opt.value for i, opt in enumerate(options) if i in chosen]

        console.print(Text(f"Unknown choice(s): {', '.join(invalid)}", style=STYLES["error"]))


# =============================================================================
# Simple prompts
# =============================================================================


def confirm(message: str, default: bool = True) -> bool:
    """Ask for confirmation with Y/n prompt."""
    suffix = " [Y/n]" if default else " [y/N]"
    prompt = Text(message + suffix + " ", style=STYLES["info"])

    try:
        response = console.input(prompt).strip().lower()

        if not response:
            return default

        return response in ("y", "yes")

    except (KeyboardInterrupt, EOFError):
        console.print()
        return False


def prompt_text(message: str, default: str = "") -> str | None:
    """Ask for a line of text; empty input keeps the default, None if cancelled."""
    suffix = f" [{default}]" if default else ""
    prompt = Text(f"{message}{suffix}: ", style=STYLES["info"])

    try:
        response = console.input(prompt).strip()
    except (KeyboardInterrupt, EOFError):
        console.print()
        return None

    return response or default
