"""Console theme definitions and selection helpers.

Themes are ANSI palettes for the console browser chrome (tree, breadcrumb,
messages). Syntax highlighting style for document text is a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the console browser."""

    name: str
    reset: str
    divider: str
    tree_marker: str
    tree_dir: str
    tree_file: str
    tree_active: str
    crumb_muted: str
    crumb_active: str
    error: str
    hint: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    divider="\033[2m",
    tree_marker="\033[38;5;44m",
    tree_dir="\033[1;34m",
    tree_file="\033[38;5;252m",
    tree_active="\033[7;1m",
    crumb_muted="\033[38;5;245m",
    crumb_active="\033[1;38;5;255m",
    error="\033[38;5;203m",
    hint="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    divider="\033[2;38;5;31m",
    tree_marker="\033[38;5;39m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;252m",
    tree_active="\033[7;38;5;45m",
    crumb_muted="\033[38;5;73m",
    crumb_active="\033[1;38;5;153m",
    error="\033[38;5;210m",
    hint="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    divider="",
    tree_marker="",
    tree_dir="",
    tree_file="",
    tree_active="",
    crumb_muted="",
    crumb_active="",
    error="",
    hint="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
