"""UI theme definitions and selection helpers.

Themes are ANSI palettes for tree labels only. Branch glyphs and indentation
are never styled so plain and colored output keep identical layout.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the tree renderer."""

    name: str
    reset: str
    tree_file: str
    tree_dir: str
    repo_clean: str
    repo_dirty: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_file="\033[38;5;252m",
    tree_dir="\033[1;34m",
    repo_clean="\033[1;32m",
    repo_dirty="\033[1;31m",
)

CLASSIC_THEME = UITheme(
    name="classic",
    reset="\033[0m",
    tree_file="\033[30m",
    tree_dir="\033[37m",
    repo_clean="\033[32m",
    repo_dirty="\033[31m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    tree_file="",
    tree_dir="",
    repo_clean="",
    repo_dirty="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    CLASSIC_THEME.name: CLASSIC_THEME,
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
    if no_color or str(name or "").strip().lower() == PLAIN_THEME.name:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "CLASSIC_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
