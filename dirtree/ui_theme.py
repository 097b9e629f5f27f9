"""ANSI palettes for tree output and selection helpers.

Themes only color names, branches and diagnostics; glyph shapes live in
``tree_model.rendering``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TreeTheme:
    """Semantic ANSI palette used by the tree renderer."""

    name: str
    reset: str
    tree_root: str
    tree_branch: str
    tree_dir: str
    tree_file: str
    tree_summary: str


DEFAULT_THEME = TreeTheme(
    name="default",
    reset="\033[0m",
    tree_root="\033[1m",
    tree_branch="",
    tree_dir="\033[34m",
    tree_file="\033[32m",
    tree_summary="",
)

OCEAN_THEME = TreeTheme(
    name="ocean",
    reset="\033[0m",
    tree_root="\033[1;38;5;45m",
    tree_branch="\033[2;38;5;31m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;252m",
    tree_summary="\033[2;38;5;110m",
)

PLAIN_THEME = TreeTheme(
    name="plain",
    reset="",
    tree_root="",
    tree_branch="",
    tree_dir="",
    tree_file="",
    tree_summary="",
)

_THEMES: dict[str, TreeTheme] = {
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


def resolve_theme(name: str | None, *, no_color: bool = False) -> TreeTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "TreeTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
