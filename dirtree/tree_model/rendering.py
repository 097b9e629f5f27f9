"""Formatting helpers for tree rows: glyph sets, indent prefixes and summaries."""

from __future__ import annotations

from dataclasses import dataclass

from ..ui_theme import PLAIN_THEME, TreeTheme
from .types import RunSummary, TraversalState


@dataclass(frozen=True)
class GlyphSet:
    """Connector and indent segments; all four share one display width."""

    name: str
    tee: str
    corner: str
    vertical: str
    blank: str

    def __post_init__(self) -> None:
        widths = {len(self.tee), len(self.corner), len(self.vertical), len(self.blank)}
        if len(widths) != 1:
            raise ValueError(f"glyph set {self.name!r} mixes segment widths {sorted(widths)}")
        if self.blank.strip():
            raise ValueError(f"glyph set {self.name!r} blank segment must be spaces")

    @property
    def width(self) -> int:
        return len(self.blank)


UNICODE_GLYPHS = GlyphSet(name="unicode", tee="├── ", corner="└── ", vertical="│   ", blank="    ")
ASCII_GLYPHS = GlyphSet(name="ascii", tee="|-- ", corner="`-- ", vertical="|   ", blank="    ")


@dataclass(frozen=True)
class TreeStyle:
    """Formatting policy handed to the renderer."""

    glyphs: GlyphSet = UNICODE_GLYPHS
    theme: TreeTheme = PLAIN_THEME


def indent_prefix(state: TraversalState, glyphs: GlyphSet = UNICODE_GLYPHS) -> str:
    """Return exactly ``state.depth`` segments, root-nearest first.

    An ancestor that was the last of its siblings gets a blank segment; any
    other ancestor still has siblings below it and gets a vertical bar.
    """
    return "".join(glyphs.blank if is_last else glyphs.vertical for is_last in state.ancestor_is_last)


def printable(text: str) -> str:
    """Return ``text`` safe for any UTF-8 stream.

    Names that are not valid UTF-8 arrive as surrogate escapes; their raw
    bytes are shown as ``\\xNN`` instead of failing the write.
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "backslashreplace").decode("utf-8")
    return raw.decode("utf-8", "backslashreplace")


def connector_for(is_last: bool, glyphs: GlyphSet = UNICODE_GLYPHS) -> str:
    return glyphs.corner if is_last else glyphs.tee


def _paint(text: str, color: str, theme: TreeTheme) -> str:
    if not color or not text:
        return text
    return f"{color}{text}{theme.reset}"


def format_entry_line(name: str, is_dir: bool, is_last: bool, state: TraversalState, style: TreeStyle) -> str:
    """Render one entry row: indent prefix, connector, then the name."""
    theme = style.theme
    branch = indent_prefix(state, style.glyphs) + connector_for(is_last, style.glyphs)
    name_color = theme.tree_dir if is_dir else theme.tree_file
    return _paint(branch, theme.tree_branch, theme) + _paint(printable(name), name_color, theme)


def format_root_line(root: str, style: TreeStyle) -> str:
    return _paint(printable(root), style.theme.tree_root, style.theme)


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def format_summary(summary: RunSummary, style: TreeStyle | None = None) -> str:
    """Return the trailing ``N directories, M files`` line."""
    text = ", ".join(
        (
            _plural(summary.directory_count, "directory", "directories"),
            _plural(summary.file_count, "file", "files"),
        )
    )
    if style is None:
        return text
    return _paint(text, style.theme.tree_summary, style.theme)


__all__ = [
    "GlyphSet",
    "UNICODE_GLYPHS",
    "ASCII_GLYPHS",
    "TreeStyle",
    "indent_prefix",
    "printable",
    "connector_for",
    "format_entry_line",
    "format_root_line",
    "format_summary",
]
