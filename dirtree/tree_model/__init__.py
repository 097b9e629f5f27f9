"""Core tree model: entry listing policy, traversal, and row formatting.

This package contains the non-CLI pieces:
- datatypes for listed entries, rendered nodes, and run summaries
- filesystem scanning plus hidden-entry filtering and ordering
- indent/connector formatting driven by a swappable style
- the recursive renderer that writes rows and counts entries
"""

from __future__ import annotations

from .types import DirectoryChild, RunSummary, TraversalState, TreeNode
from .fs import HIDDEN_PREFIX, EntryLister, entry_sort_key, is_hidden_name, scan_directory
from .rendering import (
    ASCII_GLYPHS,
    UNICODE_GLYPHS,
    GlyphSet,
    TreeStyle,
    connector_for,
    format_entry_line,
    format_root_line,
    format_summary,
    indent_prefix,
    printable,
)
from .walk import TreeRenderer, render_tree

__all__ = [
    "DirectoryChild",
    "RunSummary",
    "TraversalState",
    "TreeNode",
    "HIDDEN_PREFIX",
    "EntryLister",
    "entry_sort_key",
    "is_hidden_name",
    "scan_directory",
    "ASCII_GLYPHS",
    "UNICODE_GLYPHS",
    "GlyphSet",
    "TreeStyle",
    "connector_for",
    "format_entry_line",
    "format_root_line",
    "format_summary",
    "indent_prefix",
    "printable",
    "TreeRenderer",
    "render_tree",
]
