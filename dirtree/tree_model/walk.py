"""Recursive pre-order tree walk that writes rows and accumulates counts.

The walk threads an immutable ``TraversalState`` down the recursion, so each
child call sees its own extension of the ancestor chain. Rows are written as
soon as an entry is classified; read failures are reported on the error
stream and leave the failing directory without children.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from ..errors import ReadError, SymlinkLoopError
from .fs import EntryLister
from .rendering import TreeStyle, format_entry_line, format_root_line, format_summary, printable
from .types import DirectoryChild, RunSummary, TraversalState, TreeNode


class TreeRenderer:
    """Render directory trees through an ``EntryLister``."""

    def __init__(
        self,
        lister: EntryLister | None = None,
        style: TreeStyle | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
        max_depth: int | None = None,
    ) -> None:
        if max_depth is not None and max_depth < 1:
            raise ValueError("max_depth must be >= 1")
        self.lister = lister or EntryLister()
        self.style = style or TreeStyle()
        self.out = out
        self.err = err
        self.max_depth = max_depth

    def _write(self, line: str) -> None:
        print(line, file=self.out if self.out is not None else sys.stdout)

    def _report(self, error: ReadError, summary: RunSummary) -> None:
        summary.errors.append(error)
        print(f"dirtree: {printable(str(error))}", file=self.err if self.err is not None else sys.stderr)

    def render(self, root: Path | str) -> RunSummary:
        """Write the tree for ``root`` followed by the summary line."""
        root_path = Path(root)
        summary = RunSummary(root=str(root))
        self._write(format_root_line(summary.root, self.style))

        try:
            children = self._walk(root_path, TraversalState(), summary, frozenset())
        except ReadError as exc:
            summary.root_error = exc
            self._report(exc, summary)
            children = ()
        summary.tree = TreeNode(name=summary.root, is_dir=True, children=children)

        self._write("")
        self._write(format_summary(summary, self.style))
        return summary

    def _list(
        self, directory: Path, ancestors: frozenset[Path]
    ) -> tuple[list[DirectoryChild], frozenset[Path]]:
        """List ``directory`` and return the real paths its children descend from."""
        if not self.lister.follow_symlinks:
            return self.lister.list(directory), ancestors
        real = self.lister.real_path(directory)
        if real in ancestors:
            raise SymlinkLoopError(directory, real)
        return self.lister.list(directory), ancestors | {real}

    def _walk(
        self,
        directory: Path,
        state: TraversalState,
        summary: RunSummary,
        ancestors: frozenset[Path],
    ) -> tuple[TreeNode, ...]:
        entries, ancestors = self._list(directory, ancestors)
        can_descend = self.max_depth is None or state.depth + 1 < self.max_depth

        nodes: list[TreeNode] = []
        for idx, entry in enumerate(entries):
            is_last = idx == len(entries) - 1
            self._write(format_entry_line(entry.name, entry.is_dir, is_last, state, self.style))
            if not entry.is_dir:
                summary.file_count += 1
                nodes.append(TreeNode(name=entry.name, is_dir=False))
                continue

            summary.directory_count += 1
            grandchildren: tuple[TreeNode, ...] = ()
            if can_descend:
                try:
                    grandchildren = self._walk(entry.path, state.descend(is_last), summary, ancestors)
                except ReadError as exc:
                    self._report(exc, summary)
            nodes.append(TreeNode(name=entry.name, is_dir=True, children=grandchildren))
        return tuple(nodes)


def render_tree(
    root: Path | str,
    show_hidden: bool = False,
    follow_symlinks: bool = False,
    style: TreeStyle | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
    max_depth: int | None = None,
) -> RunSummary:
    """Render ``root`` from the real filesystem with default listing policy."""
    lister = EntryLister(show_hidden=show_hidden, follow_symlinks=follow_symlinks)
    renderer = TreeRenderer(lister=lister, style=style, out=out, err=err, max_depth=max_depth)
    return renderer.render(root)


__all__ = ["TreeRenderer", "render_tree"]
