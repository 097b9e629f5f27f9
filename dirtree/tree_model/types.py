"""Domain datatypes for rendered directory trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..errors import ReadError


@dataclass(frozen=True)
class DirectoryChild:
    """One immediate child of a listed directory."""

    name: str
    path: Path
    is_dir: bool


@dataclass(frozen=True)
class TreeNode:
    """Rendered entry with its visible children in render order.

    ``children`` stays empty for files and for directories that were not
    expanded (read failure, depth limit, repeated link target).
    """

    name: str
    is_dir: bool
    children: tuple["TreeNode", ...] = ()


@dataclass(frozen=True)
class TraversalState:
    """Last-sibling flags for every ancestor between the root and the parent."""

    ancestor_is_last: tuple[bool, ...] = ()

    @property
    def depth(self) -> int:
        return len(self.ancestor_is_last)

    def descend(self, is_last: bool) -> TraversalState:
        """Return the state seen by the children of an entry."""
        return TraversalState(self.ancestor_is_last + (is_last,))


@dataclass
class RunSummary:
    """Counters and diagnostics accumulated by one render call."""

    root: str
    directory_count: int = 0
    file_count: int = 0
    errors: list[ReadError] = field(default_factory=list)
    root_error: ReadError | None = None
    tree: TreeNode | None = None

    @property
    def ok(self) -> bool:
        return self.root_error is None


__all__ = [
    "DirectoryChild",
    "TreeNode",
    "TraversalState",
    "RunSummary",
]
