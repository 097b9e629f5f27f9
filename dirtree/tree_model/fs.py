"""Filesystem scanning plus the visibility/ordering policy for listed entries."""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from pathlib import Path

from ..errors import ReadError
from .types import DirectoryChild

HIDDEN_PREFIX = "."

ScanFunction = Callable[[Path, bool], Sequence[DirectoryChild]]


def scan_directory(directory: Path, follow_symlinks: bool = False) -> list[DirectoryChild]:
    """Return immediate children of ``directory`` in filesystem order.

    Raises ``ReadError`` when the directory cannot be enumerated. The scandir
    handle is closed before returning.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    is_dir = child.is_dir(follow_symlinks=follow_symlinks)
                except OSError:
                    is_dir = False
                children.append(
                    DirectoryChild(
                        name=child.name,
                        path=Path(child.path),
                        is_dir=is_dir,
                    )
                )
    except OSError as exc:
        raise ReadError(directory, exc) from exc
    return children


def is_hidden_name(name: str) -> bool:
    """Return whether ``name`` carries the hidden-entry marker."""
    return name.startswith(HIDDEN_PREFIX)


def entry_sort_key(child: DirectoryChild) -> tuple[bool, str]:
    """Files before directories, then case-sensitive name order."""
    return (child.is_dir, child.name)


class EntryLister:
    """Lists one directory's visible children in render order.

    ``scan`` is the filesystem capability; tests substitute an in-memory
    mapping. ``resolve`` canonicalizes paths for the symlink loop guard.
    """

    def __init__(
        self,
        scan: ScanFunction = scan_directory,
        show_hidden: bool = False,
        follow_symlinks: bool = False,
        resolve: Callable[[Path], Path] | None = None,
    ) -> None:
        self.scan = scan
        self.show_hidden = show_hidden
        self.follow_symlinks = follow_symlinks
        self._resolve = resolve

    def list(self, directory: Path) -> list[DirectoryChild]:
        """Return visible children of ``directory``, or raise ``ReadError``."""
        children = [
            child
            for child in self.scan(directory, self.follow_symlinks)
            if self.show_hidden or not is_hidden_name(child.name)
        ]
        children.sort(key=entry_sort_key)
        return children

    def real_path(self, directory: Path) -> Path:
        """Canonical form of ``directory`` used to detect repeated visits."""
        if self._resolve is not None:
            return self._resolve(directory)
        return Path(os.path.realpath(directory))


__all__ = [
    "HIDDEN_PREFIX",
    "ScanFunction",
    "scan_directory",
    "is_hidden_name",
    "entry_sort_key",
    "EntryLister",
]
