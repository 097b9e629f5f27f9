"""Error taxonomy for tree rendering and the command-line front door."""

from __future__ import annotations

from pathlib import Path


class DirTreeError(Exception):
    """Base class for errors raised by dirtree."""


class PathResolutionError(DirTreeError):
    """Root path could not be converted to an absolute path."""

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")


class ReadError(DirTreeError):
    """Directory contents could not be enumerated.

    Recoverable: the walk reports it and treats the subtree as empty.
    """

    def __init__(self, path: Path, cause: BaseException | None = None, reason: str | None = None) -> None:
        self.path = path
        self.cause = cause
        if reason is None:
            reason = _describe_os_error(cause)
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class SymlinkLoopError(ReadError):
    """Directory was already listed earlier in the same walk."""

    def __init__(self, path: Path, target: Path) -> None:
        self.target = target
        super().__init__(path, reason=f"recursive directory link to {target}")


class UnknownFlagError(DirTreeError):
    """Unrecognized option token on the command line."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"unrecognized option: {flag}")


def _describe_os_error(cause: BaseException | None) -> str:
    if cause is None:
        return "unreadable"
    strerror = getattr(cause, "strerror", None)
    if strerror:
        return str(strerror)
    return str(cause) or type(cause).__name__


__all__ = [
    "DirTreeError",
    "PathResolutionError",
    "ReadError",
    "SymlinkLoopError",
    "UnknownFlagError",
]
