"""Command-line front door for dirtree.

Parses CLI options, resolves each root path, and renders one tree per root.
Exit status is non-zero when any root could not be resolved or listed.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TextIO

from . import config
from .errors import PathResolutionError, UnknownFlagError
from .tree_model import ASCII_GLYPHS, UNICODE_GLYPHS, EntryLister, TreeRenderer, TreeStyle, printable
from .ui_theme import available_theme_names, resolve_theme

EXIT_FAILURE = 1


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirtree",
        description="List directory contents as an indented tree.",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Directories to list. Defaults to current directory.")
    parser.add_argument("-a", "--all", action="store_true", default=None, help="Include entries whose name starts with '.'.")
    parser.add_argument("-L", "--max-depth", type=_positive_int, default=None, help="Descend at most N levels.")
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        default=None,
        help="Descend into directory links; directories reached twice are reported and skipped.",
    )
    parser.add_argument("--ascii", action="store_true", help="Draw branches with ASCII characters.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Remember --all, --follow-symlinks and --theme for later runs.",
    )
    return parser


def parse_args(parser: argparse.ArgumentParser, argv: list[str] | None) -> argparse.Namespace:
    """Parse ``argv``, raising ``UnknownFlagError`` for unrecognized options."""
    args, extras = parser.parse_known_intermixed_args(argv)
    for token in extras:
        if token.startswith("-") and token != "-":
            raise UnknownFlagError(token)
    args.paths = list(args.paths) + list(extras)
    return args


def resolve_root(raw: str) -> Path:
    """Return ``raw`` as an absolute path without following links."""
    if "\x00" in raw:
        raise PathResolutionError(raw, ValueError("embedded null byte"))
    try:
        return Path(os.path.abspath(raw))
    except (OSError, ValueError) as exc:
        raise PathResolutionError(raw, exc) from exc


def _color_disabled(no_color_flag: bool, out: TextIO) -> bool:
    if no_color_flag or os.environ.get("NO_COLOR"):
        return True
    isatty = getattr(out, "isatty", None)
    return not (callable(isatty) and isatty())


def _save_defaults(args: argparse.Namespace, err: TextIO) -> None:
    saved = config.save_show_hidden(args.all)
    saved = config.save_follow_symlinks(args.follow_symlinks) and saved
    if args.theme:
        saved = config.save_theme_name(args.theme) and saved
    if not saved:
        print(f"dirtree: could not write {config.CONFIG_PATH}", file=err)


def main(
    argv: list[str] | None = None,
    default_path: Path | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """Parse CLI arguments and render a tree for every requested root.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Raises ``SystemExit`` with a non-zero code when any
    root failed to resolve or list.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    parser = build_parser()
    try:
        args = parse_args(parser, argv)
    except UnknownFlagError as exc:
        parser.error(str(exc))

    if args.all is None:
        args.all = config.load_show_hidden()
    if args.follow_symlinks is None:
        args.follow_symlinks = config.load_follow_symlinks()
    theme_name = args.theme or config.load_theme_name()
    if args.save_defaults:
        _save_defaults(args, err)

    style = TreeStyle(
        glyphs=ASCII_GLYPHS if args.ascii else UNICODE_GLYPHS,
        theme=resolve_theme(theme_name, no_color=_color_disabled(args.no_color, out)),
    )
    renderer = TreeRenderer(
        lister=EntryLister(show_hidden=args.all, follow_symlinks=args.follow_symlinks),
        style=style,
        out=out,
        err=err,
        max_depth=args.max_depth,
    )

    raw_paths = args.paths or [str(default_path) if default_path is not None else "."]
    failures = 0
    for index, raw in enumerate(raw_paths):
        if index:
            print("", file=out)
        try:
            root = resolve_root(raw)
        except PathResolutionError as exc:
            print(f"dirtree: {printable(str(exc))}", file=err)
            failures += 1
            continue
        summary = renderer.render(root)
        if not summary.ok:
            failures += 1

    if failures:
        raise SystemExit(EXIT_FAILURE)


if __name__ == "__main__":
    main()
