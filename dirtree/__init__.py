"""dirtree: print a directory as an indented tree with a count summary.

``main`` runs the command line; ``render_tree`` renders one root from code.
Both import their modules on first call.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Run the ``dirtree`` command line (see ``dirtree.cli.main``)."""
    from .cli import main as _main

    return _main(*args, **kwargs)


def render_tree(*args, **kwargs):
    """Render one root to a stream (see ``dirtree.tree_model.render_tree``)."""
    from .tree_model import render_tree as _render_tree

    return _render_tree(*args, **kwargs)


__all__ = ["main", "render_tree"]
