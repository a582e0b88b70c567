"""Choose the single active presentation mode and dispatch to its renderer.

The selector neither filters nor sorts: flat modes receive entries in
enumeration order, tree mode receives the tree walk's own ordering.
"""

from __future__ import annotations

from typing import TextIO

from .listing.enumeration import iter_classified_entries
from .listing.types import ListingConfig, ListingMode
from .render.structured import render_structured
from .render.table import render_table
from .render.tree import build_tree_lines
from .ui_theme import resolve_theme


def select_mode(*, tree: bool = False, structured: bool = False, detailed: bool = False) -> ListingMode:
    """Collapse mode flags into one mode: tree > structured > detailed > compact."""
    if tree:
        return ListingMode.TREE
    if structured:
        return ListingMode.STRUCTURED
    if detailed:
        return ListingMode.DETAILED
    return ListingMode.COMPACT


def present(config: ListingConfig, stream: TextIO, width: int | None = None) -> None:
    """Render ``config.root_path`` to ``stream`` in ``config.mode``."""
    theme = resolve_theme(config.theme_name, no_color=config.no_color)

    if config.mode is ListingMode.TREE:
        for line in build_tree_lines(config.root_path, config.show_hidden, config.max_depth, theme):
            stream.write(line + "\n")
        return

    entries = iter_classified_entries(config.root_path, config.show_hidden)
    if config.mode is ListingMode.STRUCTURED:
        render_structured(entries, stream)
        return

    render_table(
        entries,
        stream,
        theme,
        detailed=config.mode is ListingMode.DETAILED,
        no_color=config.no_color,
        width=width,
    )


__all__ = ["select_mode", "present"]
