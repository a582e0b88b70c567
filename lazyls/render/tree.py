"""ANSI rendering of depth-bounded directory trees."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..listing.categories import categorize
from ..listing.tree import iter_tree_nodes
from ..listing.types import DEFAULT_TREE_MAX_DEPTH, TreeNode
from ..ui_theme import DEFAULT_THEME, UITheme


def root_label(root: Path, theme: UITheme | None = None) -> str:
    """Return the unprefixed first line naming the listing root."""
    active_theme = theme or DEFAULT_THEME
    return f"{active_theme.tree_root}{root}{active_theme.reset}"


def format_tree_node(node: TreeNode, theme: UITheme | None = None) -> str:
    """Render one row: dimmed prefix and connector, then the colored name."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    name_color = active_theme.name_color(categorize(node.entry.kind, node.entry.name))
    name = f"{name_color}{node.entry.name}{reset}" if name_color else node.entry.name
    return f"{active_theme.tree_branch}{node.prefix}{node.connector}{reset}{name}"


def build_tree_lines(
    root: Path,
    show_hidden: bool,
    max_depth: int = DEFAULT_TREE_MAX_DEPTH,
    theme: UITheme | None = None,
) -> Iterator[str]:
    """Yield the root label followed by one rendered line per tree node."""
    yield root_label(root, theme)
    for node in iter_tree_nodes(root, show_hidden, max_depth):
        yield format_tree_node(node, theme)


__all__ = ["root_label", "format_tree_node", "build_tree_lines"]
