"""Output renderers for flat tables, JSON records, and ANSI trees."""

from __future__ import annotations

from .structured import entry_record, render_structured
from .table import build_table, format_modified, render_table
from .tree import build_tree_lines, format_tree_node, root_label

__all__ = [
    "entry_record",
    "render_structured",
    "build_table",
    "format_modified",
    "render_table",
    "build_tree_lines",
    "format_tree_node",
    "root_label",
]
