"""Rounded Rich tables for the compact and detailed listing modes."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from datetime import datetime
from typing import TextIO

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..listing.categories import categorize
from ..listing.types import ClassifiedEntry
from ..ui_theme import DEFAULT_THEME, UITheme


def format_modified(modified: datetime | None) -> str:
    """Format like ``Sat Oct 17 2026``; empty when the timestamp is unknown."""
    if modified is None:
        return ""
    return f"{modified:%a %b} {modified.day:>2} {modified:%Y}"


def _name_cell(entry: ClassifiedEntry, theme: UITheme) -> Text:
    color = theme.name_color(categorize(entry.kind, entry.name))
    if not color:
        return Text(entry.name)
    return Text.from_ansi(f"{color}{entry.name}{theme.reset}")


def build_table(
    entries: Iterable[ClassifiedEntry],
    theme: UITheme | None = None,
    detailed: bool = False,
) -> Table:
    """Build the listing table; ``detailed`` adds permission and owner columns."""
    active_theme = theme or DEFAULT_THEME
    table = Table(box=box.ROUNDED, header_style=active_theme.table_header)
    if detailed:
        table.add_column("Permission", style=active_theme.table_permissions)
        table.add_column("Owner", style=active_theme.table_owner)
    table.add_column("Name", style=active_theme.table_name, no_wrap=True)
    table.add_column("Type", style=active_theme.table_type)
    table.add_column("Size B", style=active_theme.table_size, justify="right")
    table.add_column("Modified", style=active_theme.table_modified)

    for entry in entries:
        cells: list[Text] = []
        if detailed:
            cells.append(Text(entry.permissions or ""))
            cells.append(Text(entry.owner or ""))
        cells.extend(
            [
                _name_cell(entry, active_theme),
                Text(entry.kind.value),
                Text(str(entry.size_bytes or 0)),
                Text(format_modified(entry.modified)),
            ]
        )
        table.add_row(*cells)
    return table


def render_table(
    entries: Iterable[ClassifiedEntry],
    stream: TextIO,
    theme: UITheme | None = None,
    detailed: bool = False,
    no_color: bool = False,
    width: int | None = None,
) -> None:
    """Print the listing table to ``stream``.

    Piped output is printed at the table's natural width so no column is
    squeezed or cut short.
    """
    table = build_table(entries, theme, detailed=detailed)
    if width is None and not stream.isatty():
        width = Console(width=sys.maxsize).measure(table).maximum
    console = Console(
        file=stream,
        no_color=no_color,
        force_terminal=None if no_color else True,
        highlight=False,
        width=width,
    )
    console.print(table)


__all__ = ["format_modified", "build_table", "render_table"]
