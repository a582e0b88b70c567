"""Sibling ordering policies for flat and tree presentation."""

from __future__ import annotations

import os
from collections.abc import Iterable

from .types import ClassifiedEntry, EntryKind


def tree_sort_key(entry: ClassifiedEntry) -> tuple[bool, bytes]:
    """Directories first, then case-sensitive byte order of the on-disk name.

    The raw path name is used so undecodable siblings keep distinct keys even
    though they share one display placeholder.
    """
    return (entry.kind is not EntryKind.DIRECTORY, os.fsencode(entry.path.name))


def sort_for_tree(entries: Iterable[ClassifiedEntry]) -> list[ClassifiedEntry]:
    """Return ``entries`` in tree order.

    Flat modes keep enumeration order and never call this.
    """
    return sorted(entries, key=tree_sort_key)


__all__ = ["tree_sort_key", "sort_for_tree"]
