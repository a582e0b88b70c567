"""Depth-bounded tree walk producing immutable ``TreeNode`` rows.

The walk is pre-order and iterative: each directory is scanned into memory,
its handle closed, and its sorted children pushed as one stack frame. A frame
remembers which ancestors were last siblings so every node can draw its own
indentation prefix without shared mutable state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .enumeration import classify, scan_directory
from .ordering import sort_for_tree
from .types import DEFAULT_TREE_MAX_DEPTH, ClassifiedEntry, TreeNode

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    children: list[ClassifiedEntry]
    depth: int
    ancestor_is_last: tuple[bool, ...]
    next_index: int = 0


def _sorted_children(directory: Path, show_hidden: bool) -> list[ClassifiedEntry]:
    raw_entries, scan_error = scan_directory(directory, show_hidden)
    if scan_error is not None:
        logger.warning("cannot descend into %s: %s", directory, scan_error)
        return []
    return sort_for_tree(classify(raw) for raw in raw_entries)


def iter_tree_nodes(
    root: Path,
    show_hidden: bool,
    max_depth: int = DEFAULT_TREE_MAX_DEPTH,
) -> Iterator[TreeNode]:
    """Yield tree rows under ``root`` in pre-order.

    Direct children of ``root`` have depth 0. A directory at depth ``d`` is
    expanded only while ``d < max_depth``, so directories at exactly
    ``max_depth`` are listed but not entered. Symlink cycles are bounded by the
    same cap. Entries whose kind could not be read are leaves.
    """
    if max_depth < 0:
        raise ValueError("max_depth must be >= 0")

    stack = [_Frame(children=_sorted_children(root, show_hidden), depth=0, ancestor_is_last=())]
    while stack:
        frame = stack[-1]
        if frame.next_index >= len(frame.children):
            stack.pop()
            continue

        entry = frame.children[frame.next_index]
        frame.next_index += 1
        node = TreeNode(
            entry=entry,
            depth=frame.depth,
            is_last_sibling=frame.next_index == len(frame.children),
            ancestor_is_last=frame.ancestor_is_last,
        )
        yield node

        if entry.is_dir and node.depth < max_depth:
            stack.append(
                _Frame(
                    children=_sorted_children(entry.path, show_hidden),
                    depth=node.depth + 1,
                    ancestor_is_last=frame.ancestor_is_last + (node.is_last_sibling,),
                )
            )


__all__ = ["iter_tree_nodes"]
