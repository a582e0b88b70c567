"""Directory listing core: enumeration, classification, ordering, tree walk.

This package contains non-rendering primitives:
- entry/tree datatypes with optional metadata fields
- best-effort ``stat`` resolution and owner lookup
- hidden-entry filtering and root-path validation
- sibling ordering and the depth-bounded tree walk
- extension-derived color categories
"""

from __future__ import annotations

from .types import (
    DEFAULT_TREE_MAX_DEPTH,
    ClassifiedEntry,
    EntryKind,
    EntryMetadata,
    ListingConfig,
    ListingMode,
    TreeNode,
)
from .metadata import owner_name, permission_bits, resolve_metadata
from .enumeration import (
    RawEntry,
    classify,
    display_name,
    is_hidden,
    iter_classified_entries,
    iter_directory_entries,
    scan_directory,
    validate_root,
)
from .ordering import sort_for_tree, tree_sort_key
from .tree import iter_tree_nodes
from .categories import FileCategory, categorize

__all__ = [
    "DEFAULT_TREE_MAX_DEPTH",
    "ClassifiedEntry",
    "EntryKind",
    "EntryMetadata",
    "ListingConfig",
    "ListingMode",
    "TreeNode",
    "owner_name",
    "permission_bits",
    "resolve_metadata",
    "RawEntry",
    "classify",
    "display_name",
    "is_hidden",
    "iter_classified_entries",
    "iter_directory_entries",
    "scan_directory",
    "validate_root",
    "sort_for_tree",
    "tree_sort_key",
    "iter_tree_nodes",
    "FileCategory",
    "categorize",
]
