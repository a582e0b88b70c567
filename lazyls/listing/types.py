"""Domain datatypes for classified directory entries and tree rows."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

DEFAULT_TREE_MAX_DEPTH = 32

TREE_BRANCH = "├── "
TREE_LAST = "└── "
TREE_PIPE = "│   "
TREE_BLANK = "    "


class EntryKind(enum.Enum):
    """File-vs-directory classification taken from ``stat``."""

    FILE = "File"
    DIRECTORY = "Dir"


class ListingMode(enum.Enum):
    """Mutually exclusive presentation modes."""

    COMPACT = "compact"
    DETAILED = "detailed"
    STRUCTURED = "structured"
    TREE = "tree"


@dataclass(frozen=True)
class EntryMetadata:
    """Facts observed from one successful ``stat`` call."""

    kind: EntryKind
    size_bytes: int
    modified: datetime | None = None
    permissions: str | None = None
    owner: str | None = None


@dataclass(frozen=True)
class ClassifiedEntry:
    """One directory child paired with best-effort metadata.

    Metadata fields are ``None`` when they could not be read; ``kind`` then
    falls back to ``EntryKind.FILE`` so the entry is never dropped.
    """

    name: str
    path: Path
    kind: EntryKind = EntryKind.FILE
    size_bytes: int | None = None
    modified: datetime | None = None
    permissions: str | None = None
    owner: str | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class TreeNode:
    """Classified entry plus the ancestor state needed to draw its row."""

    entry: ClassifiedEntry
    depth: int
    is_last_sibling: bool
    ancestor_is_last: tuple[bool, ...] = ()

    @property
    def connector(self) -> str:
        return TREE_LAST if self.is_last_sibling else TREE_BRANCH

    @property
    def prefix(self) -> str:
        """Indentation drawn before the connector; open ancestors get a bar."""
        return "".join(TREE_BLANK if last else TREE_PIPE for last in self.ancestor_is_last)


@dataclass(frozen=True)
class ListingConfig:
    """Resolved invocation settings consumed read-only by the listing core."""

    root_path: Path
    show_hidden: bool = False
    mode: ListingMode = ListingMode.COMPACT
    max_depth: int = DEFAULT_TREE_MAX_DEPTH
    theme_name: str | None = None
    no_color: bool = False


__all__ = [
    "DEFAULT_TREE_MAX_DEPTH",
    "TREE_BRANCH",
    "TREE_LAST",
    "TREE_PIPE",
    "TREE_BLANK",
    "EntryKind",
    "ListingMode",
    "EntryMetadata",
    "ClassifiedEntry",
    "TreeNode",
    "ListingConfig",
]
