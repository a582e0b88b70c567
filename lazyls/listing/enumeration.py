"""Directory scanning, hidden-entry filtering, and entry classification."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from ..errors import DirectoryUnreadableError, PathNotFoundError
from .metadata import resolve_metadata
from .types import ClassifiedEntry

HIDDEN_MARKER = "."
UNKNOWN_NAME = "unknown name"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawEntry:
    """One visible directory child before metadata is attached."""

    name: str
    path: Path


def is_hidden(name: str) -> bool:
    """Return whether ``name`` follows the dot-file hiding convention."""
    return name.startswith(HIDDEN_MARKER)


def display_name(raw_name: str) -> str:
    """Return ``raw_name``, or a placeholder when it is not valid UTF-8 text."""
    try:
        raw_name.encode("utf-8")
    except UnicodeEncodeError:
        return UNKNOWN_NAME
    return raw_name


def scan_directory(directory: Path, show_hidden: bool) -> tuple[list[RawEntry], OSError | None]:
    """Drain one directory into memory, skipping hidden names unless requested.

    Returns ``(entries, scan_error)``. The directory handle is closed before
    returning; ``scan_error`` is set when the directory cannot be scanned.
    """
    entries: list[RawEntry] = []
    try:
        with os.scandir(directory) as it:
            for child in it:
                if not show_hidden and is_hidden(child.name):
                    continue
                entries.append(RawEntry(name=child.name, path=Path(child.path)))
    except OSError as exc:
        return [], exc
    return entries, None


def iter_directory_entries(directory: Path, show_hidden: bool) -> Iterator[RawEntry]:
    """Yield visible children in OS order; nothing when the scan fails."""
    entries, scan_error = scan_directory(directory, show_hidden)
    if scan_error is not None:
        logger.debug("cannot scan %s: %s", directory, scan_error)
        return
    yield from entries


def classify(raw: RawEntry) -> ClassifiedEntry:
    """Attach resolved metadata to ``raw`` without ever dropping it."""
    name = display_name(raw.name)
    meta = resolve_metadata(raw.path)
    if meta is None:
        return ClassifiedEntry(name=name, path=raw.path)
    return ClassifiedEntry(
        name=name,
        path=raw.path,
        kind=meta.kind,
        size_bytes=meta.size_bytes,
        modified=meta.modified,
        permissions=meta.permissions,
        owner=meta.owner,
    )


def iter_classified_entries(directory: Path, show_hidden: bool) -> Iterator[ClassifiedEntry]:
    """Yield classified children of ``directory`` in enumeration order."""
    for raw in iter_directory_entries(directory, show_hidden):
        yield classify(raw)


def validate_root(path: Path) -> Path:
    """Check that ``path`` exists and can be scanned as a directory.

    Raises ``PathNotFoundError`` or ``DirectoryUnreadableError``.
    """
    if not path.exists():
        raise PathNotFoundError(path)
    if not path.is_dir():
        raise DirectoryUnreadableError(path)
    try:
        with os.scandir(path):
            pass
    except OSError as exc:
        raise DirectoryUnreadableError(path, exc) from exc
    return path


__all__ = [
    "HIDDEN_MARKER",
    "UNKNOWN_NAME",
    "RawEntry",
    "is_hidden",
    "display_name",
    "scan_directory",
    "iter_directory_entries",
    "classify",
    "iter_classified_entries",
    "validate_root",
]
