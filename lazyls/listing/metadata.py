"""Best-effort ``stat`` metadata for directory entries.

Every helper here tolerates failure: a missing entry, a permission error or a
broken symlink yields ``None`` for the affected fields instead of raising.
"""

from __future__ import annotations

import functools
import logging
import os
import stat
from datetime import datetime, timezone
from pathlib import Path

from .types import EntryKind, EntryMetadata

try:
    import pwd
except ImportError:  # no account database on this platform
    pwd = None

logger = logging.getLogger(__name__)


def permission_bits(st_mode: int) -> str:
    """Return the rwx triple of ``st_mode`` as three octal digits."""
    return f"{st_mode & 0o777:03o}"


@functools.lru_cache(maxsize=256)
def owner_name(uid: int) -> str:
    """Return the account name for ``uid``, or the uid itself when unknown."""
    if pwd is None:
        return str(uid)
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def modified_at(st: os.stat_result) -> datetime | None:
    """Return ``st_mtime`` as an aware UTC datetime, or ``None`` if unusable."""
    try:
        return datetime.fromtimestamp(st.st_mtime, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def resolve_metadata(path: Path) -> EntryMetadata | None:
    """Stat ``path`` (following symlinks) and classify it.

    Returns ``None`` when the entry cannot be stat'ed at all.
    """
    try:
        st = os.stat(path)
    except OSError as exc:
        logger.debug("metadata unavailable for %s: %s", path, exc)
        return None

    posix = os.name == "posix"
    return EntryMetadata(
        kind=EntryKind.DIRECTORY if stat.S_ISDIR(st.st_mode) else EntryKind.FILE,
        size_bytes=int(st.st_size),
        modified=modified_at(st),
        permissions=permission_bits(st.st_mode) if posix else None,
        owner=owner_name(st.st_uid) if posix else None,
    )


__all__ = [
    "permission_bits",
    "owner_name",
    "modified_at",
    "resolve_metadata",
]
