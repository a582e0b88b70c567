"""JSON export of classified entries in enumeration order."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import TextIO

from ..listing.types import ClassifiedEntry


def entry_record(entry: ClassifiedEntry) -> dict[str, object]:
    """Return the machine-readable record for ``entry``.

    Unknown sizes are reported as ``0``; other absent fields stay ``None``.
    """
    return {
        "permissions": entry.permissions,
        "owner": entry.owner,
        "name": entry.name,
        "type": entry.kind.value,
        "size_bytes": entry.size_bytes if entry.size_bytes is not None else 0,
        "modified": entry.modified.isoformat() if entry.modified is not None else None,
    }


def render_structured(entries: Iterable[ClassifiedEntry], stream: TextIO) -> None:
    """Write ``entries`` to ``stream`` as a pretty-printed JSON array."""
    records = [entry_record(entry) for entry in entries]
    stream.write(json.dumps(records, indent=2, ensure_ascii=False) + "\n")


__all__ = ["entry_record", "render_structured"]
