"""Extension-derived file categories used to pick name colors.

Categorization is a pure function of ``(kind, extension)``: it never touches
the filesystem. Documents, structured data and images come from fixed suffix
sets; any remaining suffix Pygments has a lexer for counts as source code.
"""

from __future__ import annotations

import enum
import functools

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from .types import EntryKind

DOCUMENT_SUFFIXES = frozenset(
    {".md", ".markdown", ".rst", ".txt", ".pdf", ".doc", ".docx", ".odt", ".rtf", ".tex", ".epub"}
)
DATA_SUFFIXES = frozenset(
    {".json", ".yaml", ".yml", ".toml", ".xml", ".csv", ".tsv", ".ini", ".cfg", ".lock", ".sqlite", ".db"}
)
IMAGE_SUFFIXES = frozenset(
    {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".svg", ".webp", ".ico", ".tif", ".tiff", ".heic"}
)


class FileCategory(enum.Enum):
    DIRECTORY = "directory"
    SOURCE = "source"
    DOCUMENT = "document"
    DATA = "data"
    IMAGE = "image"
    DEFAULT = "default"


def file_suffix(name: str) -> str:
    """Return the lowercased last extension of ``name`` (``""`` if none).

    A leading dot marks a hidden name, not an extension.
    """
    stem = name.lstrip(".")
    dot = stem.rfind(".")
    if dot <= 0:
        return ""
    return stem[dot:].lower()


@functools.lru_cache(maxsize=512)
def _has_source_lexer(suffix: str) -> bool:
    try:
        lexer = get_lexer_for_filename(f"file{suffix}")
    except ClassNotFound:
        return False
    return lexer.name != "Text only"


def categorize(kind: EntryKind, name: str) -> FileCategory:
    """Return the color category for an entry of ``kind`` named ``name``."""
    if kind is EntryKind.DIRECTORY:
        return FileCategory.DIRECTORY
    suffix = file_suffix(name)
    if not suffix:
        return FileCategory.DEFAULT
    if suffix in DOCUMENT_SUFFIXES:
        return FileCategory.DOCUMENT
    if suffix in DATA_SUFFIXES:
        return FileCategory.DATA
    if suffix in IMAGE_SUFFIXES:
        return FileCategory.IMAGE
    if _has_source_lexer(suffix):
        return FileCategory.SOURCE
    return FileCategory.DEFAULT


__all__ = [
    "DOCUMENT_SUFFIXES",
    "DATA_SUFFIXES",
    "IMAGE_SUFFIXES",
    "FileCategory",
    "file_suffix",
    "categorize",
]
