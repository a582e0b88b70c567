"""Path-level failures that abort a listing before any output is produced."""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """Root path cannot be listed.

    Raised when:
    - the path does not exist
    - the path exists but cannot be scanned as a directory
    """

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class PathNotFoundError(ListingError):
    """Root path does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Path does not exist: {path}")


class DirectoryUnreadableError(ListingError):
    """Root path exists but is not a readable directory."""

    def __init__(self, path: Path, cause: OSError | None = None) -> None:
        detail = f" ({cause.strerror})" if cause is not None and cause.strerror else ""
        super().__init__(path, f"Cannot read directory: {path}{detail}")
        self.cause = cause


__all__ = [
    "ListingError",
    "PathNotFoundError",
    "DirectoryUnreadableError",
]
