"""Read a file's size from filesystem metadata."""

from pathlib import Path

from ..errors.StorageIOError import StorageIOError
from .require_file import require_file


def get_file_size(path: str | Path, role: str = "File") -> int:
    """Return the size of ``path`` in bytes without reading its contents."""
    path = require_file(path, role)
    try:
        return path.stat().st_size
    except OSError as exc:
        raise StorageIOError(f"Failed to stat {path}: {exc}", path) from exc
