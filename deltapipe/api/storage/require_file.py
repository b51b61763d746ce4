"""Validate that a path names an existing regular file."""

from pathlib import Path

from ..errors.NotAFileError import NotAFileError
from ..errors.NotFoundError import NotFoundError
from ..errors.StorageIOError import StorageIOError


def require_file(path: str | Path, role: str = "File") -> Path:
    """Return ``path`` as a Path after checking it is an existing regular file.

    Args:
        path: Path to check
        role: Label used in the error message (e.g. "Old file", "Patch file")

    Raises:
        NotFoundError: If the path does not exist
        NotAFileError: If the path is a directory or special file
        StorageIOError: If the path cannot be stat'ed
    """
    path = Path(path)
    try:
        if not path.exists():
            raise NotFoundError(path, role)
        if not path.is_file():
            raise NotAFileError(path)
    except OSError as exc:
        raise StorageIOError(f"Failed to stat {path}: {exc}", path) from exc
    return path
