"""Check that a file exists and can be read."""

from pathlib import Path

from ..errors.StorageIOError import StorageIOError
from .require_file import require_file


def check_access(path: str | Path) -> None:
    """Check that ``path`` exists, is a regular file and can be opened for reading.

    Raises:
        NotFoundError: If the path does not exist
        NotAFileError: If the path is not a regular file
        StorageIOError: If the file cannot be opened
    """
    path = require_file(path)
    try:
        with path.open("rb"):
            pass
    except OSError as exc:
        raise StorageIOError(f"Failed to open {path}: {exc}", path) from exc
