"""Open a file as a read-only memory map."""

import mmap
import os
from pathlib import Path

from ..errors.StorageIOError import StorageIOError
from .MappedFile import MappedFile
from .require_file import require_file


def open_readonly(path: str | Path, role: str = "File") -> MappedFile:
    """Map ``path`` into memory for zero-copy reads.

    Args:
        path: File to open
        role: Label used in error messages

    Returns:
        MappedFile; the caller closes it (or uses it as a context manager)

    Raises:
        NotFoundError: If the path does not exist
        NotAFileError: If the path is not a regular file
        StorageIOError: If the file cannot be opened or mapped
    """
    path = require_file(path, role)
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise StorageIOError(f"Failed to open {path}: {exc}", path) from exc

    try:
        size = os.fstat(handle.fileno()).st_size
        mapping = mmap.mmap(handle.fileno(), 0, access=mmap.ACCESS_READ) if size else None
    except (OSError, ValueError) as exc:
        handle.close()
        raise StorageIOError(f"Failed to map {path}: {exc}", path) from exc

    return MappedFile(path, handle, mapping)
