"""Read-only memory-mapped view over a file."""

import mmap
from pathlib import Path
from typing import BinaryIO


class MappedFile:
    """Read-only view over a file's contents, backed by a memory map.

    Empty files cannot be mapped, so their view is an empty ``bytes`` object.
    Use as a context manager; the map and the file handle are released on exit.
    """

    def __init__(self, path: Path, handle: BinaryIO, mapping: mmap.mmap | None):
        self.path = path
        self._handle = handle
        self._mapping = mapping

    @property
    def view(self) -> mmap.mmap | bytes:
        """Buffer over the file contents."""
        if self.closed:
            raise ValueError(f"Mapped file already closed: {self.path}")
        return self._mapping if self._mapping is not None else b""

    @property
    def size(self) -> int:
        """Number of bytes in the view."""
        return len(self.view)

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def close(self) -> None:
        if self._mapping is not None:
            self._mapping.close()
            self._mapping = None
        self._handle.close()

    def __enter__(self) -> "MappedFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else f"{len(self.view)} bytes"
        return f"MappedFile({str(self.path)!r}, {state})"
