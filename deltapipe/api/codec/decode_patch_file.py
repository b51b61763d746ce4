"""Decode a patch file against an old file."""

from pathlib import Path

from ..errors.StorageIOError import StorageIOError
from ..storage.open_readonly import open_readonly
from .decode_delta import decode_delta
from .DeltaAlgorithm import DeltaAlgorithm


def decode_patch_file(old_path: Path, patch_path: Path, algorithm: DeltaAlgorithm | None = None) -> bytes:
    """Map ``old_path``, stream ``patch_path`` through decode_delta and return the new contents."""
    with open_readonly(old_path, "Old file") as old:
        try:
            with patch_path.open("rb") as source:
                return decode_delta(old.view, source, algorithm)
        except OSError as exc:
            raise StorageIOError(f"Failed to read patch {patch_path}: {exc}", patch_path) from exc
