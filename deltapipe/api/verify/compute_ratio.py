"""Compression ratio of a patch."""

from pathlib import Path

from ..storage.get_file_size import get_file_size
from .CompressionRatio import CompressionRatio


def compute_ratio(old_path: str | Path, new_path: str | Path, patch_path: str | Path) -> CompressionRatio:
    """Compare the patch size to the combined size of its inputs.

    Only file sizes are read. ``ratio`` is ``patch / (old + new) * 100`` and 0 when
    both inputs are empty.

    Raises:
        NotFoundError: If any of the three files does not exist
        NotAFileError: If any path is not a regular file
    """
    return CompressionRatio.from_sizes(
        old_size=get_file_size(old_path, "Old file"),
        new_size=get_file_size(new_path, "New file"),
        patch_size=get_file_size(patch_path, "Patch file"),
    )
