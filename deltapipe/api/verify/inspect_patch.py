"""Inspect a patch file."""

from pathlib import Path

from ..storage.get_file_size import get_file_size
from .PatchInfo import PatchInfo


def inspect_patch(patch_path: str | Path) -> PatchInfo:
    """Summarize a patch from filesystem metadata; the contents are not read.

    Every patch written by produce_delta is a zstd stream, so ``compressed`` is always True.
    """
    return PatchInfo(size=get_file_size(patch_path, "Patch file"), compressed=True)
