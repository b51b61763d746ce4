"""Commit a staged output to its final path."""

import errno
import os
import shutil
from contextlib import suppress
from pathlib import Path

from ...utils.get_logger import get_logger
from ..errors.StorageIOError import StorageIOError
from .resolve_output_path import sibling_staged_path
from .StagedOutput import StagedOutput

logger = get_logger("storage")


def _replace_across_devices(staged: StagedOutput) -> None:
    """Copy the staged file next to the final path, sync it, then rename it into place."""
    sibling = sibling_staged_path(staged.final_path)
    try:
        with staged.staged_path.open("rb") as src, sibling.open("wb") as dst:
            shutil.copyfileobj(src, dst)
            dst.flush()
            os.fsync(dst.fileno())
        os.replace(sibling, staged.final_path)
    except OSError as exc:
        with suppress(OSError):
            sibling.unlink(missing_ok=True)
        raise StorageIOError(f"Failed to finalize {staged.final_path}: {exc}", staged.final_path) from exc
    staged.staged_path.unlink(missing_ok=True)


def finalize(staged: StagedOutput) -> Path:
    """Atomically move a staged output onto its final path.

    A rename is the only commit point: readers see either the previous file or
    the complete new one. When the staged file lives on another filesystem the
    rename is done from a copy placed in the final directory.

    Returns:
        The final path

    Raises:
        StorageIOError: If the rename (or cross-device copy) fails
    """
    if staged.is_direct:
        return staged.final_path

    try:
        os.replace(staged.staged_path, staged.final_path)
    except OSError as exc:
        if exc.errno != errno.EXDEV:
            raise StorageIOError(f"Failed to finalize {staged.final_path}: {exc}", staged.final_path) from exc
        logger.warning("Staged file %s is on another device, copying into place", staged.staged_path)
        _replace_across_devices(staged)

    logger.debug("Finalized %s", staged.final_path)
    return staged.final_path


def discard(staged: StagedOutput) -> None:
    """Remove a staged file left behind by a failed operation. Never touches the final path."""
    if staged.is_direct:
        return
    try:
        staged.staged_path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("Failed to remove staged file %s: %s", staged.staged_path, exc)
