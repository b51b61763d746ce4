"""Apply a compressed patch to reconstruct a new file version."""

import os
from pathlib import Path

from ...utils.get_logger import get_logger
from ..codec.decode_patch_file import decode_patch_file
from ..codec.DeltaAlgorithm import DeltaAlgorithm
from ..errors.StorageIOError import StorageIOError
from ..storage.FastTempProbe import FastTempProbe
from ..storage.finalize import discard, finalize
from ..storage.require_file import require_file
from ..storage.resolve_output_path import resolve_output_path
from .OptimizationConfig import OptimizationConfig

logger = get_logger("pipeline")


def apply_delta(
    old_path: str | Path,
    new_path: str | Path,
    patch_path: str | Path,
    config: OptimizationConfig | None = None,
    *,
    algorithm: DeltaAlgorithm | None = None,
    probe: FastTempProbe | None = None,
) -> Path:
    """Reconstruct ``new_path`` from ``old_path`` and the patch at ``patch_path``.

    The whole new file is rebuilt in memory, written to a staged file, flushed
    and then renamed onto ``new_path``.

    Args:
        old_path: Old version of the file
        new_path: Where the reconstructed file is committed
        patch_path: Patch produced by produce_delta
        config: Optimization settings; defaults when omitted
        algorithm: Delta algorithm; bsdiff4 when omitted
        probe: Fast temp directory strategy; platform default when omitted

    Returns:
        The committed new file path

    Raises:
        NotFoundError: If the old file or the patch does not exist
        NotAFileError: If either is not a regular file
        CorruptPatchError: If the patch cannot be decompressed
        DeltaApplyError: If the algorithm rejects the delta
        StorageIOError: On open, read, write or rename failure
    """
    config = config or OptimizationConfig()
    old_path = require_file(old_path, "Old file")
    patch_path = require_file(patch_path, "Patch file")
    new_path = Path(new_path)

    data = decode_patch_file(old_path, patch_path, algorithm)

    staged = resolve_output_path(new_path, config.use_fast_temp_dir, probe)
    try:
        with staged.staged_path.open("wb") as fh:
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())
        finalize(staged)
    except OSError as exc:
        discard(staged)
        raise StorageIOError(f"Failed to write {new_path}: {exc}", new_path) from exc
    except Exception:
        discard(staged)
        raise

    logger.info("Applied patch %s to %s -> %s (%d bytes)", patch_path, old_path, new_path, len(data))
    return new_path
