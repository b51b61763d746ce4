"""Produce a compressed patch from two file versions."""

import os
from pathlib import Path

from ...utils.get_logger import get_logger
from ..codec.DeltaAlgorithm import DeltaAlgorithm
from ..codec.encode_delta import encode_delta
from ..errors.StorageIOError import StorageIOError
from ..storage.FastTempProbe import FastTempProbe
from ..storage.finalize import discard, finalize
from ..storage.open_readonly import open_readonly
from ..storage.require_file import require_file
from ..storage.resolve_output_path import resolve_output_path
from .OptimizationConfig import OptimizationConfig

logger = get_logger("pipeline")


def produce_delta(
    old_path: str | Path,
    new_path: str | Path,
    patch_path: str | Path,
    config: OptimizationConfig | None = None,
    *,
    algorithm: DeltaAlgorithm | None = None,
    probe: FastTempProbe | None = None,
) -> Path:
    """Write the compressed delta turning ``old_path`` into ``new_path`` to ``patch_path``.

    Both inputs are memory-mapped, the delta is compressed while it is written
    to a staged file, and the staged file is renamed onto ``patch_path``. If
    anything fails before that rename, ``patch_path`` is left as it was.

    Args:
        old_path: Old version of the file
        new_path: New version of the file
        patch_path: Where the patch is committed
        config: Optimization settings; defaults when omitted
        algorithm: Delta algorithm; bsdiff4 when omitted
        probe: Fast temp directory strategy; platform default when omitted

    Returns:
        The committed patch path

    Raises:
        NotFoundError: If an input does not exist
        NotAFileError: If an input is not a regular file
        StorageIOError: On open, map, write or rename failure
        DeltaComputeError: If the algorithm fails on the inputs
    """
    config = config or OptimizationConfig()
    old_path = require_file(old_path, "Old file")
    new_path = require_file(new_path, "New file")
    patch_path = Path(patch_path)

    with open_readonly(old_path, "Old file") as old, open_readonly(new_path, "New file") as new:
        staged = resolve_output_path(patch_path, config.use_fast_temp_dir, probe)
        try:
            with staged.staged_path.open("wb") as sink:
                encode_delta(old.view, new.view, sink, config.compression_level, algorithm)
                sink.flush()
                os.fsync(sink.fileno())
        except OSError as exc:
            discard(staged)
            message = f"Failed to write staged patch {staged.staged_path}: {exc}"
            raise StorageIOError(message, staged.staged_path) from exc
        except Exception:
            discard(staged)
            raise
        old_size, new_size = old.size, new.size

    try:
        finalize(staged)
    except StorageIOError:
        discard(staged)
        raise

    logger.info(
        "Produced patch %s (%d bytes) from %s (%d bytes) -> %s (%d bytes) at level %d",
        patch_path,
        patch_path.stat().st_size,
        old_path,
        old_size,
        new_path,
        new_size,
        config.compression_level,
    )
    return patch_path
