"""Compute a delta and compress it while it is written."""

from typing import BinaryIO

import zstandard

from ...constants import DEFAULT_COMPRESSION_LEVEL, MAX_COMPRESSION_LEVEL, MIN_COMPRESSION_LEVEL
from ..errors.DeltaPipelineError import DeltaPipelineError
from ..errors.StorageIOError import StorageIOError
from .Bsdiff4Algorithm import Bsdiff4Algorithm
from .DeltaAlgorithm import ByteView, DeltaAlgorithm


def encode_delta(
    old: ByteView,
    new: ByteView,
    sink: BinaryIO,
    level: int = DEFAULT_COMPRESSION_LEVEL,
    algorithm: DeltaAlgorithm | None = None,
) -> None:
    """Write the zstd-compressed delta from ``old`` to ``new`` into ``sink``.

    The algorithm writes straight into a zstd stream writer, so the raw delta
    never lands on disk. The zstd frame is ended before returning; ``sink``
    itself is left open.

    Args:
        old: Contents of the old file
        new: Contents of the new file
        sink: Writable binary stream receiving the compressed delta
        level: zstd compression level (1-22)
        algorithm: Delta algorithm; bsdiff4 when omitted

    Raises:
        ValueError: If ``level`` is out of range
        DeltaComputeError: If the algorithm fails on the inputs
        StorageIOError: If writing to ``sink`` fails
    """
    if not MIN_COMPRESSION_LEVEL <= level <= MAX_COMPRESSION_LEVEL:
        raise ValueError(
            f"compression level must be between {MIN_COMPRESSION_LEVEL} and {MAX_COMPRESSION_LEVEL} (found: {level})"
        )
    algorithm = algorithm or Bsdiff4Algorithm()
    compressor = zstandard.ZstdCompressor(level=level)

    try:
        with compressor.stream_writer(sink, closefd=False) as writer:
            algorithm.compute(old, new, writer)
    except DeltaPipelineError:
        raise
    except (OSError, zstandard.ZstdError) as exc:
        raise StorageIOError(f"Failed to write compressed delta: {exc}") from exc
