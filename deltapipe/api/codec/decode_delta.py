"""Decompress a delta stream and apply it."""

from typing import BinaryIO

import zstandard

from ..errors.CorruptPatchError import CorruptPatchError
from ..errors.DeltaPipelineError import DeltaPipelineError
from ..errors.StorageIOError import StorageIOError
from .Bsdiff4Algorithm import Bsdiff4Algorithm
from .DeltaAlgorithm import ByteView, DeltaAlgorithm


def decode_delta(old: ByteView, source: BinaryIO, algorithm: DeltaAlgorithm | None = None) -> bytes:
    """Apply the compressed delta read from ``source`` to ``old``.

    Args:
        old: Contents of the old file
        source: Readable binary stream positioned at the start of a patch
        algorithm: Delta algorithm; bsdiff4 when omitted

    Returns:
        The reconstructed new contents

    Raises:
        CorruptPatchError: If the stream is not valid zstd data
        DeltaApplyError: If the algorithm rejects the decompressed delta
        StorageIOError: If reading ``source`` fails
    """
    algorithm = algorithm or Bsdiff4Algorithm()
    decompressor = zstandard.ZstdDecompressor()

    try:
        with decompressor.stream_reader(source, closefd=False) as reader:
            return algorithm.apply(old, reader)
    except DeltaPipelineError:
        raise
    except zstandard.ZstdError as exc:
        raise CorruptPatchError(f"Failed to decompress patch: {exc}") from exc
    except OSError as exc:
        raise StorageIOError(f"Failed to read patch: {exc}") from exc
