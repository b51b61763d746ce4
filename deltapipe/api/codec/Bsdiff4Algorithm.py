"""bsdiff4 delta algorithm."""

import struct
from typing import BinaryIO

import bsdiff4

from ..errors.DeltaApplyError import DeltaApplyError
from ..errors.DeltaComputeError import DeltaComputeError
from .DeltaAlgorithm import ByteView, DeltaAlgorithm


def _as_bytes(data: ByteView) -> bytes:
    # bsdiff4 parses its arguments as immutable bytes, not arbitrary buffers
    return data if isinstance(data, bytes) else bytes(data)


class Bsdiff4Algorithm(DeltaAlgorithm):
    """Suffix-sorting binary delta using the bsdiff4 package (BSDIFF40 format)."""

    name = "bsdiff4"

    def compute(self, old: ByteView, new: ByteView, out: BinaryIO) -> None:
        try:
            delta = bsdiff4.diff(_as_bytes(old), _as_bytes(new))
        except (ValueError, TypeError, MemoryError, SystemError) as exc:
            raise DeltaComputeError(f"bsdiff4 diff operation failed: {exc}") from exc
        out.write(delta)

    def apply(self, old: ByteView, patch: BinaryIO) -> bytes:
        delta = patch.read()
        try:
            return bsdiff4.patch(_as_bytes(old), delta)
        except (ValueError, OSError, EOFError, struct.error, MemoryError) as exc:
            raise DeltaApplyError(f"bsdiff4 patch operation failed: {exc}") from exc
