"""Base class for delta algorithms."""

import mmap
from abc import ABC, abstractmethod
from typing import BinaryIO

# Anything the storage layer hands out as file contents
ByteView = bytes | bytearray | memoryview | mmap.mmap


class DeltaAlgorithm(ABC):
    """Binary delta algorithm plugged into the codec.

    Implementations only compute and apply raw deltas; compression, staging
    and file handling belong to the pipeline.
    """

    name: str = ""

    @abstractmethod
    def compute(self, old: ByteView, new: ByteView, out: BinaryIO) -> None:
        """Write the delta transforming ``old`` into ``new`` to ``out``.

        Raises:
            DeltaComputeError: If no delta can be computed for the inputs
        """
        pass

    @abstractmethod
    def apply(self, old: ByteView, patch: BinaryIO) -> bytes:
        """Read a delta from ``patch`` and return the reconstructed new bytes.

        Raises:
            DeltaApplyError: If the delta stream is malformed, truncated or
                references bytes outside ``old``
        """
        pass
