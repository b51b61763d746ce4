"""Delta codec - streams deltas through zstd compression."""

from .Bsdiff4Algorithm import Bsdiff4Algorithm
from .decode_delta import decode_delta
from .decode_patch_file import decode_patch_file
from .DeltaAlgorithm import ByteView, DeltaAlgorithm
from .encode_delta import encode_delta

__all__ = [
    "Bsdiff4Algorithm",
    "ByteView",
    "DeltaAlgorithm",
    "decode_delta",
    "decode_patch_file",
    "encode_delta",
]
