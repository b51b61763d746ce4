"""deltapipe - compressed binary patches with atomic, verifiable outputs."""

from .api.codec import Bsdiff4Algorithm, DeltaAlgorithm
from .api.errors import (
    CorruptPatchError,
    DeltaApplyError,
    DeltaComputeError,
    DeltaConfigError,
    DeltaPipelineError,
    NotAFileError,
    NotFoundError,
    StorageIOError,
)
from .api.pipeline import (
    OptimizationConfig,
    apply_delta,
    apply_delta_async,
    produce_delta,
    produce_delta_async,
    verify_async,
)
from .api.storage import check_access, get_file_size
from .api.verify import CompressionRatio, PatchInfo, compute_ratio, inspect_patch, verify

__all__ = [
    "Bsdiff4Algorithm",
    "CompressionRatio",
    "CorruptPatchError",
    "DeltaAlgorithm",
    "DeltaApplyError",
    "DeltaComputeError",
    "DeltaConfigError",
    "DeltaPipelineError",
    "NotAFileError",
    "NotFoundError",
    "OptimizationConfig",
    "PatchInfo",
    "StorageIOError",
    "apply_delta",
    "apply_delta_async",
    "check_access",
    "compute_ratio",
    "get_file_size",
    "inspect_patch",
    "produce_delta",
    "produce_delta_async",
    "verify",
    "verify_async",
]
