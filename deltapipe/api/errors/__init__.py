"""Error taxonomy for deltapipe operations."""

from .CorruptPatchError import CorruptPatchError
from .DeltaApplyError import DeltaApplyError
from .DeltaComputeError import DeltaComputeError
from .DeltaConfigError import DeltaConfigError
from .DeltaPipelineError import DeltaPipelineError
from .NotAFileError import NotAFileError
from .NotFoundError import NotFoundError
from .StorageIOError import StorageIOError

__all__ = [
    "CorruptPatchError",
    "DeltaApplyError",
    "DeltaComputeError",
    "DeltaConfigError",
    "DeltaPipelineError",
    "NotAFileError",
    "NotFoundError",
    "StorageIOError",
]
