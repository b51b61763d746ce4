"""Storage accessor - memory-mapped inputs and staged, atomically committed outputs."""

from .check_access import check_access
from .FastTempProbe import FastTempProbe
from .finalize import discard, finalize
from .get_fast_temp_probe import get_fast_temp_probe
from .get_file_size import get_file_size
from .MappedFile import MappedFile
from .open_readonly import open_readonly
from .RamVolumeProbe import RamVolumeProbe
from .require_file import require_file
from .resolve_output_path import resolve_output_path
from .ShmProbe import ShmProbe
from .StagedOutput import StagedOutput
from .TempDirProbe import TempDirProbe

__all__ = [
    "FastTempProbe",
    "MappedFile",
    "RamVolumeProbe",
    "ShmProbe",
    "StagedOutput",
    "TempDirProbe",
    "check_access",
    "discard",
    "finalize",
    "get_fast_temp_probe",
    "get_file_size",
    "open_readonly",
    "require_file",
    "resolve_output_path",
]
