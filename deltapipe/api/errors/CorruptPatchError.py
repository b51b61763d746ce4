"""Corrupt patch error."""

from .DeltaPipelineError import DeltaPipelineError


class CorruptPatchError(DeltaPipelineError):
    """Raised when a patch file cannot be decompressed."""
