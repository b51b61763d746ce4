"""Storage I/O error."""

from .DeltaPipelineError import DeltaPipelineError


class StorageIOError(DeltaPipelineError):
    """Raised when opening, mapping, reading, writing or renaming a file fails."""
