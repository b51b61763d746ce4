"""Missing input error."""

from pathlib import Path

from .DeltaPipelineError import DeltaPipelineError


class NotFoundError(DeltaPipelineError):
    """Raised when an input path does not exist."""

    def __init__(self, path: str | Path, role: str = "File"):
        super().__init__(f"{role} not found: {path}", path)
