"""Non-regular file error."""

from pathlib import Path

from .DeltaPipelineError import DeltaPipelineError


class NotAFileError(DeltaPipelineError):
    """Raised when a path exists but is a directory or special file."""

    def __init__(self, path: str | Path):
        super().__init__(f"Path is not a file: {path}", path)
