"""Base error for delta pipeline operations."""

from pathlib import Path


class DeltaPipelineError(Exception):
    """Raised when a delta pipeline operation fails.

    Every failure surfaced by deltapipe derives from this class so callers can
    catch the whole family while still telling the concrete kinds apart.
    """

    def __init__(self, message: str, path: str | Path | None = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)
