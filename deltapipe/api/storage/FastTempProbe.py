"""Base class for fast temporary directory probes."""

import os
from abc import ABC, abstractmethod
from pathlib import Path


class FastTempProbe(ABC):
    """Strategy that locates a memory-backed directory for staged outputs."""

    name: str = ""

    @abstractmethod
    def preferred_dir(self) -> Path | None:
        """Return a writable fast directory, or None if this platform has none."""
        pass

    @staticmethod
    def _is_writable_dir(path: Path) -> bool:
        return path.is_dir() and os.access(path, os.W_OK | os.X_OK)
