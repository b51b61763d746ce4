"""Shared-memory mount probe (Linux)."""

from pathlib import Path

from ...utils.get_logger import get_logger
from .FastTempProbe import FastTempProbe

logger = get_logger("storage")


class ShmProbe(FastTempProbe):
    """Prefer the tmpfs shared-memory mount."""

    name = "shm"

    def __init__(self, mount: Path = Path("/dev/shm")):
        self.mount = mount

    def preferred_dir(self) -> Path | None:
        if self._is_writable_dir(self.mount):
            return self.mount
        logger.debug("Shared-memory mount %s is not usable", self.mount)
        return None
