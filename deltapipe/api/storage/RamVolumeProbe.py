"""RAM-backed volume probe (macOS and other Unix-like systems)."""

import re
from pathlib import Path

from ...utils.get_logger import get_logger
from .FastTempProbe import FastTempProbe

logger = get_logger("storage")


class RamVolumeProbe(FastTempProbe):
    """Prefer a mounted volume whose name marks it as a RAM disk (e.g. ``/Volumes/RAMDisk``)."""

    name = "ram_volume"

    def __init__(self, volumes_root: Path = Path("/Volumes"), marker: str = "ram"):
        self.volumes_root = volumes_root
        self.marker = marker.lower()
        self._pattern = re.compile(rf"(?<![a-z]){re.escape(self.marker)}")

    def preferred_dir(self) -> Path | None:
        if not self.volumes_root.is_dir():
            return None
        try:
            candidates = sorted(self.volumes_root.iterdir())
        except OSError as exc:
            logger.debug("Cannot list %s: %s", self.volumes_root, exc)
            return None

        for candidate in candidates:
            if self._pattern.search(candidate.name.lower()) and self._is_writable_dir(candidate):
                return candidate
        return None
