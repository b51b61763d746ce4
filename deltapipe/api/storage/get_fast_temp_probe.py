"""Select the fast temp directory probe for the running platform."""

import platform

from .FastTempProbe import FastTempProbe
from .RamVolumeProbe import RamVolumeProbe
from .ShmProbe import ShmProbe
from .TempDirProbe import TempDirProbe


def get_fast_temp_probe(system: str | None = None) -> FastTempProbe:
    """Get the probe for a platform.

    Args:
        system: ``platform.system()`` value; detected when omitted

    Returns:
        ShmProbe on Linux, RamVolumeProbe on other Unix-like systems, TempDirProbe on Windows
    """
    system = (system or platform.system()).lower()
    if system == "linux":
        return ShmProbe()
    if system == "windows":
        return TempDirProbe()
    return RamVolumeProbe()
