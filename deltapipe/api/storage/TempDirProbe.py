"""Standard temporary directory probe."""

import tempfile
from pathlib import Path

from .FastTempProbe import FastTempProbe


class TempDirProbe(FastTempProbe):
    """Fallback probe returning the platform temp directory."""

    name = "tempdir"

    def preferred_dir(self) -> Path:
        return Path(tempfile.gettempdir())
