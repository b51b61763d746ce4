"""Staged output awaiting finalize."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StagedOutput:
    """A file being written at ``staged_path`` that will be committed to ``final_path``."""

    staged_path: Path
    final_path: Path

    @property
    def is_direct(self) -> bool:
        """True when the output is written in place and finalize has nothing to rename."""
        return self.staged_path == self.final_path
