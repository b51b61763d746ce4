"""StageResult dataclass for staged command results."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result from a command function: announce, progress, result, output.

    The command's work runs while ``progress_callback`` is drained; the callback
    fills in ``result``, ``output`` and ``success``.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False

    def run(self) -> "StageResult":
        """Drain the progress callback and return self."""
        for _ in self.progress_callback(self):
            pass
        return self
