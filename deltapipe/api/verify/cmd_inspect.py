"""Inspect command - reports patch metadata."""

from collections.abc import Iterator
from dataclasses import asdict
from pathlib import Path

from .._error_output import _error_output
from ..errors.DeltaPipelineError import DeltaPipelineError
from ..StageResult import StageResult
from .inspect_patch import inspect_patch


def cmd_inspect(patch_path: Path) -> StageResult:
    """Report size and compression of ``patch_path``."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Reading metadata...")
        try:
            info = inspect_patch(patch_path)
        except DeltaPipelineError as e:
            result_obj.result = str(e)
            result_obj.output = {"patch_path": str(patch_path), "info": None, "errors": [_error_output(e)]}
            result_obj.success = False
            yield (1.0, "Failed")
            return

        result_obj.result = f"{patch_path}: {info.size} bytes"
        result_obj.output = {"patch_path": str(patch_path), "info": asdict(info), "errors": []}
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Inspecting patch {patch_path}...",
        progress_callback=do_work,
    )
