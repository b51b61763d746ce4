"""Apply command - reconstructs a file from a patch."""

from collections.abc import Iterator
from pathlib import Path

from .._error_output import _error_output
from ..errors.DeltaPipelineError import DeltaPipelineError
from ..StageResult import StageResult
from .apply_delta import apply_delta
from .OptimizationConfig import OptimizationConfig


def cmd_apply(
    old_path: Path,
    new_path: Path,
    patch_path: Path,
    use_fast_temp_dir: bool = True,
) -> StageResult:
    """Apply ``patch_path`` to ``old_path`` and write the result to ``new_path``."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Applying patch...")
        try:
            config = OptimizationConfig(use_fast_temp_dir=use_fast_temp_dir)
            written = apply_delta(old_path, new_path, patch_path, config)
        except DeltaPipelineError as e:
            result_obj.result = str(e)
            result_obj.output = {"new_path": str(new_path), "size": None, "errors": [_error_output(e)]}
            result_obj.success = False
            yield (1.0, "Failed")
            return

        size = written.stat().st_size
        result_obj.result = f"Reconstructed {new_path} ({size} bytes)"
        result_obj.output = {"new_path": str(written), "size": size, "errors": []}
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Applying patch {patch_path} to {old_path}...",
        progress_callback=do_work,
    )
