"""Produce command - writes a patch and reports its ratio."""

from collections.abc import Iterator
from dataclasses import asdict
from pathlib import Path

from ...constants import DEFAULT_COMPRESSION_LEVEL
from .._error_output import _error_output
from ..errors.DeltaPipelineError import DeltaPipelineError
from ..StageResult import StageResult
from ..verify.compute_ratio import compute_ratio
from .OptimizationConfig import OptimizationConfig
from .produce_delta import produce_delta


def cmd_produce(
    old_path: Path,
    new_path: Path,
    patch_path: Path,
    compression_level: int = DEFAULT_COMPRESSION_LEVEL,
    use_fast_temp_dir: bool = True,
) -> StageResult:
    """Produce a patch from ``old_path`` to ``new_path``.

    Returns:
        StageResult with the patch path and compression ratio in output
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        errors: list[dict] = []
        try:
            yield (0.1, "Validating configuration...")
            config = OptimizationConfig.from_dict(
                {"compression_level": compression_level, "use_fast_temp_dir": use_fast_temp_dir}
            )
            yield (0.3, "Computing delta...")
            produce_delta(old_path, new_path, patch_path, config)
            yield (0.9, "Measuring patch...")
            ratio = compute_ratio(old_path, new_path, patch_path)
        except DeltaPipelineError as e:
            errors.append(_error_output(e))
            result_obj.result = str(e)
            result_obj.output = {"patch_path": str(patch_path), "ratio": None, "errors": errors}
            result_obj.success = False
            yield (1.0, "Failed")
            return

        result_obj.result = f"Patch written to {patch_path} ({ratio.patch_size} bytes, {ratio.ratio:.1f}%)"
        result_obj.output = {"patch_path": str(patch_path), "ratio": asdict(ratio), "errors": errors}
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Producing patch {patch_path} from {old_path} to {new_path}...",
        progress_callback=do_work,
    )
