"""Verify command - checks a patch against the expected new file."""

from collections.abc import Iterator
from pathlib import Path

from .._error_output import _error_output
from ..errors.DeltaPipelineError import DeltaPipelineError
from ..StageResult import StageResult
from .verify import verify


def cmd_verify(old_path: Path, new_path: Path, patch_path: Path) -> StageResult:
    """Verify that ``patch_path`` turns ``old_path`` into ``new_path``.

    A patch that decodes but does not reproduce ``new_path`` is reported with
    ``verified`` False and no errors.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Decoding patch...")
        try:
            verified = verify(old_path, new_path, patch_path)
        except DeltaPipelineError as e:
            result_obj.result = str(e)
            result_obj.output = {"patch_path": str(patch_path), "verified": False, "errors": [_error_output(e)]}
            result_obj.success = False
            yield (1.0, "Failed")
            return

        result_obj.result = "Patch verified" if verified else f"Patch does not reproduce {new_path}"
        result_obj.output = {"patch_path": str(patch_path), "verified": verified, "errors": []}
        result_obj.success = verified
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Verifying patch {patch_path}...",
        progress_callback=do_work,
    )
