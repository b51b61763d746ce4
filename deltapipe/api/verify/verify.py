"""Verify that a patch reproduces an expected file."""

from pathlib import Path

from ...utils.get_logger import get_logger
from ..codec.decode_patch_file import decode_patch_file
from ..codec.DeltaAlgorithm import DeltaAlgorithm
from ..storage.open_readonly import open_readonly
from ..storage.require_file import require_file

logger = get_logger("verify")


def _matches(expected_path: Path, data: bytes) -> bool:
    with open_readonly(expected_path, "New file") as expected:
        if expected.size != len(data):
            return False
        view = expected.view
        if isinstance(view, bytes):
            return view == data
        with memoryview(view) as mv:
            return mv == data


def verify(
    old_path: str | Path,
    new_path: str | Path,
    patch_path: str | Path,
    *,
    algorithm: DeltaAlgorithm | None = None,
) -> bool:
    """Check that applying ``patch_path`` to ``old_path`` yields exactly ``new_path``.

    The patch is decoded in memory and compared byte for byte; nothing is written.

    Returns:
        True if the reconstructed bytes equal the contents of ``new_path``

    Raises:
        NotFoundError: If any of the three files does not exist
        CorruptPatchError: If the patch cannot be decompressed
        DeltaApplyError: If the algorithm rejects the delta
    """
    old_path = require_file(old_path, "Old file")
    new_path = require_file(new_path, "New file")
    patch_path = require_file(patch_path, "Patch file")

    data = decode_patch_file(old_path, patch_path, algorithm)
    ok = _matches(new_path, data)
    logger.info("Verified patch %s against %s: %s", patch_path, new_path, "match" if ok else "mismatch")
    return ok
