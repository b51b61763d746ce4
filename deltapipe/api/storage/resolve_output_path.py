"""Choose where an output is written before it is committed."""

import hashlib
import os
from pathlib import Path

from ...constants import STAGED_SUFFIX
from ...utils.get_logger import get_logger
from .FastTempProbe import FastTempProbe
from .get_fast_temp_probe import get_fast_temp_probe
from .StagedOutput import StagedOutput
from .TempDirProbe import TempDirProbe

logger = get_logger("storage")


def _staging_digest(final_path: Path) -> str:
    return hashlib.sha256(os.path.abspath(final_path).encode("utf-8")).hexdigest()[:12]


def sibling_staged_path(final_path: Path) -> Path:
    """Hidden staging file in the same directory as ``final_path``."""
    return final_path.parent / f".{final_path.name}.{_staging_digest(final_path)}{STAGED_SUFFIX}"


def resolve_output_path(
    final_path: str | Path,
    use_fast_temp: bool,
    probe: FastTempProbe | None = None,
) -> StagedOutput:
    """Resolve the staged location for ``final_path``.

    With ``use_fast_temp`` the staged file goes to the probe's directory (falling
    back to the standard temp directory), named from the final base name and a
    digest of its absolute path. Otherwise it is staged beside the final path so
    the commit is a same-directory rename.

    Args:
        final_path: Path the output is committed to
        use_fast_temp: Prefer a memory-backed directory for the staged file
        probe: Fast directory strategy; platform default when omitted

    Returns:
        StagedOutput pairing staged and final paths
    """
    final_path = Path(final_path)
    if not use_fast_temp:
        staged = StagedOutput(staged_path=sibling_staged_path(final_path), final_path=final_path)
        logger.debug("Staging %s beside final path", final_path)
        return staged

    probe = probe or get_fast_temp_probe()
    directory = probe.preferred_dir()
    if directory is None:
        directory = TempDirProbe().preferred_dir()
        logger.debug("Probe %s found no fast directory, using %s", probe.name, directory)

    staged_path = directory / f"{final_path.name}.{_staging_digest(final_path)}{STAGED_SUFFIX}"
    logger.debug("Staging %s at %s", final_path, staged_path)
    return StagedOutput(staged_path=staged_path, final_path=final_path)
