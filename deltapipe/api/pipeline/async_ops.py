"""Run blocking pipeline operations off the event loop."""

import asyncio
from pathlib import Path

from ..codec.DeltaAlgorithm import DeltaAlgorithm
from ..verify.verify import verify
from .apply_delta import apply_delta
from .OptimizationConfig import OptimizationConfig
from .produce_delta import produce_delta


async def produce_delta_async(
    old_path: str | Path,
    new_path: str | Path,
    patch_path: str | Path,
    config: OptimizationConfig | None = None,
    *,
    algorithm: DeltaAlgorithm | None = None,
) -> Path:
    """produce_delta in a worker thread. Runs to completion once started."""
    return await asyncio.to_thread(produce_delta, old_path, new_path, patch_path, config, algorithm=algorithm)


async def apply_delta_async(
    old_path: str | Path,
    new_path: str | Path,
    patch_path: str | Path,
    config: OptimizationConfig | None = None,
    *,
    algorithm: DeltaAlgorithm | None = None,
) -> Path:
    """apply_delta in a worker thread."""
    return await asyncio.to_thread(apply_delta, old_path, new_path, patch_path, config, algorithm=algorithm)


async def verify_async(
    old_path: str | Path,
    new_path: str | Path,
    patch_path: str | Path,
    *,
    algorithm: DeltaAlgorithm | None = None,
) -> bool:
    """verify in a worker thread."""
    return await asyncio.to_thread(verify, old_path, new_path, patch_path, algorithm=algorithm)
