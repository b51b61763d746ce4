"""Verification and metrics for committed patches."""

from .cmd_inspect import cmd_inspect
from .cmd_verify import cmd_verify
from .CompressionRatio import CompressionRatio
from .compute_ratio import compute_ratio
from .inspect_patch import inspect_patch
from .PatchInfo import PatchInfo
from .verify import verify

__all__ = [
    "CompressionRatio",
    "PatchInfo",
    "cmd_inspect",
    "cmd_verify",
    "compute_ratio",
    "inspect_patch",
    "verify",
]
