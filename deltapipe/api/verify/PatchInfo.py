"""Patch file summary."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PatchInfo:
    """Size of a committed patch file and whether it is compressed (always true)."""

    size: int
    compressed: bool = True
