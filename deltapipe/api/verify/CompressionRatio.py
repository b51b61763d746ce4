"""Patch size relative to its inputs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CompressionRatio:
    """Sizes of old, new and patch files with ``ratio`` as a percentage of old + new."""

    old_size: int
    new_size: int
    patch_size: int
    ratio: float

    @classmethod
    def from_sizes(cls, old_size: int, new_size: int, patch_size: int) -> "CompressionRatio":
        total = old_size + new_size
        ratio = patch_size / total * 100 if total > 0 else 0.0
        return cls(old_size=old_size, new_size=new_size, patch_size=patch_size, ratio=ratio)
