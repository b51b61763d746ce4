"""API module for deltapipe.

Subpackages, leaf first: ``storage`` (memory-mapped inputs, staged outputs),
``codec`` (zstd-wrapped delta algorithm), ``pipeline`` (produce/apply) and
``verify`` (verification and metrics).
"""

__all__ = []
