"""Delta application error."""

from .DeltaPipelineError import DeltaPipelineError


class DeltaApplyError(DeltaPipelineError):
    """Raised when the delta algorithm rejects a decompressed delta stream.

    Covers format mismatches, truncated streams and control data that points
    outside the old file.
    """
