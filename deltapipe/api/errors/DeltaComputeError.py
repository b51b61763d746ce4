"""Delta computation error."""

from .DeltaPipelineError import DeltaPipelineError


class DeltaComputeError(DeltaPipelineError):
    """Raised when the delta algorithm cannot compute a delta for the inputs."""
