"""Optimization configuration error."""

from .DeltaPipelineError import DeltaPipelineError


class DeltaConfigError(DeltaPipelineError):
    """Raised when optimization configuration is invalid."""

    def __init__(self, errors: list[str] | str, path=None):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        message = "Optimization configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message, path)
