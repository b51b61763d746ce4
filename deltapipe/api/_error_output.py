"""Describe a pipeline error for a command's output dict."""

from .errors.DeltaPipelineError import DeltaPipelineError


def _error_output(exc: DeltaPipelineError) -> dict:
    return {
        "type": type(exc).__name__,
        "message": str(exc),
        "path": str(exc.path) if exc.path is not None else None,
    }
