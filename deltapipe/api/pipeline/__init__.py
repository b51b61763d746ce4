"""Delta pipeline - produce and apply compressed patches."""

from .apply_delta import apply_delta
from .async_ops import apply_delta_async, produce_delta_async, verify_async
from .cmd_apply import cmd_apply
from .cmd_produce import cmd_produce
from .OptimizationConfig import OptimizationConfig
from .produce_delta import produce_delta

__all__ = [
    "OptimizationConfig",
    "apply_delta",
    "apply_delta_async",
    "cmd_apply",
    "cmd_produce",
    "produce_delta",
    "produce_delta_async",
    "verify_async",
]
