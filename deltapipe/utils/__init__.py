"""Utility helpers shared across deltapipe."""

from .get_home_dir import get_home_dir
from .get_logger import get_logger
from .logger import configure_logging

__all__ = [
    "configure_logging",
    "get_home_dir",
    "get_logger",
]
