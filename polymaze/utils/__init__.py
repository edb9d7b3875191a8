"""Utility modules for polymaze: structured exceptions and logging."""

from __future__ import annotations

from .exceptions import (
    ConfigError,
    InvalidArgumentError,
    PolyMazeError,
    ValidationError,
    validate_parameter_value,
)
from .maze_logging import configure_logging, get_logger

__all__ = [
    "ConfigError",
    "InvalidArgumentError",
    "PolyMazeError",
    "ValidationError",
    "configure_logging",
    "get_logger",
    "validate_parameter_value",
]
