"""
Logging utilities for polymaze.

Usage:
    >>> from polymaze.utils.maze_logging import get_logger, configure_logging
    >>> logger = get_logger(__name__)
    >>> configure_logging(level="DEBUG")
    >>> logger.debug("Tiling hexagon with six_triangles")
"""

from __future__ import annotations

from .logger import MazeFormatter, MazeLogger, configure_logging, get_logger

__all__ = [
    "MazeFormatter",
    "MazeLogger",
    "configure_logging",
    "get_logger",
]
