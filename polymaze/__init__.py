"""
polymaze: recursive perfect mazes on regular polygons.

A polygon whose sides are whole numbers of unit pieces is tiled into a few
smaller polygons; the internal walls of a random spanning tree of that tiling
get one hole each, and every piece is tiled again until it is a single unit
piece. The result is a perfect maze drawn by a turtle-style cursor.

Quick Start:
    >>> from polymaze import MazeConfig, draw_maze
    >>> surface = draw_maze(MazeConfig(shape="decagon", depth=3, seed=7))
    >>> len(surface) > 0
    True

Shapes: hexagon and decagon, plus their building blocks triangle, trapezoid
and parallelogram.
"""

from __future__ import annotations

__version__ = "0.1.0"

from polymaze.config import BoundaryConfig, LoggingConfig, MazeConfig, RenderConfig
from polymaze.factory import SHAPES, create_maze_generator, draw_maze, list_methods
from polymaze.geometry import Cursor, DrawingSurface, Segment
from polymaze.mazes import (
    DecagonMazeGenerator,
    HexagonMazeGenerator,
    MazeContext,
    ParallelogramMazeGenerator,
    PolygonMazeGenerator,
    StartFrom,
    TrapezoidMazeGenerator,
    TriangleMazeGenerator,
)
from polymaze.utils import ConfigError, InvalidArgumentError, PolyMazeError, ValidationError, configure_logging

__all__ = [
    "SHAPES",
    "BoundaryConfig",
    "ConfigError",
    "Cursor",
    "DecagonMazeGenerator",
    "DrawingSurface",
    "HexagonMazeGenerator",
    "InvalidArgumentError",
    "LoggingConfig",
    "MazeConfig",
    "MazeContext",
    "ParallelogramMazeGenerator",
    "PolyMazeError",
    "PolygonMazeGenerator",
    "RenderConfig",
    "Segment",
    "StartFrom",
    "TrapezoidMazeGenerator",
    "TriangleMazeGenerator",
    "ValidationError",
    "__version__",
    "configure_logging",
    "create_maze_generator",
    "draw_maze",
    "list_methods",
]
