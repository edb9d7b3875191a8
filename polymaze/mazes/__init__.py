"""
Polygon maze generators.

All generators share the recursive driver in ``base`` and differ only in
their outline and tilings:

- HexagonMazeGenerator: two_trapezoids, six_triangles, three_parallelograms
- DecagonMazeGenerator: ten_rhombs
- TriangleMazeGenerator: four_triangles, triangle_and_trapezoid
- TrapezoidMazeGenerator: parallelogram_and_triangle, three_triangles,
  four_trapezoids
- ParallelogramMazeGenerator: two_parallelograms, four_parallelograms
"""

from __future__ import annotations

from .base import (
    MazeContext,
    PolygonMazeGenerator,
    PolygonOutline,
    StartFrom,
    TilingDecision,
)
from .decagon import DecagonMazeGenerator, DecagonMethod
from .hexagon import HexagonMazeGenerator, HexagonMethod
from .parallelogram import ParallelogramMazeGenerator, ParallelogramMethod
from .trapezoid import TrapezoidMazeGenerator, TrapezoidMethod
from .triangle import TriangleMazeGenerator, TriangleMethod

__all__ = [
    "DecagonMazeGenerator",
    "DecagonMethod",
    "HexagonMazeGenerator",
    "HexagonMethod",
    "MazeContext",
    "ParallelogramMazeGenerator",
    "ParallelogramMethod",
    "PolygonMazeGenerator",
    "PolygonOutline",
    "StartFrom",
    "TilingDecision",
    "TrapezoidMazeGenerator",
    "TrapezoidMethod",
    "TriangleMazeGenerator",
    "TriangleMethod",
]
