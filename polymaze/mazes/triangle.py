"""
Equilateral triangle mazes.

Tilings from corner A, side A->B first:

- four_triangles: halve every side; three corner triangles around an
  inverted centre triangle. The centre touches each corner triangle, so all
  three walls lie on the centre's boundary.
- triangle_and_trapezoid: a trapezoid on side A->B topped by a smaller
  triangle; the single shared wall is the trapezoid's top.
"""

from __future__ import annotations

from enum import Enum

from polymaze.geometry.spanning_tree import AdjacencyGraph
from polymaze.utils.exceptions import ConfigError

from .base import PolygonMazeGenerator, PolygonOutline

# centre triangle is region 0, corner triangles in the order of its sides
_FOUR_TRIANGLES = AdjacencyGraph.star(3)
_TWO_REGIONS = AdjacencyGraph.path(2)


class TriangleMethod(Enum):
    """Tilings of an equilateral triangle."""

    FOUR_TRIANGLES = "four_triangles"
    TRIANGLE_AND_TRAPEZOID = "triangle_and_trapezoid"
    RANDOM = "random"


class TriangleMazeGenerator(PolygonMazeGenerator):
    """Maze in an equilateral triangle of side ``n`` unit pieces."""

    shape_name = "triangle"
    method_enum = TriangleMethod
    default_method = TriangleMethod.RANDOM
    allows_fractional_depth = True

    def dimensions(self, num_segs: int) -> tuple[int]:
        return (num_segs,)

    def outline(self, dims):
        (n,) = dims
        return PolygonOutline((n, n, n), (120.0, 120.0, 120.0))

    def validate_dimensions(self, dims):
        if len(dims) != 1:
            raise ConfigError("dims", dims, reason="expected (side,)", component_name=self._component)
        super().validate_dimensions(dims)

    def applicable_methods(self, dims):
        (n,) = dims
        methods = [TriangleMethod.TRIANGLE_AND_TRAPEZOID]
        if n % 2 == 0:
            methods.insert(0, TriangleMethod.FOUR_TRIANGLES)
        return methods

    def _tile(self, method, dims, unit_len, clockwise):
        if method is TriangleMethod.FOUR_TRIANGLES:
            self._four_triangles(dims, unit_len, clockwise)
        elif method is TriangleMethod.TRIANGLE_AND_TRAPEZOID:
            self._triangle_and_trapezoid(dims, unit_len, clockwise)

    def _four_triangles(self, dims, unit_len, clockwise):
        (n,) = dims
        k = n // 2
        cursor = self.cursor
        holes = self._open_walls(TriangleMethod.FOUR_TRIANGLES, dims, _FOUR_TRIANGLES)
        sub = TriangleMazeGenerator(self.context)

        # corner triangles at A and at the midpoint of A->B
        self._child(sub, (k,), unit_len, clockwise)
        cursor.forward(k * unit_len)
        self._child(sub, (k,), unit_len, clockwise)
        cursor.backward(k * unit_len)

        # corner triangle at C and the inverted centre, both from the midpoint of A->C
        self._turn(clockwise, 60)
        cursor.forward(k * unit_len)
        self._turn(clockwise, -60)
        self._child(sub, (k,), unit_len, clockwise)
        self._child(sub, (k,), unit_len, not clockwise, [True, True, True], holes)
        self._turn(clockwise, 60)
        cursor.backward(k * unit_len)
        self._turn(clockwise, -60)

    def _triangle_and_trapezoid(self, dims, unit_len, clockwise):
        from .trapezoid import TrapezoidMazeGenerator

        (n,) = dims
        top = n // 2
        leg = n - top
        cursor = self.cursor
        hole = self._open_walls(TriangleMethod.TRIANGLE_AND_TRAPEZOID, dims, _TWO_REGIONS)[0]

        trapezoid = TrapezoidMazeGenerator(self.context)
        self._child(trapezoid, (n, leg), unit_len, clockwise, [False, False, True, False], [False, False, hole, False])
        self._turn(clockwise, 60)
        cursor.forward(leg * unit_len)
        self._turn(clockwise, -60)
        self._child(TriangleMazeGenerator(self.context), (top,), unit_len, clockwise)
        self._turn(clockwise, 60)
        cursor.backward(leg * unit_len)
        self._turn(clockwise, -60)
