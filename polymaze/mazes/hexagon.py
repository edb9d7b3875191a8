"""
Regular hexagon mazes.

Side length ``n = round(2**depth)``; depth may be fractional, so any side
length is reachable. Tilings from corner A with the hexagon walked clockwise
A, V2, ..., V6:

- two_trapezoids: the long diagonal V6-V3 splits the hexagon into two
  trapezoids; the diagonal always gets one hole
- six_triangles: six triangles around the centre; the six spokes form a ring,
  five of them are opened
- three_parallelograms: three 60 degree rhombi meeting at the centre; two of
  the three spokes are opened
"""

from __future__ import annotations

from enum import Enum

from polymaze.geometry.spanning_tree import AdjacencyGraph
from polymaze.utils.exceptions import ConfigError

from .base import PolygonMazeGenerator, PolygonOutline
from .parallelogram import ParallelogramMazeGenerator
from .trapezoid import TrapezoidMazeGenerator
from .triangle import TriangleMazeGenerator

_TWO_TRAPEZOIDS = AdjacencyGraph.path(2)
# spoke i separates region i from region i + 1
_SIX_TRIANGLES = AdjacencyGraph.cycle(6)
_THREE_PARALLELOGRAMS = AdjacencyGraph.cycle(3)


class HexagonMethod(Enum):
    """Tilings of a regular hexagon."""

    TWO_TRAPEZOIDS = "two_trapezoids"
    SIX_TRIANGLES = "six_triangles"
    THREE_PARALLELOGRAMS = "three_parallelograms"
    RANDOM = "random"


class HexagonMazeGenerator(PolygonMazeGenerator):
    """
    Maze in a regular hexagon.

    Examples:
        >>> from polymaze.mazes import MazeContext
        >>> context = MazeContext.create(seed=3)
        >>> HexagonMazeGenerator(context).generate(depth=4, unit_len=12, draw_boundary=True,
        ...                                        boundary_holes=[1, 4])
    """

    shape_name = "hexagon"
    method_enum = HexagonMethod
    default_method = HexagonMethod.TWO_TRAPEZOIDS
    allows_fractional_depth = True

    def dimensions(self, num_segs: int) -> tuple[int]:
        return (num_segs,)

    def outline(self, dims):
        (n,) = dims
        return PolygonOutline((n,) * 6, (60.0,) * 6)

    def validate_dimensions(self, dims):
        if len(dims) != 1:
            raise ConfigError("dims", dims, reason="expected (side,)", component_name=self._component)
        super().validate_dimensions(dims)

    def applicable_methods(self, dims):
        return [HexagonMethod.TWO_TRAPEZOIDS, HexagonMethod.SIX_TRIANGLES, HexagonMethod.THREE_PARALLELOGRAMS]

    def _tile(self, method, dims, unit_len, clockwise):
        if method is HexagonMethod.TWO_TRAPEZOIDS:
            self._two_trapezoids(dims, unit_len, clockwise)
        elif method is HexagonMethod.SIX_TRIANGLES:
            self._six_triangles(dims, unit_len, clockwise)
        elif method is HexagonMethod.THREE_PARALLELOGRAMS:
            self._three_parallelograms(dims, unit_len, clockwise)

    def _two_trapezoids(self, dims, unit_len, clockwise):
        (n,) = dims
        cursor = self.cursor
        holes = self._open_walls(HexagonMethod.TWO_TRAPEZOIDS, dims, _TWO_TRAPEZOIDS)
        sub = TrapezoidMazeGenerator(self.context)

        # to V6, facing along the diagonal
        self._turn(clockwise, -60)
        cursor.backward(n * unit_len)
        self._turn(clockwise, 60)

        self._child(sub, (2 * n, n), unit_len, clockwise, [True, False, False, False], [holes[0], False, False, False])
        self._child(sub, (2 * n, n), unit_len, not clockwise)

        self._turn(clockwise, -60)
        cursor.forward(n * unit_len)
        self._turn(clockwise, 60)

    def _six_triangles(self, dims, unit_len, clockwise):
        (n,) = dims
        cursor = self.cursor
        holes = self._open_walls(HexagonMethod.SIX_TRIANGLES, dims, _SIX_TRIANGLES)
        sub = TriangleMazeGenerator(self.context)

        for i in range(6):
            self._child(sub, (n,), unit_len, clockwise, [False, True, False], [False, holes[i], False])
            cursor.forward(n * unit_len)
            self._turn(clockwise, 60)

    def _three_parallelograms(self, dims, unit_len, clockwise):
        (n,) = dims
        cursor = self.cursor
        holes = self._open_walls(HexagonMethod.THREE_PARALLELOGRAMS, dims, _THREE_PARALLELOGRAMS)
        rhombus = ParallelogramMazeGenerator(self.context, angle=60.0)

        for i in range(3):
            spoke = [False, False, holes[i], False]
            self._child(rhombus, (n, n), unit_len, clockwise, [False, False, True, False], spoke)
            for _ in range(2):
                cursor.forward(n * unit_len)
                self._turn(clockwise, 60)
