"""
Isosceles 60 degree trapezoid mazes.

A trapezoid with a long base of ``base`` unit pieces and two legs of
``leg`` pieces; the short top then has ``base - leg`` pieces. Two of these
with ``base = 2 * leg`` make a hexagon.

Tilings from corner A on the long base:

- parallelogram_and_triangle: a 60 degree parallelogram on A with the
  remaining triangle beside it
- three_triangles: (base = 2 leg) two upright triangles with an inverted
  one between them; walls form a path
- four_trapezoids: (base = 2 leg, leg even) four half-size trapezoids:
  one on each leg, one in the middle of the long base and an inverted one
  under the short top, with five walls
"""

from __future__ import annotations

from enum import Enum

from polymaze.geometry.spanning_tree import AdjacencyGraph
from polymaze.utils.exceptions import ConfigError

from .base import PolygonMazeGenerator, PolygonOutline
from .parallelogram import ParallelogramMazeGenerator
from .triangle import TriangleMazeGenerator

_TWO_REGIONS = AdjacencyGraph.path(2)
_THREE_TRIANGLES = AdjacencyGraph.path(3)
# regions: 1 left, 2 right, 3 middle along the base, 4 inverted middle
_FOUR_TRAPEZOIDS = AdjacencyGraph.from_pairs(starts=[1, 1, 2, 2, 3], ends=[4, 3, 4, 3, 4])


class TrapezoidMethod(Enum):
    """Tilings of a 60 degree trapezoid."""

    PARALLELOGRAM_AND_TRIANGLE = "parallelogram_and_triangle"
    THREE_TRIANGLES = "three_triangles"
    FOUR_TRAPEZOIDS = "four_trapezoids"
    RANDOM = "random"


class TrapezoidMazeGenerator(PolygonMazeGenerator):
    """Maze in a 60 degree isosceles trapezoid of dimensions (base, leg)."""

    shape_name = "trapezoid"
    method_enum = TrapezoidMethod
    default_method = TrapezoidMethod.RANDOM
    allows_fractional_depth = True

    def dimensions(self, num_segs: int) -> tuple[int, int]:
        return (2 * num_segs, num_segs)

    def outline(self, dims):
        base, leg = dims
        return PolygonOutline((base, leg, base - leg, leg), (120.0, 60.0, 60.0, 120.0))

    def validate_dimensions(self, dims):
        if len(dims) != 2:
            raise ConfigError("dims", dims, reason="expected (base, leg)", component_name=self._component)
        super().validate_dimensions(dims)
        base, leg = dims
        if leg >= base:
            raise ConfigError(
                "dims", dims, reason="leg must be shorter than base", component_name=self._component
            )

    def applicable_methods(self, dims):
        base, leg = dims
        methods = [TrapezoidMethod.PARALLELOGRAM_AND_TRIANGLE]
        if base == 2 * leg:
            methods.append(TrapezoidMethod.THREE_TRIANGLES)
            if leg % 2 == 0:
                methods.append(TrapezoidMethod.FOUR_TRAPEZOIDS)
        return methods

    def _tile(self, method, dims, unit_len, clockwise):
        if method is TrapezoidMethod.PARALLELOGRAM_AND_TRIANGLE:
            self._parallelogram_and_triangle(dims, unit_len, clockwise)
        elif method is TrapezoidMethod.THREE_TRIANGLES:
            self._three_triangles(dims, unit_len, clockwise)
        elif method is TrapezoidMethod.FOUR_TRAPEZOIDS:
            self._four_trapezoids(dims, unit_len, clockwise)

    def _parallelogram_and_triangle(self, dims, unit_len, clockwise):
        base, leg = dims
        top = base - leg
        cursor = self.cursor
        hole = self._open_walls(TrapezoidMethod.PARALLELOGRAM_AND_TRIANGLE, dims, _TWO_REGIONS)[0]

        rhombus = ParallelogramMazeGenerator(self.context, angle=60.0)
        self._child(rhombus, (top, leg), unit_len, clockwise, [False, True, False, False], [False, hole, False, False])
        cursor.forward(top * unit_len)
        self._child(TriangleMazeGenerator(self.context), (leg,), unit_len, clockwise)
        cursor.backward(top * unit_len)

    def _three_triangles(self, dims, unit_len, clockwise):
        _, leg = dims
        cursor = self.cursor
        h12, h23 = self._open_walls(TrapezoidMethod.THREE_TRIANGLES, dims, _THREE_TRIANGLES)
        sub = TriangleMazeGenerator(self.context)

        self._child(sub, (leg,), unit_len, clockwise)
        self._turn(clockwise, 60)
        cursor.forward(leg * unit_len)
        self._turn(clockwise, -60)
        # inverted middle triangle owns both walls
        self._child(sub, (leg,), unit_len, not clockwise, [False, True, True], [False, h23, h12])
        self._turn(clockwise, 60)
        cursor.backward(leg * unit_len)
        self._turn(clockwise, -60)

        cursor.forward(leg * unit_len)
        self._child(sub, (leg,), unit_len, clockwise)
        cursor.backward(leg * unit_len)

    def _four_trapezoids(self, dims, unit_len, clockwise):
        _, leg = dims
        k = leg // 2
        half = (2 * k, k)
        cursor = self.cursor
        w14, w13, w24, w23, w34 = self._open_walls(TrapezoidMethod.FOUR_TRAPEZOIDS, dims, _FOUR_TRAPEZOIDS)
        sub = TrapezoidMazeGenerator(self.context)

        # left: along the left leg, mirrored
        self._turn(clockwise, 60)
        self._child(sub, half, unit_len, not clockwise, [False, True, True, False], [False, w14, w13, False])
        self._turn(clockwise, -60)

        # middle, on the base
        cursor.forward(k * unit_len)
        self._child(sub, half, unit_len, clockwise, [False, False, True, False], [False, False, w34, False])
        cursor.backward(k * unit_len)

        # right: from B along the right leg
        cursor.forward(4 * k * unit_len)
        self._turn(clockwise, 120)
        self._child(sub, half, unit_len, clockwise, [False, True, True, False], [False, w24, w23, False])
        self._turn(clockwise, -120)
        cursor.backward(4 * k * unit_len)

        # inverted middle, on the top
        self._turn(clockwise, 60)
        cursor.forward(2 * k * unit_len)
        self._turn(clockwise, -60)
        self._child(sub, half, unit_len, not clockwise)
        self._turn(clockwise, 60)
        cursor.backward(2 * k * unit_len)
        self._turn(clockwise, -60)
