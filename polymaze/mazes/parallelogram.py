"""
Parallelogram mazes.

A parallelogram of ``width`` by ``height`` unit pieces whose walk turns by
``angle`` after the first side and ``180 - angle`` after the second. With the
default 90 degrees it is a rectangle; the decagon uses 36 and 108 degree
rhombi, the hexagon 60 degree ones.

Tilings, from the first corner A with sides A->B (width) and B->C (height):

- two_parallelograms: cut across the longer dimension into two halves
- four_parallelograms: cut both ways into a 2x2 block whose four walls form
  a ring, three of which are opened
"""

from __future__ import annotations

from enum import Enum

from polymaze.geometry.spanning_tree import AdjacencyGraph
from polymaze.utils.exceptions import ConfigError, validate_parameter_value

from .base import PolygonMazeGenerator, PolygonOutline

# walls of the 2x2 block, regions numbered 1 2 / 3 4 from corner A
_FOUR_PARALLELOGRAMS = AdjacencyGraph.from_pairs(starts=[1, 1, 2, 3], ends=[2, 3, 4, 4])
_TWO_REGIONS = AdjacencyGraph.path(2)


class ParallelogramMethod(Enum):
    """Tilings of a parallelogram."""

    TWO_PARALLELOGRAMS = "two_parallelograms"
    FOUR_PARALLELOGRAMS = "four_parallelograms"
    RANDOM = "random"


class ParallelogramMazeGenerator(PolygonMazeGenerator):
    """Maze in a parallelogram with a configurable corner angle."""

    shape_name = "parallelogram"
    method_enum = ParallelogramMethod
    default_method = ParallelogramMethod.RANDOM

    def __init__(self, context=None, angle: float = 90.0):
        super().__init__(context)
        validate_parameter_value(angle, "angle", (0.0, 180.0), self._component, exclusive_lower=True)
        if angle >= 180.0:
            raise ConfigError(
                "angle", angle, valid_range=(0.0, 180.0), reason="must be below 180", component_name=self._component
            )
        self.angle = float(angle)

    def dimensions(self, num_segs: int) -> tuple[int, int]:
        return (num_segs, num_segs)

    def outline(self, dims):
        width, height = dims
        a = self.angle
        return PolygonOutline((width, height, width, height), (a, 180.0 - a, a, 180.0 - a))

    def validate_dimensions(self, dims):
        if len(dims) != 2:
            raise ConfigError("dims", dims, reason="expected (width, height)", component_name=self._component)
        super().validate_dimensions(dims)

    def applicable_methods(self, dims):
        width, height = dims
        methods = [ParallelogramMethod.TWO_PARALLELOGRAMS]
        if width >= 2 and height >= 2:
            methods.append(ParallelogramMethod.FOUR_PARALLELOGRAMS)
        return methods

    def _sub(self) -> ParallelogramMazeGenerator:
        return ParallelogramMazeGenerator(self.context, angle=self.angle)

    def _tile(self, method, dims, unit_len, clockwise):
        if method is ParallelogramMethod.TWO_PARALLELOGRAMS:
            self._two_parallelograms(dims, unit_len, clockwise)
        elif method is ParallelogramMethod.FOUR_PARALLELOGRAMS:
            self._four_parallelograms(dims, unit_len, clockwise)

    def _two_parallelograms(self, dims, unit_len, clockwise):
        width, height = dims
        cursor = self.cursor
        a = self.angle
        hole = self._open_walls(ParallelogramMethod.TWO_PARALLELOGRAMS, dims, _TWO_REGIONS)[0]

        if width >= 2 and (width >= height or height == 1):
            w1 = width // 2
            lines = [False, True, False, False]
            self._child(self._sub(), (w1, height), unit_len, clockwise, lines, [False, hole, False, False])
            cursor.forward(w1 * unit_len)
            self._child(self._sub(), (width - w1, height), unit_len, clockwise)
            cursor.backward(w1 * unit_len)
        else:
            h1 = height // 2
            lines = [False, False, True, False]
            self._child(self._sub(), (width, h1), unit_len, clockwise, lines, [False, False, hole, False])
            self._turn(clockwise, a)
            cursor.forward(h1 * unit_len)
            self._turn(clockwise, -a)
            self._child(self._sub(), (width, height - h1), unit_len, clockwise)
            self._turn(clockwise, a)
            cursor.backward(h1 * unit_len)
            self._turn(clockwise, -a)

    def _four_parallelograms(self, dims, unit_len, clockwise):
        width, height = dims
        cursor = self.cursor
        a = self.angle
        w1, h1 = width // 2, height // 2
        w12, w13, w24, w34 = self._open_walls(ParallelogramMethod.FOUR_PARALLELOGRAMS, dims, _FOUR_PARALLELOGRAMS)

        sub = self._sub()
        self._child(sub, (w1, h1), unit_len, clockwise, [False, True, True, False], [False, w12, w13, False])
        cursor.forward(w1 * unit_len)
        self._child(sub, (width - w1, h1), unit_len, clockwise, [False, False, True, False], [False, False, w24, False])
        cursor.backward(w1 * unit_len)

        self._turn(clockwise, a)
        cursor.forward(h1 * unit_len)
        self._turn(clockwise, -a)
        lower = height - h1
        self._child(sub, (w1, lower), unit_len, clockwise, [False, True, False, False], [False, w34, False, False])
        cursor.forward(w1 * unit_len)
        self._child(sub, (width - w1, lower), unit_len, clockwise)
        cursor.backward(w1 * unit_len)
        self._turn(clockwise, a)
        cursor.backward(h1 * unit_len)
        self._turn(clockwise, -a)
