"""
Regular decagon mazes.

The decagon is tiled by ten rhombi with sides of ``n = 2**depth`` unit
pieces: five thin 36 degree rhombi along the boundary alternating with five
fat 108 degree rhombi that meet at the centre. The rhombi are drawn in a
chain, each one leaving the cursor at its second side where the next begins.

Region adjacency (15 walls over 10 rhombi, numbered in drawing order)::

    1-10  1-2  2-10  3-2  3-4  4-2  5-4  5-6  6-4
    7-6   7-8  8-6   9-8  9-10 10-8

A random spanning tree opens 9 of the 15 walls. Walls are owned by the thin
rhombi (their first two sides) and the fat rhombi (their fourth side), in
the order listed above.
"""

from __future__ import annotations

from enum import Enum

from polymaze.geometry.spanning_tree import AdjacencyGraph
from polymaze.utils.exceptions import ConfigError

from .base import PolygonMazeGenerator, PolygonOutline
from .parallelogram import ParallelogramMazeGenerator

_TEN_RHOMBS = AdjacencyGraph.from_pairs(
    starts=[1, 1, 2, 3, 3, 4, 5, 5, 6, 7, 7, 8, 9, 9, 10],
    ends=[10, 2, 10, 2, 4, 2, 4, 6, 4, 6, 8, 6, 8, 10, 8],
)
_THIN_LINES = (True, True, False, False)
_FAT_LINES = (False, False, False, True)
_EXTERIOR = 36.0


class DecagonMethod(Enum):
    """Tilings of a regular decagon."""

    TEN_RHOMBS = "ten_rhombs"
    RANDOM = "random"


class DecagonMazeGenerator(PolygonMazeGenerator):
    """Maze in a regular decagon; depth must be a whole number."""

    shape_name = "decagon"
    method_enum = DecagonMethod
    default_method = DecagonMethod.TEN_RHOMBS

    def dimensions(self, num_segs: int) -> tuple[int]:
        return (num_segs,)

    def outline(self, dims):
        (n,) = dims
        return PolygonOutline((n,) * 10, (_EXTERIOR,) * 10)

    def validate_dimensions(self, dims):
        if len(dims) != 1:
            raise ConfigError("dims", dims, reason="expected (side,)", component_name=self._component)
        super().validate_dimensions(dims)

    def applicable_methods(self, dims):
        return [DecagonMethod.TEN_RHOMBS]

    def _tile(self, method, dims, unit_len, clockwise):
        (n,) = dims
        mask = self._open_walls(method, dims, _TEN_RHOMBS)
        walls = iter(mask)
        thin = ParallelogramMazeGenerator(self.context, angle=_EXTERIOR)
        fat = ParallelogramMazeGenerator(self.context, angle=180.0 - 2 * _EXTERIOR)

        self._turn(clockwise, _EXTERIOR)
        for i in range(10):
            if i % 2 == 0:
                generator, lines, orientation = thin, _THIN_LINES, not clockwise
            else:
                generator, lines, orientation = fat, _FAT_LINES, clockwise
            holes = [bool(next(walls)) if line else False for line in lines]
            self._child(generator, (n, n), unit_len, orientation, list(lines), holes, end_side=2)
        self._turn(clockwise, -_EXTERIOR)
