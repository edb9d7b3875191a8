"""
Recursive Polygon Maze Generation

Shared driver for every polygon maze shape. A generator draws a perfect maze
inside a polygon whose sides are whole numbers of unit pieces by tiling the
polygon into a few smaller polygons, opening the walls of a random spanning
tree of the tiling's region adjacency, and recursing into each piece.

Per invocation the driver runs:

1. Init: validate every argument, resolve the boundary flags and the tiling
   method. Nothing is drawn before this step succeeds.
2. Recurse: skipped when every side is a single unit piece. Otherwise the
   concrete shape tiles itself starting from its first corner and returns
   the cursor to that corner and heading.
3. DrawBoundary: only when requested.
4. Reposition: walk ``end_side - 1`` sides so callers can chain shapes.
5. Done: with the midpoint convention step half a side forward again.

Orientation:
``clockwise`` shapes turn right at every vertex. Every turn in a tiling is
written for the clockwise case and multiplied by ``-1`` otherwise, so a
counter-clockwise maze is the mirror image of the clockwise one.

Author: polymaze Team
Date: October 2026
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from polymaze.geometry.boundary import resolve_holes, resolve_lines
from polymaze.geometry.cursor import Cursor, DrawingSurface
from polymaze.geometry.holey_path import draw_path
from polymaze.geometry.spanning_tree import open_wall_mask
from polymaze.utils.exceptions import ConfigError, InvalidArgumentError, ValidationError, validate_parameter_value
from polymaze.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from polymaze.geometry.boundary import SideSelection
    from polymaze.geometry.cursor import Point
    from polymaze.geometry.spanning_tree import AdjacencyGraph

logger = get_logger(__name__)


class StartFrom(Enum):
    """Where the cursor sits on side 1 when a generator is entered."""

    MIDPOINT = "midpoint"
    CORNER = "corner"


@dataclass(frozen=True)
class PolygonOutline:
    """
    Outline of a polygon in unit pieces.

    Attributes:
        side_units: Number of unit pieces on each side, in drawing order
        turn_angles: Exterior turn after each side, for a clockwise walk
    """

    side_units: tuple[int, ...]
    turn_angles: tuple[float, ...]

    @property
    def side_count(self) -> int:
        return len(self.side_units)

    @property
    def is_unit(self) -> bool:
        return all(units == 1 for units in self.side_units)

    def corners(self, start: Point, heading: float, unit_len: float, clockwise: bool = True) -> tuple[Point, ...]:
        """Corner coordinates of the outline walked from ``start`` along ``heading``."""
        m = 1 if clockwise else -1
        x, y = start
        corners = []
        for units, turn in zip(self.side_units, self.turn_angles):
            corners.append((x, y))
            theta = np.deg2rad(heading)
            x += unit_len * units * float(np.cos(theta))
            y += unit_len * units * float(np.sin(theta))
            heading = (heading - m * turn) % 360.0
        return tuple(corners)


@dataclass(frozen=True)
class TilingDecision:
    """
    Record of one tiling step, kept when tracing is enabled.

    Attributes:
        shape: Shape name
        method: Concrete tiling method
        dims: Shape dimensions in unit pieces
        num_regions: Regions produced by the tiling
        num_walls: Internal walls between those regions
        open_walls: Per wall, whether it received a hole
    """

    shape: str
    method: str
    dims: tuple[int, ...]
    num_regions: int
    num_walls: int
    open_walls: tuple[bool, ...]

    @property
    def num_open(self) -> int:
        return sum(self.open_walls)


@dataclass
class MazeContext:
    """
    State shared by every generator of one drawing.

    Attributes:
        cursor: The drawing cursor, mutated by every generator
        rng: Random source for holes, spanning trees and method choice
        hole_fraction: Gap width as a fraction of a unit piece
        max_depth: Largest depth ``generate`` accepts
        record_tilings: Whether to keep a ``TilingDecision`` per tiling and
            the corners of every untiled unit cell
        tilings: Recorded decisions, outermost first
        cells: Corners of the recorded unit cells, in drawing order
    """

    cursor: Cursor = field(default_factory=Cursor)
    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    hole_fraction: float = 1.0
    max_depth: float = 10.0
    record_tilings: bool = False
    tilings: list[TilingDecision] = field(default_factory=list)
    cells: list[tuple[Point, ...]] = field(default_factory=list)

    def __post_init__(self):
        validate_parameter_value(self.hole_fraction, "hole_fraction", (0.0, 1.0), "MazeContext", exclusive_lower=True)
        validate_parameter_value(self.max_depth, "max_depth", (0.0, float("inf")), "MazeContext")

    @classmethod
    def create(cls, seed: int | None = None, surface: DrawingSurface | None = None, **kwargs) -> MazeContext:
        """Context with a fresh cursor at the origin, pen up, heading 0."""
        cursor = Cursor(surface, pen_down=False)
        return cls(cursor=cursor, rng=np.random.default_rng(seed), **kwargs)

    @property
    def surface(self) -> DrawingSurface:
        return self.cursor.surface


class PolygonMazeGenerator(ABC):
    """
    Base class of all polygon maze generators.

    Subclasses declare their shape name, a method enum that contains a
    ``RANDOM`` member, and implement the outline and the tilings. Generators
    are cheap; the context carries all state.
    """

    shape_name: ClassVar[str]
    method_enum: ClassVar[type[Enum]]
    default_method: ClassVar[Enum]
    allows_fractional_depth: ClassVar[bool] = False

    def __init__(self, context: MazeContext | None = None):
        self.context = context if context is not None else MazeContext()

    @property
    def cursor(self) -> Cursor:
        return self.context.cursor

    @property
    def rng(self) -> np.random.Generator:
        return self.context.rng

    # ------------------------------------------------------------------
    # Shape description
    # ------------------------------------------------------------------

    @abstractmethod
    def dimensions(self, num_segs: int) -> tuple[int, ...]:
        """Shape dimensions for a maze with ``num_segs`` pieces per side."""

    @abstractmethod
    def outline(self, dims: tuple[int, ...]) -> PolygonOutline:
        """Side lengths and turns of the shape with the given dimensions."""

    @abstractmethod
    def applicable_methods(self, dims: tuple[int, ...]) -> list[Enum]:
        """Concrete tiling methods usable at these dimensions."""

    @abstractmethod
    def _tile(self, method: Enum, dims: tuple[int, ...], unit_len: float, clockwise: bool) -> None:
        """Draw the tiling from the first corner and return the cursor there."""

    def validate_dimensions(self, dims: tuple[int, ...]) -> None:
        if any(isinstance(d, bool) or not isinstance(d, numbers.Integral) or d < 1 for d in dims):
            raise ConfigError(
                "dims", dims, reason="dimensions must be positive integers", component_name=self._component
            )

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------

    def segment_count(self, depth: float) -> int:
        """Unit pieces per side for ``depth``, i.e. round(2**depth)."""
        validate_parameter_value(depth, "depth", (0, self.context.max_depth), self._component)
        if not self.allows_fractional_depth and depth != int(depth):
            raise ConfigError(
                "depth",
                depth,
                reason=f"{self.shape_name} mazes need an integral depth",
                component_name=self._component,
            )
        return round(2.0**depth)

    def generate(
        self,
        depth: float,
        unit_len: float = 4.0,
        clockwise: bool = True,
        start_from: StartFrom | str = StartFrom.MIDPOINT,
        method: Enum | str | None = None,
        draw_boundary: bool = False,
        num_boundary_holes: int | None = 2,
        boundary_lines: SideSelection = True,
        boundary_holes: SideSelection = None,
        boundary_hole_color: str | None = None,
        end_side: int = 1,
    ) -> None:
        """
        Draw a maze with ``round(2**depth)`` unit pieces per side.

        Args:
            depth: Recursion depth, bounded by the context's ``max_depth``
            unit_len: Length of one unit piece
            clockwise: Walk the outline clockwise
            start_from: Cursor on the midpoint or first corner of side 1
            method: Tiling method name, enum member, "random" or None
                for the shape's default
            draw_boundary: Draw the outer boundary
            num_boundary_holes: Random boundary holes when
                ``boundary_holes`` is None
            boundary_lines: Which boundary sides to draw
            boundary_holes: Which boundary sides carry a hole
            boundary_hole_color: Color marking boundary holes
            end_side: Side on which to leave the cursor

        Raises:
            ConfigError: Invalid depth, method or unit length
            ValidationError: Invalid side indices or ``end_side``
        """
        num_segs = self.segment_count(depth)
        dims = self.dimensions(num_segs)
        logger.info(f"Drawing {self.shape_name} maze: depth={depth}, {num_segs} unit pieces per side")

        drawn_before = len(self.context.surface)
        self.render(
            dims,
            unit_len=unit_len,
            clockwise=clockwise,
            start_from=start_from,
            method=method,
            draw_boundary=draw_boundary,
            num_boundary_holes=num_boundary_holes,
            boundary_lines=boundary_lines,
            boundary_holes=boundary_holes,
            boundary_hole_color=boundary_hole_color,
            end_side=end_side,
        )
        logger.info(f"Finished {self.shape_name} maze: {len(self.context.surface) - drawn_before} segments drawn")

    def render(
        self,
        dims: tuple[int, ...],
        unit_len: float = 4.0,
        clockwise: bool = True,
        start_from: StartFrom | str = StartFrom.MIDPOINT,
        method: Enum | str | None = None,
        draw_boundary: bool = False,
        num_boundary_holes: int | None = 2,
        boundary_lines: SideSelection = True,
        boundary_holes: SideSelection = None,
        boundary_hole_color: str | None = None,
        end_side: int = 1,
    ) -> None:
        """
        Draw a maze of explicit dimensions; arguments as in ``generate``.

        The dimensions may not exceed those ``generate`` builds at the
        context's ``max_depth``.

        Raises:
            ConfigError: Invalid or oversized dimensions, invalid method or
                unit length
            ValidationError: Invalid side indices or ``end_side``
        """
        dims = tuple(dims)
        self.validate_dimensions(dims)
        largest = self.dimensions(round(2.0**self.context.max_depth))
        if any(d > limit for d, limit in zip(dims, largest)):
            raise ConfigError(
                "dims",
                dims,
                reason=f"larger than {largest}, the limit for max_depth={self.context.max_depth}",
                component_name=self._component,
            )

        self._render(
            dims,
            unit_len=unit_len,
            clockwise=clockwise,
            start_from=start_from,
            method=method,
            draw_boundary=draw_boundary,
            num_boundary_holes=num_boundary_holes,
            boundary_lines=boundary_lines,
            boundary_holes=boundary_holes,
            boundary_hole_color=boundary_hole_color,
            end_side=end_side,
        )

    def _render(
        self,
        dims: tuple[int, ...],
        unit_len: float,
        clockwise: bool,
        start_from: StartFrom | str,
        method: Enum | str | None,
        draw_boundary: bool,
        num_boundary_holes: int | None,
        boundary_lines: SideSelection,
        boundary_holes: SideSelection,
        boundary_hole_color: str | None,
        end_side: int,
    ) -> None:
        # Init: everything that can fail does so before the first stroke
        dims = tuple(dims)
        self.validate_dimensions(dims)
        outline = self.outline(dims)
        n = outline.side_count
        start = self._resolve_start(start_from)
        validate_parameter_value(unit_len, "unit_len", (0, float("inf")), self._component, exclusive_lower=True)
        if isinstance(end_side, bool) or not isinstance(end_side, numbers.Integral) or not 1 <= end_side <= n:
            raise ValidationError("end_side", end_side, valid_range=(1, n), component_name=self._component)

        requested = self._parse_method(method)
        concrete = None if outline.is_unit else self._resolve_method(requested, dims)

        if draw_boundary:
            lines = resolve_lines(boundary_lines, n)
            holes = resolve_holes(boundary_holes, num_boundary_holes, n, self.rng)

        m = 1 if clockwise else -1
        cursor = self.cursor
        was_down = cursor.is_down
        cursor.pen_up()
        if start is StartFrom.MIDPOINT:
            cursor.backward(unit_len * outline.side_units[0] / 2)

        # Recurse
        if concrete is None and self.context.record_tilings:
            self.context.cells.append(outline.corners(cursor.position, cursor.heading, unit_len, clockwise))
        if concrete is not None:
            self._tile(concrete, dims, unit_len, clockwise)

        # DrawBoundary
        if draw_boundary:
            draw_path(
                cursor,
                self.rng,
                unit_len,
                outline.side_units,
                [m * angle for angle in outline.turn_angles],
                draw_line=lines,
                has_hole=holes,
                hole_color=boundary_hole_color,
                hole_fraction=self.context.hole_fraction,
            )

        # Reposition
        for side in range(end_side - 1):
            cursor.forward(unit_len * outline.side_units[side])
            cursor.turn_right(m * outline.turn_angles[side])

        # Done
        if start is StartFrom.MIDPOINT:
            cursor.forward(unit_len * outline.side_units[end_side - 1] / 2)
        if was_down:
            cursor.pen_down()

    # ------------------------------------------------------------------
    # Helpers for tilings
    # ------------------------------------------------------------------

    @property
    def _component(self) -> str:
        return type(self).__name__

    def _resolve_start(self, start_from: StartFrom | str) -> StartFrom:
        if isinstance(start_from, StartFrom):
            return start_from
        try:
            return StartFrom(start_from)
        except ValueError:
            raise InvalidArgumentError(
                "start_from",
                start_from,
                valid_options=[s.value for s in StartFrom],
                component_name=self._component,
            ) from None

    def _parse_method(self, method: Enum | str | None) -> Enum:
        if method is None:
            return self.default_method
        if isinstance(method, self.method_enum):
            return method
        try:
            return self.method_enum(method)
        except ValueError:
            raise ConfigError(
                "method",
                method,
                valid_options=[m.value for m in self.method_enum],
                component_name=self._component,
            ) from None

    def _resolve_method(self, method: Enum, dims: tuple[int, ...]) -> Enum:
        options = self.applicable_methods(dims)
        if method is self.method_enum.RANDOM:
            return options[int(self.rng.integers(len(options)))]
        if method not in options:
            raise ConfigError(
                "method",
                method.value,
                valid_options=[m.value for m in options],
                reason=f"not applicable to a {self.shape_name} of dimensions {dims}",
                component_name=self._component,
            )
        return method

    def _turn(self, clockwise: bool, angle: float) -> None:
        """Right turn for clockwise walks, left turn otherwise."""
        self.cursor.turn_right(angle if clockwise else -angle)

    def _open_walls(self, method: Enum, dims: tuple[int, ...], graph: AdjacencyGraph) -> NDArray:
        """Pick the walls to open for this tiling and record the decision."""
        mask = open_wall_mask(graph, self.rng)
        logger.debug(
            f"{self.shape_name}{dims} via {method.value}: "
            f"{graph.num_nodes} regions, {int(mask.sum())}/{graph.num_edges} walls open"
        )
        if self.context.record_tilings:
            self.context.tilings.append(
                TilingDecision(
                    shape=self.shape_name,
                    method=method.value,
                    dims=dims,
                    num_regions=graph.num_nodes,
                    num_walls=graph.num_edges,
                    open_walls=tuple(bool(flag) for flag in mask),
                )
            )
        return mask

    def _child(
        self,
        generator: PolygonMazeGenerator,
        dims: tuple[int, ...],
        unit_len: float,
        clockwise: bool,
        lines: list[bool] | None = None,
        holes: list[bool] | NDArray | None = None,
        end_side: int = 1,
    ) -> None:
        """Recurse into a sub-polygon entered at its first corner."""
        draw = lines is not None and any(lines)
        generator._render(
            dims,
            unit_len=unit_len,
            clockwise=clockwise,
            start_from=StartFrom.CORNER,
            method=generator.method_enum.RANDOM,
            draw_boundary=draw,
            num_boundary_holes=None,
            boundary_lines=np.asarray(lines, dtype=bool) if draw else None,
            boundary_holes=np.asarray(holes, dtype=bool) if draw and holes is not None else False,
            boundary_hole_color=None,
            end_side=end_side,
        )
