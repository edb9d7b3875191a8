"""
Turtle-style drawing cursor and the surface it draws on.

The cursor lives in the plane with y pointing up and headings measured in
degrees counter-clockwise from the positive x axis. ``turn_right`` therefore
decreases the heading, which makes a clockwise walk turn right at every
vertex exactly as it does on screen.

Moving with the pen down emits a ``Segment`` to the attached
``DrawingSurface``; moving with the pen up only changes position. The surface
is a plain in-memory accumulator, the rendering backend lives in
``polymaze.visualization``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    from numpy.typing import NDArray

Point = tuple[float, float]


@dataclass(frozen=True)
class Segment:
    """
    A straight stroke emitted by the cursor.

    Attributes:
        start: Starting point (x, y)
        end: Ending point (x, y)
        color: Stroke color, or None for the default wall color
    """

    start: Point
    end: Point
    color: str | None = None

    @property
    def length(self) -> float:
        return float(np.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1]))


class DrawingSurface:
    """Ordered collection of segments drawn during one maze rendering."""

    def __init__(self):
        self.segments: list[Segment] = []

    def add_segment(self, start: Point, end: Point, color: str | None = None) -> None:
        self.segments.append(Segment(start, end, color))

    def clear(self) -> None:
        self.segments.clear()

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def to_array(self) -> NDArray:
        """
        Export segments as an array.

        Returns:
            Float array of shape (N, 2, 2): segment, endpoint, coordinate
        """
        if not self.segments:
            return np.zeros((0, 2, 2))
        return np.array([[seg.start, seg.end] for seg in self.segments], dtype=float)

    def colors(self) -> list[str | None]:
        return [seg.color for seg in self.segments]

    def bounds(self) -> tuple[float, float, float, float]:
        """Bounding box (xmin, ymin, xmax, ymax) of all segments."""
        if not self.segments:
            return (0.0, 0.0, 0.0, 0.0)
        points = self.to_array().reshape(-1, 2)
        xmin, ymin = points.min(axis=0)
        xmax, ymax = points.max(axis=0)
        return (float(xmin), float(ymin), float(xmax), float(ymax))


@dataclass(frozen=True)
class CursorState:
    """Snapshot of the cursor: position, heading in [0, 360), pen state."""

    position: Point
    heading: float
    pen_down: bool


class Cursor:
    """
    Minimal 2D turtle with relative movement and a pen.

    Args:
        surface: Surface receiving drawn segments (a new one if omitted)
        position: Starting point
        heading: Starting heading in degrees
        pen_down: Whether the pen starts down
    """

    def __init__(
        self,
        surface: DrawingSurface | None = None,
        position: Point = (0.0, 0.0),
        heading: float = 0.0,
        pen_down: bool = True,
    ):
        self.surface = surface if surface is not None else DrawingSurface()
        self._position = (float(position[0]), float(position[1]))
        self._heading = float(heading) % 360.0
        self._pen_down = pen_down
        self._pen_color: str | None = None

    @property
    def position(self) -> Point:
        return self._position

    @property
    def heading(self) -> float:
        return self._heading

    @property
    def is_down(self) -> bool:
        return self._pen_down

    @property
    def pen_color(self) -> str | None:
        return self._pen_color

    def set_pen_color(self, color: str | None) -> None:
        self._pen_color = color

    def state(self) -> CursorState:
        return CursorState(self._position, self._heading, self._pen_down)

    def forward(self, distance: float) -> None:
        """Move ``distance`` along the heading, drawing if the pen is down."""
        theta = np.deg2rad(self._heading)
        x0, y0 = self._position
        x1 = x0 + distance * float(np.cos(theta))
        y1 = y0 + distance * float(np.sin(theta))
        self._position = (x1, y1)
        if self._pen_down and distance != 0:
            self.surface.add_segment((x0, y0), (x1, y1), self._pen_color)

    def backward(self, distance: float) -> None:
        self.forward(-distance)

    def turn_right(self, angle: float) -> None:
        """Rotate clockwise by ``angle`` degrees."""
        self._heading = (self._heading - angle) % 360.0

    def turn_left(self, angle: float) -> None:
        self.turn_right(-angle)

    def pen_up(self) -> None:
        self._pen_down = False

    def pen_down(self) -> None:
        self._pen_down = True
