"""
Drawing a polygonal path whose edges may be hidden or pierced by a hole.

Each edge is a whole number of unit pieces. A hole occupies one of those
pieces, picked at random unless given, and leaves a centered gap of
``hole_fraction * unit_len`` inside it, so a gap never spans a vertex.

Planning and drawing are split: ``plan_path`` is pure and returns the strokes
and turns for a given random source, ``draw_path`` replays a plan on a
cursor.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from polymaze.utils.exceptions import InvalidArgumentError, ValidationError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from .cursor import Cursor


@dataclass(frozen=True)
class PathStroke:
    """A straight move; drawn in ``color`` when ``draw`` is set."""

    distance: float
    draw: bool
    color: str | None = None


@dataclass(frozen=True)
class EdgePlan:
    """Strokes covering one edge followed by a right turn of ``turn`` degrees."""

    strokes: tuple[PathStroke, ...]
    turn: float
    hole_unit: int | None = None


def _per_edge(values: ArrayLike, count: int, parameter_name: str) -> np.ndarray:
    array = np.atleast_1d(np.asarray(values))
    if array.size == 1 and count != 1:
        return np.full(count, array.item(), dtype=array.dtype)
    if array.shape != (count,):
        raise InvalidArgumentError(
            parameter_name,
            values,
            reason=f"expected a scalar or {count} entries, got {array.size}",
            component_name="HoleyPathRenderer",
        )
    return array


def _edge_strokes(units: int, unit_len: float, hole_unit: int | None, hole_fraction: float, hole_color):
    length = units * unit_len
    if hole_unit is None:
        return (PathStroke(length, True),)

    gap = hole_fraction * unit_len
    before = (hole_unit + (1.0 - hole_fraction) / 2.0) * unit_len
    after = length - before - gap

    # floating residue below this is not drawn
    eps = 1e-9 * unit_len
    strokes = []
    if before > eps:
        strokes.append(PathStroke(before, True))
    strokes.append(PathStroke(gap, hole_color is not None, hole_color))
    if after > eps:
        strokes.append(PathStroke(after, True))
    return tuple(strokes)


def plan_path(
    rng: np.random.Generator,
    unit_len: float,
    lengths: Sequence[int],
    angles: float | Sequence[float],
    draw_line: ArrayLike = True,
    has_hole: ArrayLike = False,
    hole_color: str | None = None,
    hole_fraction: float = 1.0,
    hole_locations: Sequence[int | None] | None = None,
) -> list[EdgePlan]:
    """
    Plan the strokes of a holey path.

    Args:
        rng: Random source for hole placement
        unit_len: Length of one unit piece
        lengths: Number of unit pieces per edge
        angles: Right turn after each edge, scalar or one per edge
        draw_line: Whether each edge is drawn
        has_hole: Whether each drawn edge carries a hole
        hole_color: Color for the gap, or None to leave it blank
        hole_fraction: Gap width as a fraction of ``unit_len``
        hole_locations: Optional 1-based unit piece holding each edge's hole

    Returns:
        One ``EdgePlan`` per edge
    """
    units = np.asarray(lengths, dtype=int)
    num_edges = units.size
    turns = _per_edge(angles, num_edges, "angles").astype(float)
    draw = _per_edge(draw_line, num_edges, "draw_line").astype(bool)
    holes = _per_edge(has_hole, num_edges, "has_hole").astype(bool)

    if not 0 < hole_fraction <= 1:
        raise ValidationError(
            "hole_fraction", hole_fraction, valid_range=(0, 1), component_name="HoleyPathRenderer"
        )
    if hole_locations is not None and len(hole_locations) != num_edges:
        raise InvalidArgumentError(
            "hole_locations",
            hole_locations,
            reason=f"expected {num_edges} entries",
            component_name="HoleyPathRenderer",
        )

    plan = []
    for i in range(num_edges):
        hole_unit = None
        if draw[i] and holes[i]:
            location = None if hole_locations is None else hole_locations[i]
            if location is None:
                hole_unit = int(rng.integers(units[i]))
            elif 1 <= location <= units[i]:
                hole_unit = int(location) - 1
            else:
                raise ValidationError(
                    "hole_locations",
                    location,
                    valid_range=(1, int(units[i])),
                    component_name="HoleyPathRenderer",
                )

        if draw[i]:
            strokes = _edge_strokes(int(units[i]), unit_len, hole_unit, hole_fraction, hole_color)
        else:
            strokes = (PathStroke(units[i] * unit_len, False),)
        plan.append(EdgePlan(strokes, float(turns[i]), hole_unit))

    return plan


def draw_path(
    cursor: Cursor,
    rng: np.random.Generator,
    unit_len: float,
    lengths: Sequence[int],
    angles: float | Sequence[float],
    draw_line: ArrayLike = True,
    has_hole: ArrayLike = False,
    hole_color: str | None = None,
    hole_fraction: float = 1.0,
    hole_locations: Sequence[int | None] | None = None,
) -> list[EdgePlan]:
    """
    Draw a holey path starting at the cursor.

    The cursor ends at the vertex after the last edge with its pen state and
    color restored. Arguments match ``plan_path``.

    Returns:
        The executed plan
    """
    plan = plan_path(rng, unit_len, lengths, angles, draw_line, has_hole, hole_color, hole_fraction, hole_locations)

    was_down = cursor.is_down
    color = cursor.pen_color
    for edge in plan:
        for stroke in edge.strokes:
            if stroke.draw:
                cursor.set_pen_color(stroke.color)
                cursor.pen_down()
            else:
                cursor.pen_up()
            cursor.forward(stroke.distance)
        cursor.turn_right(edge.turn)

    cursor.set_pen_color(color)
    if was_down:
        cursor.pen_down()
    else:
        cursor.pen_up()
    return plan
