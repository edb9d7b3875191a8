"""
Factory functions for polymaze generators.

``create_maze_generator`` maps a shape name onto its generator class and
``draw_maze`` runs a complete ``MazeConfig`` on a fresh cursor, returning the
surface with every drawn segment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from polymaze.geometry.cursor import DrawingSurface
from polymaze.mazes import (
    DecagonMazeGenerator,
    HexagonMazeGenerator,
    MazeContext,
    ParallelogramMazeGenerator,
    TrapezoidMazeGenerator,
    TriangleMazeGenerator,
)
from polymaze.utils.exceptions import ConfigError
from polymaze.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from polymaze.config import MazeConfig
    from polymaze.mazes import PolygonMazeGenerator

logger = get_logger(__name__)

SHAPES: dict[str, type[PolygonMazeGenerator]] = {
    "hexagon": HexagonMazeGenerator,
    "decagon": DecagonMazeGenerator,
    "triangle": TriangleMazeGenerator,
    "trapezoid": TrapezoidMazeGenerator,
    "parallelogram": ParallelogramMazeGenerator,
}


def create_maze_generator(shape: str, context: MazeContext | None = None, **kwargs) -> PolygonMazeGenerator:
    """
    Create the generator for a shape.

    Args:
        shape: Shape name, one of ``SHAPES``
        context: Shared drawing context (a new one if omitted)
        **kwargs: Extra constructor arguments, e.g. ``angle`` for parallelograms

    Returns:
        Generator bound to ``context``

    Raises:
        ConfigError: Unknown shape
    """
    if shape not in SHAPES:
        raise ConfigError("shape", shape, valid_options=sorted(SHAPES), component_name="factory")
    return SHAPES[shape](context, **kwargs)


def list_methods() -> dict[str, list[str]]:
    """Tiling methods of every shape, "random" excluded."""
    return {
        name: [method.value for method in generator.method_enum if method.value != "random"]
        for name, generator in SHAPES.items()
    }


def draw_maze(config: MazeConfig, surface: DrawingSurface | None = None) -> DrawingSurface:
    """
    Draw the maze described by ``config``.

    The cursor starts at the origin heading along +x with the pen up.

    Args:
        config: Complete maze description
        surface: Surface to draw on (a new one if omitted)

    Returns:
        The surface holding every drawn segment
    """
    surface = surface if surface is not None else DrawingSurface()
    context = MazeContext.create(
        seed=config.seed,
        surface=surface,
        hole_fraction=config.render.hole_fraction,
        max_depth=config.max_depth,
    )
    generator = create_maze_generator(config.shape, context)

    logger.debug(f"Maze configuration: {config.model_dump(exclude_none=True)}")
    generator.generate(
        depth=config.depth,
        unit_len=config.render.unit_len,
        clockwise=config.clockwise,
        start_from=config.start_from,
        method=config.method,
        draw_boundary=config.boundary.draw,
        num_boundary_holes=config.boundary.num_holes,
        boundary_lines=config.boundary.lines,
        boundary_holes=config.boundary.holes,
        boundary_hole_color=config.boundary.hole_color,
        end_side=config.end_side,
    )
    return surface
