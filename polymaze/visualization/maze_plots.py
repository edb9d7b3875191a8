"""
Matplotlib rendering of drawn mazes.

Segments from a ``DrawingSurface`` become one ``LineCollection``; segments
that carry their own color (marked holes) keep it, all others use the wall
color.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from polymaze.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from polymaze.config import RenderConfig
    from polymaze.geometry.cursor import DrawingSurface

logger = get_logger(__name__)


def plot_maze(
    surface: DrawingSurface,
    ax: Axes | None = None,
    line_width: float = 1.0,
    wall_color: str = "black",
    title: str | None = None,
    figure_size: tuple[float, float] = (8.0, 8.0),
) -> tuple[Figure, Axes]:
    """
    Plot every segment of a drawing surface.

    Args:
        surface: Surface with the drawn maze
        ax: Axes to draw into (a new figure if omitted)
        line_width: Wall line width
        wall_color: Color of segments without their own color
        title: Optional axes title
        figure_size: Size of a newly created figure

    Returns:
        The figure and axes holding the plot
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figure_size)
    else:
        fig = ax.figure

    colors = [color or wall_color for color in surface.colors()]
    collection = LineCollection(surface.to_array(), colors=colors, linewidths=line_width, capstyle="round")
    ax.add_collection(collection)

    if len(surface):
        xmin, ymin, xmax, ymax = surface.bounds()
        margin = 0.02 * max(xmax - xmin, ymax - ymin, 1.0)
        ax.set_xlim(xmin - margin, xmax + margin)
        ax.set_ylim(ymin - margin, ymax + margin)

    ax.set_aspect("equal")
    ax.axis("off")
    if title:
        ax.set_title(title)

    return fig, ax


def save_maze_figure(
    surface: DrawingSurface,
    path: str | Path,
    render: RenderConfig | None = None,
    title: str | None = None,
) -> Path:
    """
    Render a maze to an image file.

    Args:
        surface: Surface with the drawn maze
        path: Output file; the suffix picks the format (png, pdf, svg)
        render: Appearance settings (defaults of ``RenderConfig`` if omitted)
        title: Optional title

    Returns:
        Path of the written file
    """
    if render is None:
        from polymaze.config import RenderConfig

        render = RenderConfig()

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig, _ = plot_maze(
        surface,
        line_width=render.line_width,
        wall_color=render.wall_color,
        title=title,
        figure_size=render.figure_size,
    )
    fig.savefig(path, dpi=render.dpi, bbox_inches="tight")
    plt.close(fig)

    logger.info(f"Saved maze with {len(surface)} segments to {path}")
    return path
