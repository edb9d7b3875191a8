"""Rendering of drawn mazes with matplotlib."""

from __future__ import annotations

from .maze_plots import plot_maze, save_maze_figure

__all__ = ["plot_maze", "save_maze_figure"]
