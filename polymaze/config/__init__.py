"""
Configuration management for polymaze.

Quick Start
-----------
>>> from polymaze.config import MazeConfig, BoundaryConfig
>>> config = MazeConfig(shape="hexagon", depth=4, boundary=BoundaryConfig(holes=[1, 4]))

>>> # Or load from YAML
>>> from polymaze.config import load_maze_config
>>> config = load_maze_config("mazes/hexagon.yaml")
"""

from .core import BoundaryConfig, LoggingConfig, MazeConfig, RenderConfig
from .io import load_maze_config, save_maze_config

__all__ = [
    "BoundaryConfig",
    "LoggingConfig",
    "MazeConfig",
    "RenderConfig",
    "load_maze_config",
    "save_maze_config",
]
