"""
Core maze configuration classes.

A ``MazeConfig`` describes one complete drawing: which shape, how deep, how
the boundary looks and how the result is rendered. It maps one to one onto
the arguments of ``PolygonMazeGenerator.generate`` plus the context and
rendering settings, and can be stored as YAML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Union

from pydantic import BaseModel, Field, model_validator

if TYPE_CHECKING:
    from pathlib import Path

ShapeName = Literal["hexagon", "decagon", "triangle", "trapezoid", "parallelogram"]
SideSpec = Union[bool, int, list[bool], list[int]]


class BoundaryConfig(BaseModel):
    """
    Outer boundary of the maze.

    Attributes
    ----------
    draw : bool
        Draw the outer boundary (default: True)
    num_holes : int
        Number of random boundary holes when ``holes`` is not given
        (default: 2, the entrance and the exit)
    lines : bool | int | list[bool] | list[int]
        Sides to draw: all/none, per-side flags, or 1-based indices
    holes : bool | int | list[bool] | list[int] | None
        Sides carrying a hole; None picks ``num_holes`` at random
    hole_color : str | None
        Color marking the holes instead of leaving them blank
    """

    draw: bool = True
    num_holes: int = Field(default=2, ge=0)
    lines: SideSpec = True
    holes: SideSpec | None = None
    hole_color: str | None = None


class RenderConfig(BaseModel):
    """
    Geometry and appearance of the drawing.

    Attributes
    ----------
    unit_len : float
        Length of one unit piece (default: 4.0)
    hole_fraction : float
        Width of a hole as a fraction of a unit piece, in (0, 1] (default: 1.0)
    line_width : float
        Wall line width in points (default: 1.0)
    wall_color : str
        Default wall color (default: black)
    figure_size : tuple[float, float]
        Figure size in inches (default: (8, 8))
    dpi : int
        Resolution of saved images (default: 150)
    """

    unit_len: float = Field(default=4.0, gt=0)
    hole_fraction: float = Field(default=1.0, gt=0, le=1.0)
    line_width: float = Field(default=1.0, gt=0)
    wall_color: str = "black"
    figure_size: tuple[float, float] = (8.0, 8.0)
    dpi: int = Field(default=150, ge=1)


class LoggingConfig(BaseModel):
    """
    Configuration for logging.

    Attributes
    ----------
    level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
        Logging level (default: INFO)
    log_to_file : bool
        Also write logs to a file (default: False)
    log_file_path : str | None
        Log file; required when ``log_to_file`` is True
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_to_file: bool = False
    log_file_path: str | None = None

    @model_validator(mode="after")
    def validate_log_file(self) -> LoggingConfig:
        """Validate that a log file is given when file logging is on."""
        if self.log_to_file and self.log_file_path is None:
            raise ValueError("log_file_path must be provided when log_to_file is True")
        return self


class MazeConfig(BaseModel):
    """
    Complete description of one maze drawing.

    Attributes
    ----------
    shape : ShapeName
        Polygon to fill (default: hexagon)
    depth : float
        Recursion depth; each side has round(2**depth) unit pieces
    method : str | None
        Top-level tiling method, "random", or None for the shape default
    clockwise : bool
        Walk the outline clockwise (default: True)
    start_from : Literal["midpoint", "corner"]
        Cursor position on side 1 at entry and exit
    end_side : int
        Side on which the cursor is left (default: 1)
    max_depth : float
        Largest accepted depth (default: 10)
    seed : int | None
        Seed of the random source; None draws a fresh maze every time
    boundary : BoundaryConfig
        Outer boundary settings
    render : RenderConfig
        Geometry and appearance
    logging : LoggingConfig
        Logging settings

    Examples
    --------
    >>> config = MazeConfig(shape="decagon", depth=3, seed=7)
    >>> config.to_yaml("decagon.yaml")
    >>> MazeConfig.from_yaml("decagon.yaml") == config
    True
    """

    shape: ShapeName = "hexagon"
    depth: float = Field(default=3.0, ge=0)
    method: str | None = None
    clockwise: bool = True
    start_from: Literal["midpoint", "corner"] = "midpoint"
    end_side: int = Field(default=1, ge=1)
    max_depth: float = Field(default=10.0, gt=0)
    seed: int | None = None
    boundary: BoundaryConfig = Field(default_factory=BoundaryConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def validate_depth(self) -> MazeConfig:
        """Validate depth against the configured maximum."""
        if self.depth > self.max_depth:
            raise ValueError(f"depth {self.depth} exceeds max_depth {self.max_depth}")
        return self

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        from .io import save_maze_config

        save_maze_config(self, path)

    @classmethod
    def from_yaml(cls, path: str | Path) -> MazeConfig:
        """Load configuration from a YAML file."""
        from .io import load_maze_config

        return load_maze_config(path)
