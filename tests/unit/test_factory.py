"""
Unit tests for generator creation and config-driven drawing.
"""

import pytest

import numpy as np

from polymaze.config import BoundaryConfig, MazeConfig, RenderConfig
from polymaze.factory import SHAPES, create_maze_generator, draw_maze, list_methods
from polymaze.geometry import DrawingSurface
from polymaze.mazes import DecagonMazeGenerator, HexagonMazeGenerator, MazeContext, ParallelogramMazeGenerator
from polymaze.utils.exceptions import ConfigError, PolyMazeError


class TestCreateMazeGenerator:
    """Test shape lookup."""

    def test_known_shapes(self):
        """Test the registered shape names."""
        assert set(SHAPES) == {"hexagon", "decagon", "triangle", "trapezoid", "parallelogram"}

    def test_create_with_context(self, context):
        """Test that the generator uses the given context."""
        generator = create_maze_generator("decagon", context)
        assert isinstance(generator, DecagonMazeGenerator)
        assert generator.context is context

    def test_constructor_kwargs(self):
        """Test that extra arguments reach the generator constructor."""
        generator = create_maze_generator("parallelogram", angle=72.0)
        assert isinstance(generator, ParallelogramMazeGenerator)
        assert generator.angle == 72.0

    def test_default_context(self):
        """Test that a context is created when none is given."""
        generator = create_maze_generator("hexagon")
        assert isinstance(generator, HexagonMazeGenerator)
        assert isinstance(generator.context, MazeContext)

    def test_unknown_shape(self):
        """Test that an unknown shape lists the known ones."""
        with pytest.raises(ConfigError) as exc_info:
            create_maze_generator("square")
        assert "hexagon" in str(exc_info.value)

    def test_list_methods(self):
        """Test the concrete method names per shape."""
        methods = list_methods()
        assert methods["hexagon"] == ["two_trapezoids", "six_triangles", "three_parallelograms"]
        assert methods["decagon"] == ["ten_rhombs"]
        assert all("random" not in names for names in methods.values())


class TestDrawMaze:
    """Test drawing from a MazeConfig."""

    def test_draws_on_new_surface(self):
        """Test that draw_maze returns a fresh surface."""
        surface = draw_maze(MazeConfig(shape="decagon", depth=2, seed=7))
        assert isinstance(surface, DrawingSurface)
        assert len(surface) > 0

    def test_uses_given_surface(self):
        """Test that draw_maze draws into a given surface."""
        surface = DrawingSurface()
        result = draw_maze(MazeConfig(depth=1, seed=1), surface)
        assert result is surface
        assert len(surface) > 0

    def test_seed_reproducible(self):
        """Test that the configured seed fixes the drawing."""
        config = MazeConfig(shape="hexagon", depth=3, seed=11, method="random")
        first = draw_maze(config).to_array()
        second = draw_maze(config).to_array()
        np.testing.assert_array_equal(first, second)

    def test_settings_reach_generator(self):
        """Test that boundary and render settings reach the generator."""
        config = MazeConfig(
            shape="hexagon",
            depth=0,
            boundary=BoundaryConfig(holes=[2], hole_color="green"),
            render=RenderConfig(unit_len=2.0, hole_fraction=0.5),
        )
        surface = draw_maze(config)

        green = [seg for seg in surface if seg.color == "green"]
        assert len(green) == 1
        assert green[0].length == pytest.approx(1.0)

    def test_no_boundary(self):
        """Test that the boundary can be switched off."""
        surface = draw_maze(MazeConfig(depth=0, boundary=BoundaryConfig(draw=False)))
        assert len(surface) == 0

    def test_generator_errors_propagate(self):
        """Test that generator errors reach the caller."""
        with pytest.raises(PolyMazeError):
            draw_maze(MazeConfig(shape="decagon", depth=1.5))
