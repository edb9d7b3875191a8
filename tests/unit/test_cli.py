#!/usr/bin/env python3
"""
Unit tests for polymaze/cli.py

Tests the click command group:
- draw with options, config files and image output
- methods listing
- init-config file creation
- Error handling and exit codes
"""

import pytest

from click.testing import CliRunner

from polymaze import __version__
from polymaze.cli import main
from polymaze.config import load_maze_config
from polymaze.utils.maze_logging import configure_logging


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """Rebind log handlers after commands that configured them on the runner's streams."""
    yield
    configure_logging(level="INFO")


# ===================================================================
# Group
# ===================================================================


@pytest.mark.unit
def test_version(runner):
    """Test that --version prints the package version."""
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.unit
def test_help_lists_commands(runner):
    """Test that the group help names every command."""
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    for command in ("draw", "methods", "init-config"):
        assert command in result.output


# ===================================================================
# draw
# ===================================================================


@pytest.mark.unit
def test_draw_reports_segments(runner):
    """Test that draw reports the number of segments."""
    result = runner.invoke(main, ["draw", "--shape", "hexagon", "--depth", "2", "--seed", "3"])
    assert result.exit_code == 0, result.output
    assert "Drew hexagon maze (depth 2):" in result.output


@pytest.mark.unit
def test_draw_saves_image(runner, tmp_path):
    """Test that draw writes an image when given an output path."""
    output = tmp_path / "decagon.png"
    args = ["draw", "-s", "decagon", "-d", "2", "--seed", "1", "--boundary-hole", "1", "--boundary-hole", "6"]
    result = runner.invoke(main, [*args, "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert output.exists()
    assert "Saved maze to:" in result.output


@pytest.mark.unit
def test_draw_from_config_with_override(runner, tmp_path):
    """Test that command line options override the configuration file."""
    config_path = tmp_path / "maze.yaml"
    config_path.write_text("shape: triangle\ndepth: 2\nseed: 5\n")

    result = runner.invoke(main, ["draw", "-c", str(config_path), "--depth", "3", "--counter-clockwise"])

    assert result.exit_code == 0, result.output
    assert "Drew triangle maze (depth 3):" in result.output


@pytest.mark.unit
@pytest.mark.parametrize(
    "args",
    [
        ["draw", "-s", "decagon", "-d", "1.5"],
        ["draw", "-d", "12"],
        ["draw", "-m", "spiral", "-d", "2"],
        ["draw", "--unit-len", "-1"],
    ],
)
def test_draw_errors_exit_with_code_one(runner, args):
    """Test that maze and configuration errors exit with code 1."""
    result = runner.invoke(main, args)
    assert result.exit_code == 1
    assert "Error:" in result.output


@pytest.mark.unit
def test_draw_unknown_shape_is_usage_error(runner):
    """Test that click rejects an unknown shape choice."""
    result = runner.invoke(main, ["draw", "-s", "square"])
    assert result.exit_code == 2


# ===================================================================
# methods / init-config
# ===================================================================


@pytest.mark.unit
def test_methods(runner):
    """Test that methods lists the tilings of each shape."""
    result = runner.invoke(main, ["methods"])
    assert result.exit_code == 0
    assert "decagon: ten_rhombs" in result.output
    assert "hexagon: two_trapezoids, six_triangles, three_parallelograms" in result.output


@pytest.mark.unit
def test_init_config(runner, tmp_path):
    """Test that init-config writes a loadable configuration."""
    path = tmp_path / "maze.yaml"
    result = runner.invoke(main, ["init-config", str(path), "--shape", "decagon", "--depth", "4"])

    assert result.exit_code == 0, result.output
    assert "Wrote configuration to:" in result.output

    config = load_maze_config(path)
    assert config.shape == "decagon"
    assert config.depth == 4.0


@pytest.mark.unit
def test_init_config_invalid_depth(runner, tmp_path):
    """Test that init-config refuses an invalid depth."""
    result = runner.invoke(main, ["init-config", str(tmp_path / "maze.yaml"), "--depth", "-2"])
    assert result.exit_code == 1
    assert "Error:" in result.output
