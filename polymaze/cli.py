"""
Command-line interface for polymaze.

Draws polygon mazes to image files and lists the available shapes and
tiling methods.
"""

import sys

import click

from polymaze import __version__

SHAPE_NAMES = ["hexagon", "decagon", "triangle", "trapezoid", "parallelogram"]


@click.group()
@click.version_option(version=__version__, prog_name="polymaze")
def main():
    """
    polymaze: recursive perfect mazes on regular polygons

    Hexagons, decagons and their building blocks, tiled recursively into
    smaller polygons with a random spanning tree of passages at every level.
    """


@main.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML maze configuration; other options override it",
)
@click.option("--shape", "-s", type=click.Choice(SHAPE_NAMES), default=None, help="Polygon to fill (default: hexagon)")
@click.option("--depth", "-d", type=float, default=None, help="Recursion depth; sides have round(2**depth) pieces")
@click.option("--method", "-m", type=str, default=None, help="Top-level tiling method or 'random'")
@click.option("--unit-len", type=float, default=None, help="Length of one unit piece")
@click.option("--seed", type=int, default=None, help="Random seed for a reproducible maze")
@click.option("--counter-clockwise", is_flag=True, help="Walk the outline counter-clockwise")
@click.option(
    "--boundary-hole",
    "boundary_holes",
    type=int,
    multiple=True,
    help="1-based side carrying a boundary hole (repeatable)",
)
@click.option("--hole-color", type=str, default=None, help="Color marking boundary holes")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Output image (PNG/PDF/SVG)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def draw(
    config_path, shape, depth, method, unit_len, seed, counter_clockwise, boundary_holes, hole_color, output, verbose
):
    """
    Draw a maze.

    Examples:
        polymaze draw --shape hexagon --depth 4 --seed 3 -o hexagon.png
        polymaze draw -s decagon -d 3 --boundary-hole 1 --boundary-hole 6 -o decagon.svg
        polymaze draw -c maze.yaml -o maze.png
    """
    from polymaze.config import MazeConfig
    from polymaze.factory import draw_maze
    from polymaze.utils.exceptions import PolyMazeError
    from polymaze.utils.maze_logging import configure_logging

    try:
        config = MazeConfig.from_yaml(config_path) if config_path else MazeConfig()

        data = config.model_dump()
        for key, value in (("shape", shape), ("depth", depth), ("method", method), ("seed", seed)):
            if value is not None:
                data[key] = value
        if counter_clockwise:
            data["clockwise"] = False
        if unit_len is not None:
            data["render"]["unit_len"] = unit_len
        if boundary_holes:
            data["boundary"]["holes"] = list(boundary_holes)
        if hole_color is not None:
            data["boundary"]["hole_color"] = hole_color
        if verbose:
            data["logging"]["level"] = "DEBUG"
        config = MazeConfig.model_validate(data)

        configure_logging(
            level=config.logging.level,
            log_to_file=config.logging.log_to_file,
            log_file_path=config.logging.log_file_path,
        )

        surface = draw_maze(config)
        click.echo(f"Drew {config.shape} maze (depth {config.depth:g}): {len(surface)} segments")

        if output:
            import matplotlib

            matplotlib.use("Agg")
            from polymaze.visualization import save_maze_figure

            path = save_maze_figure(surface, output, render=config.render)
            click.echo(f"Saved maze to: {path}")

    except (PolyMazeError, ValueError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
def methods():
    """
    List shapes and their tiling methods.

    Examples:
        polymaze methods
    """
    from polymaze.factory import list_methods

    for shape, names in list_methods().items():
        click.echo(f"{shape}: {', '.join(names)}")


@main.command(name="init-config")
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--shape", "-s", type=click.Choice(SHAPE_NAMES), default="hexagon", help="Polygon to fill")
@click.option("--depth", "-d", type=float, default=3.0, help="Recursion depth")
def init_config(path, shape, depth):
    """
    Write a maze configuration file with default settings.

    Examples:
        polymaze init-config maze.yaml --shape decagon --depth 3
    """
    from polymaze.config import MazeConfig

    try:
        MazeConfig(shape=shape, depth=depth).to_yaml(path)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"Wrote configuration to: {path}")


if __name__ == "__main__":
    main()
