"""CLI for turtlesoup."""

from pathlib import Path

import click

from .turtle import Point

# Negative numbers such as -1 or -10,0 are arguments, not options
NUMERIC_ARGS = {"ignore_unknown_options": True}


def _parse_point(value: str) -> Point:
    try:
        x, y = (float(part) for part in value.split(","))
    except ValueError:
        raise click.BadParameter(f"expected X,Y but got {value!r}") from None
    return Point(x, y)


def _load_config(path: Path | None):
    from .config import Config

    return Config.load(path) if path else Config()


def _demo(config):
    """Run the demo drawing and return the turtle and planned path."""
    from .drawing import draw_personal_art, draw_square
    from .geometry import draw_approximate_circle, find_path
    from .turtle import SimpleTurtle

    turtle = SimpleTurtle()
    draw_square(turtle, config.drawing.square_side)
    draw_approximate_circle(turtle, config.drawing.circle_radius, config.drawing.circle_sides)
    plan = find_path(turtle, config.drawing.waypoint_points())
    draw_personal_art(turtle)
    return turtle, plan


@click.group()
def main():
    """turtlesoup - Turtle graphics and geometry planning."""
    pass


@main.command()
@click.option("--output", "-o", default="output.html", type=Path)
@click.option("--png", type=Path, help="Also write a PNG preview")
@click.option("--config", "-c", "config_path", type=Path)
def draw(output: Path, png: Path | None, config_path: Path | None):
    """Draw the demo picture to an HTML page."""
    from .geometry import chord_length
    from .render import HtmlExporter, PngExporter

    config = _load_config(config_path)
    turtle, plan = _demo(config)

    click.echo(f"Chord length for radius 5, angle 60 degrees: {chord_length(5, 60)}")
    click.echo(f"Path instructions: {plan}")

    HtmlExporter(config).save(turtle.get_path(), output)
    click.echo(f"Drawing saved to {output}")
    if png:
        PngExporter(config).save(turtle.get_path(), png)
        click.echo(f"Preview saved to {png}")


@main.command(context_settings=NUMERIC_ARGS)
@click.argument("radius", type=float)
@click.argument("angle", type=float)
def chord(radius: float, angle: float):
    """Chord length for a radius and central angle in degrees."""
    from .geometry import chord_length

    try:
        click.echo(chord_length(radius, angle))
    except ValueError as e:
        raise click.BadParameter(str(e)) from None


@main.command(context_settings=NUMERIC_ARGS)
@click.argument("x1", type=float)
@click.argument("y1", type=float)
@click.argument("x2", type=float)
@click.argument("y2", type=float)
def distance(x1: float, y1: float, x2: float, y2: float):
    """Distance between two points."""
    from .geometry import distance as euclidean

    try:
        click.echo(euclidean(Point(x1, y1), Point(x2, y2)))
    except ValueError as e:
        raise click.BadParameter(str(e)) from None


@main.command(context_settings=NUMERIC_ARGS)
@click.argument("points", nargs=-1, required=True)
@click.option("--start", default="0,0", help="Start position as X,Y")
@click.option("--heading", default=0.0, type=float)
def path(points: tuple[str, ...], start: str, heading: float):
    """Plan turns and moves through waypoints given as X,Y."""
    from .geometry import find_path
    from .turtle import SimpleTurtle

    try:
        turtle = SimpleTurtle(_parse_point(start), heading)
        instructions = find_path(turtle, [_parse_point(p) for p in points])
    except ValueError as e:
        raise click.BadParameter(str(e)) from None
    for instruction in instructions:
        click.echo(instruction)


@main.command()
@click.option("--config", "-c", "config_path", type=Path)
def validate(config_path: Path | None):
    """Draw the demo and check it against the canvas."""
    from .validator import PathValidator

    config = _load_config(config_path)
    turtle, plan = _demo(config)
    validator = PathValidator(config)

    for name, result in (
        ("path", validator.validate(turtle.get_path())),
        ("plan", validator.validate_instructions(plan)),
    ):
        if result.errors:
            click.echo(click.style(f"{name} errors: {len(result.errors)}", fg="red"))
            for e in result.errors[:10]:
                click.echo(f"  {e}")
        if result.warnings:
            click.echo(click.style(f"{name} warnings: {len(result.warnings)}", fg="yellow"))
        click.echo(f"{name} stats: {result.stats}")
        if result.valid:
            click.echo(click.style(f"{name} OK", fg="green"))


if __name__ == "__main__":
    main()
