"""Composite drawings expressed as plain turtle commands."""

from .turtle import Color, Turtle

PETAL_COLORS = [
    Color.RED,
    Color.ORANGE,
    Color.YELLOW,
    Color.GREEN,
    Color.CYAN,
    Color.BLUE,
    Color.PURPLE,
    Color.MAGENTA,
]


def draw_square(turtle: Turtle, side_length: float):
    for _ in range(4):
        turtle.forward(side_length)
        turtle.turn(90)


def _draw_petal(turtle: Turtle, size: float, color: Color):
    turtle.color(color)
    for _ in range(2):
        turtle.forward(size)
        turtle.turn(60)
        turtle.forward(size)
        turtle.turn(120)


def _draw_spiral(turtle: Turtle, rotations: int):
    turtle.color(Color.MAGENTA)
    for i in range(rotations * 10):
        turtle.forward(i / 5)
        turtle.turn(36)


def _draw_leaf(turtle: Turtle):
    turtle.color(Color.GREEN)
    turtle.turn(30)
    turtle.forward(15)
    turtle.turn(120)
    turtle.forward(15)
    turtle.turn(120)
    turtle.forward(15)


def draw_personal_art(turtle: Turtle):
    """Flower: a ring of coloured petals, a spiral centre, a stem and two leaves."""
    # Face straight down whatever the starting heading
    turtle.turn(270 - turtle.get_heading())

    for i, color in enumerate(PETAL_COLORS):
        _draw_petal(turtle, 30 + i * 2, color)
        turtle.turn(45)

    turtle.turn(90)
    turtle.forward(20)
    _draw_spiral(turtle, 3)

    # Stem
    turtle.color(Color.GREEN)
    turtle.turn(180)
    turtle.forward(100)
    turtle.turn(90)
    turtle.forward(10)
    turtle.turn(180)
    turtle.forward(20)

    _draw_leaf(turtle)
    turtle.turn(180)
    turtle.forward(40)
    _draw_leaf(turtle)
