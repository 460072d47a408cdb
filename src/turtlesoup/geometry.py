"""Geometry routines built on the turtle: chords, circles and path planning."""

import math
import re
from dataclasses import dataclass
from typing import Iterable

from .turtle import Point, Turtle, normalize_heading, require_finite

COMMANDS = ("forward", "turn")

_INSTRUCTION_RE = re.compile(r"^\s*([a-z]+)\s+(\S+)\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class Instruction:
    command: str
    value: float

    def __str__(self):
        return f"{self.command} {format_number(self.value)}"


def format_number(value: float) -> str:
    """Integral values print without a fractional part, others at full precision.

    Integers from 1e16 up keep the exponent form of `repr`.
    """
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    require_finite("point", p1.x, p1.y, p2.x, p2.y)
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


def chord_length(radius: float, angle_in_degrees: float) -> float:
    """Length of the chord subtending `angle_in_degrees` at the centre of a circle."""
    require_finite("chord", radius, angle_in_degrees)
    if radius <= 0:
        return 0.0
    return 2 * radius * math.sin(angle_in_degrees * math.pi / 360)


def draw_approximate_circle(turtle: Turtle, radius: float, num_sides: int):
    """Draw a regular polygon of `num_sides` chords approximating a circle.

    The turtle first steps out by `radius` and turns 90 degrees so that it
    stands on the perimeter facing along it. Each side then advances one chord
    and turns by the exterior angle, so the heading comes back round by a full
    360 degrees once every side is drawn.
    """
    require_finite("radius", radius)
    require_finite("num_sides", num_sides)
    if num_sides != int(num_sides):
        raise ValueError(f"num_sides must be a whole number, got {num_sides!r}")
    num_sides = int(num_sides)
    if num_sides <= 0:
        return

    angle_per_side = 360 / num_sides
    segment_length = chord_length(radius, angle_per_side)

    turtle.forward(radius)
    turtle.turn(90)
    for _ in range(num_sides):
        turtle.forward(segment_length)
        turtle.turn(angle_per_side)


def bearing(p1: Point, p2: Point) -> float:
    """Absolute heading from p1 to p2 in [0, 360)."""
    return normalize_heading(math.degrees(math.atan2(p2.y - p1.y, p2.x - p1.x)))


def shortest_turn(heading: float, target: float) -> float:
    """Signed turn of smallest magnitude from `heading` to `target`, in (-180, 180]."""
    turn = (target - heading) % 360.0
    if turn > 180:
        turn -= 360
    return turn


def plan_path(turtle: Turtle, points: Iterable[Point]) -> list[Instruction]:
    """Plan turns and moves that take the turtle through `points` in order.

    The turtle itself is only read, never moved.
    """
    instructions = []
    position = turtle.get_position()
    heading = turtle.get_heading()

    for point in points:
        require_finite("waypoint", point.x, point.y)
        step = distance(position, point)
        if step == 0:
            continue

        target = bearing(position, point)
        turn = shortest_turn(heading, target)
        if turn != 0:
            instructions.append(Instruction("turn", turn))
        instructions.append(Instruction("forward", step))

        position = point
        heading = target

    return instructions


def find_path(turtle: Turtle, points: Iterable[Point]) -> list[str]:
    """Instruction strings ("turn 90", "forward 10") visiting `points` in order."""
    return [str(instruction) for instruction in plan_path(turtle, points)]


def parse_instruction(text: str) -> Instruction:
    match = _INSTRUCTION_RE.match(text)
    if not match:
        raise ValueError(f"Malformed instruction: {text!r}")

    command = match.group(1).lower()
    if command not in COMMANDS:
        raise ValueError(f"Unknown command: {command}")

    try:
        value = float(match.group(2))
    except ValueError:
        raise ValueError(f"Invalid value in instruction: {text!r}") from None
    require_finite(command, value)
    return Instruction(command, value)


def execute_instructions(turtle: Turtle, instructions: Iterable[str | Instruction]):
    """Drive a turtle through planned instructions."""
    for item in instructions:
        instruction = item if isinstance(item, Instruction) else parse_instruction(item)
        if instruction.command == "turn":
            turtle.turn(instruction.value)
        else:
            turtle.forward(instruction.value)
