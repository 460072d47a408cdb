"""Turtle graphics state and motion."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class Color(str, Enum):
    BLACK = "black"
    GRAY = "gray"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"
    BLUE = "blue"
    PURPLE = "purple"
    MAGENTA = "magenta"


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class PathSegment:
    start: Point
    end: Point
    color: Color


def require_finite(name: str, *values: float):
    for value in values:
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value!r}")


def normalize_heading(angle: float) -> float:
    """Fold an angle in degrees into [0, 360)."""
    angle = angle % 360.0
    # -1e-20 % 360 rounds up to 360.0
    return 0.0 if angle == 360.0 else angle


class Turtle(ABC):
    """Drawing capabilities shared by every turtle."""

    @abstractmethod
    def forward(self, distance: float):
        ...

    @abstractmethod
    def turn(self, angle: float):
        """Turn counter-clockwise by `angle` degrees (negative turns clockwise)."""

    @abstractmethod
    def color(self, color: Color | str):
        ...

    @abstractmethod
    def get_position(self) -> Point:
        ...

    @abstractmethod
    def get_heading(self) -> float:
        ...

    @abstractmethod
    def get_path(self) -> tuple[PathSegment, ...]:
        ...


class SimpleTurtle(Turtle):
    """Simulated turtle that records a line segment for every move.

    Heading is in degrees, 0 along +x and increasing counter-clockwise, and
    is kept in [0, 360).
    """

    def __init__(
        self,
        position: Point | None = None,
        heading: float = 0.0,
        color: Color | str = Color.BLACK,
    ):
        position = position or Point()
        require_finite("position", position.x, position.y)
        require_finite("heading", heading)
        self._position = position
        self._heading = normalize_heading(heading)
        self._color = Color(color)
        self._path: list[PathSegment] = []

    def __repr__(self):
        return "SimpleTurtle(pos=(%g, %g), heading=%g, color=%s)" % (
            self._position.x, self._position.y, self._heading, self._color.value
        )

    def forward(self, distance: float):
        require_finite("distance", distance)
        if distance == 0:
            return

        theta = math.radians(self._heading)
        start = self._position
        end = Point(
            start.x + distance * math.cos(theta),
            start.y + distance * math.sin(theta),
        )
        # Huge finite distances can still overflow to inf
        require_finite("position", end.x, end.y)

        self._path.append(PathSegment(start, end, self._color))
        self._position = end

    def turn(self, angle: float):
        require_finite("angle", angle)
        self._heading = normalize_heading(self._heading + angle)

    def color(self, color: Color | str):
        self._color = Color(color)

    def get_position(self) -> Point:
        return self._position

    def get_heading(self) -> float:
        return self._heading

    def get_path(self) -> tuple[PathSegment, ...]:
        return tuple(self._path)


class RecordingTurtle(Turtle):
    """Turtle that records the calls made on it instead of drawing.

    Only the heading is tracked; the position never changes and no path is
    recorded. Useful for checking what a drawing routine asks for.
    """

    def __init__(self, position: Point | None = None, heading: float = 0.0):
        self._position = position or Point()
        self._heading = normalize_heading(heading)
        self.calls: list[tuple[str, float | Color]] = []

    def forward(self, distance: float):
        require_finite("distance", distance)
        self.calls.append(("forward", distance))

    def turn(self, angle: float):
        require_finite("angle", angle)
        self._heading = normalize_heading(self._heading + angle)
        self.calls.append(("turn", angle))

    def color(self, color: Color | str):
        self.calls.append(("color", Color(color)))

    def get_position(self) -> Point:
        return self._position

    def get_heading(self) -> float:
        return self._heading

    def get_path(self) -> tuple[PathSegment, ...]:
        return ()

    def count(self, command: str) -> int:
        return sum(1 for name, _ in self.calls if name == command)
