"""Configuration management."""

import json
from pathlib import Path

from pydantic import BaseModel

from .turtle import Point


class CanvasConfig(BaseModel):
    width: int = 500
    height: int = 500
    scale: float = 1.0
    background: str = "#f0f0f0"
    stroke_width: int = 2

    @property
    def offset_x(self) -> float:
        return self.width / 2

    @property
    def offset_y(self) -> float:
        return self.height / 2

    def to_canvas(self, point: Point) -> tuple[float, float]:
        """Map turtle coordinates onto the canvas, origin at its centre."""
        return (
            point.x * self.scale + self.offset_x,
            point.y * self.scale + self.offset_y,
        )


class DrawingConfig(BaseModel):
    square_side: float = 100
    circle_radius: float = 50
    circle_sides: int = 360
    waypoints: list[tuple[float, float]] = [(20, 20), (80, 20), (80, 80)]

    def waypoint_points(self) -> list[Point]:
        return [Point(x, y) for x, y in self.waypoints]


class Config(BaseModel):
    canvas: CanvasConfig = CanvasConfig()
    drawing: DrawingConfig = DrawingConfig()

    @classmethod
    def load(cls, path: str | Path = "configs/canvas.json") -> "Config":
        with open(path) as f:
            return cls(**json.load(f))

    def save(self, path: str | Path = "configs/canvas.json"):
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=4)
