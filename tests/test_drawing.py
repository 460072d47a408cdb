"""Tests for the composite drawings."""

import pytest

from turtlesoup.drawing import PETAL_COLORS, draw_personal_art, draw_square
from turtlesoup.turtle import Color, Point, RecordingTurtle, SimpleTurtle


class TestSquare:
    def test_returns_to_start(self, turtle):
        draw_square(turtle, 100)
        pos = turtle.get_position()
        assert pos.x == pytest.approx(0, abs=1e-9)
        assert pos.y == pytest.approx(0, abs=1e-9)
        assert turtle.get_heading() == pytest.approx(0)

    def test_corners(self, turtle):
        draw_square(turtle, 100)
        corners = [segment.end for segment in turtle.get_path()]
        expected = [(100, 0), (100, 100), (0, 100), (0, 0)]
        assert len(corners) == 4
        for corner, (x, y) in zip(corners, expected):
            assert corner.x == pytest.approx(x, abs=1e-9)
            assert corner.y == pytest.approx(y, abs=1e-9)

    def test_call_sequence(self):
        turtle = RecordingTurtle()
        draw_square(turtle, 7)
        assert turtle.calls == [("forward", 7), ("turn", 90)] * 4


class TestPersonalArt:
    def test_uses_many_commands(self):
        turtle = RecordingTurtle()
        draw_personal_art(turtle)
        assert len(turtle.calls) >= 20
        assert turtle.count("forward") == 73

    def test_first_faces_down(self):
        turtle = RecordingTurtle(heading=45)
        draw_personal_art(turtle)
        assert turtle.calls[0] == ("turn", 225)

    def test_uses_every_petal_color(self):
        turtle = RecordingTurtle()
        draw_personal_art(turtle)
        used = {value for name, value in turtle.calls if name == "color"}
        assert set(PETAL_COLORS) <= used

    def test_draws_on_simple_turtle(self):
        turtle = SimpleTurtle(Point(10, -10), heading=200)
        draw_personal_art(turtle)
        path = turtle.get_path()
        # the first spiral step has zero length
        assert len(path) == 72
        assert path[0].start == Point(10, -10)
        assert path[-1].color is Color.GREEN
        for prev, seg in zip(path, path[1:]):
            assert seg.start == prev.end
