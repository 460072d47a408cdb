"""Tests for HTML and PNG rendering."""

from turtlesoup.config import CanvasConfig, Config
from turtlesoup.render import HtmlExporter, PngExporter
from turtlesoup.turtle import Color, PathSegment, Point, SimpleTurtle


def red_line():
    return [PathSegment(Point(0, 0), Point(10, 0), Color.RED)]


class TestHtmlExporter:
    def test_empty_canvas(self):
        html = HtmlExporter().export([])
        assert html.startswith("<!DOCTYPE html>")
        assert '<svg width="500" height="500" style="background-color:#f0f0f0;">' in html
        assert "<line" not in html

    def test_line_is_offset_to_centre(self):
        html = HtmlExporter().export(red_line())
        assert (
            '<line x1="250.0" y1="250.0" x2="260.0" y2="250.0" stroke="red" stroke-width="2"/>'
            in html
        )

    def test_scale_and_size_from_config(self):
        config = Config(canvas=CanvasConfig(width=200, height=100, scale=2.0, stroke_width=3))
        html = HtmlExporter(config).export(red_line())
        assert '<svg width="200" height="100"' in html
        assert 'x1="100.0" y1="50.0" x2="120.0" y2="50.0"' in html
        assert 'stroke-width="3"' in html

    def test_one_line_per_segment(self, turtle):
        turtle.forward(10)
        turtle.turn(90)
        turtle.color("cyan")
        turtle.forward(10)
        html = HtmlExporter().export(turtle.get_path())
        assert html.count("<line") == 2
        assert 'stroke="cyan"' in html

    def test_save(self, tmp_path):
        out = HtmlExporter().save(red_line(), tmp_path / "out.html")
        assert out.exists()
        assert 'stroke="red"' in out.read_text()


class TestPngExporter:
    def test_draws_segment_colors(self):
        image = PngExporter().export(red_line())
        assert image.size == (500, 500)
        colors = {color for _, color in image.getcolors()}
        assert (255, 0, 0) in colors
        assert (240, 240, 240) in colors

    def test_save(self, tmp_path):
        turtle = SimpleTurtle()
        turtle.forward(20)
        out = PngExporter().save(turtle.get_path(), tmp_path / "out.png")
        assert out.exists()
        assert out.read_bytes().startswith(b"\x89PNG")
