"""Rendering of recorded turtle paths to HTML/SVG and PNG."""

import logging
from pathlib import Path
from typing import Sequence

from PIL import Image, ImageDraw

from .config import Config
from .turtle import PathSegment

LOG = logging.getLogger(__name__)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>Turtle Graphics Output</title>
    <style>
        body {{ margin: 0; }}
        canvas {{ display: block; }}
    </style>
</head>
<body>
    <svg width="{width}" height="{height}" style="background-color:{background};">
        {lines}
    </svg>
</body>
</html>"""


class HtmlExporter:
    """Exports turtle paths to an HTML page holding an SVG canvas."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.canvas = self.config.canvas

    def export(self, segments: Sequence[PathSegment]) -> str:
        """Convert path segments to an HTML string."""
        lines = []
        for segment in segments:
            x1, y1 = self.canvas.to_canvas(segment.start)
            x2, y2 = self.canvas.to_canvas(segment.end)
            lines.append(
                f'<line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" '
                f'stroke="{segment.color.value}" stroke-width="{self.canvas.stroke_width}"/>'
            )

        return PAGE_TEMPLATE.format(
            width=self.canvas.width,
            height=self.canvas.height,
            background=self.canvas.background,
            lines="".join(lines),
        )

    def save(self, segments: Sequence[PathSegment], path: str | Path = "output.html") -> Path:
        path = Path(path)
        path.write_text(self.export(segments))
        LOG.info("Drawing saved to %s", path)
        return path


class PngExporter:
    """Rasterises turtle paths with Pillow."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.canvas = self.config.canvas

    def export(self, segments: Sequence[PathSegment]) -> Image.Image:
        image = Image.new("RGB", (self.canvas.width, self.canvas.height), self.canvas.background)
        draw = ImageDraw.Draw(image)
        for segment in segments:
            draw.line(
                [self.canvas.to_canvas(segment.start), self.canvas.to_canvas(segment.end)],
                fill=segment.color.value,
                width=self.canvas.stroke_width,
            )
        return image

    def save(self, segments: Sequence[PathSegment], path: str | Path = "output.png") -> Path:
        path = Path(path)
        self.export(segments).save(path)
        LOG.info("Preview saved to %s", path)
        return path
