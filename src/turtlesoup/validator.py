"""Path and instruction validation against the canvas."""

from dataclasses import dataclass, field
from typing import Sequence

from .config import Config
from .geometry import distance, parse_instruction
from .turtle import PathSegment


@dataclass
class ValidationResult:
    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    stats: dict = field(default_factory=dict)


class PathValidator:
    """Checks recorded paths and planned instructions."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.canvas = self.config.canvas

    def validate(self, segments: Sequence[PathSegment]) -> ValidationResult:
        """Validate that every segment lands on the canvas."""
        errors = []
        warnings = []
        stats = {"segments": len(segments), "length": 0.0, "colors": {}}

        for i, segment in enumerate(segments, 1):
            length = distance(segment.start, segment.end)
            stats["length"] += length
            color = segment.color.value
            stats["colors"][color] = stats["colors"].get(color, 0) + 1

            if length == 0:
                warnings.append(f"S{i}: zero-length segment")

            for label, point in (("start", segment.start), ("end", segment.end)):
                x, y = self.canvas.to_canvas(point)
                if not (0 <= x <= self.canvas.width and 0 <= y <= self.canvas.height):
                    errors.append(
                        f"S{i}: {label} ({point.x:.2f}, {point.y:.2f}) off canvas "
                        f"[{self.canvas.width}x{self.canvas.height}]"
                    )

        return ValidationResult(
            valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            stats=stats,
        )

    def validate_instructions(self, instructions: Sequence[str]) -> ValidationResult:
        """Validate planned instruction lines."""
        errors = []
        warnings = []
        stats = {"lines": len(instructions), "turns": 0, "moves": 0}

        for i, line in enumerate(instructions, 1):
            try:
                instruction = parse_instruction(line)
            except ValueError as e:
                errors.append(f"L{i}: {e}")
                continue

            if instruction.command == "turn":
                stats["turns"] += 1
                if not -180 < instruction.value <= 180:
                    warnings.append(f"L{i}: turn {instruction.value} is not the shortest turn")
            else:
                stats["moves"] += 1
                if instruction.value < 0:
                    warnings.append(f"L{i}: backward move {instruction.value}")

        return ValidationResult(
            valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            stats=stats,
        )
