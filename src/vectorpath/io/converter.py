"""Converters from fonttools pen recordings to paths.

This module turns the drawing commands recorded by a fonttools
RecordingPen into Path objects, one Path per contour.
"""

from typing import Any

from fontTools.pens.basePen import (
    decomposeQuadraticSegment,
    decomposeSuperBezierSegment,
)

from vectorpath.domain.command import Command
from vectorpath.domain.path import Path

Recording = list[tuple[str, tuple[Any, ...]]]


def recording_to_paths(recording: Recording) -> list[Path]:
    """Convert RecordingPen recording to list of Path objects.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), (x2, y2), ...))  # Quadratic, TrueType
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # Cubic, CFF
    - ('closePath', ())
    - ('endPath', ())

    Runs of quadratic off-curve points are split into single segments with
    implied on-curve points between them. A qCurveTo ending in None is a
    contour without on-curve points; it starts at the implied point between
    its last and first control points.

    Commands are stored as drawn. A segment that returns to the start point
    stays a segment; only closePath appends a CLOSE.

    Args:
        recording: List of drawing commands from RecordingPen

    Returns:
        List of Path objects
    """
    paths: list[Path] = []
    commands: list[Command] = []

    def finish() -> None:
        if commands:
            paths.append(Path(commands))
        commands.clear()

    for command, args in recording:
        if command == "moveTo":
            finish()
            commands.append(Command.move(args[0]))

        elif command == "lineTo":
            commands.append(Command.line(args[0]))

        elif command == "qCurveTo":
            points = list(args)
            if points[-1] is None:
                finish()
                implied = _midpoint(points[-2], points[0])
                commands.append(Command.move(implied))
                points[-1] = implied
            if len(points) == 1:
                commands.append(Command.line(points[0]))
                continue
            for control, point in decomposeQuadraticSegment(points):
                commands.append(Command.quadratic(control, point))

        elif command == "curveTo":
            if len(args) == 1:
                commands.append(Command.line(args[0]))
                continue
            if len(args) == 2:
                commands.append(Command.quadratic(args[0], args[1]))
                continue
            if len(args) == 3:
                commands.append(Command.cubic(args[0], args[1], args[2]))
                continue
            for control1, control2, point in decomposeSuperBezierSegment(list(args)):
                commands.append(Command.cubic(control1, control2, point))

        elif command == "closePath":
            if commands:
                commands.append(Command.close())
            finish()

        elif command == "endPath":
            finish()

    finish()
    return paths


def _midpoint(a: tuple[float, float], b: tuple[float, float]) -> tuple[float, float]:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)
