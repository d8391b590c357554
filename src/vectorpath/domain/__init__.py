"""Domain models for vectorpath.

This module contains the value types a path is made of and the path
itself. Vectors, rectangles and commands are immutable (frozen
dataclasses); a Path is a mutable container that owns its commands.

Key classes:
- Vector2: A 2D point with a cross product
- Rect: Axis-aligned rectangle
- Command: One drawing instruction (move, line, quadratic, cubic, close)
- Path: Ordered command sequence with bounds, direction and reverse
- GlyphOutline: The contours of one glyph as paths
"""

from vectorpath.domain.command import Command, CommandKind
from vectorpath.domain.outline import GlyphOutline
from vectorpath.domain.path import Direction, Path, Path2d, Path2f, Path2i
from vectorpath.domain.vector import PointLike, Rect, Vector2

__all__: list[str] = [
    # Enums
    "CommandKind",
    "Direction",
    # Core types
    "Vector2",
    "PointLike",
    "Rect",
    "Command",
    "Path",
    "Path2i",
    "Path2f",
    "Path2d",
    "GlyphOutline",
]
