"""Glyph outline representation.

A glyph outline groups the contours of one glyph, one Path per contour.
"""

from dataclasses import dataclass, field

from vectorpath.domain.path import Path


@dataclass
class GlyphOutline:
    """Outline of a single glyph.

    Attributes:
        name: Glyph name (e.g., "A", "B", "exclam")
        paths: One path per contour, in drawing order
        unicode: Unicode code point (None for unencoded glyphs)
    """

    name: str
    paths: list[Path] = field(default_factory=list)
    unicode: int | None = None

    def is_empty(self) -> bool:
        """Check if glyph has no contours (spaces and other blanks)."""
        return len(self.paths) == 0

    @property
    def contour_count(self) -> int:
        return len(self.paths)
