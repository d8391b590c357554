"""Font outline input for vectorpath.

This module reads font files using fonttools and converts glyph
outlines into Path objects, keeping fonttools out of the domain models.

Key responsibilities:
- Load TTF/OTF fonts
- Convert pen recordings to paths, one per contour
- Normalize CFF winding to the TrueType convention

Key classes:
- FontReader: Load fonts and extract glyph outlines
"""

from vectorpath.io.converter import recording_to_paths
from vectorpath.io.reader import FontReader

__all__ = [
    "FontReader",
    "recording_to_paths",
]
