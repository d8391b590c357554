"""Core processing for vectorpath.

This module contains the contour inspection that sits between the font
reader and the CLI.

Key classes:
- PathInspector: Reports bounds and winding direction per contour
- ContourReport: Inspection result for one contour
"""

from vectorpath.core.inspector import ContourReport, PathInspector

__all__ = [
    "ContourReport",
    "PathInspector",
]
