"""Vectorpath - Two-dimensional vector paths built from drawing commands.

A Path is an ordered sequence of move, line, quadratic, cubic and close
commands. On top of it vectorpath computes axis-aligned bounds, classifies
the winding direction and reverses traversal order without changing the
shape. A small fontTools-based reader turns glyph outlines into paths.

Example:
    $ vectorpath Roboto-Regular.ttf -g O -g A

This prints the bounds and winding direction of every contour in O and A.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
