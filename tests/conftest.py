"""Shared fixtures: small fonts built with fontTools FontBuilder."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen

OUTER_SQUARE = [(0, 0), (0, 100), (100, 100), (100, 0)]
INNER_SQUARE = [(25, 25), (75, 25), (75, 75), (25, 75)]
# CFF outer contours wind opposite to TrueType ones.
CFF_OUTER_SQUARE = [(0, 0), (100, 0), (100, 100), (0, 100)]


def _draw_polygon(pen, points: list[tuple[int, int]]) -> None:
    pen.moveTo(points[0])
    for point in points[1:]:
        pen.lineTo(point)
    pen.closePath()


def _finish(fb: FontBuilder, glyph_order: list[str], path: Path) -> Path:
    fb.setupHorizontalMetrics({name: (600, 0) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Vectorpath Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def ttf_font(tmp_path: Path) -> Path:
    """TrueType font with an empty, a ring, a curved and a composite glyph."""
    glyph_order = [".notdef", "space", "O", "D", "O.shifted"]
    glyphs = {}

    glyphs[".notdef"] = TTGlyphPen(None).glyph()
    glyphs["space"] = TTGlyphPen(None).glyph()

    pen = TTGlyphPen(None)
    _draw_polygon(pen, OUTER_SQUARE)
    _draw_polygon(pen, INNER_SQUARE)
    glyphs["O"] = pen.glyph()

    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((0, 100))
    pen.qCurveTo((100, 100), (100, 0))
    pen.closePath()
    glyphs["D"] = pen.glyph()

    pen = TTGlyphPen(glyphs)
    pen.addComponent("O", (1, 0, 0, 1, 200, 0))
    glyphs["O.shifted"] = pen.glyph()

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({32: "space", ord("O"): "O", ord("D"): "D"})
    fb.setupGlyf(glyphs)
    return _finish(fb, glyph_order, tmp_path / "Test-Regular.ttf")


@pytest.fixture
def otf_font(tmp_path: Path) -> Path:
    """CFF-flavored font with one square glyph."""
    glyph_order = [".notdef", "A"]

    notdef = T2CharStringPen(600, None).getCharString()
    pen = T2CharStringPen(600, None)
    _draw_polygon(pen, CFF_OUTER_SQUARE)
    square = pen.getCharString()

    fb = FontBuilder(1000, isTTF=False)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord("A"): "A"})
    fb.setupCFF(
        "VectorpathTest-Regular",
        {"FullName": "Vectorpath Test Regular"},
        {".notdef": notdef, "A": square},
        {},
    )
    return _finish(fb, glyph_order, tmp_path / "Test-Regular.otf")
