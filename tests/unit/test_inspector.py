"""Tests for contour inspection."""

from unittest.mock import MagicMock

import pytest

from vectorpath.config import OutputConfig, VectorPathSettings
from vectorpath.core.inspector import PathInspector
from vectorpath.domain import Command, Direction, GlyphOutline, Path
from vectorpath.exceptions import GlyphNotFoundError
from vectorpath.io import FontReader
from vectorpath.utils import InspectionLogger


@pytest.fixture
def inspector() -> PathInspector:
    """Inspector with reversed directions and a mocked structlog logger."""
    settings = VectorPathSettings(output=OutputConfig(show_reversed=True))
    return PathInspector(settings, InspectionLogger(MagicMock()))


@pytest.fixture
def square_outline() -> GlyphOutline:
    """Glyph with one clockwise and one open two-point contour."""
    square = Path()
    square.move_to((0, 0))
    square.line_to((10, 0))
    square.line_to((10, 10))
    square.line_to((0, 10))
    square.close()

    stroke = Path([Command.move((0, 0)), Command.line((5, 5))])
    return GlyphOutline(name="square", paths=[square, stroke])


class TestInspectPath:
    """Tests for single contour reports."""

    def test_report_fields(self, inspector, square_outline):
        """Report carries bounds, direction and reversed direction."""
        report = inspector.inspect_path("square", 0, square_outline.paths[0])
        assert report.glyph_name == "square"
        assert report.contour_idx == 0
        assert report.command_count == 5
        assert report.closed
        assert report.bounds.to_tuple() == (0, 0, 10, 10)
        assert report.direction is Direction.CLOCKWISE
        assert report.reversed_direction is Direction.COUNTER_CLOCKWISE

    def test_path_not_mutated(self, inspector, square_outline):
        """Inspecting with reversal leaves the path as it was."""
        path = square_outline.paths[0]
        before = path.commands
        inspector.inspect_path("square", 0, path)
        assert path.commands == before

    def test_reversed_direction_off(self, square_outline):
        """Without show_reversed there is no reversed direction."""
        inspector = PathInspector(VectorPathSettings(), InspectionLogger(MagicMock()))
        report = inspector.inspect_path("square", 0, square_outline.paths[0])
        assert report.reversed_direction is None


class TestInspectGlyph:
    """Tests for glyph level inspection and stats."""

    def test_stats_counted(self, inspector, square_outline):
        """Contours are counted per direction."""
        reports = inspector.inspect_glyph(square_outline)
        assert len(reports) == 2
        stats = inspector.stats
        assert stats.glyph_count == 1
        assert stats.contour_count == 2
        assert stats.clockwise_count == 1
        assert stats.undefined_count == 1

    def test_glyph_error_logged_and_counted(self, tmp_path):
        """A path invariant error in one glyph does not stop the run."""
        broken = GlyphOutline(
            name="broken",
            paths=[
                Path(
                    [
                        Command.move((0, 0)),
                        Command.line((1, 0)),
                        Command.move((2, 2)),
                    ]
                )
            ],
        )
        reader = MagicMock(spec=FontReader)
        reader.font_path = tmp_path / "fake.ttf"
        reader.glyph_names.return_value = ["broken"]
        reader.get_glyph.return_value = broken

        mock_logger = MagicMock()
        inspector = PathInspector(VectorPathSettings(), InspectionLogger(mock_logger))
        reports = inspector.inspect_font(reader)

        assert reports == []
        assert inspector.stats.error_count == 1
        assert inspector.stats.errors[0][0] == "broken"
        mock_logger.error.assert_called_once()


class TestInspectFont:
    """Tests against a generated font."""

    def test_all_glyphs(self, inspector, ttf_font):
        """Every contour of every non-empty glyph is reported."""
        with FontReader(ttf_font) as reader:
            reports = inspector.inspect_font(reader)

        assert [(r.glyph_name, r.contour_idx) for r in reports] == [
            ("O", 0),
            ("O", 1),
            ("D", 0),
            ("O.shifted", 0),
            ("O.shifted", 1),
        ]
        stats = inspector.stats
        assert stats.glyph_count == 3
        assert stats.skipped_count == 2
        assert stats.duration_seconds >= 0

    def test_selected_glyphs(self, inspector, ttf_font):
        """Only requested glyphs are inspected."""
        with FontReader(ttf_font) as reader:
            reports = inspector.inspect_font(reader, ["O"])

        assert {r.glyph_name for r in reports} == {"O"}
        directions = [r.direction for r in reports]
        assert directions == [Direction.COUNTER_CLOCKWISE, Direction.CLOCKWISE]
        assert [r.reversed_direction for r in reports] == [d.opposite() for d in directions]

    def test_unknown_glyph(self, inspector, ttf_font):
        """Unknown glyph names propagate GlyphNotFoundError."""
        with FontReader(ttf_font) as reader:
            with pytest.raises(GlyphNotFoundError):
                inspector.inspect_font(reader, ["missing"])
