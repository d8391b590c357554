"""Contour inspection for glyph outlines.

This module reports, for every contour of a glyph, its bounds and winding
direction, and optionally the direction after reversal. It is the layer
between the FontReader and the CLI.
"""

import traceback
from collections.abc import Iterable
from dataclasses import dataclass

from vectorpath.config import VectorPathSettings
from vectorpath.domain import Direction, GlyphOutline, Path, Rect
from vectorpath.exceptions import VectorPathError
from vectorpath.io import FontReader
from vectorpath.utils import InspectionLogger, InspectionStats, configure_logging


@dataclass(frozen=True)
class ContourReport:
    """Inspection result for a single contour.

    Attributes:
        glyph_name: Name of the glyph the contour belongs to
        contour_idx: Index of the contour within the glyph
        command_count: Number of commands in the contour's path
        closed: Whether the path ends with CLOSE
        bounds: Bounds of on-curve and control points
        direction: Winding direction of the contour
        reversed_direction: Direction after reverse() (None if not requested)
    """

    glyph_name: str
    contour_idx: int
    command_count: int
    closed: bool
    bounds: Rect
    direction: Direction
    reversed_direction: Direction | None = None


class PathInspector:
    """Inspects glyph contours and collects statistics.

    Example:
        inspector = PathInspector(settings)
        with FontReader(font_path) as reader:
            reports = inspector.inspect_font(reader)
        print(inspector.stats.contour_count)
    """

    def __init__(
        self,
        settings: VectorPathSettings | None = None,
        logger: InspectionLogger | None = None,
    ) -> None:
        self.settings = settings if settings is not None else VectorPathSettings()
        if logger is None:
            logger = InspectionLogger(
                configure_logging(
                    log_file=self.settings.logging.log_file,
                    console_level=self.settings.logging.log_level.value,
                    file_level=self.settings.logging.file_log_level.value,
                )
            )
        self._logger = logger

    @property
    def stats(self) -> InspectionStats:
        return self._logger.stats

    def inspect_path(self, glyph_name: str, contour_idx: int, path: Path) -> ContourReport:
        """Build the report for one contour."""
        direction = path.direction()
        reversed_direction = None
        if self.settings.output.show_reversed:
            reversed_direction = path.reversed().direction()

        self._logger.log_contour(glyph_name, contour_idx, direction.name, len(path))

        return ContourReport(
            glyph_name=glyph_name,
            contour_idx=contour_idx,
            command_count=len(path),
            closed=path.is_closed(),
            bounds=path.bounds(),
            direction=direction,
            reversed_direction=reversed_direction,
        )

    def inspect_glyph(self, outline: GlyphOutline) -> list[ContourReport]:
        """Build reports for every contour of a glyph."""
        self._logger.log_glyph_start(outline.name)
        reports = [
            self.inspect_path(outline.name, idx, path)
            for idx, path in enumerate(outline.paths)
        ]
        self._logger.log_glyph_complete(outline.name, len(reports))
        return reports

    def inspect_font(
        self,
        reader: FontReader,
        glyph_names: Iterable[str] | None = None,
    ) -> list[ContourReport]:
        """Inspect glyphs of a loaded font.

        A path error in one glyph is logged and counted; the remaining
        glyphs are still inspected.

        Args:
            reader: Loaded font reader
            glyph_names: Glyphs to inspect (all glyphs if None)

        Returns:
            Contour reports in glyph order

        Raises:
            GlyphNotFoundError: If a requested glyph does not exist
        """
        names = list(glyph_names) if glyph_names is not None else reader.glyph_names()
        self._logger.log_run_start(str(reader.font_path), len(names))

        reports: list[ContourReport] = []
        for name in names:
            outline = reader.get_glyph(name)
            if outline.is_empty() and self.settings.reader.skip_empty:
                self._logger.log_glyph_skipped(name, "no contours")
                continue
            try:
                reports.extend(self.inspect_glyph(outline))
            except VectorPathError as e:
                self._logger.log_glyph_error(name, e, traceback.format_exc())

        self._logger.log_run_complete()
        return reports
