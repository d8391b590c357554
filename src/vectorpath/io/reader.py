"""Font reader for loading glyph outlines as paths.

This module provides the FontReader class for loading font files
and extracting glyph outlines into domain models.
"""

from collections.abc import Iterator
from pathlib import Path

from fontTools.pens.recordingPen import DecomposingRecordingPen
from fontTools.ttLib import TTFont, TTLibError

from vectorpath.config import ReaderConfig
from vectorpath.domain import GlyphOutline
from vectorpath.exceptions import FontLoadError, GlyphNotFoundError
from vectorpath.io.converter import recording_to_paths


class FontReader:
    """Loads TTF/OTF fonts and extracts glyph outlines.

    Components of composite glyphs are decomposed, so every outline holds
    plain contours. CFF outlines wind opposite to TrueType; with
    normalize_winding enabled their paths are reversed on read.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            for outline in reader.iter_glyphs():
                print(outline.name, outline.contour_count)
    """

    def __init__(self, font_path: Path, config: ReaderConfig | None = None) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
            config: Reader settings (defaults if None)
        """
        self._font_path = font_path
        self._config = config if config is not None else ReaderConfig()
        self._font: TTFont | None = None
        self._unicodes: dict[str, int] = {}

    def load(self) -> None:
        """Load the font file.

        Raises:
            FontLoadError: If the file does not exist or is not a valid font
        """
        if not self._font_path.exists():
            raise FontLoadError(str(self._font_path), "file not found")

        try:
            self._font = TTFont(str(self._font_path))
        except (TTLibError, OSError) as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

        self._unicodes = {}
        for code_point, glyph_name in sorted((self._font.getBestCmap() or {}).items()):
            self._unicodes.setdefault(glyph_name, code_point)

    @property
    def font_path(self) -> Path:
        return self._font_path

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for CFF-flavored fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["maxp"].numGlyphs

    def glyph_names(self) -> list[str]:
        """Return glyph names in font order."""
        return list(self._require_font().getGlyphOrder())

    def iter_glyphs(self) -> Iterator[GlyphOutline]:
        """Iterate over all glyphs in font order.

        Yields:
            GlyphOutline domain models (empty ones only if skip_empty is off)

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        for name in self.glyph_names():
            outline = self.get_glyph(name)
            if self._config.skip_empty and outline.is_empty():
                continue
            yield outline

    def get_glyph(self, name: str) -> GlyphOutline:
        """Get a specific glyph by name.

        Args:
            name: Name of the glyph to retrieve

        Returns:
            GlyphOutline with one path per contour

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphNotFoundError: If the font has no glyph with that name
        """
        font = self._require_font()
        glyph_set = font.getGlyphSet()
        if name not in glyph_set:
            raise GlyphNotFoundError(name)

        pen = DecomposingRecordingPen(glyph_set)
        glyph_set[name].draw(pen)
        paths = recording_to_paths(pen.value)

        if self._config.normalize_winding and self.format == "OpenType":
            for path in paths:
                path.reverse()

        return GlyphOutline(name=name, paths=paths, unicode=self._unicode_for(name))

    def _unicode_for(self, name: str) -> int | None:
        return self._unicodes.get(name)

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None
            self._unicodes = {}

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
