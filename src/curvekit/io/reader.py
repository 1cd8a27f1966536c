"""Font reader for loading TTF/OTF glyph outlines as piecewise curves.

This module provides the FontReader class for loading font files and
drawing glyphs into BezierOutline values.
"""

from collections.abc import Iterator
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from curvekit.config import CurveKitSettings, get_default_settings
from curvekit.core import BezierOutline
from curvekit.domain import Outline
from curvekit.exceptions import CurveError, FontLoadError
from curvekit.io.pens import PathPen
from curvekit.utils import ConversionLogger


class FontReader:
    """Loads TTF/OTF fonts and converts glyph outlines to curves.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            outline = reader.get_outline("O")
            print(outline.bounds())
    """

    def __init__(
        self,
        font_path: Path,
        settings: CurveKitSettings | None = None,
        conversion_logger: ConversionLogger | None = None,
    ) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
            settings: Library settings (defaults if None)
            conversion_logger: Optional logger collecting conversion stats
        """
        self._font_path = font_path
        self._settings = settings or get_default_settings()
        self._conversion_logger = conversion_logger
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If fontTools cannot parse the file
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            self._font = TTFont(str(self._font_path))
        except TTLibError as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for OTF fonts

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

    def get_outline(self, name: str) -> BezierOutline | None:
        """Draw a glyph into a piecewise outline.

        Args:
            name: Name of the glyph to convert

        Returns:
            BezierOutline with one contour per glyph contour, or None if the
            glyph is not in the font

        Raises:
            RuntimeError: If font has not been loaded yet
            CurveError: If the glyph's drawing cannot be converted
        """
        font = self._require_font()

        if name not in font.getGlyphOrder():
            return None

        glyph_set = font.getGlyphSet()
        pen = PathPen(glyph_set)
        glyph_set[name].draw(pen)

        return BezierOutline.from_path(pen.path)

    def get_handle_outline(self, name: str) -> Outline | None:
        """Convert a glyph to the handle-based outline format.

        Handles within the configured colocation tolerance of their point
        are emitted as colocated.
        """
        outline = self.get_outline(name)
        if outline is None:
            return None
        return outline.to_outline(tolerance=self._settings.geometry.colocation_tolerance)

    def iter_outlines(self) -> Iterator[tuple[str, BezierOutline]]:
        """Iterate over all glyphs with outlines, in glyph order.

        Glyphs without contours (spaces, empty composites) are skipped.

        Yields:
            Tuples of (glyph name, outline)

        Raises:
            RuntimeError: If font has not been loaded yet
            CurveError: If a glyph cannot be converted
        """
        font = self._require_font()

        for glyph_name in font.getGlyphOrder():
            try:
                outline = self.get_outline(glyph_name)
            except CurveError as e:
                if self._conversion_logger is not None:
                    self._conversion_logger.log_glyph_error(glyph_name, e)
                raise

            if outline is None or not len(outline):
                if self._conversion_logger is not None:
                    self._conversion_logger.log_glyph_skipped(glyph_name, "no contours")
                continue

            if self._conversion_logger is not None:
                self._conversion_logger.log_glyph_converted(
                    glyph_name,
                    contours=len(outline),
                    segments=sum(len(contour) for contour in outline),
                )
            yield glyph_name, outline

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
