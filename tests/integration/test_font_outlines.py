"""Integration tests converting real font glyphs to piecewise curves.

A small TrueType font is built with fontTools so the tests exercise the
full glyf -> pen -> Path -> BezierOutline -> glif pipeline.
"""

from pathlib import Path
from unittest.mock import Mock

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont

from curvekit.config import CurveKitSettings
from curvekit.core import BezierOutline
from curvekit.domain import PointType
from curvekit.io import FontReader, bezier_outline_from_glif, draw_outline, outline_to_glif
from curvekit.utils import ConversionLogger

GLYPH_ORDER = [".notdef", "square", "bowl", "space"]


def _square_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    return pen.glyph()


def _bowl_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.qCurveTo((0, 500), (500, 500))
    pen.lineTo((500, 0))
    pen.closePath()
    return pen.glyph()


@pytest.fixture(scope="module")
def font_path(tmp_path_factory) -> Path:
    """Build a four-glyph TrueType font on disk."""
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(GLYPH_ORDER)
    fb.setupCharacterMap({0x20: "space", 0x41: "square", 0x42: "bowl"})
    fb.setupGlyf(
        {
            ".notdef": TTGlyphPen(None).glyph(),
            "square": _square_glyph(),
            "bowl": _bowl_glyph(),
            "space": TTGlyphPen(None).glyph(),
        }
    )
    # Left side bearings must equal each glyph's xMin or the glyph set
    # shifts the outlines horizontally when drawing.
    glyf = fb.font["glyf"]
    fb.setupHorizontalMetrics(
        {name: (600, getattr(glyf[name], "xMin", 0)) for name in GLYPH_ORDER}
    )
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "CurveKit Test", "styleName": "Regular"})
    fb.setupOS2()
    fb.setupPost()

    path = tmp_path_factory.mktemp("fonts") / "CurveKitTest.ttf"
    fb.save(str(path))
    return path


class TestFontReaderIntegration:
    """FontReader against a real TrueType font."""

    def test_font_properties(self, font_path):
        """Test basic font properties."""
        with FontReader(font_path) as reader:
            assert reader.format == "TrueType"
            assert reader.units_per_em == 1000
            assert reader.glyph_count == 4

    def test_side_bearings_match_glyph_bounds(self, font_path):
        """Test the fixture font draws glyphs at their own coordinates."""
        font = TTFont(str(font_path))
        assert font["hmtx"]["square"] == (600, 100)
        assert font["hmtx"]["bowl"] == (600, 0)
        font.close()

    def test_square_outline(self, font_path):
        """Test an all-line glyph becomes four straight segments."""
        with FontReader(font_path) as reader:
            outline = reader.get_outline("square")

        assert outline is not None
        assert len(outline) == 1
        assert len(outline[0]) == 4
        assert all(segment.is_line() for segment in outline[0])

        rect = outline.bounds()
        assert rect.to_tuple() == (100.0, 0.0, 500.0, 700.0)

    def test_quadratic_outline(self, font_path):
        """Test TrueType quadratics are elevated without changing shape."""
        with FontReader(font_path) as reader:
            outline = reader.get_outline("bowl")

        assert outline is not None
        contour = outline[0]
        assert len(contour) == 3

        curves = [segment for segment in contour if not segment.is_line()]
        assert len(curves) == 1
        mid = curves[0].evaluate(0.5)
        assert mid.x == pytest.approx(125.0)
        assert mid.y == pytest.approx(375.0)

    def test_bounds_match_fonttools(self, font_path):
        """Test outline bounds agree with fontTools' own bounds pen."""
        font = TTFont(str(font_path))
        glyph_set = font.getGlyphSet()

        with FontReader(font_path) as reader:
            for name in ("square", "bowl"):
                expected = BoundsPen(glyph_set)
                glyph_set[name].draw(expected)

                outline = reader.get_outline(name)
                assert outline is not None
                assert outline.bounds().to_tuple() == pytest.approx(expected.bounds)

                redrawn = BoundsPen(None)
                draw_outline(outline, redrawn)
                assert redrawn.bounds == pytest.approx(expected.bounds)

        font.close()

    def test_iter_outlines_skips_empty_glyphs(self, font_path):
        """Test only glyphs with contours are yielded and counted."""
        conversion_logger = ConversionLogger(Mock())

        with FontReader(font_path, conversion_logger=conversion_logger) as reader:
            names = [name for name, _ in reader.iter_outlines()]

        assert names == ["square", "bowl"]
        stats = conversion_logger.stats
        assert stats.converted_count == 2
        assert stats.skipped_count == 2
        assert stats.segment_count == 7
        assert stats.error_count == 0

    def test_handle_outline(self, font_path):
        """Test handle-based conversion marks straight corners as lines."""
        with FontReader(font_path) as reader:
            square = reader.get_handle_outline("square")
            assert reader.get_handle_outline("missing") is None

        assert square is not None
        contour = square[0]
        assert len(contour) == 4
        assert contour.is_closed
        assert all(point.ptype == PointType.LINE for point in contour)
        assert all(point.a.colocated and point.b.colocated for point in contour)

    def test_handle_outline_with_tolerance(self, font_path):
        """Test the configured tolerance is applied."""
        settings = CurveKitSettings.model_validate({"geometry": {"colocation_tolerance": 0.5}})

        with FontReader(font_path, settings=settings) as reader:
            bowl = reader.get_handle_outline("bowl")

        assert bowl is not None
        assert sum(1 for point in bowl[0] if point.ptype == PointType.CURVE) == 1


class TestGlifPipeline:
    """Font glyph -> subdivided curves -> glif -> curves."""

    def test_subdivided_glyphs_survive_glif(self, font_path):
        """Test subdivision and glif serialization keep shape and segment count."""
        with FontReader(font_path) as reader:
            outlines = dict(reader.iter_outlines())

        for name, outline in outlines.items():
            split = outline.subdivide(0.5)
            text = outline_to_glif(name, split)
            restored = bezier_outline_from_glif(text)

            assert isinstance(restored, BezierOutline)
            assert [len(c) for c in restored] == [len(c) for c in split]
            assert restored.bounds().to_tuple() == pytest.approx(outline.bounds().to_tuple())

            for t in (0.1, 0.45, 0.8):
                assert restored.evaluate(t).x == pytest.approx(split.evaluate(t).x)
                assert restored.evaluate(t).y == pytest.approx(split.evaluate(t).y)
