"""Font I/O layer for curvekit.

This module connects the curve kernel to fontTools: glyphs drawn through
segment pens become piecewise outlines, glif point streams become
handle-based outlines, and both can be drawn back into fontTools pens.

Key classes:
- FontReader: Load fonts and convert glyphs to BezierOutline
- PathPen: fontTools segment pen recording into a Path
- OutlinePointPen: fontTools point pen building an Outline
"""

from curvekit.io.glif import (
    OutlinePointPen,
    bezier_outline_from_glif,
    draw_outline_points,
    outline_from_glif,
    outline_to_glif,
)
from curvekit.io.pens import PathPen, draw_outline, draw_path
from curvekit.io.reader import FontReader

__all__ = [
    "FontReader",
    "OutlinePointPen",
    "PathPen",
    "bezier_outline_from_glif",
    "draw_outline",
    "draw_outline_points",
    "draw_path",
    "outline_from_glif",
    "outline_to_glif",
]
