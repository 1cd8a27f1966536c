"""curvekit - Cubic Bezier and piecewise curve kernel for font outlines.

curvekit represents cubic Bezier segments and sequences of them, and
converts between handle-based font outlines, move/line/quad/cubic/close
drawing paths and the polynomial form used for evaluation and subdivision.

Example:
    >>> from curvekit import BezierOutline
    >>> outline = BezierOutline.from_outline(glyph_outline)
    >>> outline.subdivide(0.5).bounds()
"""

from curvekit.core import Bezier, BezierContour, BezierOutline, Evaluate, Piecewise

__version__ = "0.1.0"

__all__ = [
    "Bezier",
    "BezierContour",
    "BezierOutline",
    "Evaluate",
    "Piecewise",
    "__version__",
]
