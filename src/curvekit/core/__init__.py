"""Core curve algorithms for curvekit.

This module contains the curve kernel:

- Cubic Bezier segments (polynomial form, bounds, De Casteljau subdivision)
- The Evaluate capability shared by segments and compositions
- Piecewise composition and its contour/outline levels

All values are immutable: every transform, subdivision and conversion
returns a new value, so they are safe to share between threads.

Key classes:
- Bezier: A single cubic segment
- Evaluate: Abstract evaluate/derivative/bounds/transform contract
- Piecewise: Generic sequence of segments over one parameter
- BezierContour: Piecewise of Bezier, converts to/from contours and paths
- BezierOutline: Piecewise of BezierContour, converts to/from outlines and paths
"""

from curvekit.core.bezier import Bezier, Coefficients
from curvekit.core.evaluate import Evaluate, Transform
from curvekit.core.piecewise import BezierContour, BezierOutline, Piecewise

__all__ = [
    "Bezier",
    "BezierContour",
    "BezierOutline",
    "Coefficients",
    "Evaluate",
    "Piecewise",
    "Transform",
]
