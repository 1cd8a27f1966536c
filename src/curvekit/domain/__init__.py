"""Domain models for curvekit.

This module contains the value types the curve kernel consumes and
produces. All models except the Path builder are immutable (frozen
dataclasses) and independent of fontTools.

Key classes:
- Vector: A 2D point or displacement
- Rect: An axis-aligned bounding box
- Handle: A bezier handle, absolute or colocated with its point
- OutlinePoint: An on-curve point owning its incoming/outgoing handles
- Contour: A sequence of outline points
- Outline: A sequence of contours
- Path: A move/line/quad/cubic/close drawing path
"""

from curvekit.domain.outline import Contour, Handle, Outline, OutlinePoint, PointType
from curvekit.domain.path import Path, PathCommand, Verb
from curvekit.domain.vector import Rect, Vector

__all__: list[str] = [
    # Enums
    "PointType",
    "Verb",
    # Core types
    "Vector",
    "Rect",
    "Handle",
    "OutlinePoint",
    "Contour",
    "Outline",
    "Path",
    "PathCommand",
]
