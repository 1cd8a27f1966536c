"""Conversion between UFO glif point streams and handle-based outlines.

A glif contour interleaves off-curve points with on-curve ones. The
handle-based Outline instead hangs the off-curve points on the on-curve
points they belong to:

- the off-curve point after an on-curve point is that point's outgoing
  handle (``a``)
- the off-curve point before an on-curve point is its incoming handle (``b``)

Quadratic segments are degree-elevated to cubic handles on the way in, and
written back out as cubic ``curve`` segments.
"""

import logging
from dataclasses import dataclass
from typing import Any

from fontTools.pens.basePen import decomposeSuperBezierSegment
from fontTools.pens.pointPen import AbstractPointPen
from fontTools.ufoLib import glifLib

from curvekit.config import CurveKitSettings, get_default_settings
from curvekit.core import BezierOutline
from curvekit.domain import Contour, Handle, Outline, OutlinePoint, PointType, Vector
from curvekit.exceptions import MalformedContourError

logger = logging.getLogger(__name__)

_SEGMENT_TYPES = {
    "move": PointType.MOVE,
    "line": PointType.LINE,
    "curve": PointType.CURVE,
    "qcurve": PointType.QCURVE,
}


@dataclass
class _Node:
    """Mutable on-curve point used while handles are being attached."""

    position: Vector
    ptype: PointType
    a: Handle = Handle.COLOCATED
    b: Handle = Handle.COLOCATED

    def freeze(self) -> OutlinePoint:
        return OutlinePoint(self.position.x, self.position.y, self.ptype, a=self.a, b=self.b)


def _elevated_handles(start: Vector, handle: Vector, end: Vector) -> tuple[Handle, Handle]:
    """Cubic handles equivalent to a single quadratic control point."""
    return (
        Handle.at(start + (handle - start) * (2.0 / 3.0)),
        Handle.at(end + (handle - end) * (2.0 / 3.0)),
    )


def contour_from_points(points: list[tuple[Vector, str | None]]) -> Contour:
    """Convert one glif contour's point stream to a handle-based contour.

    Args:
        points: (position, segment type) pairs in glif order; off-curve
            points have a segment type of None

    Returns:
        Contour with one point per on-curve glif point (plus implied
        on-curve points for quadratic runs and curves with more than two
        off-curve points)

    Raises:
        MalformedContourError: If the contour has no on-curve point, an open
            contour ends in off-curve points, or a segment's off-curve
            points do not fit its type
    """
    if not points:
        raise MalformedContourError("empty contour")

    is_open = points[0][1] == "move"

    first_on_curve = next((i for i, (_, st) in enumerate(points) if st is not None), None)
    if first_on_curve is None:
        raise MalformedContourError("contour has no on-curve points")

    if is_open and points[-1][1] is None:
        raise MalformedContourError("open contour ends in off-curve points")

    # Start on an on-curve point; trailing off-curves then belong to the
    # closing segment.
    points = points[first_on_curve:] + points[:first_on_curve]

    nodes: list[_Node] = []
    pending: list[Vector] = []

    for position, segment_type in points:
        if segment_type is None:
            pending.append(position)
            continue

        node = _Node(position, _point_type(segment_type))
        if nodes:
            _link(nodes, nodes[-1], node, pending, segment_type)
        nodes.append(node)
        pending = []

    if not is_open:
        _link(nodes, nodes[-1], nodes[0], pending, points[0][1] or "line")

    return Contour([node.freeze() for node in nodes])


def _point_type(segment_type: str) -> PointType:
    ptype = _SEGMENT_TYPES.get(segment_type)
    if ptype is None:
        raise MalformedContourError(f"unknown segment type {segment_type!r}")
    return ptype


def _link(
    nodes: list[_Node],
    start: _Node,
    end: _Node,
    offcurves: list[Vector],
    segment_type: str,
) -> None:
    """Set handles for the segment start -> end from its off-curve points.

    A curve with one off-curve point is a quadratic; with more than two it
    is a super-bezier, split into cubics the way fontTools pens split it.
    Implied on-curve points of a quadratic run or a super-bezier are
    appended to ``nodes``, which at call time ends with ``start``.
    """
    if not offcurves:
        return

    if segment_type == "curve":
        if len(offcurves) == 1:
            start.a, end.b = _elevated_handles(start.position, offcurves[0], end.position)
        elif len(offcurves) == 2:
            start.a = Handle.at(offcurves[0])
            end.b = Handle.at(offcurves[1])
        else:
            _link_super_bezier(nodes, start, end, offcurves)
        return

    if segment_type != "qcurve":
        raise MalformedContourError(f"{segment_type} segment cannot have off-curve points")

    previous = start
    for handle, following in zip(offcurves, offcurves[1:]):
        implied = _Node(handle.lerp(following, 0.5), PointType.QCURVE)
        previous.a, implied.b = _elevated_handles(previous.position, handle, implied.position)
        nodes.append(implied)
        previous = implied

    previous.a, end.b = _elevated_handles(previous.position, offcurves[-1], end.position)


def _link_super_bezier(
    nodes: list[_Node],
    start: _Node,
    end: _Node,
    offcurves: list[Vector],
) -> None:
    segments = decomposeSuperBezierSegment(
        [p.to_tuple() for p in offcurves] + [end.position.to_tuple()]
    )

    previous = start
    for pt1, pt2, pt3 in segments[:-1]:
        implied = _Node(Vector.from_tuple(pt3), PointType.CURVE)
        previous.a = Handle.at(Vector.from_tuple(pt1))
        implied.b = Handle.at(Vector.from_tuple(pt2))
        nodes.append(implied)
        previous = implied

    pt1, pt2, _ = segments[-1]
    previous.a = Handle.at(Vector.from_tuple(pt1))
    end.b = Handle.at(Vector.from_tuple(pt2))


class OutlinePointPen(AbstractPointPen):
    """fontTools point pen that builds a handle-based Outline.

    Components are not part of a glyph's own contours and are skipped.

    Example:
        pen = OutlinePointPen()
        glyph.drawPoints(pen)
        outline = pen.outline
    """

    def __init__(self) -> None:
        self._contours: list[Contour] = []
        self._current: list[tuple[Vector, str | None]] | None = None

    @property
    def outline(self) -> Outline:
        return Outline(self._contours)

    def beginPath(self, identifier: str | None = None, **kwargs: Any) -> None:
        self._current = []

    def endPath(self) -> None:
        if self._current is None:
            raise MalformedContourError("endPath called without beginPath")
        self._contours.append(contour_from_points(self._current))
        self._current = None

    def addPoint(
        self,
        pt: tuple[float, float],
        segmentType: str | None = None,
        smooth: bool = False,
        name: str | None = None,
        identifier: str | None = None,
        **kwargs: Any,
    ) -> None:
        if self._current is None:
            raise MalformedContourError("addPoint called outside a contour")
        self._current.append((Vector.from_tuple(pt), segmentType))

    def addComponent(
        self,
        baseGlyphName: str,
        transformation: tuple[float, float, float, float, float, float],
        identifier: str | None = None,
        **kwargs: Any,
    ) -> None:
        logger.debug("Skipping component %s", baseGlyphName)


def draw_outline_points(outline: Outline, pen: AbstractPointPen) -> None:
    """Write a handle-based outline into a fontTools point pen.

    Segments with both handles colocated become ``line`` segments; all
    others become cubic ``curve`` segments with two off-curve points.

    Args:
        outline: Outline to draw
        pen: Any fontTools point pen
    """
    for contour in outline:
        points = contour.points
        pen.beginPath()

        for index, point in enumerate(points):
            if index == 0 and not contour.is_closed:
                pen.addPoint(point.position.to_tuple(), segmentType="move")
                continue

            # index - 1 wraps to the last point for the closing segment
            previous = points[index - 1]
            if previous.a.colocated and point.b.colocated:
                segment_type = "line"
            else:
                segment_type = "curve"
                pen.addPoint(previous.handle_a().to_tuple())
                pen.addPoint(point.handle_b().to_tuple())

            pen.addPoint(point.position.to_tuple(), segmentType=segment_type)

        pen.endPath()


def outline_from_glif(text: str | bytes) -> Outline:
    """Parse a glif document into a handle-based Outline."""
    pen = OutlinePointPen()
    glifLib.readGlyphFromString(text, pointPen=pen)
    outline = pen.outline
    logger.debug("Read %d contours from glif", len(outline))
    return outline


def bezier_outline_from_glif(text: str | bytes) -> BezierOutline:
    """Parse a glif document straight into a piecewise outline."""
    return BezierOutline.from_outline(outline_from_glif(text))


def outline_to_glif(
    glyph_name: str,
    outline: Outline | BezierOutline,
    settings: CurveKitSettings | None = None,
) -> str:
    """Serialize an outline as a glif document.

    Args:
        glyph_name: Name written into the glif
        outline: Handle-based or piecewise outline
        settings: Library settings; the geometry colocation tolerance is
            used when converting a piecewise outline

    Returns:
        glif XML string
    """
    if isinstance(outline, BezierOutline):
        settings = settings or get_default_settings()
        outline = outline.to_outline(tolerance=settings.geometry.colocation_tolerance)

    handle_outline = outline

    def draw_points(pen: AbstractPointPen) -> None:
        draw_outline_points(handle_outline, pen)

    return glifLib.writeGlyphToString(glyph_name, None, draw_points)
