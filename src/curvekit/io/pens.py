"""Bridges between fontTools segment pens and curvekit paths.

fontTools glyphs draw themselves into pens. PathPen records those calls as
a curvekit Path; draw_path and draw_outline go the other way and replay
curvekit geometry into any fontTools pen (TTGlyphPen, T2CharStringPen,
BoundsPen, RecordingPen, ...).
"""

from typing import Any

from fontTools.pens.basePen import AbstractPen, BasePen

from curvekit.core import BezierOutline
from curvekit.domain import Path, Vector, Verb


class PathPen(BasePen):
    """fontTools pen that records drawing calls into a Path.

    BasePen splits TrueType quadratic runs with implied on-curve points
    into single quads, so the recorded path only holds the five path verbs.
    A fontTools closePath implies a line back to the subpath start; that
    line is recorded explicitly so the closing edge becomes a segment.

    Example:
        pen = PathPen(glyph_set)
        glyph_set["O"].draw(pen)
        outline = BezierOutline.from_path(pen.path)
    """

    def __init__(self, glyphSet: Any = None) -> None:
        super().__init__(glyphSet)
        self.path = Path()
        self._subpath_start: Vector | None = None

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self._subpath_start = Vector.from_tuple(pt)
        self.path.move_to(self._subpath_start)

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.path.line_to(Vector.from_tuple(pt))

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.path.quad_to(Vector.from_tuple(pt1), Vector.from_tuple(pt2))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.path.cubic_to(Vector.from_tuple(pt1), Vector.from_tuple(pt2), Vector.from_tuple(pt3))

    def _closePath(self) -> None:
        current = self._getCurrentPoint()
        start = self._subpath_start
        if start is not None and current is not None and Vector.from_tuple(current) != start:
            self.path.line_to(start)
        self.path.close()
        self._subpath_start = None

    def _endPath(self) -> None:
        # Open subpaths simply end; the next move starts a new one.
        pass


def draw_path(path: Path, pen: AbstractPen) -> None:
    """Replay a Path into a fontTools segment pen.

    Subpaths that are not explicitly closed are finished with endPath.

    Args:
        path: Path to replay
        pen: Any fontTools segment pen
    """
    open_subpath = False

    for command in path.commands:
        points = [p.to_tuple() for p in command.points]

        if command.verb == Verb.MOVE:
            if open_subpath:
                pen.endPath()
            pen.moveTo(points[0])
            open_subpath = True
        elif command.verb == Verb.LINE:
            pen.lineTo(points[0])
        elif command.verb == Verb.QUAD:
            pen.qCurveTo(*points)
        elif command.verb == Verb.CUBIC:
            pen.curveTo(*points)
        elif command.verb == Verb.CLOSE:
            pen.closePath()
            open_subpath = False

    if open_subpath:
        pen.endPath()


def draw_outline(outline: BezierOutline, pen: AbstractPen) -> None:
    """Draw every contour of an outline as a closed fontTools contour.

    Segments whose handles both sit on their endpoints are drawn as lines,
    everything else as cubic curves.

    Args:
        outline: Outline to draw
        pen: Any fontTools segment pen accepting cubic curves
    """
    for contour in outline:
        if not len(contour):
            continue

        pen.moveTo(contour[0].p0.to_tuple())
        for curve in contour:
            if curve.is_line():
                pen.lineTo(curve.p3.to_tuple())
            else:
                pen.curveTo(curve.p1.to_tuple(), curve.p2.to_tuple(), curve.p3.to_tuple())
        pen.closePath()
