"""Piecewise curves: sequences of segments addressed by one parameter.

Piecewise maps t in [0, 1] onto its segments so that 0 is the start of the
first segment and 1 the end of the last, each segment owning an equal-width
sub-interval. Two concrete levels are built on it:

- BezierContour: Piecewise of Bezier segments, one contour
- BezierOutline: Piecewise of BezierContour, a whole outline

Both levels convert to and from the handle-based Outline format and the
drawing Path format.
"""

import logging
import math
from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, Self, TypeVar

from curvekit.core.bezier import Bezier
from curvekit.core.evaluate import Evaluate, Transform
from curvekit.domain import (
    Contour,
    Handle,
    Outline,
    OutlinePoint,
    Path,
    PointType,
    Rect,
    Vector,
    Verb,
)
from curvekit.exceptions import (
    EmptySequenceError,
    InvalidParameterError,
    MalformedContourError,
    UnsupportedPrimitiveError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Evaluate)

# Points each verb group carries when read from a Path (current point included)
_VERB_POINT_COUNTS = {
    Verb.MOVE: 1,
    Verb.LINE: 2,
    Verb.QUAD: 3,
    Verb.CUBIC: 4,
    Verb.CLOSE: 0,
}


class Piecewise(Evaluate, Generic[T]):
    """An ordered sequence of segments treated as one curve over [0, 1].

    Construction accepts an empty sequence, but evaluating, differentiating
    or bounding an empty piecewise raises EmptySequenceError.

    Attributes:
        curves: Segments in parameter order
    """

    __slots__ = ("_curves",)

    def __init__(self, curves: Iterable[T]) -> None:
        self._curves: tuple[T, ...] = tuple(curves)

    @property
    def curves(self) -> tuple[T, ...]:
        return self._curves

    def __len__(self) -> int:
        return len(self._curves)

    def __iter__(self) -> Iterator[T]:
        return iter(self._curves)

    def __getitem__(self, index: int) -> T:
        return self._curves[index]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._curves == other._curves  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._curves))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._curves)!r})"

    def locate(self, t: float, operation: str = "evaluate") -> tuple[int, float]:
        """Map a global parameter onto (segment index, local parameter).

        The last sub-interval is closed on the right so that t=1 lands on
        the end of the last segment rather than past it.

        Args:
            t: Global parameter
            operation: Verb used in the error message when empty

        Returns:
            Tuple of (segment index, parameter local to that segment)

        Raises:
            EmptySequenceError: If there are no segments
            InvalidParameterError: If t is NaN or infinite
        """
        n = len(self._curves)
        if n == 0:
            raise EmptySequenceError(operation)

        modified_time = n * t
        if not math.isfinite(modified_time):
            raise InvalidParameterError(t)
        index = max(0, min(math.floor(modified_time), n - 1))
        return index, modified_time - index

    def evaluate(self, t: float) -> Vector:
        index, local_t = self.locate(t, "evaluate")
        return self._curves[index].evaluate(local_t)

    def derivative(self, t: float) -> Vector:
        index, local_t = self.locate(t, "differentiate")
        return self._curves[index].derivative(local_t)

    def bounds(self) -> Rect:
        if not self._curves:
            raise EmptySequenceError("bound")

        output = Rect.empty()
        for curve in self._curves:
            output = output.encapsulate_rect(curve.bounds())

        return output

    def apply_transform(self, transform: Transform) -> Self:
        return type(self)(curve.apply_transform(transform) for curve in self._curves)


def _to_handle(handle: Vector, owner: Vector, tolerance: float) -> Handle:
    """Emit a handle, collapsing it to colocated when it sits on its owner."""
    if handle == owner or (tolerance > 0.0 and handle.distance(owner) <= tolerance):
        return Handle.COLOCATED
    return Handle.at(handle)


def _as_vector(point: Vector | tuple[float, float]) -> Vector:
    if isinstance(point, Vector):
        return point
    return Vector.from_tuple(point)


def _as_verb(verb: Verb | str) -> Verb:
    if isinstance(verb, Verb):
        return verb
    try:
        return Verb(verb)
    except ValueError:
        raise UnsupportedPrimitiveError(verb) from None


class BezierContour(Piecewise[Bezier]):
    """One contour as a piecewise cubic curve."""

    __slots__ = ()

    @classmethod
    def from_contour(cls, contour: Contour) -> "BezierContour":
        """Build one segment per consecutive pair of outline points.

        A contour whose first point is not a move is closed: a final
        segment runs from the last point back to the first. A contour of k
        points therefore yields k segments when closed and k - 1 when open.

        Args:
            contour: Handle-based contour with at least 2 points

        Returns:
            Piecewise cubic contour

        Raises:
            MalformedContourError: If the contour has fewer than 2 points
        """
        points = contour.points
        if len(points) < 2:
            raise MalformedContourError(f"need at least 2 points, got {len(points)}")

        curves = [
            Bezier.from_outline_points(point, next_point)
            for point, next_point in zip(points, points[1:])
        ]

        if points[0].ptype != PointType.MOVE:
            curves.append(Bezier.from_outline_points(points[-1], points[0]))

        return cls(curves)

    def to_contour(self, tolerance: float = 0.0) -> Contour:
        """Convert back to a handle-based contour.

        Each segment contributes the point at its start. The outgoing handle
        comes from the segment's second control point and the incoming
        handle from the previous segment's third control point; for the
        first point that previous segment is the last one, which reconnects
        the loop.

        Args:
            tolerance: Distance under which a handle is emitted as colocated
                (0 compares exactly)

        Returns:
            Contour with one point per segment

        Raises:
            EmptySequenceError: If there are no segments
        """
        if not self._curves:
            raise EmptySequenceError("convert")

        points: list[OutlinePoint] = []
        for index, curve in enumerate(self._curves):
            # index - 1 wraps to the last segment for the first point
            incoming = self._curves[index - 1]
            start = curve.p0
            ptype = PointType.LINE if incoming.is_line() else PointType.CURVE

            points.append(
                OutlinePoint(
                    start.x,
                    start.y,
                    ptype,
                    a=_to_handle(curve.p1, start, tolerance),
                    b=_to_handle(incoming.p2, start, tolerance),
                )
            )

        return Contour(points)

    def append_to_path(self, path: Path) -> Path:
        """Emit this contour into a drawing path.

        Issues one move to the first segment's start, then a cubic per
        segment. A segment whose control points satisfy P0 == P2 and
        P1 == P3 also gets a line to its end ahead of the cubic.

        Args:
            path: Path to append to

        Returns:
            The same path, for chaining
        """
        for index, curve in enumerate(self._curves):
            p0, p1, p2, p3 = curve.to_control_points()

            if index == 0:
                path.move_to(p0)

            if p0 == p2 and p1 == p3:
                path.line_to(p3)

            path.cubic_to(p1, p2, p3)

        return path

    def to_path(self) -> Path:
        return self.append_to_path(Path())

    def subdivide(self, t: float) -> "BezierContour":
        """Split every segment at t, doubling the segment count.

        The contour's image is unchanged; only its parameterization gets
        finer.
        """
        new_curves: list[Bezier] = []
        for curve in self._curves:
            new_curves.extend(curve.subdivide(t))

        return BezierContour(new_curves)


class BezierOutline(Piecewise[BezierContour]):
    """A whole outline as a piecewise of contours."""

    __slots__ = ()

    @classmethod
    def from_outline(cls, outline: Outline) -> "BezierOutline":
        return cls(BezierContour.from_contour(contour) for contour in outline)

    def to_outline(self, tolerance: float = 0.0) -> Outline:
        return Outline([contour.to_contour(tolerance) for contour in self._curves])

    @classmethod
    def from_path(
        cls,
        path: Iterable[tuple[Verb | str, Sequence[Vector | tuple[float, float]]]],
    ) -> "BezierOutline":
        """Parse a drawing path into one contour per subpath.

        Lines and quadratics are degree-elevated to cubics. A subpath ends
        at a close or at the next move; empty subpaths are dropped.

        Args:
            path: A Path, or any iterable of (verb, points) groups with the
                current point prepended as Path iteration yields them.
                Verbs may be Verb members or their string values.

        Returns:
            Outline of piecewise cubic contours

        Raises:
            UnsupportedPrimitiveError: If a verb is not move/line/quad/cubic/close
            MalformedContourError: If a verb carries the wrong number of points
        """
        contours: list[BezierContour] = []
        current: list[Bezier] = []

        for raw_verb, raw_points in path:
            verb = _as_verb(raw_verb)
            points = [_as_vector(p) for p in raw_points]

            expected = _VERB_POINT_COUNTS[verb]
            if len(points) != expected:
                raise MalformedContourError(
                    f"{verb.value} expects {expected} points, got {len(points)}"
                )

            if verb == Verb.MOVE or verb == Verb.CLOSE:
                if current:
                    contours.append(BezierContour(current))
                current = []
            elif verb == Verb.LINE:
                current.append(Bezier.line(points[0], points[1]))
            elif verb == Verb.QUAD:
                current.append(Bezier.quadratic(points[0], points[1], points[2]))
            elif verb == Verb.CUBIC:
                current.append(Bezier(points[0], points[1], points[2], points[3]))

        if current:
            contours.append(BezierContour(current))

        logger.debug(
            "Parsed path into %d contours (%d segments)",
            len(contours),
            sum(len(c) for c in contours),
        )

        return cls(contours)

    def append_to_path(self, path: Path) -> Path:
        for contour in self._curves:
            contour.append_to_path(path)

        return path

    def to_path(self) -> Path:
        return self.append_to_path(Path())

    def subdivide(self, t: float) -> "BezierOutline":
        return BezierOutline(contour.subdivide(t) for contour in self._curves)
