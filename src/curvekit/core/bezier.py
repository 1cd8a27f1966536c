"""Cubic Bezier segment.

A Bezier stores its four control points. The polynomial form

    x(t) = A t^3 + B t^2 + C t + D
    y(t) = E t^3 + F t^2 + G t + H

is derived from them on demand, so the two views cannot drift apart.
Lines and quadratics are degree-elevated to cubics on construction; every
segment downstream is cubic.
"""

import math
from dataclasses import dataclass

from curvekit.core.evaluate import Evaluate, Transform
from curvekit.domain import OutlinePoint, Rect, Vector

# Below this a derivative coefficient counts as zero when solving for extrema.
ROOT_EPSILON = 1e-12


@dataclass(frozen=True, slots=True)
class Coefficients:
    """Polynomial coefficients of a cubic, x over A..D and y over E..H."""

    A: float
    B: float
    C: float
    D: float
    E: float
    F: float
    G: float
    H: float


def _axis_extrema(a: float, b: float, c: float) -> list[float]:
    """Roots in (0, 1) of the derivative 3a t^2 + 2b t + c."""
    qa, qb, qc = 3.0 * a, 2.0 * b, c

    if abs(qa) < ROOT_EPSILON:
        if abs(qb) < ROOT_EPSILON:
            return []
        roots = [-qc / qb]
    else:
        disc = qb * qb - 4.0 * qa * qc
        if disc < 0.0:
            return []
        sq = math.sqrt(disc)
        roots = [(-qb + sq) / (2.0 * qa), (-qb - sq) / (2.0 * qa)]

    return [t for t in roots if 0.0 < t < 1.0]


@dataclass(frozen=True, slots=True)
class Bezier(Evaluate):
    """A cubic Bezier segment.

    Attributes:
        p0: Start point
        p1: First handle
        p2: Second handle
        p3: End point
    """

    p0: Vector
    p1: Vector
    p2: Vector
    p3: Vector

    @classmethod
    def from_points(cls, p0: Vector, p1: Vector, p2: Vector, p3: Vector) -> "Bezier":
        return cls(p0, p1, p2, p3)

    @classmethod
    def from_outline_points(cls, point: OutlinePoint, next_point: OutlinePoint) -> "Bezier":
        """Build the segment running from one outline point to the next.

        The interior control points are the outgoing handle of ``point`` and
        the incoming handle of ``next_point``. A colocated handle resolves to
        its owning point, so line, quadratic-elevated and cubic segments all
        come through the same path.

        Args:
            point: Segment start, whose ``a`` handle is used
            next_point: Segment end, whose ``b`` handle is used

        Returns:
            Cubic segment between the two points
        """
        return cls(point.position, point.handle_a(), next_point.handle_b(), next_point.position)

    @classmethod
    def line(cls, start: Vector, end: Vector) -> "Bezier":
        """Straight segment with both handles collapsed onto their endpoints."""
        return cls(start, start, end, end)

    @classmethod
    def quadratic(cls, start: Vector, handle: Vector, end: Vector) -> "Bezier":
        """Degree-elevate a quadratic segment to the equivalent cubic."""
        return cls(
            start,
            start + (handle - start) * (2.0 / 3.0),
            end + (handle - end) * (2.0 / 3.0),
            end,
        )

    @classmethod
    def from_coefficients(cls, coefficients: Coefficients) -> "Bezier":
        """Rebuild control points from polynomial coefficients."""
        A, B, C, D, E, F, G, H = (
            coefficients.A,
            coefficients.B,
            coefficients.C,
            coefficients.D,
            coefficients.E,
            coefficients.F,
            coefficients.G,
            coefficients.H,
        )
        return cls(
            Vector(D, H),
            Vector(D + C / 3.0, H + G / 3.0),
            Vector(D + 2.0 * C / 3.0 + B / 3.0, H + 2.0 * G / 3.0 + F / 3.0),
            Vector(D + C + B + A, H + G + F + E),
        )

    def coefficients(self) -> Coefficients:
        """Expand the control points into polynomial coefficients."""
        x0, y0 = self.p0.x, self.p0.y
        x1, y1 = self.p1.x, self.p1.y
        x2, y2 = self.p2.x, self.p2.y
        x3, y3 = self.p3.x, self.p3.y

        return Coefficients(
            A=x3 - 3.0 * x2 + 3.0 * x1 - x0,
            B=3.0 * x2 - 6.0 * x1 + 3.0 * x0,
            C=3.0 * x1 - 3.0 * x0,
            D=x0,
            E=y3 - 3.0 * y2 + 3.0 * y1 - y0,
            F=3.0 * y2 - 6.0 * y1 + 3.0 * y0,
            G=3.0 * y1 - 3.0 * y0,
            H=y0,
        )

    def to_control_points(self) -> tuple[Vector, Vector, Vector, Vector]:
        return (self.p0, self.p1, self.p2, self.p3)

    def to_control_points_vec(self) -> list[Vector]:
        return [self.p0, self.p1, self.p2, self.p3]

    def is_line(self) -> bool:
        """True when both handles sit on their endpoints."""
        return self.p0 == self.p1 and self.p2 == self.p3

    def evaluate(self, t: float) -> Vector:
        k = self.coefficients()
        x = ((k.A * t + k.B) * t + k.C) * t + k.D
        y = ((k.E * t + k.F) * t + k.G) * t + k.H
        return Vector(x, y)

    def derivative(self, t: float) -> Vector:
        k = self.coefficients()
        dx = (3.0 * k.A * t + 2.0 * k.B) * t + k.C
        dy = (3.0 * k.E * t + 2.0 * k.F) * t + k.G
        return Vector(dx, dy)

    def bounds(self) -> Rect:
        """Tight bounding box: endpoints plus interior extrema on each axis."""
        k = self.coefficients()
        rect = Rect.from_points((self.p0, self.p3))

        for t in _axis_extrema(k.A, k.B, k.C) + _axis_extrema(k.E, k.F, k.G):
            rect = rect.encapsulate(self.evaluate(t))

        return rect

    def apply_transform(self, transform: Transform) -> "Bezier":
        return Bezier(transform(self.p0), transform(self.p1), transform(self.p2), transform(self.p3))

    def subdivide(self, t: float) -> tuple["Bezier", "Bezier"]:
        """Split into two cubics at parameter t using De Casteljau's algorithm.

        Both halves share the point at t. A t outside [0, 1] is not clamped
        and extrapolates the curve.

        Args:
            t: Split parameter

        Returns:
            Tuple of (first half, second half)
        """
        # First level
        q0 = self.p0.lerp(self.p1, t)
        q1 = self.p1.lerp(self.p2, t)
        q2 = self.p2.lerp(self.p3, t)

        # Second level
        r0 = q0.lerp(q1, t)
        r1 = q1.lerp(q2, t)

        # Split point
        mid = r0.lerp(r1, t)

        return Bezier(self.p0, q0, r0, mid), Bezier(mid, r1, q2, self.p3)
