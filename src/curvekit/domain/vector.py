"""2D vector and axis-aligned rectangle value types.

This module defines the primitive geometric values used by every curve:
- Vector: An immutable 2D point or displacement
- Rect: An immutable axis-aligned bounding box
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector:
    """A 2D vector.

    Immutable and hashable. Equality compares components exactly.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector":
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def lerp(self, other: "Vector", t: float) -> "Vector":
        """Linearly interpolate towards another vector.

        Args:
            other: Target vector (reached at t=1)
            t: Interpolation parameter, not clamped

        Returns:
            Interpolated vector
        """
        return Vector(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def distance(self, other: "Vector") -> float:
        """Euclidean distance to another vector."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, pt: tuple[float, float]) -> "Vector":
        """Build a vector from an (x, y) pair such as a fontTools pen point."""
        x, y = pt
        return cls(float(x), float(y))


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle.

    ``Rect.empty()`` is inverted-infinite so that encapsulating anything
    into it yields exactly that thing's box.

    Attributes:
        left: Minimum x
        bottom: Minimum y
        right: Maximum x
        top: Maximum y
    """

    left: float
    bottom: float
    right: float
    top: float

    @classmethod
    def empty(cls) -> "Rect":
        """Return the inverted-infinite rectangle used as a union seed."""
        return cls(math.inf, math.inf, -math.inf, -math.inf)

    @classmethod
    def from_points(cls, points: Iterable[Vector]) -> "Rect":
        """Tight bounding box of a set of points."""
        rect = cls.empty()
        for point in points:
            rect = rect.encapsulate(point)
        return rect

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    def is_empty(self) -> bool:
        """True for a rectangle that encloses nothing (e.g. ``Rect.empty()``)."""
        return self.left > self.right or self.bottom > self.top

    def encapsulate(self, point: Vector) -> "Rect":
        """Return the smallest rectangle containing this one and a point."""
        return Rect(
            min(self.left, point.x),
            min(self.bottom, point.y),
            max(self.right, point.x),
            max(self.top, point.y),
        )

    def encapsulate_rect(self, other: "Rect") -> "Rect":
        """Return the union of this rectangle and another."""
        return Rect(
            min(self.left, other.left),
            min(self.bottom, other.bottom),
            max(self.right, other.right),
            max(self.top, other.top),
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y), the fontTools bounds order."""
        return (self.left, self.bottom, self.right, self.top)
