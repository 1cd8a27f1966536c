"""Handle-based font outline types.

An outline point carries its own bezier handles instead of interleaving
off-curve points with on-curve ones:
- Handle: A control point, either colocated with its owner or absolute
- PointType: Enum for the kind of on-curve point
- OutlinePoint: An on-curve point with incoming and outgoing handles
- Contour: An ordered sequence of outline points
- Outline: An ordered sequence of contours
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from curvekit.domain.vector import Vector


class PointType(Enum):
    """Type of an on-curve outline point.

    A contour whose first point is MOVE is open; any other type on the
    first point means the contour closes back onto it.
    """

    MOVE = "move"
    LINE = "line"
    CURVE = "curve"
    QCURVE = "qcurve"


@dataclass(frozen=True, slots=True)
class Handle:
    """A bezier handle attached to an outline point.

    A colocated handle has zero length: it sits on its owning point, so
    the segment it belongs to degrades towards a straight line.

    Attributes:
        x: Absolute x position (ignored when colocated)
        y: Absolute y position (ignored when colocated)
        colocated: Whether the handle sits on its owning point
    """

    COLOCATED: ClassVar["Handle"]

    x: float = 0.0
    y: float = 0.0
    colocated: bool = False

    @classmethod
    def at(cls, position: Vector) -> "Handle":
        """Absolute handle at the given position."""
        return cls(position.x, position.y)

    def resolve(self, owner: Vector) -> Vector:
        """Return the handle's effective position given its owning point."""
        if self.colocated:
            return owner
        return Vector(self.x, self.y)


Handle.COLOCATED = Handle(colocated=True)


@dataclass(frozen=True, slots=True)
class OutlinePoint:
    """An on-curve point with its bezier handles.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
        ptype: Kind of point
        a: Outgoing handle, towards the next point
        b: Incoming handle, from the previous point
    """

    x: float
    y: float
    ptype: PointType = PointType.CURVE
    a: Handle = Handle.COLOCATED
    b: Handle = Handle.COLOCATED

    @property
    def position(self) -> Vector:
        return Vector(self.x, self.y)

    def handle_a(self) -> Vector:
        """Effective position of the outgoing handle."""
        return self.a.resolve(self.position)

    def handle_b(self) -> Vector:
        """Effective position of the incoming handle."""
        return self.b.resolve(self.position)


@dataclass(frozen=True)
class Contour:
    """A sequence of outline points forming one loop or open stroke.

    Attributes:
        points: Points in drawing order
    """

    points: tuple[OutlinePoint, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, index: int) -> OutlinePoint:
        return self.points[index]

    @property
    def is_closed(self) -> bool:
        """A contour is closed unless its first point is a move."""
        return bool(self.points) and self.points[0].ptype != PointType.MOVE


@dataclass(frozen=True)
class Outline:
    """A full shape: an ordered sequence of contours.

    Attributes:
        contours: Contours in drawing order
    """

    contours: tuple[Contour, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "contours", tuple(self.contours))

    def __len__(self) -> int:
        return len(self.contours)

    def __iter__(self):
        return iter(self.contours)

    def __getitem__(self, index: int) -> Contour:
        return self.contours[index]
