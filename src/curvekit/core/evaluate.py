"""Evaluate capability shared by single curves and piecewise compositions."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Self

from curvekit.domain import Rect, Vector

Transform = Callable[[Vector], Vector]


class Evaluate(ABC):
    """A curve-like value addressed by a parameter t in [0, 1].

    Both Bezier and Piecewise implement this, which lets a Piecewise hold
    other Piecewise values (contours inside an outline).
    """

    __slots__ = ()

    @abstractmethod
    def evaluate(self, t: float) -> Vector:
        """Position at parameter t."""

    @abstractmethod
    def derivative(self, t: float) -> Vector:
        """Tangent vector at parameter t."""

    @abstractmethod
    def bounds(self) -> Rect:
        """Tight axis-aligned bounding box over the whole domain."""

    @abstractmethod
    def apply_transform(self, transform: Transform) -> Self:
        """Return a new value with every control point mapped through transform."""
