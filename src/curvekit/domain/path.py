"""Drawing-path format built from move/line/quad/cubic/close verbs.

A Path is a mutable builder in the style of a skia path or a fontTools pen.
Iterating it yields verb groups with the current point prepended, so every
drawing verb carries both of its endpoints:

- ('move', (p,))
- ('line', (p0, p1))
- ('quad', (p0, h, p1))
- ('cubic', (p0, h1, h2, p1))
- ('close', ())
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from curvekit.domain.vector import Vector


class Verb(Enum):
    """Drawing path verb."""

    MOVE = "move"
    LINE = "line"
    QUAD = "quad"
    CUBIC = "cubic"
    CLOSE = "close"


@dataclass(frozen=True, slots=True)
class PathCommand:
    """A single recorded verb with its own (non-prepended) points.

    Attributes:
        verb: Drawing verb
        points: Points supplied to the verb (1 for move/line, 2 for quad,
            3 for cubic, none for close)
    """

    verb: Verb
    points: tuple[Vector, ...] = ()


class Path:
    """Mutable drawing path.

    Example:
        path = Path()
        path.move_to(Vector(0, 0)).line_to(Vector(1, 0)).close()
        for verb, points in path:
            ...
    """

    def __init__(self) -> None:
        self._commands: list[PathCommand] = []

    @property
    def commands(self) -> tuple[PathCommand, ...]:
        """Recorded commands in drawing order."""
        return tuple(self._commands)

    def move_to(self, point: Vector) -> "Path":
        self._commands.append(PathCommand(Verb.MOVE, (point,)))
        return self

    def line_to(self, point: Vector) -> "Path":
        self._commands.append(PathCommand(Verb.LINE, (point,)))
        return self

    def quad_to(self, handle: Vector, point: Vector) -> "Path":
        self._commands.append(PathCommand(Verb.QUAD, (handle, point)))
        return self

    def cubic_to(self, handle1: Vector, handle2: Vector, point: Vector) -> "Path":
        self._commands.append(PathCommand(Verb.CUBIC, (handle1, handle2, point)))
        return self

    def close(self) -> "Path":
        self._commands.append(PathCommand(Verb.CLOSE))
        return self

    def is_empty(self) -> bool:
        return not self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._commands == other._commands

    def __repr__(self) -> str:
        return f"Path({self._commands!r})"

    def __iter__(self) -> Iterator[tuple[Verb, tuple[Vector, ...]]]:
        """Iterate verb groups with the current point prepended.

        A drawing verb issued before any move starts from the origin. After
        a close the current point returns to the subpath's start.
        """
        start = Vector(0.0, 0.0)
        current = start

        for command in self._commands:
            if command.verb == Verb.MOVE:
                start = current = command.points[0]
                yield Verb.MOVE, command.points
            elif command.verb == Verb.CLOSE:
                current = start
                yield Verb.CLOSE, ()
            else:
                yield command.verb, (current, *command.points)
                current = command.points[-1]
