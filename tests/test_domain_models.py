"""Tests for domain models to verify they work correctly."""

import math

import pytest

from curvekit.domain import (
    Contour,
    Handle,
    Outline,
    OutlinePoint,
    Path,
    PathCommand,
    PointType,
    Rect,
    Vector,
    Verb,
)


class TestVector:
    """Tests for Vector class."""

    def test_vector_arithmetic(self) -> None:
        """Test addition, subtraction and scaling."""
        a = Vector(1.0, 2.0)
        b = Vector(3.0, 5.0)
        assert a + b == Vector(4.0, 7.0)
        assert b - a == Vector(2.0, 3.0)
        assert a * 2.0 == Vector(2.0, 4.0)
        assert 2.0 * a == Vector(2.0, 4.0)

    def test_lerp(self) -> None:
        """Test linear interpolation including extrapolation."""
        a = Vector(0.0, 0.0)
        b = Vector(10.0, 20.0)
        assert a.lerp(b, 0.25) == Vector(2.5, 5.0)
        assert a.lerp(b, 1.5) == Vector(15.0, 30.0)

    def test_exact_equality(self) -> None:
        """Test that equality compares components exactly."""
        assert Vector(0.1 + 0.2, 0.0) != Vector(0.3, 0.0)
        assert Vector(1.0, 1.0) == Vector(1, 1)

    def test_from_tuple(self) -> None:
        """Test building from a pen point."""
        v = Vector.from_tuple((3, 4))
        assert v == Vector(3.0, 4.0)
        assert v.to_tuple() == (3.0, 4.0)

    def test_vector_immutable(self) -> None:
        """Test that vector is immutable."""
        v = Vector(1.0, 2.0)
        with pytest.raises(AttributeError):
            v.x = 3.0  # type: ignore


class TestRect:
    """Tests for Rect class."""

    def test_empty_is_inverted_infinite(self) -> None:
        """Test the union seed rectangle."""
        rect = Rect.empty()
        assert rect.left == math.inf
        assert rect.right == -math.inf
        assert rect.is_empty()

    def test_encapsulate_rect_into_empty(self) -> None:
        """Test that the empty seed disappears in a union."""
        rect = Rect(1.0, 2.0, 3.0, 4.0)
        assert Rect.empty().encapsulate_rect(rect) == rect

    def test_encapsulate_point(self) -> None:
        """Test growing a rectangle by a point."""
        rect = Rect(0.0, 0.0, 1.0, 1.0).encapsulate(Vector(2.0, -1.0))
        assert rect == Rect(0.0, -1.0, 2.0, 1.0)

    def test_from_points(self) -> None:
        """Test tight box of a point set."""
        rect = Rect.from_points([Vector(10, 20), Vector(100, 30), Vector(50, 150)])
        assert rect.to_tuple() == (10.0, 20.0, 100.0, 150.0)
        assert rect.width == 90.0
        assert rect.height == 130.0


class TestHandle:
    """Tests for Handle class."""

    def test_colocated_resolves_to_owner(self) -> None:
        """Test that a colocated handle sits on its point."""
        owner = Vector(5.0, 5.0)
        assert Handle.COLOCATED.resolve(owner) == owner

    def test_absolute_handle(self) -> None:
        """Test that an absolute handle ignores its owner."""
        handle = Handle.at(Vector(1.0, 2.0))
        assert not handle.colocated
        assert handle.resolve(Vector(5.0, 5.0)) == Vector(1.0, 2.0)


class TestOutlinePoint:
    """Tests for OutlinePoint class."""

    def test_defaults(self) -> None:
        """Test default point type and handles."""
        p = OutlinePoint(1.0, 2.0)
        assert p.ptype == PointType.CURVE
        assert p.a.colocated
        assert p.b.colocated
        assert p.handle_a() == Vector(1.0, 2.0)

    def test_handles(self) -> None:
        """Test effective handle positions."""
        p = OutlinePoint(0.0, 0.0, a=Handle(3.0, 0.0), b=Handle(0.0, -3.0))
        assert p.handle_a() == Vector(3.0, 0.0)
        assert p.handle_b() == Vector(0.0, -3.0)


class TestContour:
    """Tests for Contour and Outline classes."""

    def test_contour_closed_unless_move(self) -> None:
        """Test closure rule on the first point."""
        closed = Contour([OutlinePoint(0, 0), OutlinePoint(1, 0)])
        opened = Contour([OutlinePoint(0, 0, PointType.MOVE), OutlinePoint(1, 0)])
        assert closed.is_closed
        assert not opened.is_closed

    def test_contour_stores_tuple(self) -> None:
        """Test that lists are frozen into tuples."""
        contour = Contour([OutlinePoint(0, 0), OutlinePoint(1, 0)])
        assert isinstance(contour.points, tuple)
        assert len(contour) == 2
        assert contour[1] == OutlinePoint(1, 0)

    def test_outline_sequence(self) -> None:
        """Test outline container behaviour."""
        contour = Contour([OutlinePoint(0, 0), OutlinePoint(1, 0)])
        outline = Outline([contour, contour])
        assert len(outline) == 2
        assert list(outline) == [contour, contour]


class TestPath:
    """Tests for Path builder and iteration."""

    def test_commands_recorded(self) -> None:
        """Test that builder calls are recorded in order."""
        path = Path().move_to(Vector(0, 0)).line_to(Vector(1, 0)).close()
        assert path.commands == (
            PathCommand(Verb.MOVE, (Vector(0, 0),)),
            PathCommand(Verb.LINE, (Vector(1, 0),)),
            PathCommand(Verb.CLOSE),
        )

    def test_iteration_prepends_current_point(self) -> None:
        """Test verb groups carry their start point."""
        path = (
            Path()
            .move_to(Vector(0, 0))
            .line_to(Vector(10, 0))
            .quad_to(Vector(10, 10), Vector(0, 10))
            .cubic_to(Vector(-5, 10), Vector(-5, 0), Vector(0, 0))
            .close()
        )
        groups = list(path)

        assert groups[0] == (Verb.MOVE, (Vector(0, 0),))
        assert groups[1] == (Verb.LINE, (Vector(0, 0), Vector(10, 0)))
        assert groups[2] == (Verb.QUAD, (Vector(10, 0), Vector(10, 10), Vector(0, 10)))
        assert groups[3][0] == Verb.CUBIC
        assert len(groups[3][1]) == 4
        assert groups[3][1][0] == Vector(0, 10)
        assert groups[4] == (Verb.CLOSE, ())

    def test_close_returns_to_subpath_start(self) -> None:
        """Test that drawing after close starts from the subpath start."""
        path = Path().move_to(Vector(5, 5)).line_to(Vector(6, 5)).close().line_to(Vector(7, 7))
        groups = list(path)
        assert groups[-1] == (Verb.LINE, (Vector(5, 5), Vector(7, 7)))

    def test_equality(self) -> None:
        """Test paths compare by their commands."""
        a = Path().move_to(Vector(0, 0)).line_to(Vector(1, 1))
        b = Path().move_to(Vector(0, 0)).line_to(Vector(1, 1))
        assert a == b
        assert a != Path()
        assert Path().is_empty()
