import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from planegeom.line import Line
from planegeom.point import Point
from planegeom.segment import Segment
from planegeom.vector import Vector

coords = st.integers(min_value=-1000, max_value=1000)
points = st.builds(Point, coords, coords)
vectors = st.builds(Vector, coords, coords)


def test_str_format():
    assert str(Line(1, 2, 3)) == "Line(1, 2, 3)"


@given(points, points)
def test_from_points_contains_both(p, q):
    assume(p != q)
    line = Line.from_points(p, q)
    assert line.contains_point(p)
    assert line.contains_point(q)


@given(points, points, vectors)
def test_move_carries_points_along(p, q, v):
    assume(p != q)
    line = Line.from_points(p, q)
    assert line.move(v) is line
    assert line.contains_point(p.clone().move(v))
    assert line.contains_point(q.clone().move(v))


def test_crosses_segment():
    axis = Line(0, 1, 0)
    assert axis.crosses_segment(Segment(Point(0, -1), Point(0, 1)))
    assert axis.crosses_segment(Segment(Point(0, 0), Point(1, 1)))
    assert not axis.crosses_segment(Segment(Point(0, 1), Point(0, 2)))


def test_distance_to_point():
    assert Line(0, 1, 0).distance_to_point(Point(7, -5)) == pytest.approx(5.0)
    assert Line(1, -1, 0).distance_to_point(Point(3, 3)) == pytest.approx(0.0)


@given(points, points, points)
def test_distance_zero_iff_on_line(p, q, r):
    assume(p != q)
    line = Line.from_points(p, q)
    assert (line.distance_to_point(r) == 0) == line.contains_point(r)


def test_distance_for_degenerate_line_raises():
    with pytest.raises(ZeroDivisionError):
        Line(0, 0, 1).distance_to_point(Point(1, 1))


def test_clone_is_independent():
    line = Line(1, 2, 3)
    copy = line.clone()
    copy.move(Vector(1, 0))
    assert line == Line(1, 2, 3)
    assert copy.a == line.a and copy.b == line.b
    assert copy.c != line.c