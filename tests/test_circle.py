from hypothesis import given
from hypothesis import strategies as st

from planegeom.circle import Circle
from planegeom.point import Point
from planegeom.segment import Segment
from planegeom.vector import Vector

coords = st.integers(min_value=-100, max_value=100)
points = st.builds(Point, coords, coords)
vectors = st.builds(Vector, coords, coords)
radii = st.integers(min_value=0, max_value=50)


def test_str_format():
    assert str(Circle(Point(1, 2), 3)) == "Circle(Point(1, 2), 3)"


def test_contains_point_cases():
    circle = Circle(Point(0, 0), 5)
    assert circle.contains_point(Point(0, 0))
    assert circle.contains_point(Point(3, 4))
    assert not circle.contains_point(Point(4, 4))


def test_perimeter_contains_point():
    circle = Circle(Point(0, 0), 5)
    assert circle.perimeter_contains_point(Point(3, 4))
    assert circle.perimeter_contains_point(Point(-5, 0))
    assert not circle.perimeter_contains_point(Point(0, 0))


@given(points, radii, points)
def test_perimeter_implies_contained(center, r, p):
    circle = Circle(center, r)
    if circle.perimeter_contains_point(p):
        assert circle.contains_point(p)


def test_crosses_segment_cases():
    circle = Circle(Point(0, 0), 5)
    assert circle.crosses_segment(Segment(Point(-10, 0), Point(10, 0)))
    assert not circle.crosses_segment(Segment(Point(1, 1), Point(2, 2)))
    assert circle.crosses_segment(Segment(Point(-10, 5), Point(10, 5)))
    assert not circle.crosses_segment(Segment(Point(-10, 10), Point(10, 10)))
    assert circle.crosses_segment(Segment(Point(0, 0), Point(10, 0)))
    assert circle.crosses_segment(Segment(Point(5, 0), Point(20, 0)))


@given(points, radii, points, vectors)
def test_containment_invariant_under_move(center, r, p, v):
    circle = Circle(center, r)
    before = circle.contains_point(p)
    assert circle.clone().move(v).contains_point(p.clone().move(v)) == before


def test_constructor_copies_center():
    center = Point(1, 1)
    circle = Circle(center, 2)
    center.move(Vector(10, 10))
    assert circle.center == Point(1, 1)


def test_move_returns_self():
    circle = Circle(Point(0, 0), 1)
    assert circle.move(Vector(2, 3)) is circle
    assert circle == Circle(Point(2, 3), 1)