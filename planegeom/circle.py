"""Circles with integer centre and radius."""

from __future__ import annotations

from dataclasses import dataclass, field

from planegeom.point import Point
from planegeom.segment import Segment
from planegeom.shape import Shape
from planegeom.vector import Vector


@dataclass
class Circle(Shape):
    """The closed disc of ``radius`` around ``center``."""

    center: Point = field(default_factory=Point)
    radius: int = 0

    def __post_init__(self) -> None:
        self.center = self.center.clone()

    def move(self, vector: Vector) -> Circle:
        self.center.move(vector)
        return self

    def contains_point(self, point: Point) -> bool:
        return (point - self.center).length_squared() <= self.radius * self.radius

    def perimeter_contains_point(self, point: Point) -> bool:
        """Whether ``point`` lies exactly on the circle's boundary."""
        return (point - self.center).length_squared() == self.radius * self.radius

    def crosses_segment(self, segment: Segment) -> bool:
        """Whether ``segment`` touches the boundary of the circle."""
        if self.perimeter_contains_point(segment.start) or self.perimeter_contains_point(
            segment.end
        ):
            return True
        start_inside = self.contains_point(segment.start)
        end_inside = self.contains_point(segment.end)
        if start_inside and end_inside:
            return False
        if start_inside or end_inside:
            return True
        return int(segment.distance_to_point(self.center)) <= self.radius

    def clone(self) -> Circle:
        return Circle(self.center, self.radius)

    def __str__(self) -> str:
        return f"Circle({self.center}, {self.radius})"