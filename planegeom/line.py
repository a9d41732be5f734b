"""Lines given by the equation ax + by + c = 0."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from planegeom.shape import Shape

if TYPE_CHECKING:
    from planegeom.point import Point
    from planegeom.segment import Segment
    from planegeom.vector import Vector


@dataclass
class Line(Shape):
    """The line ``a*x + b*y + c = 0`` with integer coefficients."""

    a: int = 0
    b: int = 0
    c: int = 0

    @classmethod
    def from_points(cls, first: Point, second: Point) -> Line:
        """The line passing through two points."""
        a = second.y - first.y
        b = first.x - second.x
        return cls(a, b, -(a * first.x + b * first.y))

    def _value(self, point: Point) -> int:
        return self.a * point.x + self.b * point.y + self.c

    def move(self, vector: Vector) -> Line:
        self.c -= self.a * vector.x + self.b * vector.y
        return self

    def contains_point(self, point: Point) -> bool:
        return self._value(point) == 0

    def crosses_segment(self, segment: Segment) -> bool:
        return self._value(segment.start) * self._value(segment.end) <= 0

    def clone(self) -> Line:
        return Line(self.a, self.b, self.c)

    def __str__(self) -> str:
        return f"Line({self.a}, {self.b}, {self.c})"

    def distance_to_point(self, point: Point) -> float:
        """Euclidean distance from ``point``; raises ZeroDivisionError for a degenerate line."""
        return abs(self._value(point)) / math.hypot(self.a, self.b)