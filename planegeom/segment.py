"""Closed segments between two points."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from planegeom.line import Line
from planegeom.point import Point
from planegeom.shape import Shape
from planegeom.vector import Vector


@dataclass
class Segment(Shape):
    """The closed segment from ``start`` to ``end``."""

    start: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)

    def __post_init__(self) -> None:
        self.start = self.start.clone()
        self.end = self.end.clone()

    def move(self, vector: Vector) -> Segment:
        self.start.move(vector)
        self.end.move(vector)
        return self

    def contains_point(self, point: Point) -> bool:
        return point.crosses_segment(self)

    def crosses_segment(self, other: Segment) -> bool:
        if (
            self.contains_point(other.start)
            or self.contains_point(other.end)
            or other.contains_point(self.start)
            or other.contains_point(self.end)
        ):
            return True
        return not self._same_half(other) and not other._same_half(self)

    def _oriented_area_x2(self, point: Point) -> int:
        return (self.start.x - point.x) * (self.end.y - point.y) - (
            self.end.x - point.x
        ) * (self.start.y - point.y)

    def _same_half(self, other: Segment) -> bool:
        return self._oriented_area_x2(other.start) * self._oriented_area_x2(other.end) >= 0

    def clone(self) -> Segment:
        return Segment(self.start, self.end)

    def __str__(self) -> str:
        return f"Segment({self.start}, {self.end})"

    def distance_to_point(self, point: Point) -> float:
        """Euclidean distance from ``point`` to the nearest point of the segment."""
        to_start = point - self.start
        to_end = point - self.end
        direction = self.end - self.start
        if to_start.x * direction.x + to_start.y * direction.y <= 0:
            return math.sqrt(to_start.length_squared())
        if to_end.x * direction.x + to_end.y * direction.y >= 0:
            return math.sqrt(to_end.length_squared())
        return Line.from_points(self.start, self.end).distance_to_point(point)