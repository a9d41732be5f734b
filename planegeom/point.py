"""Points on the integer plane."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from planegeom.shape import Shape
from planegeom.vector import Vector

if TYPE_CHECKING:
    from planegeom.segment import Segment


@dataclass
class Point(Shape):
    """A point with integer coordinates."""

    x: int = 0
    y: int = 0

    def __sub__(self, other: Point) -> Vector:
        """Vector leading from ``other`` to this point."""
        if not isinstance(other, Point):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def move(self, vector: Vector) -> Point:
        self.x += vector.x
        self.y += vector.y
        return self

    def contains_point(self, point: Point) -> bool:
        return point.x == self.x and point.y == self.y

    def _on_ray(self, start: Point, through: Point) -> bool:
        return (through - start).same_direction(self - start)

    def crosses_segment(self, segment: Segment) -> bool:
        start, end = segment.start, segment.end
        if start.x == end.x and start.y == end.y:
            return self.contains_point(start)
        return self._on_ray(end, start) and self._on_ray(start, end)

    def clone(self) -> Point:
        return Point(self.x, self.y)

    def __str__(self) -> str:
        return f"Point({self.x}, {self.y})"