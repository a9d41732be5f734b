"""Polygons given by their vertices in order."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from planegeom.point import Point
from planegeom.segment import Segment
from planegeom.shape import Shape
from planegeom.vector import Vector

_RAY_FAR_X = 10**7


@dataclass
class Polygon(Shape):
    """A closed polygon whose edges join consecutive vertices."""

    points: list[Point] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.points = [point.clone() for point in self.points]

    def _edges(self) -> Iterator[Segment]:
        rotated = self.points[1:] + self.points[:1]
        for first, second in zip(self.points, rotated):
            yield Segment(first, second)

    def move(self, vector: Vector) -> Polygon:
        for point in self.points:
            point.move(vector)
        return self

    def contains_point(self, point: Point) -> bool:
        """Point-in-polygon test by counting crossings of a long probe segment."""
        probe = Segment(Point(_RAY_FAR_X + 1, point.y + 1), point)
        inside = False
        for edge in self._edges():
            if not probe.crosses_segment(edge):
                continue
            if edge.contains_point(point):
                return True
            if probe.contains_point(edge.start):
                continue
            inside = not inside
        return inside

    def crosses_segment(self, segment: Segment) -> bool:
        return any(edge.crosses_segment(segment) for edge in self._edges())

    def clone(self) -> Polygon:
        return Polygon(self.points)

    def __str__(self) -> str:
        return "Polygon(" + ", ".join(str(point) for point in self.points) + ")"