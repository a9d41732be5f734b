"""Rays starting at a point and running along a direction."""

from __future__ import annotations

from dataclasses import dataclass, field

from planegeom.line import Line
from planegeom.point import Point
from planegeom.segment import Segment
from planegeom.shape import Shape
from planegeom.vector import Vector


@dataclass
class Ray(Shape):
    """The ray from ``start`` in the direction of ``direction``."""

    start: Point = field(default_factory=Point)
    direction: Vector = field(default_factory=Vector)

    def __post_init__(self) -> None:
        self.start = self.start.clone()

    @classmethod
    def through(cls, start: Point, end: Point) -> Ray:
        """The ray from ``start`` passing through ``end``."""
        return cls(start, end - start)

    def move(self, vector: Vector) -> Ray:
        self.start.move(vector)
        return self

    def contains_point(self, point: Point) -> bool:
        second = self.start.clone().move(self.direction)
        if not Line.from_points(self.start, second).contains_point(point):
            return False
        return self.direction.same_direction(point - self.start)

    def crosses_segment(self, segment: Segment) -> bool:
        if (
            self.contains_point(segment.start)
            or self.contains_point(segment.end)
            or segment.contains_point(self.start)
        ):
            return True
        a = segment.start - self.start
        b = segment.end - self.start
        c = self.direction
        ab = a.is_right_rotate(b)
        ac = a.is_right_rotate(c)
        cb = c.is_right_rotate(b)
        if not (ab or ac or cb):
            return False
        return ab == ac and cb == ab

    def clone(self) -> Ray:
        return Ray(self.start, self.direction)

    def __str__(self) -> str:
        return f"Ray({self.start}, {self.direction})"