"""Common interface of all plane shapes."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from planegeom.point import Point
    from planegeom.segment import Segment
    from planegeom.vector import Vector


class Shape(ABC):
    """A figure on the integer plane that can be moved and queried."""

    @abstractmethod
    def move(self, vector: Vector) -> Shape:
        """Translate the shape in place by ``vector`` and return it."""

    @abstractmethod
    def contains_point(self, point: Point) -> bool:
        """Whether ``point`` lies on or inside the shape."""

    @abstractmethod
    def crosses_segment(self, segment: Segment) -> bool:
        """Whether the shape has a common point with ``segment``."""

    def clone(self) -> Shape:
        """Return an independent copy of the shape."""
        return copy.deepcopy(self)

    @abstractmethod
    def __str__(self) -> str:
        """Human-readable description of the shape."""