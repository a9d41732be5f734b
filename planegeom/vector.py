"""Integer vectors on the plane."""

from __future__ import annotations

from dataclasses import dataclass


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass(frozen=True)
class Vector:
    """A free vector with integer coordinates."""

    x: int = 0
    y: int = 0

    def __pos__(self) -> Vector:
        return self

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, k: int) -> Vector:
        if not isinstance(k, int):
            return NotImplemented
        return Vector(self.x * k, self.y * k)

    def __rmul__(self, k: int) -> Vector:
        return self.__mul__(k)

    def __truediv__(self, k: int) -> Vector:
        """Divide both coordinates by ``k``, truncating toward zero."""
        if not isinstance(k, int):
            return NotImplemented
        return Vector(_truncating_div(self.x, k), _truncating_div(self.y, k))

    def __xor__(self, other: Vector) -> int:
        """Cross product (signed doubled area of the spanned triangle)."""
        if not isinstance(other, Vector):
            return NotImplemented
        return self.x * other.y - self.y * other.x

    def is_right_rotate(self, other: Vector) -> bool:
        """True when the cross product with ``other`` is strictly positive."""
        return (self ^ other) > 0

    def collinear(self, other: Vector) -> bool:
        return self.x * other.y == self.y * other.x

    def same_direction(self, other: Vector) -> bool:
        """True for collinear vectors pointing the same way; a zero vector matches any."""
        if not self.collinear(other):
            return False
        if (self.x == 0 and self.y == 0) or (other.x == 0 and other.y == 0):
            return True
        return (self.x > 0) == (other.x > 0) and (self.y > 0) == (other.y > 0)

    def length_squared(self) -> int:
        return self.x * self.x + self.y * self.y

    def __str__(self) -> str:
        return f"Vector({self.x}, {self.y})"