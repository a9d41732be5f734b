# planegeom

This package does plane geometry on integer coordinates. Point and segment tests are exact. The only results given as floats are distances.

## Modules

| Module | Contents |
| --- | --- |
| `planegeom.vector` | `Vector`, a frozen integer vector |
| `planegeom.shape` | `Shape`, the abstract base class of all figures |
| `planegeom.point` | `Point` |
| `planegeom.line` | `Line`, given as `a*x + b*y + c = 0` |
| `planegeom.segment` | `Segment`, a closed segment from `start` to `end` |
| `planegeom.ray` | `Ray`, given by `start` and `direction` |
| `planegeom.circle` | `Circle`, given by `center` and `radius` |
| `planegeom.polygon` | `Polygon`, given by a list of vertices in order |

## The `Shape` interface

`Point`, `Line`, `Segment`, `Ray`, `Circle` and `Polygon` all implement these methods:

- `move(vector)` translates the shape in place and returns the same object.
- `contains_point(point)` tells whether a point lies on or in the shape.
- `crosses_segment(segment)` tells whether the shape meets a segment.
- `clone()` returns an independent copy.
- `str(shape)` gives a readable form, for example `Point(1, 2)`.

Shapes are mutable dataclasses, so `==` compares their fields. A shape copies the points it is built from, so moving the shape leaves those points unchanged.

## Installation

```
pip install .
```

## Vectors

```python
from planegeom.vector import Vector

v = Vector(3, 4)
w = Vector(1, -2)

str(v + w)          # 'Vector(4, 2)'
str(-v)             # 'Vector(-3, -4)'
str(2 * v)          # 'Vector(6, 8)'
v ^ w               # cross product: -10
v.length_squared()  # 25
v.collinear(Vector(6, 8))         # True
v.same_direction(Vector(-3, -4))  # False
v.is_right_rotate(w)              # True when v ^ w > 0
```

- `Vector / k` divides both coordinates by the integer `k` and rounds toward zero. Dividing by zero raises `ZeroDivisionError`.
- `same_direction` is true if either vector is the zero vector.

## Shapes

```python
from planegeom.point import Point
from planegeom.vector import Vector
from planegeom.line import Line
from planegeom.segment import Segment
from planegeom.ray import Ray
from planegeom.circle import Circle
from planegeom.polygon import Polygon

p = Point(1, 1)
q = Point(4, 5)
str(p - q)                # 'Vector(-3, -4)'

seg = Segment(Point(0, 0), Point(4, 4))
seg.contains_point(Point(2, 2))                        # True
seg.crosses_segment(Segment(Point(0, 4), Point(4, 0))) # True
seg.distance_to_point(Point(0, 4))                     # about 2.828

line = Line.from_points(Point(0, 0), Point(1, 1))
line.contains_point(Point(5, 5))   # True
line.distance_to_point(Point(0, 2))

ray = Ray.through(Point(0, 0), Point(1, 0))
ray.contains_point(Point(10, 0))   # True
ray.contains_point(Point(-1, 0))   # False

circle = Circle(Point(0, 0), 5)
circle.contains_point(Point(3, 4))            # True
circle.perimeter_contains_point(Point(3, 4))  # True

square = Polygon([Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)])
square.contains_point(Point(2, 2))   # True
square.contains_point(Point(5, 5))   # False

moved = square.clone().move(Vector(1, 1))
print(moved)  # Polygon(Point(1, 1), Point(5, 1), Point(5, 5), Point(1, 5))
```

## Behaviour to note

- `Line.distance_to_point` raises `ZeroDivisionError` when both `a` and `b` are zero.
- `Line.crosses_segment` is true when the segment's endpoints lie on opposite sides of the line or on the line.
- `Circle.contains_point` treats the circle as a closed disc. `Circle.crosses_segment`, however, tests whether the segment touches the boundary. A segment that lies wholly inside the circle does not cross it.
- `Polygon.contains_point` counts crossings of a probe segment that runs to `x = 10_000_001`. Points with coordinates beyond that range are outside what the test handles. Points on an edge count as inside.

## Running the tests

```
pip install .[test]
pytest
```