"""Integer plane geometry: vectors, points, lines, segments, rays, circles and polygons."""

__version__ = "0.1.0"

__all__ = ["circle", "line", "point", "polygon", "ray", "segment", "shape", "vector"]