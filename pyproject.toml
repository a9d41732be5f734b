[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planegeom"
version = "0.1.0"
description = "Integer plane geometry: points, vectors, lines, segments, rays, circles and polygons with containment and intersection tests"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "plane", "segment", "polygon", "intersection", "computational-geometry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["planegeom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
