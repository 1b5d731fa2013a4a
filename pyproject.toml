[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quarkphys"
version = "0.1.0"
description = "2D physics geometry helpers: bounding boxes, spatial-hash broad phase and polygon partitioning."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "physics",
    "geometry",
    "polygon",
    "triangulation",
    "convex-partition",
    "aabb",
    "broad-phase",
    "spatial-hashing",
]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quarkphys"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
