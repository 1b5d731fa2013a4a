# quarkphys

Geometry building blocks for 2D physics simulations, in pure Python with no
dependencies:

- **Axis-aligned bounding boxes** (`quarkphys.aabb.AABB`): size, area,
  perimeter and centre, containment and overlap tests, combining and
  fattening boxes, and building a box around a set of circles.
- **Broad-phase pair finding** (`quarkphys.broadphase.BroadPhase` and
  `quarkphys.spatial_hash.SpatialHashing`): bodies are bucketed into grid
  cells, and `get_pairs()` returns the pairs whose boxes overlap, found by a
  sweep along the x axis inside each cell.
- **Polygon partitioning**: removing holes, triangulating, and splitting
  polygons into convex or y-monotone parts.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Polygons

`quarkphys.polygon` holds `Point` (with `+`, `-`, `*`, `/`; equality ignores
the optional `id`), `Polygon` (a list of points with a `hole` flag) and the
`Orientation` enum.

```python
from quarkphys.polygon import Point, Polygon, Orientation
from quarkphys.earclip import triangulate_ec, convex_partition_hm

square = Polygon([Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)])
assert square.orientation() is Orientation.CCW

triangles = triangulate_ec(square)   # two triangles
parts = convex_partition_hm(square)  # the square itself, already convex
```

Points may also be given as `(x, y)` pairs. Outer polygons must be
counter-clockwise and holes clockwise (`Polygon(points, hole=True)`); use
`Polygon.set_orientation` or `Polygon.invert` to fix the winding.

| Function | Module | Result |
| --- | --- | --- |
| `remove_holes(polygons)` | `quarkphys.holes` | polygons with each hole bridged into an outline |
| `triangulate_ec` / `triangulate_ec_polygons` | `quarkphys.earclip` | ear-clipping triangulation |
| `convex_partition_hm` / `convex_partition_hm_polygons` | `quarkphys.earclip` | Hertel–Mehlhorn convex parts |
| `triangulate_opt(polygon)` | `quarkphys.optimal_triangulation` | triangulation of minimum total diagonal length |
| `convex_partition_opt(polygon)` | `quarkphys.optimal_convex` | fewest convex parts (Keil–Snoeyink) |
| `monotone_partition(polygons)` | `quarkphys.monotone` | y-monotone pieces |
| `triangulate_monotone(polygon)` | `quarkphys.monotone` | triangulation of one y-monotone polygon |
| `triangulate_mono` / `triangulate_mono_polygons` | `quarkphys.monotone` | triangulation through monotone pieces |

The `_polygons` variants accept a list that may contain holes. Every function
returns a list of new `Polygon` objects.

When a polygon cannot be handled — fewer than three points, a hole with no
visible vertex to join, no ear found, a polygon that is not monotone —
`quarkphys.polygon.PartitionError` is raised. `convex_partition_opt` also
raises it for a bare triangle.

## Bounding boxes and broad phase

```python
from quarkphys.aabb import AABB

a = AABB((0, 0), (10, 10))
b = AABB((5, 5), (20, 20))
assert a.collides_with(b)
merged = a.combine(b)          # AABB((0, 0), (20, 20))
grown = a.fattened(1.0)        # AABB((-1, -1), (11, 11))
box = AABB.from_circles([((0, 0), 2.0), ((5, 5), 0.0)])
```

In `from_circles`, radii of 0.5 or less count as points.

`SpatialHashing(bodies=None, cell_size=128.0, can_collide=None)` works with
any hashable body objects that have an `aabb` attribute holding an `AABB`.
Call `insert(body)` whenever a body moves and `remove(body)` when it leaves;
`set_cell_size(size)` and `clear()` empty the grid. `get_pairs()` returns a
set of `(body_a, body_b)` tuples, each unordered pair once, and each one
accepted by the optional `can_collide(body_a, body_b)` filter. The base
`BroadPhase` class keeps the same interface but finds no pairs.

## What is not included

This package supplies geometry only. It has no bodies, meshes, springs or
constraints, no world that steps a simulation, and no narrow-phase collision
tests or collision response; nor does it read shapes from files. Those are
left to the code that uses it.