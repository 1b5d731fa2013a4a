import math

import pytest

from quarkphys.earclip import triangulate_ec
from quarkphys.optimal_triangulation import triangulate_opt
from quarkphys.polygon import PartitionError, Polygon

L_SHAPE = [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]
ARROW = [(0, 0), (4, 2), (0, 4), (1, 2)]
STAR = [(0, 0), (2, 1), (4, 0), (3, 2), (4, 4), (2, 3), (0, 4), (1, 2)]
HEXAGON = [
    (math.cos(k * math.pi / 3) * 5, math.sin(k * math.pi / 3) * 3) for k in range(6)
]


def signed_area(points):
    points = list(points)
    total = 0.0
    for i, p in enumerate(points):
        q = points[(i + 1) % len(points)]
        total += p.x * q.y - p.y * q.x
    return total / 2.0


def perimeter(points):
    points = list(points)
    return sum(
        math.dist((p.x, p.y), (points[(i + 1) % len(points)].x, points[(i + 1) % len(points)].y))
        for i, p in enumerate(points)
    )


def diagonal_weight(polygon, triangles):
    return (sum(perimeter(t) for t in triangles) - perimeter(polygon)) / 2.0


@pytest.mark.parametrize("shape", [L_SHAPE, ARROW, STAR, HEXAGON])
def test_count_and_area(shape):
    polygon = Polygon(shape)
    triangles = triangulate_opt(polygon)
    assert len(triangles) == len(shape) - 2
    assert math.isclose(sum(signed_area(t) for t in triangles), signed_area(polygon))


@pytest.mark.parametrize("shape", [L_SHAPE, ARROW, STAR, HEXAGON])
def test_triangles_are_ccw_and_use_polygon_vertices(shape):
    polygon = Polygon(shape)
    vertices = {(p.x, p.y) for p in polygon}
    for triangle in triangulate_opt(polygon):
        assert signed_area(triangle) > 0
        assert {(p.x, p.y) for p in triangle} <= vertices


@pytest.mark.parametrize("shape", [L_SHAPE, STAR, HEXAGON])
def test_weight_not_worse_than_ear_clipping(shape):
    polygon = Polygon(shape)
    optimal = diagonal_weight(polygon, triangulate_opt(polygon))
    clipped = diagonal_weight(polygon, triangulate_ec(polygon))
    assert optimal <= clipped + 1e-9


def test_single_triangle():
    polygon = Polygon([(0, 0), (1, 0), (0, 1)])
    assert triangulate_opt(polygon) == [polygon]


def test_rectangle_uses_shorter_diagonal_of_rhombus():
    rhombus = Polygon([(0, 0), (3, 1), (0, 2), (-3, 1)])
    triangles = triangulate_opt(rhombus)
    shared = {(p.x, p.y) for p in triangles[0]} & {(p.x, p.y) for p in triangles[1]}
    assert shared == {(0, 0), (0, 2)}


def test_too_few_points_raises():
    with pytest.raises(PartitionError):
        triangulate_opt(Polygon([(0, 0), (1, 1)]))


def test_clockwise_polygon_raises():
    with pytest.raises(PartitionError):
        triangulate_opt(Polygon([(0, 0), (0, 1), (1, 1), (1, 0)]))