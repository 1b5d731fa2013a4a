import math

import pytest

from quarkphys.earclip import (
    convex_partition_hm,
    convex_partition_hm_polygons,
    triangulate_ec,
    triangulate_ec_polygons,
)
from quarkphys.polygon import PartitionError, Point, Polygon, is_reflex

L_SHAPE = [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]
ARROW = [(0, 0), (4, 2), (0, 4), (1, 2)]
STAR = [(0, 0), (2, 1), (4, 0), (3, 2), (4, 4), (2, 3), (0, 4), (1, 2)]


def signed_area(points):
    points = list(points)
    total = 0.0
    for i, p in enumerate(points):
        q = points[(i + 1) % len(points)]
        total += p.x * q.y - p.y * q.x
    return total / 2.0


def point_set(polygon):
    return {(p.x, p.y) for p in polygon}


@pytest.mark.parametrize("shape", [L_SHAPE, ARROW, STAR])
def test_triangle_count_and_area(shape):
    polygon = Polygon(shape)
    triangles = triangulate_ec(polygon)
    assert len(triangles) == len(shape) - 2
    assert all(len(t) == 3 for t in triangles)
    total = sum(signed_area(t) for t in triangles)
    assert math.isclose(total, signed_area(polygon))


@pytest.mark.parametrize("shape", [L_SHAPE, ARROW, STAR])
def test_triangles_are_ccw_and_use_polygon_vertices(shape):
    polygon = Polygon(shape)
    vertices = point_set(polygon)
    for triangle in triangulate_ec(polygon):
        assert signed_area(triangle) > 0
        assert point_set(triangle) <= vertices


def test_triangle_input_is_returned_as_copy():
    polygon = Polygon([(0, 0), (1, 0), (0, 1)])
    result = triangulate_ec(polygon)
    assert result == [polygon]
    assert result[0] is not polygon


def test_too_few_points_raises():
    with pytest.raises(PartitionError):
        triangulate_ec(Polygon([(0, 0), (1, 0)]))


def test_clockwise_polygon_raises():
    with pytest.raises(PartitionError):
        triangulate_ec(Polygon([(0, 0), (0, 1), (1, 1), (1, 0)]))


def test_point_ids_are_preserved():
    points = [Point(0, 0, 10), Point(2, 0, 11), Point(2, 2, 12), Point(0, 2, 13)]
    triangles = triangulate_ec(Polygon(points))
    ids = {p.id for t in triangles for p in t}
    assert ids == {p.id for p in points}


def test_polygons_with_hole():
    outer = Polygon([(0, 0), (4, 0), (4, 4), (0, 4)])
    hole = Polygon([(1, 1), (1, 3), (3, 3), (3, 1)], hole=True)
    triangles = triangulate_ec_polygons([outer, hole])
    assert len(triangles) == len(outer) + len(hole)
    total = sum(signed_area(t) for t in triangles)
    assert math.isclose(total, signed_area(outer) + signed_area(hole))


def test_polygons_without_holes_are_triangulated_each():
    first = Polygon(L_SHAPE)
    second = Polygon(ARROW)
    triangles = triangulate_ec_polygons([first, second])
    assert len(triangles) == (len(first) - 2) + (len(second) - 2)


def test_convex_polygon_is_its_own_partition():
    square = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
    parts = convex_partition_hm(square)
    assert parts == [square]


@pytest.mark.parametrize("shape", [L_SHAPE, ARROW, STAR])
def test_hm_parts_are_convex_and_cover_area(shape):
    polygon = Polygon(shape)
    parts = convex_partition_hm(polygon)
    assert len(parts) <= len(shape) - 2
    for part in parts:
        count = len(part)
        assert not any(
            is_reflex(part[(i - 1) % count], part[i], part[(i + 1) % count])
            for i in range(count)
        )
    total = sum(signed_area(p) for p in parts)
    assert math.isclose(total, signed_area(polygon))


def test_hm_merges_triangles_of_l_shape():
    parts = convex_partition_hm(Polygon(L_SHAPE))
    assert len(parts) < len(triangulate_ec(Polygon(L_SHAPE)))


def test_hm_invalid_raises():
    with pytest.raises(PartitionError):
        convex_partition_hm(Polygon([(0, 0)]))


def test_hm_clockwise_raises():
    with pytest.raises(PartitionError):
        convex_partition_hm(Polygon([(0, 0), (0, 1), (1, 1), (1, 0)]))


def test_hm_polygons_with_hole_cover_area():
    outer = Polygon([(0, 0), (4, 0), (4, 4), (0, 4)])
    hole = Polygon([(1, 1), (1, 3), (3, 3), (3, 1)], hole=True)
    parts = convex_partition_hm_polygons([outer, hole])
    total = sum(signed_area(p) for p in parts)
    assert math.isclose(total, signed_area(outer) + signed_area(hole))
    assert all(not p.hole for p in parts)