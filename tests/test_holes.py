import pytest

from quarkphys.holes import remove_holes
from quarkphys.polygon import PartitionError, Point, Polygon


def signed_area(poly):
    pts = list(poly)
    total = 0.0
    for i, p in enumerate(pts):
        q = pts[(i + 1) % len(pts)]
        total += p.x * q.y - p.y * q.x
    return total / 2.0


OUTER = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
HOLE = Polygon([(3, 3), (3, 7), (7, 7), (7, 3)], hole=True)


def test_no_holes_returns_copies():
    tri = Polygon([(0, 0), (1, 0), (0, 1)])
    result = remove_holes([OUTER, tri])
    assert result == [OUTER, tri]
    assert result[0] is not OUTER


def test_single_hole_is_bridged():
    result = remove_holes([OUTER, HOLE])
    assert len(result) == 1
    merged = result[0]
    assert merged.hole is False
    assert len(merged) == len(OUTER) + len(HOLE) + 2
    assert set(merged) == set(OUTER) | set(HOLE)


def test_single_hole_area_preserved():
    merged = remove_holes([OUTER, HOLE])[0]
    expected = signed_area(OUTER) + signed_area(HOLE)
    assert signed_area(merged) == pytest.approx(expected)


def test_bridge_endpoints_appear_twice():
    merged = list(remove_holes([OUTER, HOLE])[0])
    assert merged.count(Point(7, 7)) == 2
    assert merged.count(Point(10, 10)) == 2
    assert merged[0] == Point(0, 0)


def test_inputs_not_modified():
    outer = Polygon(OUTER.points)
    hole = Polygon(HOLE.points, hole=True)
    remove_holes([outer, hole])
    assert outer == OUTER
    assert hole == HOLE


def test_two_holes():
    h1 = Polygon([(2, 2), (2, 4), (4, 4), (4, 2)], hole=True)
    h2 = Polygon([(6, 6), (6, 8), (8, 8), (8, 6)], hole=True)
    result = remove_holes([OUTER, h1, h2])
    assert len(result) == 1
    assert not result[0].hole
    assert len(result[0]) == 4 + 4 + 2 + 4 + 2
    expected = signed_area(OUTER) + signed_area(h1) + signed_area(h2)
    assert signed_area(result[0]) == pytest.approx(expected)


def test_hole_without_outer_fails():
    with pytest.raises(PartitionError):
        remove_holes([HOLE])


def test_hole_outside_reach_fails():
    far_hole = Polygon([(20, 3), (20, 7), (24, 7), (24, 3)], hole=True)
    with pytest.raises(PartitionError):
        remove_holes([OUTER, far_hole])