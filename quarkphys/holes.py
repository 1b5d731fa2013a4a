"""Removal of holes by bridging them into their enclosing polygons."""

from __future__ import annotations

from typing import Iterable, List, Optional

from quarkphys.polygon import PartitionError, Polygon, distance, in_cone, intersects


def _copy(polygon: Polygon) -> Polygon:
    return Polygon(polygon.points, polygon.hole)


def _rightmost_hole_point(polys: List[Polygon]) -> Optional[tuple]:
    best: Optional[tuple] = None
    for index, poly in enumerate(polys):
        if not poly.hole:
            continue
        if best is None:
            best = (index, 0)
        for i, point in enumerate(poly):
            if point.x > polys[best[0]][best[1]].x:
                best = (index, i)
    return best


def _visible(polys: List[Polygon], start, end) -> bool:
    for poly in polys:
        if poly.hole:
            continue
        count = len(poly)
        for i, p in enumerate(poly):
            if intersects(start, end, p, poly[(i + 1) % count]):
                return False
    return True


def remove_holes(polygons: Iterable[Polygon]) -> List[Polygon]:
    """Merge every hole into a visible outer polygon.

    Outer polygons must be counter-clockwise and holes clockwise. Returns new
    polygons without holes; raises PartitionError when a hole has no visible
    vertex to bridge to.
    """
    polys = [_copy(p) for p in polygons]
    if not any(p.hole for p in polys):
        return polys

    while True:
        found_hole = _rightmost_hole_point(polys)
        if found_hole is None:
            break
        hole_index, hole_point_index = found_hole
        hole = polys[hole_index]
        hole_point = hole[hole_point_index]

        best = None
        for poly_index, poly in enumerate(polys):
            if poly.hole:
                continue
            count = len(poly)
            for i, point in enumerate(poly):
                if point.x <= hole_point.x:
                    continue
                if not in_cone(poly[(i + count - 1) % count], point, poly[(i + 1) % count], hole_point):
                    continue
                if best is not None:
                    if distance(hole_point, best[2]) < distance(hole_point, point):
                        continue
                if _visible(polys, hole_point, point):
                    best = (poly_index, i, point)

        if best is None:
            raise PartitionError("a hole has no visible vertex to connect to")

        poly_index, poly_point_index, _ = best
        outer = polys[poly_index]
        hole_count = len(hole)
        merged = (
            outer.points[: poly_point_index + 1]
            + [hole[(i + hole_point_index) % hole_count] for i in range(hole_count + 1)]
            + outer.points[poly_point_index:]
        )
        polys = [p for k, p in enumerate(polys) if k not in (hole_index, poly_index)]
        polys.append(Polygon(merged))

    return polys