"""Minimum-weight polygon triangulation by dynamic programming."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import List

from quarkphys.polygon import PartitionError, Polygon, distance, in_cone, intersects


@dataclass
class _State:
    visible: bool = True
    weight: float = 0.0
    best: int = -1


def _diagonal_visible(polygon: Polygon, i: int, j: int) -> bool:
    count = len(polygon)
    p1 = polygon[i]
    p2 = polygon[j]
    if not in_cone(polygon[(i - 1) % count], p1, polygon[(i + 1) % count], p2):
        return False
    if not in_cone(polygon[(j - 1) % count], p2, polygon[(j + 1) % count], p1):
        return False
    for k in range(count):
        if intersects(p1, p2, polygon[k], polygon[(k + 1) % count]):
            return False
    return True


def triangulate_opt(polygon: Polygon) -> List[Polygon]:
    """Triangulate a counter-clockwise polygon minimising the total diagonal length.

    Runs in O(n^3) time. Raises PartitionError if the polygon is invalid or
    admits no triangulation.
    """
    if not polygon.is_valid():
        raise PartitionError("a polygon needs at least three points")

    n = len(polygon)
    states = [[_State() for _ in range(n)] for _ in range(n)]

    for i in range(n - 1):
        for j in range(i + 2, n):
            states[j][i].visible = _diagonal_visible(polygon, i, j)

    closing = states[n - 1][0]
    closing.visible = True
    closing.weight = 0.0
    closing.best = -1

    for gap in range(2, n):
        for i in range(n - gap):
            j = i + gap
            if not states[j][i].visible:
                continue
            best = -1
            min_weight = 0.0
            for k in range(i + 1, j):
                if not states[k][i].visible or not states[j][k].visible:
                    continue
                d1 = 0.0 if k <= i + 1 else distance(polygon[i], polygon[k])
                d2 = 0.0 if j <= k + 1 else distance(polygon[k], polygon[j])
                weight = states[k][i].weight + states[j][k].weight + d1 + d2
                if best == -1 or weight < min_weight:
                    best = k
                    min_weight = weight
            if best == -1:
                raise PartitionError("no triangulation exists for this polygon")
            states[j][i].best = best
            states[j][i].weight = min_weight

    triangles: List[Polygon] = []
    diagonals = deque([(0, n - 1)])
    while diagonals:
        first, last = diagonals.popleft()
        best = states[last][first].best
        if best == -1:
            raise PartitionError("no triangulation exists for this polygon")
        triangles.append(Polygon.triangle(polygon[first], polygon[best], polygon[last]))
        if best > first + 1:
            diagonals.append((first, best))
        if last > best + 1:
            diagonals.append((best, last))

    return triangles