"""Triangulation by ear clipping and Hertel-Mehlhorn convex partitioning."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from quarkphys.holes import remove_holes
from quarkphys.polygon import (
    PartitionError,
    Point,
    Polygon,
    is_convex,
    is_inside,
    is_reflex,
    normalize,
)


@dataclass
class _Vertex:
    p: Point
    prev: int
    next: int
    active: bool = True
    convex: bool = False
    ear: bool = False
    angle: float = 0.0


def _update_vertex(vertex: _Vertex, vertices: List[_Vertex]) -> None:
    v1 = vertices[vertex.prev]
    v3 = vertices[vertex.next]

    vertex.convex = is_convex(v1.p, vertex.p, v3.p)

    vec1 = normalize(v1.p - vertex.p)
    vec3 = normalize(v3.p - vertex.p)
    vertex.angle = vec1.x * vec3.x + vec1.y * vec3.y

    if not vertex.convex:
        vertex.ear = False
        return

    vertex.ear = True
    for other in vertices:
        if other.p == vertex.p or other.p == v1.p or other.p == v3.p:
            continue
        if is_inside(v1.p, vertex.p, v3.p, other.p):
            vertex.ear = False
            break


def _best_ear(vertices: List[_Vertex]) -> Optional[_Vertex]:
    ear: Optional[_Vertex] = None
    for vertex in vertices:
        if not vertex.active or not vertex.ear:
            continue
        if ear is None or vertex.angle > ear.angle:
            ear = vertex
    return ear


def triangulate_ec(polygon: Polygon) -> List[Polygon]:
    """Triangulate a counter-clockwise polygon by repeatedly clipping the most extruded ear.

    Raises PartitionError if the polygon is invalid or no ear can be found.
    """
    if not polygon.is_valid():
        raise PartitionError("a polygon needs at least three points")

    count = len(polygon)
    if count == 3:
        return [Polygon(polygon.points, polygon.hole)]

    vertices = [
        _Vertex(p=point, prev=(i - 1) % count, next=(i + 1) % count)
        for i, point in enumerate(polygon)
    ]
    for vertex in vertices:
        _update_vertex(vertex, vertices)

    triangles: List[Polygon] = []
    for i in range(count - 3):
        ear = _best_ear(vertices)
        if ear is None:
            raise PartitionError("no ear found; the polygon may be clockwise or self-intersecting")

        previous = vertices[ear.prev]
        following = vertices[ear.next]
        triangles.append(Polygon.triangle(previous.p, ear.p, following.p))

        ear.active = False
        previous.next = ear.next
        following.prev = ear.prev

        if i == count - 4:
            break

        _update_vertex(previous, vertices)
        _update_vertex(following, vertices)

    for vertex in vertices:
        if vertex.active:
            triangles.append(
                Polygon.triangle(vertices[vertex.prev].p, vertex.p, vertices[vertex.next].p)
            )
            break

    return triangles


def triangulate_ec_polygons(polygons: Iterable[Polygon]) -> List[Polygon]:
    """Triangulate polygons that may contain holes by ear clipping."""
    triangles: List[Polygon] = []
    for polygon in remove_holes(polygons):
        triangles.extend(triangulate_ec(polygon))
    return triangles


def _find_shared_edge(
    triangles: List[Polygon], start: int, d1: Point, d2: Point
) -> Optional[Tuple[int, int, int]]:
    """Find a later polygon holding the edge d2 -> d1; return (index, i21, i22)."""
    for index in range(start, len(triangles)):
        poly2 = triangles[index]
        count2 = len(poly2)
        for i21, point in enumerate(poly2):
            if point != d2:
                continue
            i22 = (i21 + 1) % count2
            if poly2[i22] != d1:
                continue
            return index, i21, i22
    return None


def _walk(polygon: Polygon, start: int, stop: int) -> List[Point]:
    count = len(polygon)
    points = []
    j = start
    while j != stop:
        points.append(polygon[j])
        j = (j + 1) % count
    return points


def convex_partition_hm(polygon: Polygon) -> List[Polygon]:
    """Partition a counter-clockwise polygon into convex parts (Hertel-Mehlhorn).

    Raises PartitionError if the polygon is invalid or cannot be triangulated.
    """
    if not polygon.is_valid():
        raise PartitionError("a polygon needs at least three points")

    count = len(polygon)
    has_reflex = any(
        is_reflex(polygon[(i - 1) % count], polygon[i], polygon[(i + 1) % count])
        for i in range(count)
    )
    if not has_reflex:
        return [Polygon(polygon.points, polygon.hole)]

    parts = triangulate_ec(polygon)

    idx1 = 0
    while idx1 < len(parts):
        poly1 = parts[idx1]
        i11 = 0
        while i11 < len(poly1):
            count1 = len(poly1)
            d1 = poly1[i11]
            i12 = (i11 + 1) % count1
            d2 = poly1[i12]

            shared = _find_shared_edge(parts, idx1 + 1, d1, d2)
            if shared is None:
                i11 += 1
                continue
            idx2, i21, i22 = shared
            poly2 = parts[idx2]
            count2 = len(poly2)

            p1 = poly1[(i11 - 1) % count1]
            p2 = poly1[i11]
            p3 = poly2[(i22 + 1) % count2]
            if not is_convex(p1, p2, p3):
                i11 += 1
                continue

            p2 = poly1[i12]
            p3 = poly1[(i12 + 1) % count1]
            p1 = poly2[(i21 - 1) % count2]
            if not is_convex(p1, p2, p3):
                i11 += 1
                continue

            merged = Polygon(_walk(poly1, i12, i11) + _walk(poly2, i22, i21))
            del parts[idx2]
            parts[idx1] = merged
            poly1 = merged
            i11 = 0
        idx1 += 1

    return parts


def convex_partition_hm_polygons(polygons: Iterable[Polygon]) -> List[Polygon]:
    """Partition polygons that may contain holes into convex parts."""
    parts: List[Polygon] = []
    for polygon in remove_holes(polygons):
        parts.extend(convex_partition_hm(polygon))
    return parts