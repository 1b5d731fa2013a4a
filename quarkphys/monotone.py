"""Monotone partitioning and triangulation of monotone polygons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from quarkphys.polygon import (
    PartitionError,
    Point,
    Polygon,
    VertexType,
    below,
    is_convex,
)


@dataclass
class _Vertex:
    p: Point
    prev: int
    next: int


class _Edge:
    """An edge crossing the sweep line; its index may be reassigned."""

    __slots__ = ("index", "p1", "p2")

    def __init__(self, p1: Point, p2: Point, index: int = 0) -> None:
        self.index = index
        self.p1 = p1
        self.p2 = p2


def _edge_less(a: _Edge, b: _Edge) -> bool:
    """True if edge a lies to the left of edge b."""
    if b.p1.y == b.p2.y:
        if a.p1.y == a.p2.y:
            return a.p1.y < b.p1.y
        return is_convex(a.p1, a.p2, b.p1)
    if a.p1.y == a.p2.y:
        return not is_convex(b.p1, b.p2, a.p1)
    if a.p1.y < b.p1.y:
        return not is_convex(b.p1, b.p2, a.p1)
    return is_convex(a.p1, a.p2, b.p1)


class _EdgeTree:
    """Ordered set of edges under the sweep-line ordering."""

    def __init__(self) -> None:
        self._edges: List[_Edge] = []

    def lower_bound(self, edge: _Edge) -> int:
        lo, hi = 0, len(self._edges)
        while lo < hi:
            mid = (lo + hi) // 2
            if _edge_less(self._edges[mid], edge):
                lo = mid + 1
            else:
                hi = mid
        return lo

    def insert(self, edge: _Edge) -> _Edge:
        pos = self.lower_bound(edge)
        if pos < len(self._edges) and not _edge_less(edge, self._edges[pos]):
            return self._edges[pos]
        self._edges.insert(pos, edge)
        return edge

    def left_of(self, point: Point) -> Optional[_Edge]:
        pos = self.lower_bound(_Edge(point, point))
        if pos == 0:
            return None
        return self._edges[pos - 1]

    def erase(self, edge: _Edge) -> None:
        for pos, existing in enumerate(self._edges):
            if existing is edge:
                del self._edges[pos]
                return


class _MonotonePartitioner:
    def __init__(self, polygons: List[Polygon]) -> None:
        self.vertices: List[_Vertex] = []
        for poly in polygons:
            start = len(self.vertices)
            count = len(poly)
            for i, point in enumerate(poly):
                self.vertices.append(
                    _Vertex(point, start + (i - 1) % count, start + (i + 1) % count)
                )
        self.count = len(self.vertices)
        self.types: List[VertexType] = [self._classify(i) for i in range(self.count)]
        self.helpers: List[int] = [0] * self.count
        self.edges: List[Optional[_Edge]] = [None] * self.count
        self.tree = _EdgeTree()

    def _classify(self, i: int) -> VertexType:
        v = self.vertices[i]
        vprev = self.vertices[v.prev]
        vnext = self.vertices[v.next]
        if below(vprev.p, v.p) and below(vnext.p, v.p):
            if is_convex(vnext.p, vprev.p, v.p):
                return VertexType.START
            return VertexType.SPLIT
        if below(v.p, vprev.p) and below(v.p, vnext.p):
            if is_convex(vnext.p, vprev.p, v.p):
                return VertexType.END
            return VertexType.MERGE
        return VertexType.REGULAR

    def _add_diagonal(self, index1: int, index2: int) -> None:
        vs = self.vertices
        new1 = len(vs)
        new2 = new1 + 1
        vs.append(_Vertex(vs[index1].p, 0, vs[index1].next))
        vs.append(_Vertex(vs[index2].p, 0, vs[index2].next))

        vs[vs[index2].next].prev = new2
        vs[vs[index1].next].prev = new1

        vs[index1].next = new2
        vs[new2].prev = index1

        vs[index2].next = new1
        vs[new1].prev = index2

        for new, old in ((new1, index1), (new2, index2)):
            self.types.append(self.types[old])
            self.edges.append(self.edges[old])
            self.helpers.append(self.helpers[old])
            if self.edges[new] is not None:
                self.edges[new].index = new

    def _insert_edge(self, index: int) -> None:
        v = self.vertices[index]
        self.edges[index] = self.tree.insert(_Edge(v.p, self.vertices[v.next].p, index))

    def _previous_edge(self, v: _Vertex) -> _Edge:
        edge = self.edges[v.prev]
        if edge is None:
            raise PartitionError("inconsistent sweep state; the input may be invalid")
        return edge

    def _left_edge(self, v: _Vertex) -> _Edge:
        edge = self.tree.left_of(v.p)
        if edge is None:
            raise PartitionError("no edge to the left of a vertex; the input may be invalid")
        return edge

    def _is_merge(self, index: int) -> bool:
        return self.types[index] == VertexType.MERGE

    def _handle(self, vindex: int) -> None:
        v = self.vertices[vindex]
        vtype = self.types[vindex]
        helpers = self.helpers

        if vtype == VertexType.START:
            self._insert_edge(vindex)
            helpers[vindex] = vindex

        elif vtype == VertexType.END:
            edge = self._previous_edge(v)
            if self._is_merge(helpers[v.prev]):
                self._add_diagonal(vindex, helpers[v.prev])
            self.tree.erase(edge)

        elif vtype == VertexType.SPLIT:
            left = self._left_edge(v)
            self._add_diagonal(vindex, helpers[left.index])
            vindex2 = len(self.vertices) - 2
            helpers[left.index] = vindex
            self._insert_edge(vindex2)
            helpers[vindex2] = vindex2

        elif vtype == VertexType.MERGE:
            self._previous_edge(v)
            vindex2 = vindex
            if self._is_merge(helpers[v.prev]):
                self._add_diagonal(vindex, helpers[v.prev])
                vindex2 = len(self.vertices) - 2
            self.tree.erase(self.edges[v.prev])
            left = self._left_edge(v)
            if self._is_merge(helpers[left.index]):
                self._add_diagonal(vindex2, helpers[left.index])
            helpers[left.index] = vindex2

        elif below(v.p, self.vertices[v.prev].p):
            self._previous_edge(v)
            vindex2 = vindex
            if self._is_merge(helpers[v.prev]):
                self._add_diagonal(vindex, helpers[v.prev])
                vindex2 = len(self.vertices) - 2
            self.tree.erase(self.edges[v.prev])
            self._insert_edge(vindex2)
            helpers[vindex2] = vindex

        else:
            left = self._left_edge(v)
            if self._is_merge(helpers[left.index]):
                self._add_diagonal(vindex, helpers[left.index])
            helpers[left.index] = vindex

    def run(self) -> List[Polygon]:
        order = sorted(
            range(self.count),
            key=lambda i: (-self.vertices[i].p.y, -self.vertices[i].p.x),
        )
        for vindex in order:
            self._handle(vindex)

        vs = self.vertices
        used = [False] * len(vs)
        result: List[Polygon] = []
        for i, v in enumerate(vs):
            if used[i]:
                continue
            points = [v.p]
            used[i] = True
            used[v.next] = True
            current = v.next
            while current != i:
                points.append(vs[current].p)
                used[vs[current].next] = True
                current = vs[current].next
            result.append(Polygon(points))
        return result


def monotone_partition(polygons: Iterable[Polygon]) -> List[Polygon]:
    """Split polygons, which may contain holes, into y-monotone pieces.

    Outer polygons must be counter-clockwise and holes clockwise. Raises
    PartitionError on invalid input.
    """
    polys = list(polygons)
    if any(not poly.is_valid() for poly in polys):
        raise PartitionError("a polygon needs at least three points")
    return _MonotonePartitioner(polys).run()


def _check_chain(points: List[Point], start: int, stop: int, descending: bool) -> None:
    n = len(points)
    i = start
    while i != stop:
        i2 = (i + 1) % n
        ok = below(points[i2], points[i]) if descending else below(points[i], points[i2])
        if not ok:
            raise PartitionError("the polygon is not y-monotone")
        i = i2


def triangulate_monotone(polygon: Polygon) -> List[Polygon]:
    """Triangulate a counter-clockwise y-monotone polygon in linear time.

    Raises PartitionError if the polygon is invalid or not monotone.
    """
    if not polygon.is_valid():
        raise PartitionError("a polygon needs at least three points")

    points = list(polygon.points)
    n = len(points)
    if n == 3:
        return [Polygon(points, polygon.hole)]

    top = bottom = 0
    for i in range(1, n):
        if below(points[i], points[bottom]):
            bottom = i
        if below(points[top], points[i]):
            top = i

    _check_chain(points, top, bottom, descending=True)
    _check_chain(points, bottom, top, descending=False)

    # Merge the left and right chains from top to bottom.
    side = [0] * n
    priority = [top]
    left = (top + 1) % n
    right = (top - 1) % n
    for _ in range(1, n - 1):
        if left == bottom or (right != bottom and below(points[left], points[right])):
            priority.append(right)
            side[right] = -1
            right = (right - 1) % n
        else:
            priority.append(left)
            side[left] = 1
            left = (left + 1) % n
    priority.append(bottom)
    side[bottom] = 0

    triangles: List[Polygon] = []
    stack = [priority[0], priority[1]]
    for i in range(2, n - 1):
        vindex = priority[i]
        if side[vindex] != side[stack[-1]]:
            for a, b in zip(stack, stack[1:]):
                if side[vindex] == 1:
                    triangles.append(Polygon.triangle(points[b], points[a], points[vindex]))
                else:
                    triangles.append(Polygon.triangle(points[a], points[b], points[vindex]))
            stack = [priority[i - 1], priority[i]]
        else:
            last = stack.pop()
            while stack:
                if side[vindex] == 1:
                    if not is_convex(points[vindex], points[stack[-1]], points[last]):
                        break
                    triangles.append(
                        Polygon.triangle(points[vindex], points[stack[-1]], points[last])
                    )
                else:
                    if not is_convex(points[vindex], points[last], points[stack[-1]]):
                        break
                    triangles.append(
                        Polygon.triangle(points[vindex], points[last], points[stack[-1]])
                    )
                last = stack.pop()
            stack.append(last)
            stack.append(vindex)

    vindex = priority[n - 1]
    for a, b in zip(stack, stack[1:]):
        if side[b] == 1:
            triangles.append(Polygon.triangle(points[a], points[b], points[vindex]))
        else:
            triangles.append(Polygon.triangle(points[b], points[a], points[vindex]))
    return triangles


def triangulate_mono_polygons(polygons: Iterable[Polygon]) -> List[Polygon]:
    """Triangulate polygons, which may contain holes, via a monotone partition."""
    triangles: List[Polygon] = []
    for piece in monotone_partition(polygons):
        triangles.extend(triangulate_monotone(piece))
    return triangles


def triangulate_mono(polygon: Polygon) -> List[Polygon]:
    """Triangulate one polygon via a monotone partition."""
    return triangulate_mono_polygons([polygon])